from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, JSON
from sqlalchemy.sql import func

from sentinel.core.database import Base


# =========================
# Orchestrator
# =========================
class Orchestrator(Base):
    """
    Typed record saved by other services:
    - type: free-form label used for filtering
    - data: arbitrary JSON payload
    """

    __tablename__ = "orchestrator"

    id = Column(Integer, primary_key=True, autoincrement=True)

    type = Column(String, nullable=False, index=True)
    data = Column(JSON, nullable=False)

    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


# =========================
# Log (console table)
# =========================
class Log(Base):
    """
    Free-text entry managed through the command console.
    Rows are created and deleted, never updated.
    """

    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    content = Column(Text, nullable=False)

    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
