import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from sqlalchemy import delete, desc, select, text
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sentinel.core import models, schemas
from sentinel.core.console.errors import BackendError

logger = logging.getLogger("sentinel.console.gateway")

BACKEND_FAILURES = (SQLAlchemyError, OSError)


def describe_backend_error(error: Exception) -> str:
    """
    Short, user-facing text for a storage failure.
    Connectivity problems are collapsed into one message so hosts, ports
    and credentials from the driver never reach a console response.
    """
    if isinstance(error, (OperationalError, InterfaceError, OSError)):
        return "database unavailable"

    if isinstance(error, DBAPIError) and error.orig is not None:
        detail = str(error.orig)
    else:
        detail = str(error)

    # Drivers append the SQL and parameters on later lines
    detail = detail.strip().splitlines()[0] if detail.strip() else ""
    return detail or error.__class__.__name__


class LogGateway:
    """Storage access for the console, bound to one request's session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _backend_call(self, action: str):
        try:
            yield
        except BACKEND_FAILURES as error:
            logger.error(f"Failed to {action}: {error}")
            await self._rollback()
            raise BackendError(describe_backend_error(error)) from error

    async def _rollback(self):
        try:
            await self.db.rollback()
        except BACKEND_FAILURES as error:
            logger.warning(f"Rollback after failure also failed: {error}")

    async def insert_log(self, content: str) -> models.Log:
        new_log = models.Log(content=content)
        async with self._backend_call("insert log"):
            self.db.add(new_log)
            await self.db.commit()
            await self.db.refresh(new_log)  # Get the generated id and created_at
        return new_log

    async def list_recent_logs(self, limit: int) -> List[models.Log]:
        # created_at can collide below one second, id keeps the order stable
        query = (
            select(models.Log)
            .order_by(desc(models.Log.created_at), desc(models.Log.id))
            .limit(limit)
        )
        async with self._backend_call("list logs"):
            result = await self.db.execute(query)
            logs = list(result.scalars().all())
        return logs

    async def delete_log(self, log_id: int) -> Optional[schemas.LogResponse]:
        stmt = (
            delete(models.Log)
            .where(models.Log.id == log_id)
            .returning(models.Log.id, models.Log.content, models.Log.created_at)
            .execution_options(synchronize_session=False)
        )
        async with self._backend_call(f"delete log {log_id}"):
            result = await self.db.execute(stmt)
            row = result.one_or_none()
            await self.db.commit()

        if row is None:
            return None
        return schemas.LogResponse.model_validate(dict(row._mapping))

    async def ping(self) -> None:
        async with self._backend_call("ping database"):
            await self.db.execute(text("SELECT 1"))
