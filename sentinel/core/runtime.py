from datetime import datetime, timezone

from fastapi import Request
from pydantic import BaseModel, ConfigDict


class RuntimeState(BaseModel):
    """Process-wide facts captured once at startup."""

    started_at: datetime

    model_config = ConfigDict(frozen=True)


def capture_runtime_state() -> RuntimeState:
    return RuntimeState(started_at=datetime.now(timezone.utc))


# Set by the app lifespan
def get_runtime_state(request: Request) -> RuntimeState:
    return request.app.state.runtime
