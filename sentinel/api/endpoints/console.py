from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sentinel.core import schemas
from sentinel.core.console.service import build_console
from sentinel.core.database import get_db
from sentinel.core.runtime import RuntimeState, get_runtime_state

router = APIRouter(prefix="/console", tags=["Console"])

db_dep = Annotated[AsyncSession, Depends(get_db)]
runtime_dep = Annotated[RuntimeState, Depends(get_runtime_state)]


@router.post(
    "",
    response_model=schemas.CommandResponse,
    status_code=status.HTTP_200_OK,
)
async def execute_command(
    payload: schemas.CommandRequest, db: db_dep, runtime: runtime_dep
):
    """
    Run one console command against the logs table.
    Failures are reported inside the response text, never as an HTTP error.
    """
    console = build_console(db, runtime)
    response = await console.execute_command(payload.command)
    return {"response": response}
