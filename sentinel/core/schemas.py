from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =========================
# ORCHESTRATOR
# =========================
class OrchestratorCreate(BaseModel):
    type: str = Field(min_length=1)
    data: Any

    @field_validator("type")
    @classmethod
    def type_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("type must not be blank")
        return value

    @field_validator("data")
    @classmethod
    def data_present(cls, value: Any) -> Any:
        # Falsy scalars (null, "", false, 0) count as missing
        if value is None or value == "" or (isinstance(value, (int, float)) and not value):
            raise ValueError("data is required")
        return value


class OrchestratorSummary(BaseModel):
    id: int
    type: str

    model_config = ConfigDict(from_attributes=True)


class OrchestratorSaved(OrchestratorSummary):
    created_at: datetime


class OrchestratorResponse(OrchestratorSaved):
    data: Any


class SaveResponse(BaseModel):
    message: str
    entry: OrchestratorSaved


class DeleteResponse(BaseModel):
    message: str
    entry: OrchestratorSummary


class EntryResponse(BaseModel):
    entry: OrchestratorResponse


class EntriesResponse(BaseModel):
    entries: List[OrchestratorResponse]


# =========================
# LOGS / CONSOLE
# =========================
class LogResponse(BaseModel):
    id: int
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommandRequest(BaseModel):
    command: str = ""


class CommandResponse(BaseModel):
    response: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
