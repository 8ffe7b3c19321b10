import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, desc, select

from sentinel.core import schemas, models
from sentinel.core.database import get_db

router = APIRouter(tags=["Orchestrator"])

logger = logging.getLogger("sentinel.orchestrator")

db_dep = Annotated[AsyncSession, Depends(get_db)]

LIST_LIMIT = 100


@router.post(
    "/save",
    response_model=schemas.SaveResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_entry(entry: schemas.OrchestratorCreate, db: db_dep):
    try:
        new_entry = models.Orchestrator(**entry.model_dump())
        db.add(new_entry)
        await db.commit()
        await db.refresh(new_entry)  # Refresh to get a generated ID by DB
    except Exception as error:
        await db.rollback()
        logger.error(f"Failed to save data: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save data"
        )

    return {"message": "Data saved successfully", "entry": new_entry}


@router.get("/orchestrator", response_model=schemas.EntriesResponse)
async def list_entries(db: db_dep):
    query = (
        select(models.Orchestrator)
        .order_by(desc(models.Orchestrator.created_at), desc(models.Orchestrator.id))
        .limit(LIST_LIMIT)
    )
    try:
        result = await db.execute(query)
        entries = result.scalars().all()
    except Exception as error:
        logger.error(f"Failed to fetch data: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch data"
        )

    return {"entries": entries}


@router.get("/orchestrator/type/{entry_type}", response_model=schemas.EntriesResponse)
async def list_entries_by_type(entry_type: str, db: db_dep):
    query = (
        select(models.Orchestrator)
        .where(models.Orchestrator.type == entry_type)
        .order_by(desc(models.Orchestrator.created_at), desc(models.Orchestrator.id))
    )
    try:
        result = await db.execute(query)
        entries = result.scalars().all()
    except Exception as error:
        logger.error(f"Failed to fetch data: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch data"
        )

    return {"entries": entries}


@router.get("/orchestrator/{entry_id}", response_model=schemas.EntryResponse)
async def get_entry(entry_id: int, db: db_dep):
    try:
        entry = await db.get(models.Orchestrator, entry_id)
    except Exception as error:
        logger.error(f"Failed to fetch data: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch data"
        )

    if entry is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Entry not found")

    return {"entry": entry}


@router.delete("/orchestrator/{entry_id}", response_model=schemas.DeleteResponse)
async def delete_entry(entry_id: int, db: db_dep):
    stmt = (
        delete(models.Orchestrator)
        .where(models.Orchestrator.id == entry_id)
        .returning(models.Orchestrator.id, models.Orchestrator.type)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(stmt)
        entry = result.one_or_none()
        await db.commit()
    except Exception as error:
        await db.rollback()
        logger.error(f"Failed to delete data: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete data"
        )

    if entry is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Entry not found")

    return {"message": "Data deleted successfully", "entry": dict(entry._mapping)}
