from datetime import datetime, timezone

from fastapi import APIRouter

from sentinel.core import schemas

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=schemas.HealthResponse)
async def health():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc)}
