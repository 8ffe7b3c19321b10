from fastapi import APIRouter
from sentinel.api.endpoints import console, health, orchestrator

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(orchestrator.router)
api_router.include_router(console.router)
api_router.include_router(health.router)
