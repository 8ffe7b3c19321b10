import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from sentinel.core import models  # noqa: F401  register tables on Base
from sentinel.core.database import engine, Base
from sentinel.core.logging_config import configure_logging
from sentinel.core.runtime import capture_runtime_state
from sentinel.api.router import api_router

logger = logging.getLogger("sentinel")


async def run_diagnostics(db_engine: AsyncEngine):
    """Query the server clock to make sure the database answers"""
    async with db_engine.connect() as conn:
        result = await conn.execute(select(func.now()))
        server_time = result.scalar()

    version = db_engine.dialect.server_version_info
    logger.info(f"Database connection successful (version={version}, now={server_time})")


async def run_sentinel(db_engine: AsyncEngine):
    """Fail fast at startup when the database is unreachable, then make sure tables exist"""
    logger.info("Running sentinel")
    try:
        await run_diagnostics(db_engine)
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise


# Close the engine once everything is done and close all the sessions
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    app.state.runtime = capture_runtime_state()
    await run_sentinel(engine)

    yield
    await engine.dispose()


app = FastAPI(title="Sentinel API", lifespan=lifespan)

# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Sentinel API"}
