import os

# Settings need a DATABASE_URL before the app modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from sentinel.main import app  # noqa: E402
from sentinel.core import models  # noqa: E402, F401
from sentinel.core.console.dispatcher import CommandDispatcher  # noqa: E402
from sentinel.core.console.errors import BackendError  # noqa: E402
from sentinel.core.console.gateway import LogGateway  # noqa: E402
from sentinel.core.console.service import CommandConsole  # noqa: E402
from sentinel.core.database import Base, get_db  # noqa: E402
from sentinel.core.runtime import RuntimeState  # noqa: E402

# Tests never touch the configured database, only an in-memory SQLite one
TEST_DATABASE_URL = "sqlite+aiosqlite://"

STARTED_AT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# Fresh schema for every test; StaticPool keeps the in-memory db on one connection
@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine):
    TestingSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestingSessionLocal() as session:
        yield session
        await session.rollback()


# Client
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # ASGITransport does not run the lifespan, so set what it would have
    app.state.runtime = RuntimeState(started_at=datetime.now(timezone.utc))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def gateway(db_session: AsyncSession):
    return LogGateway(db_session)


# =========================
# In-memory gateways for the console core
# =========================
class FakeLog:
    def __init__(self, id, content, created_at):
        self.id = id
        self.content = content
        self.created_at = created_at


class InMemoryGateway:
    """Keeps logs in a list and counts calls per operation."""

    def __init__(self):
        self.logs = []
        self.calls = {"insert": 0, "list": 0, "delete": 0, "ping": 0}
        self._next_id = 1
        self.now = STARTED_AT

    async def insert_log(self, content):
        self.calls["insert"] += 1
        log = FakeLog(self._next_id, content, self.now)
        self._next_id += 1
        self.logs.append(log)
        return log

    async def list_recent_logs(self, limit):
        self.calls["list"] += 1
        ordered = sorted(self.logs, key=lambda log: (log.created_at, log.id), reverse=True)
        return ordered[:limit]

    async def delete_log(self, log_id):
        self.calls["delete"] += 1
        for log in self.logs:
            if log.id == log_id:
                self.logs.remove(log)
                return log
        return None

    async def ping(self):
        self.calls["ping"] += 1

    def tick(self, seconds=1):
        self.now = self.now + timedelta(seconds=seconds)


class BrokenGateway:
    """Every storage call fails the way LogGateway reports failures."""

    def __init__(self, message="database unavailable"):
        self.message = message

    async def insert_log(self, content):
        raise BackendError(self.message)

    async def list_recent_logs(self, limit):
        raise BackendError(self.message)

    async def delete_log(self, log_id):
        raise BackendError(self.message)

    async def ping(self):
        raise BackendError(self.message)


@pytest.fixture
def memory_gateway():
    return InMemoryGateway()


@pytest.fixture
def broken_gateway():
    return BrokenGateway()


# Build a console around any gateway, with a fixed start time and clock
@pytest.fixture
def make_console():
    def _make(gateway, elapsed=timedelta(seconds=5)):
        dispatcher = CommandDispatcher(
            gateway,
            RuntimeState(started_at=STARTED_AT),
            platform="Python / FastAPI",
            port=9000,
            clock=lambda: STARTED_AT + elapsed,
        )
        return CommandConsole(dispatcher)

    return _make
