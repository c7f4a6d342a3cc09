"""Pytest configuration and shared fixtures."""

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.api.deps import get_db
from app.core.config import settings
from app.db.base import Base
from app.db.seed import seed_questions
from app.main import app


@pytest.fixture
async def engine():
    """In-memory SQLite engine with the full schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory) -> int:
    """Seed the question catalog and return the number of questions."""
    async with session_factory() as session:
        return await seed_questions(session)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """Route uploads into a per-test temporary directory."""
    directory = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture
async def client(session_factory):
    """Async HTTP client bound to the app with the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides = {}


@pytest.fixture
def user_payload() -> dict:
    return {
        "fullName": "Dana Reyes",
        "email": "dana.reyes@example.com",
        "company": "Northwind Advisory",
        "position": "IT Manager",
        "phone": "+1 555 0100",
        "employeeCount": "51-200",
    }


@pytest.fixture
async def user(client, user_payload) -> dict:
    response = await client.post("/api/users", json=user_payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
async def admin_headers(client) -> dict:
    response = await client.post("/api/admin/auth", json={"password": settings.ADMIN_PASSWORD})
    assert response.status_code == 200
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
