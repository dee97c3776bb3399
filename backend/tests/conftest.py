"""Shared test fixtures."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from app.core.database import get_db, get_session_factory  # noqa: E402
from app.core.security import decode_token  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Base  # noqa: E402


@pytest.fixture
async def session_factory(tmp_path):
    """A fresh SQLite database file per test.

    A file (not ``:memory:``) so that the dashboard's concurrent sessions each
    get their own connection to the same data.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def client(session_factory):
    """Async test client for the FastAPI app, wired to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def register(client, email="expense1@tracker.com", password="password1",
                   first_name="User1First", last_name="User1Last") -> dict:
    """Register through the API; return the user id, token and auth headers."""
    response = await client.post("/api/v1/auth/register", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
    })
    assert response.status_code == 201, response.text
    token = response.json()["token"]
    return {
        "id": int(decode_token(token)["sub"]),
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest.fixture
async def user(client):
    return await register(client)


@pytest.fixture
async def other_user(client):
    return await register(
        client, email="expense2@tracker.com", password="password2",
        first_name="User2First", last_name="User2Last",
    )


@pytest.fixture
async def categories(client, user):
    """The user's seeded categories, keyed by name."""
    response = await client.get("/api/v1/categories", headers=user["headers"])
    assert response.status_code == 200
    return {c["name"]: c for c in response.json()["categories"]}
