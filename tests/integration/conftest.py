import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from config import ApplicationConfig
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.session_cache import InMemorySessionCache
from src.depends import get_session, get_session_cache
from src.domain.admin import Admin, Role
from src.domain.customer import Customer

TEST_PASSWORD = "password123"


class TestConfig(ApplicationConfig):
    __test__ = False

    DB_URI = "sqlite+aiosqlite://"
    CACHE_BACKEND = "memory"
    BCRYPT_ROUNDS = 4
    ENABLE_LOGGING_MIDDLEWARE = False
    ENABLE_SENTRY = 0
    JWT_SECRET = "integration-test-secret"
    SETTLEMENT_POLICY = "cycle"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite shared by every session of one test"""
    engine = create_async_engine(
        TestConfig.DB_URI,
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def cache():
    return InMemorySessionCache()


@pytest_asyncio.fixture
async def app(session_factory, cache):
    from src.api.app import create_app

    app = create_app(TestConfig)

    # One session per request, like the real dependency
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_cache] = lambda: cache
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create test client; unhandled errors become 500 responses"""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_admin(db_session):
    """Insert an admin whose password is TEST_PASSWORD"""
    hasher = BcryptPasswordHasher(rounds=4)

    async def _make_admin(username: str, role: Role = Role.ADMIN, email: str = None) -> Admin:
        admin = Admin(
            username=username,
            email=email or f"{username}@example.com",
            name=f"Admin {username.title()}",
            password_hash=hasher.hash(TEST_PASSWORD),
            role=role,
        )
        db_session.add(admin)
        await db_session.commit()
        return admin

    return _make_admin


@pytest_asyncio.fixture
async def login_as(client):
    """Log in through the API and return Bearer headers"""

    async def _login_as(username: str, password: str = TEST_PASSWORD) -> dict:
        response = await client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}

    return _login_as


@pytest_asyncio.fixture
async def superadmin(make_admin):
    return await make_admin("superadmin1", Role.SUPERADMIN)


@pytest_asyncio.fixture
async def admin(make_admin):
    return await make_admin("admin1", Role.ADMIN)


@pytest_asyncio.fixture
async def superadmin_headers(login_as, superadmin):
    return await login_as(superadmin.username)


@pytest_asyncio.fixture
async def admin_headers(login_as, admin):
    return await login_as(admin.username)


@pytest_asyncio.fixture
async def customer(db_session):
    customer = Customer(name="Budi Santoso", phone="081234567890", address="Jl. Merdeka 1")
    db_session.add(customer)
    await db_session.commit()
    return customer
