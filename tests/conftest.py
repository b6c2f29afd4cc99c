import os

# Jangan sampai test menyentuh database file lokal
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STRICT_FEE_CALCULATION", "false")

import itertools
from decimal import Decimal

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app import create_app
from app.database import get_db_session
from app.models import Base, ShippingMethod, ShippingZone, Order

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    """In-memory SQLite engine; StaticPool supaya semua session berbagi satu koneksi."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    application = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_method(session_factory):
    """Factory: insert ShippingMethod langsung ke database."""
    counter = itertools.count(1)

    async def _make(**overrides):
        data = {
            'name': f"Method {next(counter)}",
            'description': 'Test shipping method',
            'base_cost': Decimal('30.00'),
            'cost_per_kg': Decimal('5.00'),
            'estimated_days': 3,
        }
        data.update(overrides)
        async with session_factory() as session:
            method = ShippingMethod(**data)
            session.add(method)
            await session.commit()
            return method

    return _make


@pytest.fixture
def make_zone(session_factory):
    counter = itertools.count(1)

    async def _make(**overrides):
        data = {
            'zone_name': f"Zone {next(counter)}",
            'additional_fee': Decimal('10.00'),
        }
        data.update(overrides)
        async with session_factory() as session:
            zone = ShippingZone(**data)
            session.add(zone)
            await session.commit()
            return zone

    return _make


@pytest.fixture
def make_order(session_factory):
    async def _make(shipping_method_id, total_price=Decimal('1.00')):
        async with session_factory() as session:
            order = Order(shipping_method_id=shipping_method_id, total_price=total_price)
            session.add(order)
            await session.commit()
            return order

    return _make


@pytest.fixture
def fetch(session_factory):
    """Baca satu record dengan session baru, None kalau tidak ada."""
    async def _fetch(model_class, entity_id):
        async with session_factory() as session:
            return await session.get(model_class, entity_id)

    return _fetch
