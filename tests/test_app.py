import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app import create_app
from app.database import get_db_session


async def test_health(client):
    response = await client.get('/health')
    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'


async def test_root(client):
    response = await client.get('/')
    assert response.status_code == 200
    assert response.json()['message'] == 'Shipping API'


async def test_request_id_header(client):
    response = await client.get('/health')
    assert response.headers['X-Request-ID']
    assert 'X-Process-Time' in response.headers


async def test_unknown_route(client):
    response = await client.get('/api/shipping/unknown/route')
    assert response.status_code == 404


async def test_missing_body(client):
    response = await client.post('/api/shipping/zone')
    assert response.status_code == 422
    assert response.json()['errors'] == {'body': ['The request body is required.']}


@pytest.fixture
async def broken_client():
    """Client ke app yang database-nya belum punya tabel sama sekali."""
    engine = create_async_engine(
        'sqlite+aiosqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    application = create_app()

    async def override_get_db_session():
        async with factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=application, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url='http://testserver') as client:
        yield client
    await engine.dispose()


async def test_unexpected_error_is_generic_500(broken_client):
    response = await broken_client.get('/api/shipping/method')

    assert response.status_code == 500
    assert response.json() == {'status': False, 'message': 'Internal server error'}
    assert response.headers['X-Request-ID']
