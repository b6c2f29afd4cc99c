from decimal import Decimal

import pytest
from fastapi import Depends
from sqlalchemy import select

from app.database import get_db_session
from app.dependencies import get_service_registry
from app.models import Order
from app.services import create_service_registry

CALCULATE_URL = '/api/shipping/calculate'


async def list_orders(session_factory):
    async with session_factory() as session:
        result = await session.execute(select(Order).order_by(Order.id))
        return list(result.scalars().all())


@pytest.fixture
def strict_app(app):
    async def strict_service_registry(db_session=Depends(get_db_session)):
        return create_service_registry(db_session, {'STRICT_FEE_CALCULATION': True})

    app.dependency_overrides[get_service_registry] = strict_service_registry
    return app


async def test_calculate_fee(client, make_method, make_zone, session_factory):
    method = await make_method(name='Express', base_cost=Decimal('50.00'), cost_per_kg=Decimal('5.00'))
    await make_zone(zone_name='Jakarta', additional_fee=Decimal('10.00'))

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': 2, 'destination': 'Jakarta',
    })

    assert response.status_code == 201
    body = response.json()
    assert body['status'] is True
    assert body['message'] == 'Order created successfully'
    assert body['data']['total_fee'] == 70
    assert body['data']['shipping_method'] == 'Express'
    assert body['data']['additional_fee'] == 10

    orders = await list_orders(session_factory)
    assert len(orders) == 1
    assert orders[0].id == body['data']['order_id']
    assert orders[0].shipping_method_id == method.id
    assert orders[0].total_price == Decimal('70')


async def test_fractional_weight_is_exact(client, make_method, session_factory):
    method = await make_method(base_cost=Decimal('0.10'), cost_per_kg=Decimal('0.20'))

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': '0.1', 'destination': 'Nowhere',
    })

    assert response.status_code == 201
    orders = await list_orders(session_factory)
    assert orders[0].total_price == Decimal('0.12')


async def test_method_with_orders_cannot_be_deleted(client, make_method, make_zone):
    method = await make_method()
    await make_zone(zone_name='Jakarta')
    await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': 1, 'destination': 'Jakarta',
    })

    response = await client.delete(f'/api/shipping/method/{method.id}')

    assert response.status_code == 409


async def test_unknown_destination_adds_nothing(client, make_method):
    method = await make_method(base_cost=Decimal('30.00'), cost_per_kg=Decimal('5.00'))

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': 2, 'destination': 'Atlantis',
    })

    assert response.status_code == 201
    assert response.json()['data']['additional_fee'] == 0
    assert response.json()['data']['total_fee'] == 40


async def test_missing_method(client, session_factory):
    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': 999, 'weight': 1, 'destination': 'Jakarta',
    })

    assert response.status_code == 422
    assert response.json()['errors'] == {
        'shipping_method_id': ['The selected shipping method is invalid.'],
    }
    assert await list_orders(session_factory) == []


async def test_invalid_input(client, session_factory):
    response = await client.post(CALCULATE_URL, json={'weight': -1})

    assert response.status_code == 422
    assert response.json()['errors'] == {
        'shipping_method_id': ['The shipping method is required.'],
        'weight': ['The weight must not be negative.'],
        'destination': ['The destination is required.'],
    }
    assert await list_orders(session_factory) == []


async def test_weight_must_be_numeric(client, make_method):
    method = await make_method()
    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': 'heavy', 'destination': 'Jakarta',
    })
    assert response.status_code == 422
    assert response.json()['errors'] == {'weight': ['The weight must be a number.']}


class TestStrictMode:

    async def test_rejects_light_parcels_and_unknown_zones(self, strict_app, client, make_method):
        method = await make_method()

        response = await client.post(CALCULATE_URL, json={
            'shipping_method_id': method.id, 'weight': '0.05', 'destination': 'Atlantis',
        })

        assert response.status_code == 422
        assert response.json()['errors'] == {
            'weight': ['The weight must be at least 0.1 kg.'],
            'destination': ['The selected destination is invalid.'],
        }

    async def test_accepts_known_zone(self, strict_app, client, make_method, make_zone):
        method = await make_method(base_cost=Decimal('50.00'), cost_per_kg=Decimal('5.00'))
        await make_zone(zone_name='Jakarta', additional_fee=Decimal('10.00'))

        response = await client.post(CALCULATE_URL, json={
            'shipping_method_id': method.id, 'weight': 2, 'destination': 'Jakarta',
        })

        assert response.status_code == 201
        assert response.json()['data']['total_fee'] == 70


async def test_returned_fee_matches_stored_order(client, make_method, session_factory):
    method = await make_method(base_cost=Decimal('50.00'), cost_per_kg=Decimal('5.55'))

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': '0.33', 'destination': 'Nowhere',
    })

    assert response.status_code == 201
    orders = await list_orders(session_factory)
    assert orders[0].total_price == Decimal('51.8315')
    assert Decimal(str(response.json()['data']['total_fee'])) == orders[0].total_price


async def test_weight_with_too_many_decimals(client, make_method, session_factory):
    method = await make_method()

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': '0.333', 'destination': 'Nowhere',
    })

    assert response.status_code == 422
    assert response.json()['errors'] == {
        'weight': ['The weight may have at most 6 whole digits and 2 decimal places.'],
    }
    assert await list_orders(session_factory) == []


async def test_oversized_weight_is_rejected_before_saving(client, make_method, session_factory):
    method = await make_method()

    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': method.id, 'weight': '1e999999', 'destination': 'Nowhere',
    })

    assert response.status_code == 422
    assert 'weight' in response.json()['errors']
    assert await list_orders(session_factory) == []


async def test_oversized_method_id(client, session_factory):
    response = await client.post(CALCULATE_URL, json={
        'shipping_method_id': 2 ** 70, 'weight': 1, 'destination': 'Nowhere',
    })

    assert response.status_code == 422
    assert response.json()['errors'] == {
        'shipping_method_id': ['The selected shipping method is invalid.'],
    }
    assert await list_orders(session_factory) == []
