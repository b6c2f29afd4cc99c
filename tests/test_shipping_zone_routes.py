from decimal import Decimal

from app.models import ShippingZone

ZONES_URL = '/api/shipping/zone'


async def test_create_zone(client, fetch):
    response = await client.post(ZONES_URL, json={'zone_name': 'Jakarta', 'additional_fee': 10})

    assert response.status_code == 201
    body = response.json()
    assert body['message'] == 'Shipping zone created successfully'
    assert body['data']['zone_name'] == 'Jakarta'
    assert body['data']['additional_fee'] == 10

    stored = await fetch(ShippingZone, body['data']['id'])
    assert stored.additional_fee == Decimal('10.00')


async def test_zone_name_is_trimmed(client):
    response = await client.post(ZONES_URL, json={'zone_name': '  Bandung  ', 'additional_fee': '2.50'})
    assert response.status_code == 201
    assert response.json()['data']['zone_name'] == 'Bandung'


async def test_duplicate_zone_name(client, make_zone):
    await make_zone(zone_name='Jakarta')

    response = await client.post(ZONES_URL, json={'zone_name': 'Jakarta', 'additional_fee': 5})

    assert response.status_code == 422
    assert response.json()['errors'] == {'zone_name': ['The zone name has already been taken.']}


async def test_invalid_zone(client):
    response = await client.post(ZONES_URL, json={'additional_fee': -5})

    assert response.status_code == 422
    assert response.json()['errors'] == {
        'zone_name': ['The zone name is required.'],
        'additional_fee': ['The additional fee must not be negative.'],
    }


async def test_list_zones(client, make_zone):
    for _ in range(3):
        await make_zone()

    response = await client.get(ZONES_URL, params={'per_page': 2, 'page': 2})

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'Shipping zones retrieved successfully'
    assert [zone['zone_name'] for zone in body['data']] == ['Zone 3']
    assert body['pagination'] == {'current_page': 2, 'last_page': 2, 'per_page': 2, 'total': 3}


async def test_list_zones_invalid_page(client):
    response = await client.get(ZONES_URL, params={'page': 0})
    assert response.status_code == 422
    assert response.json()['errors'] == {'page': ['The page must be at least 1.']}
