# tests/test_flights.py
import pytest
from unittest.mock import MagicMock

from app import create_app, cors_origins
from app.services.ticket_store import TicketStoreError
from conftest import TestConfig

REQUIRED_FIELDS = ['airlines', 'name', 'from', 'to', 'date', 'fare']


def create_flight(client, payload):
    response = client.post('/flights/', json=payload)
    assert response.status_code == 201
    return response.get_json()['data']['flight']


class TestFlightCrud:

    def test_create_then_fetch_returns_equal_record(self, client, flight_payload):
        response = client.post('/flights/', json=flight_payload)

        assert response.status_code == 201
        data = response.get_json()
        assert data['success'] is True
        assert data['message'] == 'Flight added!'
        created = data['data']['flight']
        assert created['id']

        response = client.get(f"/flights/{created['id']}")
        assert response.status_code == 200
        fetched = response.get_json()['data']['flight']
        assert fetched == created
        assert fetched['airlines'] == 'Air India'
        assert fetched['name'] == 'AI4131'
        assert fetched['from'] == 'PNQ'
        assert fetched['to'] == 'BOM'
        assert fetched['date'] == '2020-09-05T00:00:00Z'
        assert fetched['fare'] == 4000

    @pytest.mark.parametrize('missing', REQUIRED_FIELDS)
    def test_create_missing_field_is_rejected(self, client, store, flight_payload, missing):
        del flight_payload[missing]

        response = client.post('/flights/', json=flight_payload)

        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'VALIDATION_ERROR'
        assert missing in data['errors']
        assert store.count() == 0

    def test_create_wrong_type_is_rejected(self, client, store, flight_payload):
        flight_payload['fare'] = 'cheap'

        response = client.post('/flights/', json=flight_payload)

        assert response.status_code == 400
        assert 'fare' in response.get_json()['errors']
        assert store.count() == 0

    def test_create_without_json_body(self, client, store):
        response = client.post('/flights/', data='not json', content_type='text/plain')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'VALIDATION_ERROR'
        assert store.count() == 0

    def test_duplicate_flights_are_allowed(self, client, store, flight_payload):
        first = create_flight(client, flight_payload)
        second = create_flight(client, flight_payload)

        assert first['id'] != second['id']
        assert store.count() == 2

    def test_get_unknown_flight(self, client):
        response = client.get('/flights/does-not-exist')

        assert response.status_code == 404
        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'NOT_FOUND'

    def test_delete_flight(self, client, flight_payload):
        flight = create_flight(client, flight_payload)

        response = client.delete(f"/flights/{flight['id']}")

        assert response.status_code == 200
        assert response.get_json()['message'] == 'Flight deleted.'
        assert client.get(f"/flights/{flight['id']}").status_code == 404

    def test_delete_unknown_flight_returns_404_and_service_keeps_working(self, client, flight_payload):
        response = client.delete('/flights/does-not-exist')
        assert response.status_code == 404
        assert response.get_json()['error'] == 'NOT_FOUND'

        create_flight(client, flight_payload)
        response = client.get('/flights/')
        assert response.status_code == 200
        assert len(response.get_json()['data']) == 1

    def test_patch_fare_only_leaves_other_fields(self, client, flight_payload):
        flight = create_flight(client, flight_payload)

        response = client.patch(f"/flights/{flight['id']}", json={'fare': 4500})

        assert response.status_code == 200
        assert response.get_json()['message'] == 'Flight updated!'
        updated = client.get(f"/flights/{flight['id']}").get_json()['data']['flight']
        assert updated['fare'] == 4500
        for field in ['id', 'airlines', 'name', 'from', 'to', 'date']:
            assert updated[field] == flight[field]

    def test_patch_ignores_unknown_fields(self, client, flight_payload):
        flight = create_flight(client, flight_payload)

        response = client.patch(f"/flights/{flight['id']}", json={'gate': 'A4', 'id': 'other'})

        assert response.status_code == 200
        assert response.get_json()['data']['flight'] == flight

    def test_patch_null_field_is_rejected(self, client, flight_payload):
        flight = create_flight(client, flight_payload)

        response = client.patch(f"/flights/{flight['id']}", json={'airlines': None})

        assert response.status_code == 400
        assert 'airlines' in response.get_json()['errors']
        fetched = client.get(f"/flights/{flight['id']}").get_json()['data']['flight']
        assert fetched['airlines'] == 'Air India'

    def test_patch_unknown_flight(self, client):
        response = client.patch('/flights/does-not-exist', json={'fare': 100})

        assert response.status_code == 404

    def test_list_after_creates_and_deletes(self, client, flight_payload):
        ids = []
        for i in range(5):
            flight_payload['name'] = f'AI41{i}'
            ids.append(create_flight(client, flight_payload)['id'])
        for flight_id in ids[:2]:
            assert client.delete(f'/flights/{flight_id}').status_code == 200

        response = client.get('/flights/')

        assert response.status_code == 200
        flights = response.get_json()['data']
        assert len(flights) == 3
        assert {f['id'] for f in flights} == set(ids[2:])

    def test_create_fare_with_sub_cent_precision_is_rejected(self, client, store, flight_payload):
        flight_payload['fare'] = 4000.125

        response = client.post('/flights/', json=flight_payload)

        assert response.status_code == 400
        assert 'fare' in response.get_json()['errors']
        assert store.count() == 0

    def test_create_fare_with_cents_round_trips(self, client, flight_payload):
        flight_payload['fare'] = 4000.12
        flight = create_flight(client, flight_payload)

        fetched = client.get(f"/flights/{flight['id']}").get_json()['data']['flight']
        assert fetched['fare'] == 4000.12

    def test_create_offset_date_out_of_range_is_rejected(self, client, store, flight_payload):
        flight_payload['date'] = '9999-12-31T23:00:00-05:00'

        response = client.post('/flights/', json=flight_payload)

        assert response.status_code == 400
        assert 'date' in response.get_json()['errors']
        assert store.count() == 0

    def test_list_empty(self, client):
        response = client.get('/flights/')

        assert response.status_code == 200
        assert response.get_json()['data'] == []


class TestFlightErrorTranslation:
    """Handlers run against an injected store double"""

    @pytest.fixture
    def fake_store(self):
        return MagicMock()

    @pytest.fixture
    def fake_client(self, fake_store):
        app = create_app(TestConfig, ticket_store=fake_store)
        return app.test_client()

    def test_store_failure_maps_to_500(self, fake_client, fake_store):
        fake_store.find_all.side_effect = TicketStoreError('Failed to list tickets')

        response = fake_client.get('/flights/')

        assert response.status_code == 500
        data = response.get_json()
        assert data['error'] == 'INTERNAL_ERROR'
        assert data['message'] == 'Failed to list tickets'

    def test_unexpected_exception_maps_to_generic_500(self, fake_client, fake_store):
        fake_store.find_by_id.side_effect = RuntimeError('boom')

        response = fake_client.get('/flights/abc')

        assert response.status_code == 500
        data = response.get_json()
        assert data['error'] == 'INTERNAL_ERROR'
        assert 'boom' not in data['message']

    def test_handlers_use_injected_store(self, fake_client, fake_store):
        ticket = MagicMock()
        ticket.to_dict.return_value = {'id': 'abc', 'name': 'AI4131'}
        fake_store.find_by_id.return_value = ticket

        response = fake_client.get('/flights/abc')

        assert response.status_code == 200
        assert response.get_json()['data']['flight'] == {'id': 'abc', 'name': 'AI4131'}
        fake_store.find_by_id.assert_called_once_with('abc')


class TestCorsOrigins:

    def test_comma_separated_origins_are_split(self):
        assert cors_origins('http://a.example, http://b.example') == ['http://a.example', 'http://b.example']

    def test_single_origin_passes_through(self):
        assert cors_origins('*') == '*'
        assert cors_origins('http://a.example') == 'http://a.example'

    def test_each_configured_origin_is_allowed(self):
        class MultiOriginConfig(TestConfig):
            CORS_ORIGINS = 'http://a.example,http://b.example'

        app = create_app(MultiOriginConfig, ticket_store=MagicMock())
        app.extensions['ticket_store'].find_all.return_value = []
        client = app.test_client()

        response = client.get('/flights/', headers={'Origin': 'http://b.example'})
        assert response.headers.get('Access-Control-Allow-Origin') == 'http://b.example'

        response = client.get('/flights/', headers={'Origin': 'http://c.example'})
        assert 'Access-Control-Allow-Origin' not in response.headers
