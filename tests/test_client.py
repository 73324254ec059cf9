# tests/test_client.py
import httpx
import pytest
from vehicle_inventory import crud
from vehicle_inventory.client import VehicleSource
from vehicle_inventory.errors import FetchError, InvalidRecordError
from conftest import SAMPLE


def mock_source(handler):
    return VehicleSource(base_url="http://inventory.test",
                         client=httpx.Client(transport=httpx.MockTransport(handler)))


@pytest.fixture
def live_source(api_client, db):
    for row in SAMPLE:
        crud.upsert_vehicle(db, dict(row))
    return VehicleSource(base_url="http://testserver", client=api_client)


def test_fetch_all_against_service(live_source):
    vehicles = live_source.fetch_all()
    assert [v.id for v in vehicles] == [1, 2]
    assert vehicles[0].make == "Toyota"


def test_fetch_by_id_against_service(live_source):
    assert live_source.fetch_by_id(2).model == "Mustang"
    assert live_source.fetch_by_id(999) is None


def test_server_error_is_fetch_error():
    source = mock_source(lambda request: httpx.Response(500))
    with pytest.raises(FetchError) as exc:
        source.fetch_all()
    assert exc.value.status_code == 500


def test_by_id_server_error_is_fetch_error():
    source = mock_source(lambda request: httpx.Response(503))
    with pytest.raises(FetchError):
        source.fetch_by_id(1)


def test_transport_error_is_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError):
        mock_source(handler).fetch_all()


def test_malformed_json_is_fetch_error():
    source = mock_source(lambda request: httpx.Response(200, content=b"{not json"))
    with pytest.raises(FetchError):
        source.fetch_all()


def test_wrong_shape_is_invalid_record():
    source = mock_source(lambda request: httpx.Response(200, json={"vehicles": []}))
    with pytest.raises(InvalidRecordError):
        source.fetch_all()


def test_record_missing_fields_is_invalid_record():
    source = mock_source(lambda request: httpx.Response(200, json=[{"id": 1, "make": "Ford"}]))
    with pytest.raises(InvalidRecordError):
        source.fetch_all()
    with pytest.raises(InvalidRecordError):
        mock_source(lambda request: httpx.Response(200, json={"id": 1})).fetch_by_id(1)


def test_requests_hit_the_vehicle_endpoints():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        if request.url.path == "/api/vehicles":
            return httpx.Response(200, json=SAMPLE)
        return httpx.Response(200, json=SAMPLE[1])

    source = mock_source(handler)
    assert len(source.fetch_all()) == 2
    assert source.fetch_by_id(2).id == 2
    assert seen == ["/api/vehicles", "/api/vehicles/2"]


def test_timeout_is_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(FetchError):
        mock_source(handler).fetch_all()
    with pytest.raises(FetchError):
        mock_source(handler).fetch_by_id(1)


def test_injected_client_keeps_its_timeout():
    seen = []

    def handler(request):
        seen.append(request.extensions["timeout"])
        return httpx.Response(200, json=SAMPLE)

    client = httpx.Client(transport=httpx.MockTransport(handler), timeout=2.5)
    source = VehicleSource(base_url="http://inventory.test", client=client, timeout=30)
    source.fetch_all()
    assert seen[0]["read"] == 2.5
