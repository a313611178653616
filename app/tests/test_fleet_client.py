"""
Fleet Service Client Tests

Tests for response normalization and HTTP error mapping.
Backend responses are served by httpx.MockTransport.

Run: pytest app/tests/test_fleet_client.py -v
"""

import httpx
import pytest
from fastapi import HTTPException

from app.tools import fleet_service_client


# ==================== Fixtures ====================

@pytest.fixture
def mock_fleet(monkeypatch):
    """Install a mock transport behind the module-level client."""
    def install(handler):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="http://fleet.test"
        )
        monkeypatch.setattr(fleet_service_client, "_client", client)
        return client

    return install


@pytest.fixture
def truck_record():
    """Truck as returned by the fleet backend."""
    return {
        "id": 12,
        "name": "Rig 12",
        "equipmentType": "Reefer",
        "totalMiles": 4000,
        "fixedCosts": "2500",
        "variableCosts": 3500,
    }


# ==================== Normalization ====================

def test_normalize_truck_camel_case(truck_record):
    truck = fleet_service_client.normalize_truck({"data": truck_record})

    assert truck == {
        "id": "12",
        "name": "Rig 12",
        "equipment_type": "Reefer",
        "total_miles": 4000.0,
        "fixed_costs": 2500.0,
        "variable_costs": 3500.0,
    }


def test_normalize_truck_defaults():
    truck = fleet_service_client.normalize_truck({"truck_id": "t1", "fixedCosts": None})

    assert truck["id"] == "t1"
    assert truck["equipment_type"] == "Dry Van"
    assert truck["fixed_costs"] == 0.0
    assert truck["total_miles"] == 0.0


def test_normalize_truck_garbage():
    assert fleet_service_client.normalize_truck(None)["id"] == ""


@pytest.mark.parametrize("payload, expected", [
    ([{"id": "a"}, {"id": "b"}], 2),
    ({"data": [{"id": "a"}]}, 1),
    ({"loads": [{"id": "a"}, "junk"]}, 1),
    ({"data": {"loads": [{"id": "a"}]}}, 1),
    ("not a list", 0),
    (None, 0),
])
def test_normalize_load_list(payload, expected):
    assert len(fleet_service_client.normalize_load_list(payload)) == expected


def test_safe_float():
    assert fleet_service_client.safe_float("2.5") == 2.5
    assert fleet_service_client.safe_float(None) == 0.0
    assert fleet_service_client.safe_float("") == 0.0
    assert fleet_service_client.safe_float("n/a", default=-1.0) == -1.0


def test_avg_cost_per_mile_uses_recorded_miles(truck_record):
    truck = fleet_service_client.normalize_truck(truck_record)
    assert fleet_service_client.avg_cost_per_mile(truck) == pytest.approx(1.5)


def test_avg_cost_per_mile_without_miles_uses_standard_week():
    truck = {"fixed_costs": 3000.0, "variable_costs": 1500.0, "total_miles": 0.0}

    assert fleet_service_client.avg_cost_per_mile(truck) == pytest.approx(1.5)
    assert fleet_service_client.avg_cost_per_mile(truck, weekly_standard_miles=4500) == pytest.approx(1.0)


def test_avg_cost_per_mile_reads_standard_week_from_env(monkeypatch):
    monkeypatch.setenv("WEEKLY_STANDARD_MILES", "2000")
    truck = {"fixed_costs": 1000.0, "variable_costs": 1000.0, "total_miles": 0.0}

    assert fleet_service_client.avg_cost_per_mile(truck) == pytest.approx(1.0)


def test_build_headers():
    headers = fleet_service_client._build_headers("Bearer abc", "req-1")

    assert headers["Authorization"] == "Bearer abc"
    assert headers["x-request-id"] == "req-1"
    assert "Authorization" not in fleet_service_client._build_headers()


# ==================== HTTP Calls ====================

@pytest.mark.asyncio
async def test_get_truck_success(mock_fleet, truck_record):
    """Truck is fetched by id and auth headers are forwarded."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"data": truck_record})

    mock_fleet(handler)

    truck = await fleet_service_client.get_truck("12", auth_header="Bearer token")

    assert seen == {"path": "/api/trucks/12", "auth": "Bearer token"}
    assert truck["equipment_type"] == "Reefer"


@pytest.mark.asyncio
async def test_get_truck_not_found(mock_fleet):
    mock_fleet(lambda request: httpx.Response(404, json={"message": "no such truck"}))

    with pytest.raises(HTTPException) as exc_info:
        await fleet_service_client.get_truck("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Truck not found"


@pytest.mark.parametrize("backend_status, expected_status", [
    (401, 401),
    (403, 403),
    (500, 503),
    (502, 503),
])
@pytest.mark.asyncio
async def test_http_errors_are_mapped(mock_fleet, backend_status, expected_status):
    mock_fleet(lambda request: httpx.Response(backend_status, text="boom"))

    with pytest.raises(HTTPException) as exc_info:
        await fleet_service_client.list_loads()

    assert exc_info.value.status_code == expected_status


@pytest.mark.asyncio
async def test_connection_error_is_503(mock_fleet):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    mock_fleet(handler)

    with pytest.raises(HTTPException) as exc_info:
        await fleet_service_client.list_trucks()

    assert exc_info.value.status_code == 503
    assert "ConnectError" in exc_info.value.detail


@pytest.mark.asyncio
async def test_list_loads_unwraps_envelope(mock_fleet):
    loads = [
        {"id": "L1", "equipmentType": "Dry Van", "rate": 1200, "miles": 400},
        {"id": "L2", "equipmentType": "Reefer", "rate": 900, "miles": 300},
    ]
    mock_fleet(lambda request: httpx.Response(200, json={"loads": loads}))

    result = await fleet_service_client.list_loads()

    assert [load["id"] for load in result] == ["L1", "L2"]
    assert result[0]["equipmentType"] == "Dry Van"


@pytest.mark.asyncio
async def test_list_trucks_normalizes_each(mock_fleet, truck_record):
    mock_fleet(lambda request: httpx.Response(200, json=[truck_record, {"id": "t2"}]))

    trucks = await fleet_service_client.list_trucks()

    assert [truck["id"] for truck in trucks] == ["12", "t2"]
    assert trucks[1]["equipment_type"] == "Dry Van"


@pytest.mark.asyncio
async def test_get_load(mock_fleet):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/load-board/L9"
        return httpx.Response(200, json={"data": {"id": "L9", "destinationState": "GA"}})

    mock_fleet(handler)

    load = await fleet_service_client.get_load("L9")

    assert load["destinationState"] == "GA"


@pytest.mark.asyncio
async def test_aclose_client_resets_singleton(mock_fleet):
    mock_fleet(lambda request: httpx.Response(200, json=[]))

    await fleet_service_client.aclose_client()

    assert fleet_service_client._client is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
