"""
Schema Tests

Ingestion-boundary validation for loads, requests and output models.

Run: pytest app/tests/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError

from app.schemas.loads import FleetData, Load, Location, MarketConditions, RecommendationRequest
from app.schemas.recommendation import AdvisoryNotes, TimeCompatibility
from app.schemas.requests import LoadRecommendationBody


def test_load_accepts_camel_case_backend_record():
    load = Load.model_validate({
        "id": 42,
        "equipmentType": "Reefer",
        "rate": "1500.50",
        "miles": 610,
        "originCity": "Fresno",
        "originState": "CA",
        "destinationCity": "Reno",
        "destinationState": "NV",
        "loadBoardSource": "DAT",
        "pickupDate": "2024-05-01",
    })

    assert load.id == "42"
    assert load.equipment_type == "Reefer"
    assert load.rate == pytest.approx(1500.50)
    assert load.status == ""
    assert str(load.origin) == "Fresno, CA"
    assert load.destination == Location(city="Reno", state="NV")


def test_load_null_fields_become_defaults():
    load = Load.model_validate({
        "id": "x",
        "rate": None,
        "miles": None,
        "ratePerMile": "",
        "originCity": None,
        "loadBoardSource": None,
    })

    assert load.rate == 0
    assert load.miles == 0
    assert load.rate_per_mile == 0
    assert load.origin_city == ""
    assert load.load_board_source == ""


def test_load_accepts_snake_case():
    load = Load(id="s", equipment_type="Flatbed", rate_per_mile=2.4)
    assert load.equipment_type == "Flatbed"
    assert load.rate_per_mile == 2.4


def test_fleet_data_requires_equipment_type():
    with pytest.raises(ValidationError):
        FleetData(avg_cost_per_mile=1.5)


def test_fleet_data_null_cost_is_zero():
    assert FleetData.model_validate({"avgCostPerMile": None, "equipmentType": "Van"}).avg_cost_per_mile == 0


def test_market_conditions_defaults_and_validation():
    conditions = MarketConditions()
    assert conditions.fuel_price == 3.50
    assert conditions.seasonality == "standard"
    assert conditions.market_demand == "medium"

    with pytest.raises(ValidationError):
        MarketConditions(fuel_price=0)
    with pytest.raises(ValidationError):
        MarketConditions(market_demand="extreme")


def test_request_rejects_negative_hours():
    with pytest.raises(ValidationError):
        RecommendationRequest(
            truck_id="t",
            user_id="u",
            driver_hours={"drive_time_remaining": -1, "on_duty_remaining": 14},
            fleet_data={"equipment_type": "Dry Van"},
        )


def test_request_body_caps_hours_of_service():
    body = LoadRecommendationBody.model_validate({
        "truckId": "t1",
        "driverHours": {"driveTimeRemaining": 11, "onDutyRemaining": 14},
    })
    assert body.truck_id == "t1"

    with pytest.raises(ValidationError):
        LoadRecommendationBody.model_validate({
            "truck_id": "t1",
            "driver_hours": {"drive_time_remaining": 15, "on_duty_remaining": 14},
        })


def test_request_body_requires_truck_id():
    with pytest.raises(ValidationError):
        LoadRecommendationBody.model_validate({
            "truck_id": "",
            "driver_hours": {"drive_time_remaining": 11, "on_duty_remaining": 14},
        })


def test_output_models_are_frozen():
    notes = AdvisoryNotes(reasons=["ok"], warnings=[], optimizations=[])
    with pytest.raises(ValidationError):
        notes.reasons = []


def test_time_compatibility_rejects_negative_buffer():
    with pytest.raises(ValidationError):
        TimeCompatibility(estimated_drive_time=1.0, buffer_time=-0.5, compatible=True)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
