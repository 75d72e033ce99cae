"""
Test suite for the /v1/vehicles routes.

- Query parameters select one service search
- Decimal amounts cross the boundary as strings
- Domain errors come back as structured JSON
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from dealership.domain.errors import ConflictError, NotFoundError
from dealership.domain.vehicle import Vehicle, VehicleType

NEW_VEHICLE = {
    "vin": "5YJSA1E26HF000001",
    "year": 2023,
    "make": "Honda",
    "model": "Odyssey",
    "vehicle_type": "van",
    "color": "White",
    "odometer": 12000,
    "price": "38500.50",
}


# ==============================================================================
# GET /v1/vehicles
# ==============================================================================


def test_list_without_filters_returns_all(client: TestClient, mock_service: Mock, rav4: Vehicle) -> None:
    mock_service.get_all_vehicles.return_value = [rav4]

    response = client.get("/v1/vehicles")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["vehicles"][0] == {
        "vehicle_id": 1,
        "vin": "1HGCM82633A004352",
        "year": 2024,
        "make": "Toyota",
        "model": "RAV4",
        "vehicle_type": "SUV",
        "color": "Blue",
        "odometer": 25000,
        "price": "31000.00",
    }


def test_price_filter_parses_decimals(client: TestClient, mock_service: Mock, rav4: Vehicle) -> None:
    mock_service.search_by_price_range.return_value = [rav4]

    response = client.get("/v1/vehicles", params={"price_min": "10000", "price_max": "35000.00"})

    assert response.status_code == 200
    mock_service.search_by_price_range.assert_called_once_with(Decimal("10000"), Decimal("35000.00"))


def test_half_open_price_range_fills_minimum(client: TestClient, mock_service: Mock) -> None:
    mock_service.search_by_price_range.return_value = []

    client.get("/v1/vehicles", params={"price_max": "20000"})

    price_min, price_max = mock_service.search_by_price_range.call_args[0]
    assert price_min == Decimal("0")
    assert price_max == Decimal("20000")


def test_make_model_filter(client: TestClient, mock_service: Mock) -> None:
    mock_service.search_by_make_model.return_value = []

    client.get("/v1/vehicles", params={"make": "toy"})

    mock_service.search_by_make_model.assert_called_once_with("toy", "")


def test_type_filter(client: TestClient, mock_service: Mock) -> None:
    mock_service.search_by_type.return_value = []

    client.get("/v1/vehicles", params={"vehicle_type": "suv"})

    mock_service.search_by_type.assert_called_once_with("suv")


def test_mixed_filter_families_rejected(client: TestClient, mock_service: Mock) -> None:
    response = client.get("/v1/vehicles", params={"color": "red", "year_min": 2020})

    assert response.status_code == 422
    data = response.json()
    assert {e["code"] for e in data["errors"]} == {"CONFLICTING_FILTERS"}
    mock_service.search_by_color.assert_not_called()


def test_malformed_price_rejected_before_service(client: TestClient, mock_service: Mock) -> None:
    response = client.get("/v1/vehicles", params={"price_min": "abc"})

    assert response.status_code == 422
    mock_service.search_by_price_range.assert_not_called()


# ==============================================================================
# GET /v1/vehicles/{vin}
# ==============================================================================


def test_get_by_vin(client: TestClient, mock_service: Mock, rav4: Vehicle) -> None:
    mock_service.require_vehicle_by_vin.return_value = rav4

    response = client.get("/v1/vehicles/1HGCM82633A004352")

    assert response.status_code == 200
    assert response.json()["model"] == "RAV4"


def test_get_unknown_vin_returns_404(client: TestClient, mock_service: Mock) -> None:
    mock_service.require_vehicle_by_vin.side_effect = NotFoundError("Vehicle", "NOPE")

    response = client.get("/v1/vehicles/NOPE")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


# ==============================================================================
# POST /v1/vehicles
# ==============================================================================


def test_add_vehicle_returns_201(client: TestClient, mock_service: Mock) -> None:
    mock_service.add_vehicle.side_effect = lambda vehicle: vehicle.with_id(12)

    response = client.post("/v1/vehicles", json=NEW_VEHICLE)

    assert response.status_code == 201
    data = response.json()
    assert data["vehicle_id"] == 12
    assert data["vehicle_type"] == "VAN"
    assert data["price"] == "38500.50"

    added = mock_service.add_vehicle.call_args[0][0]
    assert added.vehicle_type is VehicleType.VAN
    assert added.price == Decimal("38500.50")


def test_add_vehicle_with_unknown_type_returns_422(client: TestClient, mock_service: Mock) -> None:
    response = client.post("/v1/vehicles", json={**NEW_VEHICLE, "vehicle_type": "boat"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "vehicle_type"
    mock_service.add_vehicle.assert_not_called()


def test_add_vehicle_with_bad_price_format_returns_422(client: TestClient) -> None:
    response = client.post("/v1/vehicles", json={**NEW_VEHICLE, "price": "38500.505"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "price"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("vin", "1HGCM82633A0043521"),
        ("make", "M" * 51),
        ("model", "M" * 51),
        ("color", "C" * 31),
        ("price", "10000000000"),
    ],
)
def test_add_vehicle_too_large_for_inventory_table_returns_422(
    client: TestClient, mock_service: Mock, field: str, value: str
) -> None:
    response = client.post("/v1/vehicles", json={**NEW_VEHICLE, field: value})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == field
    mock_service.add_vehicle.assert_not_called()


def test_add_vehicle_at_column_limits_is_accepted(client: TestClient, mock_service: Mock) -> None:
    mock_service.add_vehicle.side_effect = lambda vehicle: vehicle.with_id(13)
    payload = {**NEW_VEHICLE, "vin": "V" * 17, "color": "C" * 30, "price": "9999999999.99"}

    response = client.post("/v1/vehicles", json=payload)

    assert response.status_code == 201
    assert response.json()["price"] == "9999999999.99"


def test_add_duplicate_vehicle_returns_409(client: TestClient, mock_service: Mock) -> None:
    mock_service.add_vehicle.side_effect = ConflictError("Vehicle already exists")

    assert client.post("/v1/vehicles", json=NEW_VEHICLE).status_code == 409


# ==============================================================================
# DELETE /v1/vehicles/{vehicle_id}
# ==============================================================================


def test_remove_vehicle_returns_204(client: TestClient, mock_service: Mock) -> None:
    response = client.delete("/v1/vehicles/3")

    assert response.status_code == 204
    mock_service.remove_vehicle.assert_called_once_with(3)


def test_remove_missing_vehicle_returns_404(client: TestClient, mock_service: Mock) -> None:
    mock_service.remove_vehicle.side_effect = NotFoundError("Vehicle", "3")

    assert client.delete("/v1/vehicles/3").status_code == 404
