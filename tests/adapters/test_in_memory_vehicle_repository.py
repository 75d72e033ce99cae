"""
Test suite for InMemoryVehicleRepository.

Serves as the reference for the VehicleRepository contract: inclusive
ranges, case-insensitive partial text matches and per-search ordering.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from dealership.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from dealership.domain.errors import ConflictError, NotFoundError
from dealership.domain.vehicle import Vehicle, VehicleType


def vehicle(
    vin: str,
    make: str,
    model: str,
    year: int,
    price: str,
    odometer: int = 10000,
    color: str = "Black",
    vehicle_type: VehicleType = VehicleType.CAR,
) -> Vehicle:
    return Vehicle(
        vin=vin,
        year=year,
        make=make,
        model=model,
        vehicle_type=vehicle_type,
        color=color,
        odometer=odometer,
        price=Decimal(price),
    )


@pytest.fixture()
def repo() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(
        [
            vehicle("V1", "Toyota", "Corolla", 2018, "18000.00", odometer=60000, color="Silver"),
            vehicle("V2", "Toyota", "Camry", 2020, "24000.00", odometer=30000, color="Dark Gray"),
            vehicle("V3", "Honda", "Civic", 2019, "21000.00", odometer=45000, color="gray"),
            vehicle("V4", "Ford", "F-150", 2022, "41000.00", odometer=12000, vehicle_type=VehicleType.TRUCK),
            vehicle("V5", "TOYOTA", "RAV4", 2022, "31000.00", odometer=8000, vehicle_type=VehicleType.SUV),
        ]
    )


# ==============================================================================
# Identity and writes
# ==============================================================================


def test_constructor_assigns_sequential_ids(repo: InMemoryVehicleRepository) -> None:
    assert [repo.find_by_vin(f"V{i}").vehicle_id for i in range(1, 6)] == [1, 2, 3, 4, 5]  # type: ignore[union-attr]


def test_preset_ids_are_kept_and_not_reused() -> None:
    repo = InMemoryVehicleRepository([vehicle("V1", "Kia", "Rio", 2020, "9000.00").with_id(10)])

    created = repo.create(vehicle("V2", "Kia", "Soul", 2021, "12000.00"))

    assert repo.find_by_vin("V1").vehicle_id == 10  # type: ignore[union-attr]
    assert created.vehicle_id == 11


def test_constructor_rejects_duplicate_vins() -> None:
    with pytest.raises(ConflictError):
        InMemoryVehicleRepository(
            [
                vehicle("V1", "Kia", "Rio", 2020, "9000.00").with_id(1),
                vehicle("V1", "Kia", "Rio", 2020, "9000.00").with_id(2),
            ]
        )


def test_create_rejects_existing_vin(repo: InMemoryVehicleRepository) -> None:
    with pytest.raises(ConflictError, match="already exists"):
        repo.create(vehicle("V1", "Kia", "Rio", 2020, "9000.00"))


def test_find_by_vin_is_exact(repo: InMemoryVehicleRepository) -> None:
    assert repo.find_by_vin("v1") is None
    assert repo.find_by_vin("V1") is not None


def test_delete_by_id(repo: InMemoryVehicleRepository) -> None:
    repo.delete(3)

    assert repo.find_by_vin("V3") is None
    assert len(repo.get_all()) == 4


def test_delete_missing_id_raises(repo: InMemoryVehicleRepository) -> None:
    repo.delete(3)

    with pytest.raises(NotFoundError):
        repo.delete(3)


def test_get_all_ordered_by_make_then_model(repo: InMemoryVehicleRepository) -> None:
    assert [v.vin for v in repo.get_all()] == ["V4", "V3", "V5", "V2", "V1"]


# ==============================================================================
# Searches
# ==============================================================================


def test_price_range_inclusive_and_ascending(repo: InMemoryVehicleRepository) -> None:
    result = repo.search_by_price_range(Decimal("18000.00"), Decimal("31000.00"))

    assert [v.vin for v in result] == ["V1", "V3", "V2", "V5"]


def test_make_model_partial_case_insensitive(repo: InMemoryVehicleRepository) -> None:
    result = repo.search_by_make_model("toy", "")

    assert [v.vin for v in result] == ["V5", "V2", "V1"]


def test_make_model_requires_both_to_match(repo: InMemoryVehicleRepository) -> None:
    assert [v.vin for v in repo.search_by_make_model("toyota", "CAM")] == ["V2"]


def test_year_range_descending_ties_keep_insertion_order(repo: InMemoryVehicleRepository) -> None:
    result = repo.search_by_year_range(2019, 2022)

    assert [v.vin for v in result] == ["V4", "V5", "V2", "V3"]


def test_color_partial_case_insensitive(repo: InMemoryVehicleRepository) -> None:
    assert [v.vin for v in repo.search_by_color("GRAY")] == ["V3", "V2"]


def test_mileage_range_ascending(repo: InMemoryVehicleRepository) -> None:
    result = repo.search_by_mileage_range(0, 30000)

    assert [v.vin for v in result] == ["V5", "V4", "V2"]


def test_search_by_type(repo: InMemoryVehicleRepository) -> None:
    assert [v.vin for v in repo.search_by_type(VehicleType.TRUCK)] == ["V4"]
    assert repo.search_by_type(VehicleType.VAN) == []


def test_empty_repository_returns_empty_results() -> None:
    repo = InMemoryVehicleRepository()

    assert repo.get_all() == []
    assert repo.search_by_price_range(Decimal("0"), Decimal("100000")) == []
