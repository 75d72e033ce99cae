"""
Unit test suite for PostgresVehicleRepository.

Uses a mocked Session. Tests verify:
- Statements carry the right filters and ORDER BY
- NUMERIC rows map back to Decimal-priced domain vehicles
- Duplicate VINs and zero-row deletes become domain errors
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from dealership.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from dealership.domain.errors import ConflictError, NotFoundError, ValidationError
from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.infra.db.models.vehicle import VehicleRow


@pytest.fixture()
def mock_session() -> MagicMock:
    return MagicMock(spec=Session)


@pytest.fixture()
def repo(mock_session: MagicMock) -> PostgresVehicleRepository:
    return PostgresVehicleRepository(session=mock_session)


@pytest.fixture()
def rows() -> list[VehicleRow]:
    return [
        VehicleRow(
            vehicle_id=1,
            vin="V1",
            year=2022,
            make="Toyota",
            model="RAV4",
            vehicle_type="SUV",
            color="Blue",
            odometer=25000,
            price=Decimal("31000.00"),
        ),
        VehicleRow(
            vehicle_id=2,
            vin="V2",
            year=2019,
            make="Honda",
            model="Civic",
            vehicle_type="CAR",
            color="Gray",
            odometer=45000,
            price=Decimal("21000.00"),
        ),
    ]


def executed_sql(mock_session: MagicMock) -> str:
    statement = mock_session.execute.call_args[0][0]
    return str(statement)


def new_vehicle() -> Vehicle:
    return Vehicle(
        vin="V9",
        year=2024,
        make="Ford",
        model="F-150",
        vehicle_type=VehicleType.TRUCK,
        color="Red",
        odometer=10,
        price=Decimal("45000.00"),
    )


# ==============================================================================
# Reads
# ==============================================================================


def test_find_by_vin_maps_row(repo: PostgresVehicleRepository, mock_session: MagicMock, rows) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = rows[0]

    vehicle = repo.find_by_vin("V1")

    assert vehicle is not None
    assert vehicle.vehicle_id == 1
    assert vehicle.vehicle_type is VehicleType.SUV
    assert vehicle.price == Decimal("31000.00")
    assert "vehicles.vin = :vin_1" in executed_sql(mock_session)


def test_find_by_vin_returns_none_when_absent(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert repo.find_by_vin("NOPE") is None


def test_get_all_orders_by_make_model(repo: PostgresVehicleRepository, mock_session: MagicMock, rows) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = rows

    result = repo.get_all()

    assert [v.vin for v in result] == ["V1", "V2"]
    assert "ORDER BY vehicles.make, vehicles.model, vehicles.vehicle_id" in executed_sql(mock_session)


def test_price_range_uses_between_and_price_order(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    repo.search_by_price_range(Decimal("10000"), Decimal("30000"))

    sql = executed_sql(mock_session)
    assert "vehicles.price BETWEEN" in sql
    assert "ORDER BY vehicles.price, vehicles.vehicle_id" in sql


def test_make_model_is_case_insensitive_and_escaped(
    repo: PostgresVehicleRepository, mock_session: MagicMock
) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    repo.search_by_make_model("Toy", "R%")

    sql = executed_sql(mock_session)
    assert "lower(vehicles.make) LIKE" in sql
    assert "lower(vehicles.model) LIKE" in sql
    assert "ESCAPE '/'" in sql


def test_year_range_orders_newest_first(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    repo.search_by_year_range(2018, 2024)

    assert "ORDER BY vehicles.year DESC" in executed_sql(mock_session)


def test_mileage_range_orders_by_odometer(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    repo.search_by_mileage_range(0, 50000)

    sql = executed_sql(mock_session)
    assert "vehicles.odometer BETWEEN" in sql
    assert "ORDER BY vehicles.odometer" in sql


def test_color_and_type_filters(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []

    repo.search_by_color("gray")
    assert "lower(vehicles.color) LIKE" in executed_sql(mock_session)

    repo.search_by_type(VehicleType.VAN)
    assert "vehicles.vehicle_type = :vehicle_type_1" in executed_sql(mock_session)


# ==============================================================================
# Writes
# ==============================================================================


def test_create_flushes_in_savepoint_and_returns_generated_id(
    repo: PostgresVehicleRepository, mock_session: MagicMock
) -> None:
    mock_session.add.side_effect = lambda row: setattr(row, "vehicle_id", 42)

    stored = repo.create(new_vehicle())

    assert stored.vehicle_id == 42
    assert stored.vin == "V9"
    mock_session.begin_nested.assert_called_once()
    mock_session.flush.assert_called_once()
    mock_session.commit.assert_not_called()


def test_create_duplicate_vin_raises_conflict(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.flush.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

    with pytest.raises(ConflictError, match="V9"):
        repo.create(new_vehicle())


def test_create_value_too_large_for_column_raises_validation_error(
    repo: PostgresVehicleRepository, mock_session: MagicMock
) -> None:
    mock_session.flush.side_effect = DataError(
        "INSERT", {}, Exception("value too long for type character varying(17)")
    )

    with pytest.raises(ValidationError, match="V9") as exc_info:
        repo.create(new_vehicle())

    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert isinstance(exc_info.value.__cause__, DataError)


def test_delete_by_id(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.rowcount = 1

    repo.delete(1)

    assert "DELETE FROM vehicles WHERE vehicles.vehicle_id = :vehicle_id_1" in executed_sql(mock_session)


def test_delete_zero_rows_raises_not_found(repo: PostgresVehicleRepository, mock_session: MagicMock) -> None:
    mock_session.execute.return_value.rowcount = 0

    with pytest.raises(NotFoundError, match="Vehicle with identifier '5' not found"):
        repo.delete(5)
