"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from dealership.domain.errors import ConflictError, NotFoundError, ValidationError
from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.infra.db.models.vehicle import VehicleRow
from dealership.ports.vehicle_repository import VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Uses SQLAlchemy ORM for database access
    - Text filters are case-insensitive LIKE '%term%' with wildcards escaped
    - Writes are flushed, not committed; the session owner commits
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find_by_vin(self, vin: str) -> Vehicle | None:
        query = select(VehicleRow).where(VehicleRow.vin == vin)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def get_all(self) -> list[Vehicle]:
        return self._fetch(self._by_make_model(select(VehicleRow)))

    def create(self, vehicle: Vehicle) -> Vehicle:
        """
        Insert a vehicle and return it with the generated vehicle_id.

        The insert runs in a SAVEPOINT so a duplicate VIN leaves the
        surrounding transaction usable.

        Raises:
            ConflictError: If the VIN already exists
            ValidationError: If a value does not fit its column (VIN over 17
                characters, price over 9,999,999,999.99, ...)
        """
        row = VehicleRow(
            vin=vehicle.vin,
            year=vehicle.year,
            make=vehicle.make,
            model=vehicle.model,
            vehicle_type=vehicle.vehicle_type.value,
            color=vehicle.color,
            odometer=vehicle.odometer,
            price=vehicle.price,
        )

        try:
            with self._session.begin_nested():
                self._session.add(row)
                self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Vehicle with VIN '{vehicle.vin}' already exists", vin=vehicle.vin
            ) from exc
        except DataError as exc:
            raise ValidationError(
                f"Vehicle with VIN '{vehicle.vin}' does not fit the inventory table",
                vin=vehicle.vin,
            ) from exc

        return vehicle.with_id(row.vehicle_id)

    def delete(self, vehicle_id: int) -> None:
        """
        Delete by surrogate id.

        A concurrent transaction that removed the row first makes this
        affect zero rows, which is reported rather than ignored.

        Raises:
            NotFoundError: If no row was deleted
        """
        result = self._session.execute(delete(VehicleRow).where(VehicleRow.vehicle_id == vehicle_id))

        if result.rowcount == 0:
            raise NotFoundError(resource="Vehicle", identifier=str(vehicle_id))

    def search_by_price_range(self, price_min: Decimal, price_max: Decimal) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .where(VehicleRow.price.between(price_min, price_max))
            .order_by(VehicleRow.price, VehicleRow.vehicle_id)
        )
        return self._fetch(query)

    def search_by_make_model(self, make: str, model: str) -> list[Vehicle]:
        query = select(VehicleRow).where(
            func.lower(VehicleRow.make).contains(make.lower(), autoescape=True),
            func.lower(VehicleRow.model).contains(model.lower(), autoescape=True),
        )
        return self._fetch(self._by_make_model(query))

    def search_by_year_range(self, year_min: int, year_max: int) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .where(VehicleRow.year.between(year_min, year_max))
            .order_by(VehicleRow.year.desc(), VehicleRow.vehicle_id)
        )
        return self._fetch(query)

    def search_by_color(self, color: str) -> list[Vehicle]:
        query = select(VehicleRow).where(
            func.lower(VehicleRow.color).contains(color.lower(), autoescape=True)
        )
        return self._fetch(self._by_make_model(query))

    def search_by_mileage_range(self, odometer_min: int, odometer_max: int) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .where(VehicleRow.odometer.between(odometer_min, odometer_max))
            .order_by(VehicleRow.odometer, VehicleRow.vehicle_id)
        )
        return self._fetch(query)

    def search_by_type(self, vehicle_type: VehicleType) -> list[Vehicle]:
        query = select(VehicleRow).where(VehicleRow.vehicle_type == vehicle_type.value)
        return self._fetch(self._by_make_model(query))

    def _by_make_model(self, query: Select[tuple[VehicleRow]]) -> Select[tuple[VehicleRow]]:
        return query.order_by(VehicleRow.make, VehicleRow.model, VehicleRow.vehicle_id)

    def _fetch(self, query: Select[tuple[VehicleRow]]) -> list[Vehicle]:
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity carrying its vehicle_id
        """
        return Vehicle(
            vin=row.vin,
            year=row.year,
            make=row.make,
            model=row.model,
            vehicle_type=VehicleType.parse(row.vehicle_type),
            color=row.color,
            odometer=row.odometer,
            price=row.price,  # Already Decimal from NUMERIC column
            vehicle_id=row.vehicle_id,
        )
