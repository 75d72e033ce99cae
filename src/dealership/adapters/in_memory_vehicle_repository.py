from __future__ import annotations

from decimal import Decimal
from itertools import count
from typing import Callable, Iterable

from dealership.domain.errors import ConflictError, NotFoundError
from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.ports.vehicle_repository import VehicleRepository


def _by_make_model(vehicle: Vehicle) -> tuple[str, str]:
    return (vehicle.make, vehicle.model)


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Keyed by VIN; assigns sequential vehicle_ids starting at 1
    - Vehicles passed to the constructor keep their id if they have one
    - Sorts each search result per the VehicleRepository ordering contract
    """

    def __init__(self, vehicles: Iterable[Vehicle] = ()) -> None:
        vehicles = list(vehicles)
        used_ids = [v.vehicle_id for v in vehicles if v.vehicle_id is not None]

        self._vehicles: dict[str, Vehicle] = {}
        self._ids = count(max(used_ids, default=0) + 1)

        for vehicle in vehicles:
            if vehicle.vehicle_id is None:
                self.create(vehicle)
            elif vehicle.vin in self._vehicles:
                raise ConflictError(f"Vehicle with VIN '{vehicle.vin}' already exists", vin=vehicle.vin)
            else:
                self._vehicles[vehicle.vin] = vehicle

    def find_by_vin(self, vin: str) -> Vehicle | None:
        return self._vehicles.get(vin)

    def get_all(self) -> list[Vehicle]:
        return sorted(self._vehicles.values(), key=_by_make_model)

    def create(self, vehicle: Vehicle) -> Vehicle:
        if vehicle.vin in self._vehicles:
            raise ConflictError(f"Vehicle with VIN '{vehicle.vin}' already exists", vin=vehicle.vin)

        stored = vehicle.with_id(next(self._ids))
        self._vehicles[stored.vin] = stored
        return stored

    def delete(self, vehicle_id: int) -> None:
        for vin, vehicle in self._vehicles.items():
            if vehicle.vehicle_id == vehicle_id:
                del self._vehicles[vin]
                return

        raise NotFoundError(resource="Vehicle", identifier=str(vehicle_id))

    def search_by_price_range(self, price_min: Decimal, price_max: Decimal) -> list[Vehicle]:
        return self._select(lambda v: price_min <= v.price <= price_max, key=lambda v: v.price)

    def search_by_make_model(self, make: str, model: str) -> list[Vehicle]:
        make, model = make.lower(), model.lower()
        return self._select(
            lambda v: make in v.make.lower() and model in v.model.lower(),
            key=_by_make_model,
        )

    def search_by_year_range(self, year_min: int, year_max: int) -> list[Vehicle]:
        return self._select(lambda v: year_min <= v.year <= year_max, key=lambda v: -v.year)

    def search_by_color(self, color: str) -> list[Vehicle]:
        color = color.lower()
        return self._select(lambda v: color in v.color.lower(), key=_by_make_model)

    def search_by_mileage_range(self, odometer_min: int, odometer_max: int) -> list[Vehicle]:
        return self._select(
            lambda v: odometer_min <= v.odometer <= odometer_max,
            key=lambda v: v.odometer,
        )

    def search_by_type(self, vehicle_type: VehicleType) -> list[Vehicle]:
        return self._select(lambda v: v.vehicle_type is vehicle_type, key=_by_make_model)

    def _select(self, predicate: Callable[[Vehicle], bool], key: Callable[[Vehicle], object]) -> list[Vehicle]:
        # sorted() is stable: ties keep insertion order
        return sorted((v for v in self._vehicles.values() if predicate(v)), key=key)  # type: ignore[arg-type]
