from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from dealership.domain.vehicle import Vehicle, VehicleType


class VehicleRepository(ABC):
    """
    Port for inventory data access.

    Ordering contract for result lists:
        - search_by_price_range: price ascending
        - search_by_year_range: year descending
        - search_by_mileage_range: odometer ascending
        - everything else: make, then model, lexicographic

    Ranges are inclusive on both ends. Text filters are case-insensitive
    substring matches.
    """

    @abstractmethod
    def find_by_vin(self, vin: str) -> Vehicle | None:
        """Return the vehicle with this VIN, or None if it is not in inventory."""
        ...

    @abstractmethod
    def get_all(self) -> list[Vehicle]: ...

    @abstractmethod
    def create(self, vehicle: Vehicle) -> Vehicle:
        """
        Store a new vehicle.

        Returns:
            The vehicle carrying its store-assigned vehicle_id

        Raises:
            ConflictError: If a vehicle with the same VIN is already stored
        """
        ...

    @abstractmethod
    def delete(self, vehicle_id: int) -> None:
        """
        Remove a vehicle from inventory.

        Raises:
            NotFoundError: If no vehicle has this id (already sold, leased or removed)
        """
        ...

    @abstractmethod
    def search_by_price_range(self, price_min: Decimal, price_max: Decimal) -> list[Vehicle]: ...

    @abstractmethod
    def search_by_make_model(self, make: str, model: str) -> list[Vehicle]: ...

    @abstractmethod
    def search_by_year_range(self, year_min: int, year_max: int) -> list[Vehicle]: ...

    @abstractmethod
    def search_by_color(self, color: str) -> list[Vehicle]: ...

    @abstractmethod
    def search_by_mileage_range(self, odometer_min: int, odometer_max: int) -> list[Vehicle]: ...

    @abstractmethod
    def search_by_type(self, vehicle_type: VehicleType) -> list[Vehicle]: ...
