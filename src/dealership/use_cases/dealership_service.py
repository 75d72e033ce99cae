"""Dealership service: inventory queries and the sell/lease transition."""

from __future__ import annotations

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import Callable, TypeVar

from dealership.domain.contract import (
    MAX_LEASE_AGE_YEARS,
    Contract,
    LeaseContract,
    SalesContract,
)
from dealership.domain.errors import (
    DomainError,
    InternalError,
    InvalidStateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.ports.contract_repository import (
    LeaseContractRepository,
    SalesContractRepository,
)
from dealership.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)

C = TypeVar("C", SalesContract, LeaseContract)

# Guards read-check-remove so two callers cannot contract the same VIN.
_TRANSITION_LOCK = threading.Lock()


class DealershipService:
    """
    Single entry point callers use for inventory and contracts.

    Vehicle lifecycle as seen from here: IN_INVENTORY -> CONTRACTED. A
    successful sell() or lease() stores the contract, then removes the
    vehicle. If the removal fails the stored contract is deleted again
    before the error propagates, so inventory and contract stores never
    both hold the vehicle.

    Searches and add/remove are plain delegations to the vehicle store.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        sales_contract_repository: SalesContractRepository,
        lease_contract_repository: LeaseContractRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Args:
            vehicle_repository: Inventory store
            sales_contract_repository: Store for sales contracts
            lease_contract_repository: Store for lease contracts
            today: Clock used for the lease age check (injectable for tests)
        """
        self._vehicles = vehicle_repository
        self._sales_contracts = sales_contract_repository
        self._lease_contracts = lease_contract_repository
        self._today = today

    # ==========================================================================
    # Inventory
    # ==========================================================================

    def require_vehicle_by_vin(self, vin: str) -> Vehicle:
        """
        Raises:
            NotFoundError: If no vehicle with this VIN is in inventory
        """
        vehicle = self._vehicles.find_by_vin(vin)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=vin)

        return vehicle

    def get_all_vehicles(self) -> list[Vehicle]:
        return self._vehicles.get_all()

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        return self._vehicles.create(vehicle)

    def remove_vehicle(self, vehicle_id: int) -> None:
        self._vehicles.delete(vehicle_id)

    def search_by_price_range(self, price_min: Decimal, price_max: Decimal) -> list[Vehicle]:
        _require_range("price", price_min, price_max)
        return self._vehicles.search_by_price_range(price_min, price_max)

    def search_by_make_model(self, make: str, model: str) -> list[Vehicle]:
        return self._vehicles.search_by_make_model(make, model)

    def search_by_year_range(self, year_min: int, year_max: int) -> list[Vehicle]:
        _require_range("year", year_min, year_max)
        return self._vehicles.search_by_year_range(year_min, year_max)

    def search_by_color(self, color: str) -> list[Vehicle]:
        return self._vehicles.search_by_color(color)

    def search_by_mileage_range(self, odometer_min: int, odometer_max: int) -> list[Vehicle]:
        _require_range("odometer", odometer_min, odometer_max)
        return self._vehicles.search_by_mileage_range(odometer_min, odometer_max)

    def search_by_type(self, vehicle_type: VehicleType | str) -> list[Vehicle]:
        if not isinstance(vehicle_type, VehicleType):
            vehicle_type = VehicleType.parse(vehicle_type)
        return self._vehicles.search_by_type(vehicle_type)

    # ==========================================================================
    # Contracts
    # ==========================================================================

    def get_all_sales_contracts(self) -> list[SalesContract]:
        return self._sales_contracts.get_all()

    def get_all_lease_contracts(self) -> list[LeaseContract]:
        return self._lease_contracts.get_all()

    def sell(
        self,
        contract_date: date,
        customer_name: str,
        customer_email: str,
        vin: str,
        financed: bool,
    ) -> SalesContract:
        """
        Sell an inventory vehicle.

        Raises:
            NotFoundError: If the VIN is not in inventory
            ValidationError: If a customer field is missing
            PersistenceError: If a store fails (no partial state is left behind)
        """
        with _TRANSITION_LOCK:
            vehicle = self.require_vehicle_by_vin(vin)
            contract = SalesContract(
                contract_date=contract_date,
                customer_name=customer_name,
                customer_email=customer_email,
                vehicle=vehicle,
                financed=financed,
            )
            return self._contract_vehicle(
                contract,
                create=self._sales_contracts.create,
                delete_contract=self._sales_contracts.delete,
            )

    def lease(
        self,
        contract_date: date,
        customer_name: str,
        customer_email: str,
        vin: str,
    ) -> LeaseContract:
        """
        Lease an inventory vehicle.

        Only vehicles at most MAX_LEASE_AGE_YEARS old (by model year, measured
        against today's year) can be leased.

        Raises:
            NotFoundError: If the VIN is not in inventory
            InvalidStateError: If the vehicle is too old to lease
            ValidationError: If a customer field is missing
            PersistenceError: If a store fails (no partial state is left behind)
        """
        with _TRANSITION_LOCK:
            vehicle = self.require_vehicle_by_vin(vin)

            age = vehicle.age_in(self._today().year)
            if age > MAX_LEASE_AGE_YEARS:
                raise InvalidStateError(
                    f"Vehicle is too old to be leased. Must be {MAX_LEASE_AGE_YEARS} years old or newer.",
                    vin=vin,
                    age=age,
                    max_age=MAX_LEASE_AGE_YEARS,
                )

            contract = LeaseContract(
                contract_date=contract_date,
                customer_name=customer_name,
                customer_email=customer_email,
                vehicle=vehicle,
            )
            return self._contract_vehicle(
                contract,
                create=self._lease_contracts.create,
                delete_contract=self._lease_contracts.delete,
            )

    def _contract_vehicle(
        self,
        contract: C,
        create: Callable[[C], C],
        delete_contract: Callable[[int], None],
    ) -> C:
        vehicle = contract.vehicle
        log_context = {"vin": vehicle.vin, "contract_kind": contract.kind.value}

        try:
            saved = create(contract)
        except DomainError:
            raise
        except Exception as exc:
            logger.error("Contract persistence failed", exc_info=exc, extra=log_context)
            raise PersistenceError(
                f"Failed to store {contract.kind.value} contract for vehicle '{vehicle.vin}'",
                vin=vehicle.vin,
            ) from exc

        try:
            if vehicle.vehicle_id is None:
                raise InternalError("Inventory vehicle has no vehicle_id", vin=vehicle.vin)
            self._vehicles.delete(vehicle.vehicle_id)
        except Exception as exc:
            self._compensate(saved, delete_contract)
            if isinstance(exc, DomainError):
                raise
            logger.error("Inventory removal failed", exc_info=exc, extra=log_context)
            raise PersistenceError(
                f"Failed to remove vehicle '{vehicle.vin}' from inventory",
                vin=vehicle.vin,
            ) from exc

        logger.info(
            "Vehicle contracted",
            extra={**log_context, "contract_id": saved.contract_id},
        )
        return saved

    def _compensate(self, saved: Contract, delete_contract: Callable[[int], None]) -> None:
        """Undo a stored contract whose vehicle could not be removed from inventory."""
        log_context = {
            "vin": saved.vehicle.vin,
            "contract_kind": saved.kind.value,
            "contract_id": saved.contract_id,
        }

        if saved.contract_id is None:
            logger.error("Cannot roll back contract without contract_id", extra=log_context)
            return

        try:
            delete_contract(saved.contract_id)
        except Exception as exc:
            logger.error(
                "Contract rollback failed; contract and inventory stores disagree",
                exc_info=exc,
                extra=log_context,
            )
        else:
            logger.warning("Contract rolled back after inventory removal failed", extra=log_context)


def _require_range(field: str, low: Decimal | int, high: Decimal | int) -> None:
    if low > high:
        raise ValidationError(
            errors=[
                {
                    "field": f"{field}_min",
                    "message": f"{field}_min cannot be greater than {field}_max",
                    "code": "INVALID_RANGE",
                }
            ]
        )
