from __future__ import annotations

from datetime import date
from decimal import Decimal

from dealership.domain.errors import ValidationError
from dealership.domain.money import parse_decimal, to_plain_string
from dealership.domain.vehicle import EARLIEST_MODEL_YEAR, Vehicle, VehicleType
from dealership.entrypoints.http.dtos.vehicles import (
    VehicleCreateDTO,
    VehicleListResponseDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
)
from dealership.use_cases.dealership_service import DealershipService

# Open upper bounds for half-specified ranges
MAX_PRICE = Decimal("9999999999.99")
MAX_ODOMETER = 2**31 - 1


class VehicleMapper:
    """Maps between REST DTOs and domain models for inventory."""

    @staticmethod
    def to_domain(dto: VehicleCreateDTO) -> Vehicle:
        """
        Converts the create payload to a Vehicle.

        Raises:
            ValidationError: If a field is invalid (bad type, year out of range, ...)
        """
        return Vehicle(
            vin=dto.vin,
            year=dto.year,
            make=dto.make,
            model=dto.model,
            vehicle_type=VehicleType.parse(dto.vehicle_type),
            color=dto.color,
            odometer=dto.odometer,
            price=parse_decimal(dto.price, "price"),
        )

    @staticmethod
    def to_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            vehicle_id=vehicle.vehicle_id,
            vin=vehicle.vin,
            year=vehicle.year,
            make=vehicle.make,
            model=vehicle.model,
            vehicle_type=vehicle.vehicle_type.value,
            color=vehicle.color,
            odometer=vehicle.odometer,
            price=to_plain_string(vehicle.price),  # Decimal → str at boundary
        )

    @staticmethod
    def to_list_response(vehicles: list[Vehicle]) -> VehicleListResponseDTO:
        return VehicleListResponseDTO(
            vehicles=[VehicleMapper.to_response(vehicle) for vehicle in vehicles],
            total=len(vehicles),
        )

    @staticmethod
    def search(query: VehicleSearchQueryDTO, service: DealershipService) -> list[Vehicle]:
        """
        Routes the query to the one service search it names.

        A range given with only one bound is open on the other side.

        Raises:
            ValidationError: If more than one filter family is used
        """
        families = {
            "price": query.price_min is not None or query.price_max is not None,
            "make_model": query.make is not None or query.model is not None,
            "year": query.year_min is not None or query.year_max is not None,
            "color": query.color is not None,
            "odometer": query.odometer_min is not None or query.odometer_max is not None,
            "vehicle_type": query.vehicle_type is not None,
        }
        used = [name for name, present in families.items() if present]

        if len(used) > 1:
            raise ValidationError(
                errors=[
                    {
                        "field": name,
                        "message": "Only one filter family can be used per search",
                        "code": "CONFLICTING_FILTERS",
                    }
                    for name in used
                ]
            )

        if not used:
            return service.get_all_vehicles()

        family = used[0]
        if family == "price":
            price_min = parse_decimal(query.price_min, "price_min") if query.price_min else Decimal("0")
            price_max = parse_decimal(query.price_max, "price_max") if query.price_max else MAX_PRICE
            return service.search_by_price_range(price_min, price_max)
        if family == "make_model":
            return service.search_by_make_model(query.make or "", query.model or "")
        if family == "year":
            return service.search_by_year_range(
                query.year_min if query.year_min is not None else EARLIEST_MODEL_YEAR,
                query.year_max if query.year_max is not None else date.today().year + 1,
            )
        if family == "color":
            return service.search_by_color(query.color or "")
        if family == "odometer":
            return service.search_by_mileage_range(
                query.odometer_min if query.odometer_min is not None else 0,
                query.odometer_max if query.odometer_max is not None else MAX_ODOMETER,
            )
        return service.search_by_type(query.vehicle_type or "")
