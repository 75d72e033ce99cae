from fastapi import APIRouter, Depends, Response, status

from dealership.entrypoints.http.dependencies import get_dealership_service
from dealership.entrypoints.http.dtos.vehicles import (
    VehicleCreateDTO,
    VehicleListResponseDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
)
from dealership.entrypoints.http.error_responses import ErrorResponse
from dealership.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership.use_cases.dealership_service import DealershipService


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleListResponseDTO,
    summary="Search inventory",
    description="""
    List inventory vehicles, optionally filtered by ONE filter family.

    ## Filter families and ordering
    - price_min / price_max: price ascending
    - make / model: partial, case-insensitive; ordered by make, model
    - year_min / year_max: year descending
    - color: partial, case-insensitive; ordered by make, model
    - odometer_min / odometer_max: odometer ascending
    - vehicle_type: CAR, TRUCK, SUV or VAN; ordered by make, model

    Ranges are inclusive. A range with one bound is open on the other side.

    ## Example
    ```
    GET /v1/vehicles?price_min=10000&price_max=35000.00
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def search_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    service: DealershipService = Depends(get_dealership_service),
) -> VehicleListResponseDTO:
    vehicles = VehicleMapper.search(query, service)
    return VehicleMapper.to_list_response(vehicles)


@router.get(
    "/vehicles/{vin}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle by VIN",
    responses={404: {"model": ErrorResponse, "description": "VIN not in inventory"}},
)
def get_vehicle(
    vin: str,
    service: DealershipService = Depends(get_dealership_service),
) -> VehicleResponseDTO:
    return VehicleMapper.to_response(service.require_vehicle_by_vin(vin))


@router.post(
    "/vehicles",
    response_model=VehicleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a vehicle to inventory",
    responses={
        409: {"model": ErrorResponse, "description": "VIN already in inventory"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def add_vehicle(
    payload: VehicleCreateDTO,
    service: DealershipService = Depends(get_dealership_service),
) -> VehicleResponseDTO:
    """Add vehicle endpoint following parse → execute → map → return pattern."""
    vehicle = VehicleMapper.to_domain(payload)
    stored = service.add_vehicle(vehicle)
    return VehicleMapper.to_response(stored)


@router.delete(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a vehicle from inventory",
    responses={404: {"model": ErrorResponse, "description": "No vehicle with this id"}},
)
def remove_vehicle(
    vehicle_id: int,
    service: DealershipService = Depends(get_dealership_service),
) -> Response:
    service.remove_vehicle(vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
