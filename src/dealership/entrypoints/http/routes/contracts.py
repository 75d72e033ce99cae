from fastapi import APIRouter, Depends, status

from dealership.entrypoints.http.dependencies import get_dealership_service
from dealership.entrypoints.http.dtos.contracts import (
    LeaseContractResponseDTO,
    LeaseRequestDTO,
    SaleRequestDTO,
    SalesContractResponseDTO,
)
from dealership.entrypoints.http.error_responses import ErrorResponse
from dealership.entrypoints.http.mappers.contract_mapper import ContractMapper
from dealership.use_cases.dealership_service import DealershipService


router = APIRouter(tags=["Contracts"])


@router.post(
    "/contracts/sales",
    response_model=SalesContractResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Sell an inventory vehicle",
    description="""
    Creates a sales contract and removes the vehicle from inventory.

    ## Pricing
    - Sales tax: 5% of price
    - Recording fee: 100.00
    - Processing fee: 295.00 below 10,000.00, otherwise 495.00
    - Financed: total amortized at 4.25% over 48 months (price >= 10,000.00)
      or 5.25% over 24 months; otherwise monthly payment is 0.00
    """,
    responses={
        404: {"model": ErrorResponse, "description": "VIN not in inventory"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Store failure, nothing was changed"},
    },
)
def sell_vehicle(
    payload: SaleRequestDTO,
    service: DealershipService = Depends(get_dealership_service),
) -> SalesContractResponseDTO:
    contract = service.sell(
        contract_date=ContractMapper.contract_date(payload),
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
        vin=payload.vin,
        financed=payload.financed,
    )
    return ContractMapper.to_sale_response(contract)


@router.post(
    "/contracts/leases",
    response_model=LeaseContractResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Lease an inventory vehicle",
    description="""
    Creates a lease contract and removes the vehicle from inventory.

    Only vehicles at most 3 model years old can be leased.

    ## Pricing
    - Expected end value: 50% of price
    - Lease fee: 7% of price
    - Total: end value + lease fee + 100 recording fee
    - Monthly payment: total amortized at 4% over 36 months
    """,
    responses={
        404: {"model": ErrorResponse, "description": "VIN not in inventory"},
        409: {"model": ErrorResponse, "description": "Vehicle too old to lease"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Store failure, nothing was changed"},
    },
)
def lease_vehicle(
    payload: LeaseRequestDTO,
    service: DealershipService = Depends(get_dealership_service),
) -> LeaseContractResponseDTO:
    contract = service.lease(
        contract_date=ContractMapper.contract_date(payload),
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
        vin=payload.vin,
    )
    return ContractMapper.to_lease_response(contract)


@router.get(
    "/contracts/sales",
    response_model=list[SalesContractResponseDTO],
    summary="List sales contracts",
)
def list_sales_contracts(
    service: DealershipService = Depends(get_dealership_service),
) -> list[SalesContractResponseDTO]:
    return [ContractMapper.to_sale_response(c) for c in service.get_all_sales_contracts()]


@router.get(
    "/contracts/leases",
    response_model=list[LeaseContractResponseDTO],
    summary="List lease contracts",
)
def list_lease_contracts(
    service: DealershipService = Depends(get_dealership_service),
) -> list[LeaseContractResponseDTO]:
    return [ContractMapper.to_lease_response(c) for c in service.get_all_lease_contracts()]
