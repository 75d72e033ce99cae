from __future__ import annotations

from datetime import date
from decimal import Decimal

from dealership.domain.contract import LeaseContract, LeasePricing, SalesContract
from dealership.domain.vehicle import Vehicle
from dealership.entrypoints.http.dtos.contracts import LeaseRequestDTO, SaleRequestDTO
from dealership.entrypoints.http.mappers.contract_mapper import ContractMapper


def test_contract_date_defaults_to_today() -> None:
    dto = LeaseRequestDTO(vin="V1", customer_name="Jane Doe", customer_email="jane@example.com")

    assert ContractMapper.contract_date(dto) == date.today()


def test_contract_date_uses_given_date() -> None:
    dto = SaleRequestDTO(
        vin="V1",
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        contract_date=date(2026, 1, 2),
    )

    assert ContractMapper.contract_date(dto) == date(2026, 1, 2)
    assert dto.financed is False


def test_sale_response_formats_money_as_strings(rav4: Vehicle) -> None:
    contract = SalesContract(
        contract_date=date(2026, 3, 14),
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        vehicle=rav4,
        financed=False,
    )

    response = ContractMapper.to_sale_response(contract)

    assert response.contract_id is None
    assert response.financed is False
    assert response.sales_tax == "1550.00"
    assert response.recording_fee == "100.00"
    assert response.monthly_payment == "0.00"


def test_lease_response_from_placeholder_record() -> None:
    contract = LeaseContract(
        contract_date=date(2026, 3, 15),
        customer_name="John Roe",
        customer_email="john@example.com",
        vehicle=Vehicle.placeholder("V1"),
        contract_id=2,
        pricing=LeasePricing(
            expected_end_value=Decimal("0"),
            lease_fee=Decimal("0"),
            total_price=Decimal("17770.0000"),
            monthly_payment=Decimal("524.64"),
        ),
    )

    response = ContractMapper.to_lease_response(contract)

    assert response.vehicle.make == "UNKNOWN"
    assert response.total_price == "17770.0000"
    assert response.expected_end_value == "0"
