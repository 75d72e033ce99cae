from __future__ import annotations

from datetime import date

from dealership.domain.contract import LeaseContract, SalesContract
from dealership.domain.money import to_plain_string
from dealership.entrypoints.http.dtos.contracts import (
    ContractRequestDTO,
    LeaseContractResponseDTO,
    SalesContractResponseDTO,
)
from dealership.entrypoints.http.mappers.vehicle_mapper import VehicleMapper


class ContractMapper:
    """Maps between REST DTOs and domain contracts."""

    @staticmethod
    def contract_date(dto: ContractRequestDTO) -> date:
        return dto.contract_date or date.today()

    @staticmethod
    def to_sale_response(contract: SalesContract) -> SalesContractResponseDTO:
        """
        Converts a SalesContract to its response DTO.

        Handles Decimal → string conversion at the boundary.
        """
        return SalesContractResponseDTO(
            contract_id=contract.contract_id,
            contract_date=contract.contract_date,
            customer_name=contract.customer_name,
            customer_email=contract.customer_email,
            vehicle=VehicleMapper.to_response(contract.vehicle),
            financed=contract.financed,
            sales_tax=to_plain_string(contract.sales_tax),
            recording_fee=to_plain_string(contract.recording_fee),
            processing_fee=to_plain_string(contract.processing_fee),
            total_price=to_plain_string(contract.total_price),
            monthly_payment=to_plain_string(contract.monthly_payment),
        )

    @staticmethod
    def to_lease_response(contract: LeaseContract) -> LeaseContractResponseDTO:
        return LeaseContractResponseDTO(
            contract_id=contract.contract_id,
            contract_date=contract.contract_date,
            customer_name=contract.customer_name,
            customer_email=contract.customer_email,
            vehicle=VehicleMapper.to_response(contract.vehicle),
            expected_end_value=to_plain_string(contract.expected_end_value),
            lease_fee=to_plain_string(contract.lease_fee),
            total_price=to_plain_string(contract.total_price),
            monthly_payment=to_plain_string(contract.monthly_payment),
        )
