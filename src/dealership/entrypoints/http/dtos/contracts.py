from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from dealership.entrypoints.http.dtos.vehicles import VehicleResponseDTO


class ContractRequestDTO(BaseModel):
    """Fields shared by sale and lease requests."""

    vin: str = Field(
        description="VIN of the inventory vehicle",
        examples=["1HGCM82633A004352"],
        min_length=1,
        max_length=17,
    )
    customer_name: str = Field(description="Customer full name", examples=["Jane Doe"], min_length=1, max_length=100)
    customer_email: str = Field(
        description="Customer e-mail",
        examples=["jane@example.com"],
        min_length=1,
        max_length=254,
    )
    contract_date: date | None = Field(
        default=None,
        description="Signing date (defaults to today)",
        examples=["2026-10-18"],
    )


class SaleRequestDTO(ContractRequestDTO):
    financed: bool = Field(default=False, description="Pay in monthly installments")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vin": "1HGCM82633A004352",
                "customer_name": "Jane Doe",
                "customer_email": "jane@example.com",
                "contract_date": "2026-10-18",
                "financed": True,
            }
        }
    )


class LeaseRequestDTO(ContractRequestDTO):
    pass


class SalesContractResponseDTO(BaseModel):
    """Sales contract with every amount as a decimal string."""

    contract_id: int | None
    contract_date: date
    customer_name: str
    customer_email: str
    vehicle: VehicleResponseDTO
    financed: bool
    sales_tax: str = Field(examples=["1550.00"])
    recording_fee: str = Field(examples=["100.00"])
    processing_fee: str = Field(examples=["495.00"])
    total_price: str = Field(examples=["33145.00"])
    monthly_payment: str = Field(examples=["752.10"])


class LeaseContractResponseDTO(BaseModel):
    """Lease contract with every amount as a decimal string."""

    contract_id: int | None
    contract_date: date
    customer_name: str
    customer_email: str
    vehicle: VehicleResponseDTO
    expected_end_value: str = Field(examples=["15500.0000"])
    lease_fee: str = Field(examples=["2170.0000"])
    total_price: str = Field(examples=["17770.0000"])
    monthly_payment: str = Field(examples=["524.64"])
