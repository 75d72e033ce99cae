"""
Pipe-delimited text records for contracts.

Sale (18 columns):
    SALE|yyyyMMdd|name|email|vin|year|make|model|type|color|odometer|price|
    tax|recordingFee|processingFee|total|YES/NO|monthlyPayment

Lease (7 columns):
    yyyy-MM-dd|LEASE|name|email|vin|total|monthlyPayment

Lease records keep only the VIN of the vehicle; decoding one yields a
placeholder vehicle and the stored totals.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from dealership.domain.contract import (
    Contract,
    ContractKind,
    LeaseContract,
    LeasePricing,
    SalesContract,
)
from dealership.domain.errors import ValidationError
from dealership.domain.money import parse_decimal, to_plain_string
from dealership.domain.vehicle import Vehicle, VehicleType

SEPARATOR = "|"
SALE_DATE_FORMAT = "%Y%m%d"
SALE_COLUMNS = 18
LEASE_COLUMNS = 7


class MalformedRecordError(ValidationError):
    """A record line cannot be turned into a contract."""

    error_code: str = "MALFORMED_RECORD"


def encode(contract: Contract) -> str:
    if isinstance(contract, SalesContract):
        return encode_sale(contract)
    return encode_lease(contract)


def encode_sale(contract: SalesContract) -> str:
    vehicle = contract.vehicle
    return _join(
        [
            ContractKind.SALE.value,
            contract.contract_date.strftime(SALE_DATE_FORMAT),
            contract.customer_name,
            contract.customer_email,
            vehicle.vin,
            str(vehicle.year),
            vehicle.make,
            vehicle.model,
            vehicle.vehicle_type.value,
            vehicle.color,
            str(vehicle.odometer),
            to_plain_string(vehicle.price),
            to_plain_string(contract.sales_tax),
            to_plain_string(contract.recording_fee),
            to_plain_string(contract.processing_fee),
            to_plain_string(contract.total_price),
            "YES" if contract.financed else "NO",
            to_plain_string(contract.monthly_payment),
        ]
    )


def encode_lease(contract: LeaseContract) -> str:
    return _join(
        [
            contract.contract_date.isoformat(),
            ContractKind.LEASE.value,
            contract.customer_name,
            contract.customer_email,
            contract.vehicle.vin,
            to_plain_string(contract.total_price),
            to_plain_string(contract.monthly_payment),
        ]
    )


def decode(line: str) -> Contract:
    """
    Parse one record line.

    Raises:
        MalformedRecordError: If the line has the wrong shape or unparseable values
        ValidationError: If the values parse but do not form a valid contract
    """
    parts = line.rstrip("\r\n").split(SEPARATOR)

    if len(parts) < 2:
        raise MalformedRecordError("Too few columns to determine contract type")

    if parts[0].strip().upper() == ContractKind.SALE.value:
        return _decode_sale(parts)
    if parts[1].strip().upper() == ContractKind.LEASE.value:
        return _decode_lease(parts)

    raise MalformedRecordError("Unknown contract type", record=line)


def _decode_sale(parts: list[str]) -> SalesContract:
    if len(parts) != SALE_COLUMNS:
        raise MalformedRecordError(
            f"Sale record must have {SALE_COLUMNS} columns, got {len(parts)}"
        )

    vehicle = Vehicle(
        vin=parts[4],
        year=_parse_int(parts[5], "year"),
        make=parts[6],
        model=parts[7],
        vehicle_type=VehicleType.parse(parts[8]),
        color=parts[9],
        odometer=_parse_int(parts[10], "odometer"),
        price=parse_decimal(parts[11], "price"),
    )

    return SalesContract(
        contract_date=_parse_date(parts[1], SALE_DATE_FORMAT),
        customer_name=parts[2],
        customer_email=parts[3],
        vehicle=vehicle,
        financed=parts[16].strip().upper() == "YES",
    )


def _decode_lease(parts: list[str]) -> LeaseContract:
    if len(parts) != LEASE_COLUMNS:
        raise MalformedRecordError(
            f"Lease record must have {LEASE_COLUMNS} columns, got {len(parts)}"
        )

    return LeaseContract(
        contract_date=_parse_date(parts[0], "%Y-%m-%d"),
        customer_name=parts[2],
        customer_email=parts[3],
        vehicle=Vehicle.placeholder(parts[4]),
        pricing=LeasePricing(
            expected_end_value=Decimal("0"),
            lease_fee=Decimal("0"),
            total_price=parse_decimal(parts[5], "total_price"),
            monthly_payment=parse_decimal(parts[6], "monthly_payment"),
        ),
    )


def _join(fields: list[str]) -> str:
    for value in fields:
        if SEPARATOR in value or "\n" in value or "\r" in value:
            raise ValidationError(
                f"Field value cannot contain '{SEPARATOR}' or line breaks: {value!r}"
            )
    return SEPARATOR.join(fields)


def _parse_int(raw: str, field: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise MalformedRecordError(f"{field} must be an integer: {raw}")


def _parse_date(raw: str, fmt: str) -> date:
    try:
        return datetime.strptime(raw.strip(), fmt).date()
    except ValueError:
        raise MalformedRecordError(f"contract date does not match {fmt}: {raw}")
