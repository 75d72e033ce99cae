from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from dealership.domain.contract import LeaseContract, SalesContract
from dealership.domain.vehicle import Vehicle, VehicleType


@pytest.fixture()
def rav4() -> Vehicle:
    return Vehicle(
        vin="1HGCM82633A004352",
        year=2024,
        make="Toyota",
        model="RAV4",
        vehicle_type=VehicleType.SUV,
        color="Blue",
        odometer=25000,
        price=Decimal("31000.00"),
        vehicle_id=1,
    )


@pytest.fixture()
def sale(rav4: Vehicle) -> SalesContract:
    return SalesContract(
        contract_date=date(2026, 3, 14),
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        vehicle=rav4,
        financed=True,
    )


@pytest.fixture()
def lease(rav4: Vehicle) -> LeaseContract:
    return LeaseContract(
        contract_date=date(2026, 3, 15),
        customer_name="John Roe",
        customer_email="john@example.com",
        vehicle=rav4,
    )
