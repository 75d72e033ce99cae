from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.entrypoints.http.dependencies import get_dealership_service
from dealership.entrypoints.http.exception_handlers import register_exception_handlers
from dealership.entrypoints.http.routes.contracts import router as contracts_router
from dealership.entrypoints.http.routes.vehicles import router as vehicles_router
from dealership.use_cases.dealership_service import DealershipService

SIGNED_ON = date(2026, 3, 14)


@pytest.fixture
def mock_service() -> Mock:
    """Service double so routes are tested in isolation."""
    return Mock(spec=DealershipService)


@pytest.fixture
def app(mock_service: Mock) -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(vehicles_router, prefix="/v1")
    test_app.include_router(contracts_router, prefix="/v1")
    test_app.dependency_overrides[get_dealership_service] = lambda: mock_service
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
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
