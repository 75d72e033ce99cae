"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
All repositories of one request share the same session, so a sale's
contract insert and vehicle delete commit or roll back together.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from dealership.adapters.postgres_contract_repository import (
    PostgresLeaseContractRepository,
    PostgresSalesContractRepository,
)
from dealership.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from dealership.infra.db.session import get_session
from dealership.use_cases.dealership_service import DealershipService


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_dealership_service(db: Session = Depends(get_db)) -> DealershipService:
    """
    Factory function that returns a DealershipService wired to PostgreSQL.

    Called per-request: fresh repositories over one isolated session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))

    Returns:
        DealershipService: Configured service instance
    """
    return DealershipService(
        vehicle_repository=PostgresVehicleRepository(session=db),
        sales_contract_repository=PostgresSalesContractRepository(session=db),
        lease_contract_repository=PostgresLeaseContractRepository(session=db),
    )
