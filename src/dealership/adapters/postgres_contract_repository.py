"""PostgreSQL implementations of the contract repositories."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from dealership.domain.contract import LeaseContract, LeasePricing, SalesContract
from dealership.domain.errors import NotFoundError
from dealership.domain.vehicle import Vehicle, VehicleType
from dealership.infra.db.models.contract import (
    LeaseContractRow,
    SalesContractRow,
    VehicleSnapshotMixin,
)
from dealership.ports.contract_repository import (
    LeaseContractRepository,
    SalesContractRepository,
)


def _snapshot_columns(vehicle: Vehicle) -> dict[str, object]:
    return {
        "vin": vehicle.vin,
        "vehicle_year": vehicle.year,
        "vehicle_make": vehicle.make,
        "vehicle_model": vehicle.model,
        "vehicle_type": vehicle.vehicle_type.value,
        "vehicle_color": vehicle.color,
        "vehicle_odometer": vehicle.odometer,
        "vehicle_price": vehicle.price,
    }


def _vehicle_from_snapshot(row: VehicleSnapshotMixin) -> Vehicle:
    return Vehicle(
        vin=row.vin,
        year=row.vehicle_year,
        make=row.vehicle_make,
        model=row.vehicle_model,
        vehicle_type=VehicleType.parse(row.vehicle_type),
        color=row.vehicle_color,
        odometer=row.vehicle_odometer,
        price=row.vehicle_price,
    )


class PostgresSalesContractRepository(SalesContractRepository):
    """
    Sales contracts in the sales_contracts table.

    Stores the derived amounts alongside the inputs; reading a row back
    recomputes them from the vehicle snapshot.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, contract: SalesContract) -> SalesContract:
        row = SalesContractRow(
            contract_date=contract.contract_date,
            customer_name=contract.customer_name,
            customer_email=contract.customer_email,
            is_financed=contract.financed,
            sales_tax_amount=contract.sales_tax,
            recording_fee=contract.recording_fee,
            processing_fee=contract.processing_fee,
            total_price=contract.total_price,
            monthly_payment=contract.monthly_payment,
            **_snapshot_columns(contract.vehicle),
        )
        self._session.add(row)
        self._session.flush()
        return contract.with_id(row.contract_id)

    def get_all(self) -> list[SalesContract]:
        query = select(SalesContractRow).order_by(SalesContractRow.contract_id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def delete(self, contract_id: int) -> None:
        result = self._session.execute(
            delete(SalesContractRow).where(SalesContractRow.contract_id == contract_id)
        )
        if result.rowcount == 0:
            raise NotFoundError(resource="SalesContract", identifier=str(contract_id))

    def _to_domain(self, row: SalesContractRow) -> SalesContract:
        return SalesContract(
            contract_date=row.contract_date,
            customer_name=row.customer_name,
            customer_email=row.customer_email,
            vehicle=_vehicle_from_snapshot(row),
            financed=row.is_financed,
            contract_id=row.contract_id,
        )


class PostgresLeaseContractRepository(LeaseContractRepository):
    """
    Lease contracts in the lease_contracts table.

    Unlike the flat-file record, rows keep the full vehicle snapshot and the
    amounts exactly as priced at signing.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, contract: LeaseContract) -> LeaseContract:
        row = LeaseContractRow(
            contract_date=contract.contract_date,
            customer_name=contract.customer_name,
            customer_email=contract.customer_email,
            expected_ending_value=contract.expected_end_value,
            lease_fee=contract.lease_fee,
            total_price=contract.total_price,
            monthly_payment=contract.monthly_payment,
            **_snapshot_columns(contract.vehicle),
        )
        self._session.add(row)
        self._session.flush()
        return contract.with_id(row.contract_id)

    def get_all(self) -> list[LeaseContract]:
        query = select(LeaseContractRow).order_by(LeaseContractRow.contract_id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def delete(self, contract_id: int) -> None:
        result = self._session.execute(
            delete(LeaseContractRow).where(LeaseContractRow.contract_id == contract_id)
        )
        if result.rowcount == 0:
            raise NotFoundError(resource="LeaseContract", identifier=str(contract_id))

    def _to_domain(self, row: LeaseContractRow) -> LeaseContract:
        return LeaseContract(
            contract_date=row.contract_date,
            customer_name=row.customer_name,
            customer_email=row.customer_email,
            vehicle=_vehicle_from_snapshot(row),
            contract_id=row.contract_id,
            pricing=LeasePricing(
                expected_end_value=row.expected_ending_value,
                lease_fee=row.lease_fee,
                total_price=row.total_price,
                monthly_payment=row.monthly_payment,
            ),
        )
