"""
Contract tables.

Each contract row keeps a snapshot of the vehicle: the vehicle row itself is
deleted when the contract is signed, so there is no foreign key to it.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from dealership.infra.db.models.base import Base


class VehicleSnapshotMixin:
    vin: Mapped[str] = mapped_column(String(17), nullable=False, index=True)
    vehicle_year: Mapped[int] = mapped_column(Integer, nullable=False)
    vehicle_make: Mapped[str] = mapped_column(String(50), nullable=False)
    vehicle_model: Mapped[str] = mapped_column(String(50), nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(10), nullable=False)
    vehicle_color: Mapped[str] = mapped_column(String(30), nullable=False)
    vehicle_odometer: Mapped[int] = mapped_column(Integer, nullable=False)
    vehicle_price: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)


class SalesContractRow(VehicleSnapshotMixin, Base):
    __tablename__ = "sales_contracts"

    contract_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    contract_date: Mapped[date] = mapped_column(Date, nullable=False)
    customer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(254), nullable=False)
    is_financed: Mapped[bool] = mapped_column(Boolean, nullable=False)

    sales_tax_amount: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    recording_fee: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    processing_fee: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(precision=14, scale=2), nullable=False)
    monthly_payment: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class LeaseContractRow(VehicleSnapshotMixin, Base):
    __tablename__ = "lease_contracts"

    contract_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    contract_date: Mapped[date] = mapped_column(Date, nullable=False)
    customer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(254), nullable=False)

    # Lease amounts keep the 16-digit pricing precision
    expected_ending_value: Mapped[Decimal] = mapped_column(Numeric(precision=18, scale=6), nullable=False)
    lease_fee: Mapped[Decimal] = mapped_column(Numeric(precision=18, scale=6), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(precision=18, scale=6), nullable=False)
    monthly_payment: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
