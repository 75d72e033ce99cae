"""Create inventory and contract tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:41.305118

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _vehicle_snapshot_columns() -> list[sa.Column]:
    return [
        sa.Column("vin", sa.String(17), nullable=False),
        sa.Column("vehicle_year", sa.Integer(), nullable=False),
        sa.Column("vehicle_make", sa.String(50), nullable=False),
        sa.Column("vehicle_model", sa.String(50), nullable=False),
        sa.Column("vehicle_type", sa.String(10), nullable=False),
        sa.Column("vehicle_color", sa.String(30), nullable=False),
        sa.Column("vehicle_odometer", sa.Integer(), nullable=False),
        sa.Column("vehicle_price", sa.Numeric(12, 2), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("vehicle_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("vin", sa.String(17), nullable=False, unique=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("make", sa.String(50), nullable=False),
        sa.Column("model", sa.String(50), nullable=False),
        sa.Column("vehicle_type", sa.String(10), nullable=False),
        sa.Column("color", sa.String(30), nullable=False),
        sa.Column("odometer", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "sales_contracts",
        sa.Column("contract_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("contract_date", sa.Date(), nullable=False),
        sa.Column("customer_name", sa.String(100), nullable=False),
        sa.Column("customer_email", sa.String(254), nullable=False),
        sa.Column("is_financed", sa.Boolean(), nullable=False),
        sa.Column("sales_tax_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("recording_fee", sa.Numeric(12, 2), nullable=False),
        sa.Column("processing_fee", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_price", sa.Numeric(14, 2), nullable=False),
        sa.Column("monthly_payment", sa.Numeric(12, 2), nullable=False),
        *_vehicle_snapshot_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_sales_contracts_vin", "sales_contracts", ["vin"])

    op.create_table(
        "lease_contracts",
        sa.Column("contract_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("contract_date", sa.Date(), nullable=False),
        sa.Column("customer_name", sa.String(100), nullable=False),
        sa.Column("customer_email", sa.String(254), nullable=False),
        sa.Column("expected_ending_value", sa.Numeric(18, 6), nullable=False),
        sa.Column("lease_fee", sa.Numeric(18, 6), nullable=False),
        sa.Column("total_price", sa.Numeric(18, 6), nullable=False),
        sa.Column("monthly_payment", sa.Numeric(12, 2), nullable=False),
        *_vehicle_snapshot_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_lease_contracts_vin", "lease_contracts", ["vin"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_lease_contracts_vin", table_name="lease_contracts")
    op.drop_table("lease_contracts")
    op.drop_index("ix_sales_contracts_vin", table_name="sales_contracts")
    op.drop_table("sales_contracts")
    op.drop_table("vehicles")
