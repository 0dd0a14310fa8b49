"""Initial schema for the planning service."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


client_status = sa.Enum("alive", "deceased", "disabled", name="client_status")
simulation_status = sa.Enum("draft", "active", "archived", name="simulation_status")
allocation_type = sa.Enum("financial", "property", name="allocation_type")
transaction_type = sa.Enum("contribution", "withdrawal", "yield", "fee", name="transaction_type")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("tax_id", sa.String(length=32), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("status", client_status, nullable=False, server_default="alive"),
        *_timestamps(),
        sa.UniqueConstraint("tax_id", name="uq_clients_tax_id"),
    )
    op.create_index("ix_clients_email", "clients", ["email"], unique=True)

    op.create_table(
        "simulations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("client_id", sa.Uuid(), sa.ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", simulation_status, nullable=False, server_default="draft"),
        sa.Column("initial_capital", sa.Numeric(18, 2), nullable=False),
        sa.Column("monthly_contribution", sa.Numeric(18, 2), nullable=False, server_default="0"),
        sa.Column("inflation_rate", sa.Numeric(7, 4), nullable=False, server_default="3.5"),
        sa.Column("years_projection", sa.Integer(), nullable=False, server_default="20"),
        *_timestamps(),
    )
    op.create_index("ix_simulations_client_id", "simulations", ["client_id"])

    op.create_table(
        "allocations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "simulation_id", sa.Uuid(), sa.ForeignKey("simulations.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("type", allocation_type, nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("percentage", sa.Numeric(5, 2), nullable=False),
        sa.Column("initial_value", sa.Numeric(18, 2), nullable=False),
        sa.Column("annual_return", sa.Numeric(7, 4), nullable=False, server_default="0"),
        sa.Column("allocation_date", sa.Date(), nullable=False),
        sa.Column("monthly_payment", sa.Numeric(18, 2), nullable=True),
        sa.Column("remaining_payments", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_allocations_simulation_id", "allocations", ["simulation_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "allocation_id", sa.Uuid(), sa.ForeignKey("allocations.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("type", transaction_type, nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_transactions_allocation_date", "transactions", ["allocation_id", "transaction_date"])

    op.create_table(
        "insurances",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "simulation_id", sa.Uuid(), sa.ForeignKey("simulations.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("coverage_amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("monthly_cost", sa.Numeric(18, 2), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_insurances_simulation_id", "insurances", ["simulation_id"])

    op.create_table(
        "simulation_versions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "simulation_id", sa.Uuid(), sa.ForeignKey("simulations.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("version_number", sa.Integer(), nullable=False),
        sa.Column("snapshot", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("simulation_id", "version_number", name="uq_simulation_version_number"),
    )
    op.create_index("ix_simulation_versions_simulation_id", "simulation_versions", ["simulation_id"])


def downgrade() -> None:
    op.drop_index("ix_simulation_versions_simulation_id", table_name="simulation_versions")
    op.drop_table("simulation_versions")

    op.drop_index("ix_insurances_simulation_id", table_name="insurances")
    op.drop_table("insurances")

    op.drop_index("ix_transactions_allocation_date", table_name="transactions")
    op.drop_table("transactions")

    op.drop_index("ix_allocations_simulation_id", table_name="allocations")
    op.drop_table("allocations")

    op.drop_index("ix_simulations_client_id", table_name="simulations")
    op.drop_table("simulations")

    op.drop_index("ix_clients_email", table_name="clients")
    op.drop_table("clients")

    bind = op.get_bind()
    for enum_type in (transaction_type, allocation_type, simulation_status, client_status):
        enum_type.drop(bind, checkfirst=False)
