"""Seed shared expense categories

Revision ID: 20261017_000002
Revises: 20261017_000001
Create Date: 2026-10-17

Categories with owner_id NULL are offered to every owner.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261017_000002"
down_revision: Union[str, None] = "20261017_000001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_CATEGORIES = (
    "Advertising",
    "Cleaning",
    "HOA Fees",
    "Insurance",
    "Landscaping",
    "Legal & Professional",
    "Maintenance",
    "Management Fees",
    "Mortgage Interest",
    "Property Tax",
    "Repairs",
    "Supplies",
    "Utilities",
    "Other",
)

expense_categories = sa.table(
    "expense_categories",
    sa.column("name", sa.String),
    sa.column("owner_id", sa.Integer),
)


def upgrade() -> None:
    op.bulk_insert(
        expense_categories,
        [{"name": name, "owner_id": None} for name in DEFAULT_CATEGORIES],
    )


def downgrade() -> None:
    op.execute(
        expense_categories.delete().where(
            expense_categories.c.owner_id.is_(None)
            & expense_categories.c.name.in_(DEFAULT_CATEGORIES)
        )
    )
