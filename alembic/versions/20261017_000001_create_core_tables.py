"""Create core tables

Revision ID: 20261017_000001
Revises: None
Create Date: 2026-10-17

Owners, companies, properties, tenants, leases, expenses, rent payments and
expense categories.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261017_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        'owners',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_owners_email', 'owners', ['email'], unique=True)

    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], name='fk_companies_owner_id'),
    )
    op.create_index('ix_companies_owner_id', 'companies', ['owner_id'])

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('address1', sa.String(500), nullable=False),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(50), nullable=True),
        sa.Column('zip', sa.String(20), nullable=True),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('status', sa.String(50), nullable=False, server_default='available'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('company_id', sa.Integer(), nullable=True),
        sa.Column('owner_id', sa.Integer(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], name='fk_properties_company_id'),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], name='fk_properties_owner_id'),
    )
    op.create_index('ix_properties_company_id', 'properties', ['company_id'])
    op.create_index('ix_properties_owner_id', 'properties', ['owner_id'])

    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('floor', sa.String(100), nullable=True),
        sa.Column('emergency_contact', sa.String(255), nullable=True),
        sa.Column('emergency_phone', sa.String(50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_tenants_property_id'),
    )
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])

    op.create_table(
        'leases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('rent', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('deposit', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('document_filename', sa.String(500), nullable=True),
        sa.Column('document_original_name', sa.String(500), nullable=True),
        sa.Column('document_uploaded_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_leases_property_id'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], name='fk_leases_tenant_id'),
    )
    op.create_index('ix_leases_property_id', 'leases', ['property_id'])
    op.create_index('ix_leases_tenant_id', 'leases', ['tenant_id'])
    op.create_index('ix_leases_end_date', 'leases', ['end_date'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=True),
        sa.Column('company_id', sa.Integer(), nullable=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_expenses_property_id'),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], name='fk_expenses_company_id'),
    )
    op.create_index('ix_expenses_date', 'expenses', ['date'])
    op.create_index('ix_expenses_property_id', 'expenses', ['property_id'])
    op.create_index('ix_expenses_company_id', 'expenses', ['company_id'])

    op.create_table(
        'rent_payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column('check_number', sa.String(100), nullable=True),
        sa.Column('paid_in_full', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], name='fk_rent_payments_tenant_id'),
    )
    op.create_index('ix_rent_payments_tenant_id', 'rent_payments', ['tenant_id'])
    op.create_index('ix_rent_payments_payment_date', 'rent_payments', ['payment_date'])

    op.create_table(
        'expense_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], name='fk_expense_categories_owner_id'),
    )
    op.create_index('ix_expense_categories_owner_id', 'expense_categories', ['owner_id'])


def downgrade() -> None:
    for table in (
        'expense_categories',
        'rent_payments',
        'expenses',
        'leases',
        'tenants',
        'properties',
        'companies',
        'owners',
    ):
        op.drop_table(table)
