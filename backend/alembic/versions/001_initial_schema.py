"""Initial front desk schema

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-17

Reference data only: staff directory, product catalog, room rates and the
assistant exchange log. Room, stay and ticket state is not persisted.
Money as NUMERIC(10, 2).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === EMPLOYEES ===
    op.create_table(
        'employees',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('username', sa.String(100), unique=True, nullable=False, index=True),
        sa.Column('role', sa.Enum('HOUSEKEEPER', 'RECEPTIONIST', 'MAINTENANCE', 'MANAGER', 'ADMINISTRATOR', name='staffrole'), nullable=False, index=True),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    # === PRODUCTS ===
    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('code', sa.String(20), unique=True, nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False, index=True),
        sa.Column('category', sa.Enum('MINIBAR', 'BAR', 'RESTAURANT', 'RECEPTION', 'OTHER', name='productcategory'), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('stock', sa.Integer(), default=0),
        sa.Column('min_stock', sa.Integer(), default=0),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    # === ROOM RATES ===
    op.create_table(
        'room_rates',
        sa.Column('category', sa.Enum('STANDARD', 'LUXURY', 'MASTER', name='roomcategory'), primary_key=True),
        sa.Column('daily_rate', sa.Numeric(10, 2), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    # === ASSISTANT LOGS ===
    op.create_table(
        'assistant_logs',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('asked_by', sa.String(255), nullable=True),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('context_snapshot', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('model', sa.String(100), nullable=False),
        sa.Column('is_fallback', sa.Boolean(), default=False),
        sa.Column('processing_time_ms', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('assistant_logs')
    op.drop_table('room_rates')
    op.drop_table('products')
    op.drop_table('employees')
    sa.Enum(name='roomcategory').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='productcategory').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='staffrole').drop(op.get_bind(), checkfirst=True)
