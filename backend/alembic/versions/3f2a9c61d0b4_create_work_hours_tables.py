"""create work hours tables

Revision ID: 3f2a9c61d0b4
Revises: 
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c61d0b4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create reports, goals, personal_info and work_days.

    Tables that already exist (created by the app at startup) are skipped.
    """
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'reports' not in tables:
        op.create_table(
            'reports',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('date', sa.DateTime(), nullable=False),
            sa.Column('duration', sa.Integer(), nullable=False),
            sa.Column('study_hours', sa.Integer(), nullable=False),
            sa.Column('observations', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sqlite_autoincrement=True,
        )
        op.create_index('ix_reports_id', 'reports', ['id'])
        op.create_index('ix_reports_date', 'reports', ['date'])

    if 'goals' not in tables:
        op.create_table(
            'goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('monthly_hours', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.CheckConstraint('id = 1', name='goals_single_row'),
        )

    if 'personal_info' not in tables:
        op.create_table(
            'personal_info',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(), nullable=False, server_default=''),
            sa.Column('email', sa.String(), nullable=False, server_default=''),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.CheckConstraint('id = 1', name='personal_info_single_row'),
        )

    if 'work_days' not in tables:
        op.create_table(
            'work_days',
            sa.Column('day_of_week', sa.Integer(), primary_key=True, autoincrement=False),
            sa.Column('is_selected', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='work_days_weekday_range'),
        )


def downgrade() -> None:
    # Safe drop if exists
    for table in ('work_days', 'personal_info', 'goals', 'reports'):
        op.execute(f'DROP TABLE IF EXISTS {table}')
