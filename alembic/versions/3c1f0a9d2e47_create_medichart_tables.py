"""create medichart tables

Revision ID: 3c1f0a9d2e47
Revises:
Create Date: 2026-10-17 10:12:41.093215

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9d2e47'
down_revision = None
branch_labels = None
depends_on = None


def _has_table(name):
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade():
    # Databases created by Database.create_tables() already have these tables
    if not _has_table('current_meds'):
        op.create_table(
            'current_meds',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('generic_name', sa.Text(), nullable=False),
            sa.Column('brand_name', sa.Text()),
            sa.Column('dosage', sa.Text()),
            sa.Column('dose_form', sa.Text()),
            sa.Column('instructions', sa.Text()),
            sa.Column('reason', sa.Text()),
            sa.Column('prescriber', sa.Text()),
            sa.Column('notes', sa.Text()),
            sa.Column('start_date', sa.Text()),
            sa.Column('manufacturer', sa.Text()),
            sqlite_autoincrement=True,
        )
    if not _has_table('past_meds'):
        op.create_table(
            'past_meds',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('generic_name', sa.Text(), nullable=False),
            sa.Column('brand_name', sa.Text()),
            sa.Column('dosage', sa.Text()),
            sa.Column('dose_form', sa.Text()),
            sa.Column('instructions', sa.Text()),
            sa.Column('reason', sa.Text()),
            sa.Column('prescriber', sa.Text()),
            sa.Column('history_notes', sa.Text()),
            sa.Column('reason_for_stopping', sa.Text()),
            sa.Column('date_ranges', sa.Text()),
            sa.Column('manufacturer', sa.Text()),
            sqlite_autoincrement=True,
        )
    if not _has_table('surgeries'):
        op.create_table(
            'surgeries',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('date', sa.Text()),
            sa.Column('surgeon', sa.Text()),
            sqlite_autoincrement=True,
        )
    if not _has_table('physicians'):
        op.create_table(
            'physicians',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('specialty', sa.Text()),
            sa.Column('phone', sa.Text()),
            sa.Column('fax', sa.Text()),
            sa.Column('email', sa.Text()),
            sa.Column('address', sa.Text()),
            sa.Column('notes', sa.Text()),
            sqlite_autoincrement=True,
        )


def downgrade():
    op.drop_table('physicians')
    op.drop_table('surgeries')
    op.drop_table('past_meds')
    op.drop_table('current_meds')
