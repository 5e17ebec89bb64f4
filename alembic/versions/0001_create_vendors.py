"""create vendors table

Revision ID: 0001_create_vendors
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001_create_vendors"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vendors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("contact_person", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("partner_type", sa.String(length=50), nullable=False),
        sa.UniqueConstraint("email", name="uq_vendors_email"),
    )


def downgrade() -> None:
    op.drop_table("vendors")
