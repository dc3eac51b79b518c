"""create holders table

Revision ID: 0001_create_holders_table
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_create_holders_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "holders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cpf_cnpj", sa.String(length=18), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("address_number", sa.String(length=16), nullable=True),
        sa.Column("city", sa.String(length=128), nullable=True),
        sa.Column("complement", sa.String(length=255), nullable=True),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_holders_id", "holders", ["id"], unique=False)
    op.create_index("ix_holders_cpf_cnpj", "holders", ["cpf_cnpj"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_holders_cpf_cnpj", table_name="holders")
    op.drop_index("ix_holders_id", table_name="holders")
    op.drop_table("holders")
