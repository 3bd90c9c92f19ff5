"""create users table

Revision ID: 20240612000136
Revises:
Create Date: 2024-06-12 00:01:36

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "20240612000136"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        # Which type to use?
        # sa.Column("credit_balance", sa.Integer(), nullable=False)  # unsigned
        # sa.Column("credit_balance", sa.Integer(), nullable=False)
        # sa.Column("credit_balance", sa.Float(), nullable=False)
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("users")
