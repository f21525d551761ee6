"""create users

Revision ID: 5b2c7e91d4a3
Revises: 
Create Date: 2026-10-19 10:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2c7e91d4a3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("uuid", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("age", sa.SmallInteger(), nullable=False),
        sa.Column("grade", sa.SmallInteger(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_users_name", "users", ["name"], unique=False)
    op.create_index("ix_users_grade", "users", ["grade"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_users_grade", table_name="users")
    op.drop_index("ix_users_name", table_name="users")
    op.drop_table("users")
