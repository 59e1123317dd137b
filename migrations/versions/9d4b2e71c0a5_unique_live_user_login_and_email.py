"""unique live user login and email

Revision ID: 9d4b2e71c0a5
Revises: 3c1f6e2a9b47
Create Date: 2026-10-21 09:41:27.306118

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d4b2e71c0a5"
down_revision: Union[str, Sequence[str], None] = "3c1f6e2a9b47"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Soft-deleted users release their login and e-mail
    op.drop_index("idx_users_login", table_name="users")
    op.drop_index("idx_users_email", table_name="users")
    op.create_index(
        "uq_users_login_live",
        "users",
        ["login"],
        unique=True,
        postgresql_where=sa.text("deleted_at IS NULL"),
    )
    op.create_index(
        "uq_users_email_live",
        "users",
        ["email"],
        unique=True,
        postgresql_where=sa.text("deleted_at IS NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("uq_users_email_live", table_name="users")
    op.drop_index("uq_users_login_live", table_name="users")
    op.create_index("idx_users_login", "users", ["login"])
    op.create_index("idx_users_email", "users", ["email"])
