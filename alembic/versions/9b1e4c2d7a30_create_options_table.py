"""create_options_table

Revision ID: 9b1e4c2d7a30
Revises:
Create Date: 2026-10-19 09:00:00.000000

Adds the options table: the key-value configuration store holding the
Translation Stats settings blob under a single option name.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9b1e4c2d7a30"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "options",
        sa.Column("option_name", sa.String(191), primary_key=True),
        sa.Column("option_value", sa.JSON(), nullable=True),
        sa.Column("autoload", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("options")
