"""Create movies table.

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "a1c3e5f7b9d2"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False, server_default="movie"),
        sa.Column("genre", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("watched", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("review", sa.Text(), nullable=False, server_default=""),
        sa.Column("poster", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("type IN ('movie', 'series')", name="ck_movies_type"),
        sa.CheckConstraint("priority BETWEEN 1 AND 5", name="ck_movies_priority"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        op.f("ix_movies_created_at"),
        "movies",
        ["created_at"],
        unique=False,
    )


def downgrade():
    op.drop_index(op.f("ix_movies_created_at"), table_name="movies")
    op.drop_table("movies")
