"""Create books table for the catalog.

Revision ID: 20261019100000
Revises: 20261019000000
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019100000"
down_revision: Union[str, None] = "20261019000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("isbn13", sa.BigInteger(), nullable=False),
        sa.Column("authors", sa.Text(), nullable=True),
        sa.Column("publication_year", sa.Integer(), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("rating_avg", sa.Float(), nullable=True),
        sa.Column("rating_count", sa.Integer(), nullable=True),
        sa.Column("rating_1_star", sa.Integer(), nullable=True),
        sa.Column("rating_2_star", sa.Integer(), nullable=True),
        sa.Column("rating_3_star", sa.Integer(), nullable=True),
        sa.Column("rating_4_star", sa.Integer(), nullable=True),
        sa.Column("rating_5_star", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("image_small_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("isbn13", name="books_isbn13_key"),
        sa.UniqueConstraint("title", name="books_title_key"),
    )
    op.create_index(op.f("ix_books_authors"), "books", ["authors"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_books_authors"), table_name="books")
    op.drop_table("books")
