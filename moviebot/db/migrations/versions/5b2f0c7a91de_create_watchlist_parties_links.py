"""create watchlist, watch parties and account links

Revision ID: 5b2f0c7a91de
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5b2f0c7a91de'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "watchlist",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("movie_title", sa.String(length=256), nullable=False),
        sa.Column("movie_year", sa.String(length=16), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("status IN ('watched','want_to_watch')", name="chk_watchlist_status"),
        sa.UniqueConstraint("user_id", "movie_id", "status", name="ux_watchlist_user_movie_status"),
    )
    op.create_index("ix_watchlist_user_id", "watchlist", ["user_id"])
    op.create_index("ix_watchlist_movie_status", "watchlist", ["movie_id", "status"])

    op.create_table(
        "watch_parties",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("movie_id", sa.Integer(), nullable=False, unique=True),
        sa.Column("message_id", sa.BigInteger(), nullable=False),
        sa.Column("thread_id", sa.BigInteger(), nullable=True),
        sa.Column("event_id", sa.BigInteger(), nullable=True),
        sa.Column("organized_by", sa.BigInteger(), nullable=False),
        sa.Column("organized_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed", sa.Boolean(), server_default=sa.false(), nullable=False),
    )

    op.create_table(
        "account_links",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("platform_user_id", sa.BigInteger(), nullable=False),
        sa.Column("external_user_id", sa.Integer(), nullable=False),
        sa.Column("external_username", sa.String(length=256), nullable=True),
        sa.Column("plex_username", sa.String(length=256), nullable=True),
        sa.Column("linked_by", sa.BigInteger(), nullable=True),
        sa.Column("linked_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_account_links_platform_user_id", "account_links", ["platform_user_id"], unique=True)


def downgrade():
    op.drop_index("ix_account_links_platform_user_id", table_name="account_links")
    op.drop_table("account_links")
    op.drop_table("watch_parties")
    op.drop_index("ix_watchlist_movie_status", table_name="watchlist")
    op.drop_index("ix_watchlist_user_id", table_name="watchlist")
    op.drop_table("watchlist")
