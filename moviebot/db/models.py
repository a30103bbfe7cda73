from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    String,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from moviebot.db.base import Base


class WatchlistEntry(Base):
    __tablename__ = "watchlist"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False)

    movie_title: Mapped[str] = mapped_column(String(256), nullable=False)
    # NULL when TMDB has no release date
    movie_year: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)

    # watched / want_to_watch
    status: Mapped[str] = mapped_column(String(32), nullable=False)

    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("status IN ('watched','want_to_watch')", name="chk_watchlist_status"),
        UniqueConstraint("user_id", "movie_id", "status", name="ux_watchlist_user_movie_status"),
        Index("ix_watchlist_movie_status", "movie_id", "status"),
    )


class WatchParty(Base):
    __tablename__ = "watch_parties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)

    message_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    # filled in once the coordination thread / scheduled event exist
    thread_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    event_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    organized_by: Mapped[int] = mapped_column(BigInteger, nullable=False)
    organized_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    event_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false(), default=False)


class AccountLink(Base):
    __tablename__ = "account_links"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    platform_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True, index=True)

    external_user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    external_username: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    plex_username: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)

    linked_by: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    linked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    @property
    def display_name(self) -> str:
        return self.external_username or self.plex_username or "Unknown"
