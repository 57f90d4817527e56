"""SQLAlchemy models for locally persisted data."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from opengym.db.base import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SearchEntry(Base):
    __tablename__ = "search_history"

    query: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utc_now, nullable=False)


__all__ = ["SearchEntry"]
