"""Persisted record of submitted search queries."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from opengym.db.models import SearchEntry
from opengym.logging import logger


class SearchHistory:
    """Append-only list of queries, oldest first.

    Queries are stored as typed. Duplicates are kept; blank queries are
    never stored.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save_search(self, query: str) -> SearchEntry | None:
        if not query.strip():
            return None
        entry = SearchEntry(query=query)
        self.session.add(entry)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.debug("search_saved", query=query, entry_id=entry.id)
        return entry

    async def get_all_searches(self, *, limit: int | None = None) -> list[str]:
        stmt = select(SearchEntry.query).order_by(SearchEntry.id.desc() if limit else SearchEntry.id)
        if limit:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        queries = list(result.scalars().all())
        if limit:
            queries.reverse()
        return queries


__all__ = ["SearchHistory"]
