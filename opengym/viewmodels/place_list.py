"""Coordinator owning the place list screen state."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError

from opengym.domain.models import (
    GymEntity,
    LatLngBounds,
    PlaceListState,
    ShortDetailsState,
)
from opengym.logging import logger
from opengym.services.exceptions import GymApiError, PlaceNotFound
from opengym.services.gym_api import FetchAllGymData, SearchGymData
from opengym.services.search_history import SearchHistory
from opengym.state import StateFlow

UNKNOWN_ERROR = "unknown"


class PlaceListViewModel:
    """Fetches places, runs searches and keeps the search hints current.

    Every fetch is stamped with a generation number. Only the newest fetch
    may write its result, so a slow initial load cannot overwrite a search
    that was issued after it.
    """

    def __init__(
        self,
        fetch_all_gym_data: FetchAllGymData,
        search_gym_data: SearchGymData,
        search_history: SearchHistory,
        *,
        hint_limit: int | None = None,
        default_bounds: LatLngBounds | None = None,
    ) -> None:
        self._fetch_all_gym_data = fetch_all_gym_data
        self._search_gym_data = search_gym_data
        self._search_history = search_history
        self._hint_limit = hint_limit
        self._generation = 0
        self._tasks: set[asyncio.Task[None]] = set()
        self._state = StateFlow(PlaceListState(default_bounds=default_bounds))

    @property
    def state_flow(self) -> StateFlow[PlaceListState]:
        return self._state

    @property
    def state(self) -> PlaceListState:
        return self._state.value

    async def initialize(self) -> asyncio.Task[None]:
        try:
            hints = await self._load_hints()
        except SQLAlchemyError:
            logger.exception("search_history_unavailable")
            hints = self.state.search_hints
        self._state.update(lambda state: state.model_copy(update={"search_hints": hints}))
        return self._launch("initial_load", self._fetch_all_gym_data.execute)

    async def search(self, search_query: str) -> asyncio.Task[None]:
        try:
            await self._search_history.save_search(search_query)
            hints = await self._load_hints()
        except SQLAlchemyError:
            logger.exception("search_history_unavailable", query=search_query)
            hints = self.state.search_hints
        query = search_query.strip()
        self._state.update(
            lambda state: state.model_copy(
                update={"search_hints": hints, "search_query": search_query, "loading": True}
            )
        )
        logger.info("place_search_requested", query=query)
        if not query:
            return self._launch("reset_search", self._fetch_all_gym_data.execute)
        return self._launch("search", lambda: self._search_gym_data.execute(query))

    def select_place(self, place_id: str) -> None:
        place = next((item for item in self.state.places if item.id == place_id), None)
        if place is None:
            raise PlaceNotFound(f"Place {place_id} is not on display.")
        self._state.update(
            lambda state: state.model_copy(
                update={"short_details": ShortDetailsState(visible=True, content=place)}
            )
        )

    def dismiss_details(self) -> None:
        self._state.update(
            lambda state: state.model_copy(
                update={"short_details": state.short_details.model_copy(update={"visible": False})}
            )
        )

    async def join(self) -> None:
        """Wait for every outstanding fetch to settle."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _load_hints(self) -> tuple[str, ...]:
        return tuple(await self._search_history.get_all_searches(limit=self._hint_limit))

    def _launch(
        self, name: str, fetch: Callable[[], Awaitable[Sequence[GymEntity]]]
    ) -> asyncio.Task[None]:
        self._generation += 1
        task = asyncio.create_task(self._run_fetch(name, self._generation, fetch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_fetch(
        self,
        name: str,
        generation: int,
        fetch: Callable[[], Awaitable[Sequence[GymEntity]]],
    ) -> None:
        try:
            entities = await fetch()
            places = tuple(entity.to_displayable() for entity in entities)
        except GymApiError as exc:
            logger.error("place_fetch_failed", fetch=name, error=str(exc), code=exc.code)
            self._fail(generation, exc.code)
            return
        except Exception:
            logger.exception("place_fetch_crashed", fetch=name)
            self._fail(generation, UNKNOWN_ERROR)
            return

        if generation != self._generation:
            logger.info("place_fetch_superseded", fetch=name, generation=generation)
            return

        self._state.update(
            lambda state: state.model_copy(
                update={"places": places, "loading": False, "error": None}
            )
        )
        logger.info("place_fetch_completed", fetch=name, count=len(places))

    def _fail(self, generation: int, code: str) -> None:
        if generation != self._generation:
            return
        self._state.update(
            lambda state: state.model_copy(update={"loading": False, "error": code})
        )


__all__ = ["PlaceListViewModel"]
