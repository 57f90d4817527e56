"""Console entrypoint driving the place list coordinator."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

import httpx
import structlog

from opengym.config import OpenGymSettings, get_settings
from opengym.db.session import Database
from opengym.domain.models import LatLngBounds, LocationEntity, PlaceListState
from opengym.logging import configure_logging, logger
from opengym.services.gym_api import FetchAllGymData, GymApiClient, SearchGymData
from opengym.services.search_history import SearchHistory
from opengym.viewmodels import PlaceListViewModel


def default_bounds(settings: OpenGymSettings) -> LatLngBounds:
    southwest = settings.map.default_southwest
    northeast = settings.map.default_northeast
    return LatLngBounds(
        southwest=LocationEntity(latitude=southwest.latitude, longitude=southwest.longitude),
        northeast=LocationEntity(latitude=northeast.latitude, longitude=northeast.longitude),
    )


def render(state: PlaceListState) -> None:
    logger.info(
        "place_list_state",
        loading=state.loading,
        error=state.error,
        query=state.search_query,
        hints=list(state.search_hints),
        places=[place.name for place in state.places],
    )


async def run(
    queries: Sequence[str],
    *,
    settings: OpenGymSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> PlaceListState:
    settings = settings or get_settings()
    database = Database(settings=settings)
    await database.create_all()

    client = http_client or httpx.AsyncClient()
    api = GymApiClient(client, settings=settings.api)
    try:
        async with database.session() as session:
            view_model = PlaceListViewModel(
                FetchAllGymData(api),
                SearchGymData(api),
                SearchHistory(session),
                hint_limit=settings.history.hint_limit,
                default_bounds=default_bounds(settings),
            )
            try:
                await view_model.initialize()
                await view_model.join()
                render(view_model.state)
                for query in queries:
                    await view_model.search(query)
                    render(view_model.state)
                    await view_model.join()
                    render(view_model.state)
                return view_model.state
            finally:
                await view_model.close()
    finally:
        if http_client is None:
            await client.aclose()
        await database.dispose()


async def main(argv: Sequence[str] | None = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.environment != "dev")
    structlog.contextvars.bind_contextvars(environment=settings.environment)
    logger.info("opengym_starting", environment=settings.environment)
    await run(list(sys.argv[1:] if argv is None else argv), settings=settings)


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
