"""Tests for logging configuration and the console entrypoint."""

from __future__ import annotations

import logging

import httpx
import pytest
import structlog

from opengym import main as main_module
from opengym.config import DatabaseSettings, OpenGymSettings
from opengym.logging import configure_logging


def test_configure_logging_outputs_json(capsys):
    configure_logging("INFO")
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out
    assert '"service": "opengym"' in out


def test_configure_logging_console_renderer(capsys):
    configure_logging(logging.DEBUG, json_output=False)
    structlog.get_logger().debug("console-event", place="Wandzianka")
    out = capsys.readouterr().out
    assert "console-event" in out
    assert "Wandzianka" in out
    assert not out.lstrip().startswith("{")


def test_default_bounds_follow_settings():
    settings = OpenGymSettings()
    bounds = main_module.default_bounds(settings)

    assert bounds.southwest.latitude == settings.map.default_southwest.latitude
    assert bounds.northeast.longitude == settings.map.default_northeast.longitude


@pytest.mark.asyncio
async def test_run_loads_and_searches(tmp_path):
    requested: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if request.url.path == "/gyms/search":
            return httpx.Response(
                200,
                json=[
                    {
                        "id": "9",
                        "name": "Hala Wisły",
                        "location": {"lat": 50.06, "lng": 19.91},
                    }
                ],
            )
        return httpx.Response(503)

    settings = OpenGymSettings(
        database=DatabaseSettings(dsn=f"sqlite+aiosqlite:///{tmp_path / 'history.db'}")
    )
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        state = await main_module.run(["hala"], settings=settings, http_client=client)

    assert requested == ["/gyms", "/gyms/search"]
    assert state.error is None
    assert state.search_query == "hala"
    assert state.search_hints == ("hala",)
    assert [place.name for place in state.places] == ["Hala Wisły"]
