"""Tests for the conflating StateFlow holder."""

from __future__ import annotations

import asyncio

import pytest

from opengym.state import StateFlow


def test_update_replaces_value():
    flow = StateFlow(1)

    assert flow.update(lambda value: value + 1) == 2
    assert flow.value == 2


@pytest.mark.asyncio
async def test_subscriber_receives_current_then_latest():
    flow = StateFlow("a")
    stream = flow.subscribe()

    assert await stream.__anext__() == "a"
    assert flow.subscriber_count == 1

    flow.update(lambda _: "b")
    flow.update(lambda _: "c")
    assert await stream.__anext__() == "c"

    await stream.aclose()
    assert flow.subscriber_count == 0


@pytest.mark.asyncio
async def test_equal_value_is_not_republished():
    flow = StateFlow(5)
    stream = flow.subscribe()
    assert await stream.__anext__() == 5

    flow.update(lambda value: value)
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(stream.__anext__(), timeout=0.05)

    await stream.aclose()
