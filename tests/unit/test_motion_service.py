"""Motion catalogue: read-through cache over the provider list."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from model.api import Motion
from service.motion_service import MotionService


def _cache(cached=None) -> AsyncMock:
    cache = AsyncMock()
    cache.get_all.return_value = cached
    return cache


@pytest.mark.anyio
async def test_cache_hit_skips_provider(fake_provider) -> None:
    cached = [Motion(id="m1", name="Zoom")]
    service = MotionService(_cache(cached), client=fake_provider)

    assert await service.list_motions() == cached
    assert fake_provider.motion_calls == 0


@pytest.mark.anyio
async def test_cache_miss_fetches_normalizes_and_stores(fake_provider) -> None:
    fake_provider.motions = [
        {"id": "m1", "name": "Zoom", "description": "Push in", "preview_url": "https://p/1"},
        {"id": "m2"},
        {"name": "no id"},
    ]
    cache = _cache(None)
    service = MotionService(cache, client=fake_provider)

    motions = await service.list_motions()

    assert [m.id for m in motions] == ["m1", "m2"]
    assert motions[0].preview_url == "https://p/1"
    assert motions[1].name == "m2"
    cache.put_all.assert_awaited_once_with(motions)


@pytest.mark.anyio
async def test_cache_outage_falls_back_to_provider(fake_provider) -> None:
    fake_provider.motions = [{"id": "m1", "name": "Zoom"}]
    cache = _cache()
    cache.get_all.side_effect = RedisConnectionError("down")
    cache.put_all.side_effect = RedisConnectionError("down")
    service = MotionService(cache, client=fake_provider)

    motions = await service.list_motions()

    assert [m.id for m in motions] == ["m1"]
    assert fake_provider.motion_calls == 1


@pytest.mark.anyio
async def test_non_string_optional_fields_are_dropped(fake_provider) -> None:
    fake_provider.motions = [
        {"id": "m1", "name": "Zoom", "description": {"en": "x"}, "preview_url": 42},
        {"id": 7, "name": "numeric id"},
        {"id": "m2", "name": ["Pan"]},
    ]
    service = MotionService(_cache(None), client=fake_provider)

    motions = await service.list_motions()

    assert motions == [
        Motion(id="m1", name="Zoom"),
        Motion(id="m2", name="m2"),
    ]
