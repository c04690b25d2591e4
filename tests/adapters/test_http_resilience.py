from __future__ import annotations

import asyncio
import time

import httpx

from shipinfo.config.http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from tests.helpers.http import make_client_factory

SPACING_SECONDS = 0.05
# timer resolution between taking a limiter slot and the handler running
CLOCK_SLACK = 1e-3


def _gaps(sent_at: list[float]) -> list[float]:
    return [later - earlier for earlier, later in zip(sent_at, sent_at[1:], strict=False)]


def test_rate_limit_spaces_consecutive_requests() -> None:
    sent_at: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent_at.append(time.monotonic())
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="test",
        base_url="https://example.test",
        ratelimit=RateLimit(max_calls=1, per_seconds=SPACING_SECONDS),
    )
    factory = make_client_factory(handler)

    async def send(count: int) -> None:
        async with factory(config) as client:
            for _ in range(count):
                await client.post("/chat/completions", json={})

    started = time.monotonic()
    asyncio.run(send(4))
    elapsed = time.monotonic() - started

    assert len(sent_at) == 4
    assert elapsed >= 3 * SPACING_SECONDS - CLOCK_SLACK
    assert all(gap >= SPACING_SECONDS - CLOCK_SLACK for gap in _gaps(sent_at))


def test_retried_attempts_take_their_own_rate_limit_slot() -> None:
    sent_at: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent_at.append(time.monotonic())
        if len(sent_at) == 1:
            return httpx.Response(503, headers={"Retry-After": "0"}, text="busy")
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="test",
        base_url="https://example.test",
        retry=RetryPolicy(total=1, backoff_factor=0.0, backoff_jitter=0.0),
        ratelimit=RateLimit(max_calls=1, per_seconds=SPACING_SECONDS),
    )
    factory = make_client_factory(handler)

    async def send() -> list[int]:
        async with factory(config) as client:
            first = await client.post("/chat/completions", json={})
            second = await client.post("/chat/completions", json={})
            return [first.status_code, second.status_code]

    statuses = asyncio.run(send())

    assert statuses == [200, 200]
    assert len(sent_at) == 3
    assert all(gap >= SPACING_SECONDS - CLOCK_SLACK for gap in _gaps(sent_at))


def test_rate_limit_per_minute() -> None:
    limit = RateLimit.per_minute(50)

    assert limit.max_calls == 1
    assert limit.per_seconds == 1.2


def test_client_without_rate_limit_sends_immediately() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"path": request.url.path})

    factory = make_client_factory(handler)

    async def send() -> httpx.Response:
        async with factory(ResilienceConfig(name="test", base_url="https://example.test")) as client:
            return await client.post("/ping", json={})

    response = asyncio.run(send())

    assert response.json() == {"path": "/ping"}
