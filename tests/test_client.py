import pathlib
import sys
from copy import deepcopy

import pytest

# Ensure repo root on sys.path for direct module imports when running tests locally.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from warframe_status.cache import CacheKey, ResponseCache
from warframe_status.client import StatusClient, WarframeStatusClient
from warframe_status.exceptions import DecodeError, HTTPStatusError
from warframe_status.models import Alert, CetusCycle, Language, Platform

ALERTS = [
    {
        "id": "a1",
        "activation": "2024-05-01T10:00:00.000Z",
        "expiry": "2024-05-01T11:00:00.000Z",
        "mission": {
            "node": "Tolstoj (Mercury)",
            "type": "Survival",
            "faction": "Grineer",
            "reward": {"items": ["Nitain Extract"], "credits": 8000, "asString": "Nitain Extract + 8000cr"},
        },
    }
]

CETUS = {
    "id": "cetusCycle1714557600000",
    "expiry": "2024-05-01T10:00:00.000Z",
    "isDay": True,
    "state": "day",
    "timeLeft": "1h 2m",
}


class _StubFetcher:
    """Records calls and serves canned payloads per resource."""

    def __init__(self, payloads):
        self.payloads = payloads
        self.calls = []

    async def fetch(self, resource, platform, language):
        self.calls.append((resource, platform, language))
        payload = self.payloads[resource]
        if isinstance(payload, list) and payload and isinstance(payload[0], Exception):
            raise payload.pop(0)
        if isinstance(payload, Exception):
            raise payload
        return deepcopy(payload)


@pytest.mark.asyncio
async def test_alerts_are_typed_and_cached():
    fetcher = _StubFetcher({"alerts": ALERTS})
    client = WarframeStatusClient(fetcher=fetcher, platform="pc", language="en", ttl=60)

    first = await client.alerts()
    second = await client.alerts()

    assert isinstance(first[0], Alert)
    assert first[0].mission.reward.as_string == "Nitain Extract + 8000cr"
    assert second == first
    assert fetcher.calls == [("alerts", Platform.PC, Language.ENGLISH)]


@pytest.mark.asyncio
async def test_per_call_selectors_use_separate_entries():
    fetcher = _StubFetcher({"cetusCycle": CETUS})
    client = WarframeStatusClient(fetcher=fetcher, platform="pc", language="en", ttl=60)

    await client.cetus_cycle()
    await client.cetus_cycle(language="de")
    await client.cetus_cycle(platform=Platform.PS4)
    await client.cetus_cycle(language=Language.GERMAN)

    assert fetcher.calls == [
        ("cetusCycle", Platform.PC, Language.ENGLISH),
        ("cetusCycle", Platform.PC, Language.GERMAN),
        ("cetusCycle", Platform.PS4, Language.ENGLISH),
    ]


@pytest.mark.asyncio
async def test_schema_mismatch_raises_decode_error_and_is_not_cached():
    fetcher = _StubFetcher({"cetusCycle": ["not", "a", "cycle"]})
    client = WarframeStatusClient(fetcher=fetcher, platform="pc", language="en", ttl=60)

    with pytest.raises(DecodeError) as exc:
        await client.cetus_cycle()
    assert exc.value.resource == "cetusCycle"
    assert client.cache.lookup(CacheKey("cetusCycle", "pc", "en")) is None

    fetcher.payloads["cetusCycle"] = CETUS
    cycle = await client.cetus_cycle()
    assert isinstance(cycle, CetusCycle)
    assert cycle.is_day is True


@pytest.mark.asyncio
async def test_fetch_failure_propagates_and_next_call_retries():
    failure = HTTPStatusError("down", status=502, resource="alerts")
    fetcher = _StubFetcher({"alerts": [failure]})
    client = WarframeStatusClient(fetcher=fetcher, platform="pc", language="en", ttl=60)

    with pytest.raises(HTTPStatusError) as exc:
        await client.alerts()
    assert exc.value is failure

    fetcher.payloads["alerts"] = ALERTS
    alerts = await client.alerts()
    assert alerts[0].id == "a1"
    assert len(fetcher.calls) == 2


@pytest.mark.asyncio
async def test_clients_share_an_injected_cache():
    cache = ResponseCache()
    fetcher = _StubFetcher({"alerts": ALERTS})
    english = WarframeStatusClient(cache=cache, fetcher=fetcher, platform="pc", language="en", ttl=60)
    also_english = WarframeStatusClient(cache=cache, fetcher=fetcher, platform="pc", language="en", ttl=60)

    await english.alerts()
    await also_english.alerts()

    assert len(fetcher.calls) == 1


@pytest.mark.asyncio
async def test_zero_ttl_always_refetches():
    fetcher = _StubFetcher({"news": []})
    client = WarframeStatusClient(fetcher=fetcher, platform="pc", language="en", ttl=0)

    await client.news()
    await client.news()

    assert len(fetcher.calls) == 2


@pytest.mark.asyncio
async def test_get_without_model_returns_raw_json():
    fetcher = _StubFetcher({"steelPath": {"currentReward": {"name": "Umbra Forma Blueprint"}}})
    client = WarframeStatusClient(fetcher=fetcher, platform="swi", language="fr", ttl=60)

    payload = await client.get("steelPath")

    assert payload == {"currentReward": {"name": "Umbra Forma Blueprint"}}
    assert fetcher.calls == [("steelPath", Platform.SWITCH, Language.FRENCH)]


def test_sync_client_keeps_cache_between_calls():
    fetcher = _StubFetcher({"alerts": ALERTS})
    client = StatusClient(fetcher=fetcher, platform="xbox", language="ru", ttl=60)

    first = client.alerts()
    second = client.alerts()

    assert first[0].mission.node == "Tolstoj (Mercury)"
    assert second == first
    assert fetcher.calls == [("alerts", Platform.XBOX, Language.RUSSIAN)]
    assert client.cache.lookup(CacheKey("alerts", "xb1", "ru")) == first
