"""
Cached clients for the Warframe world-state API.

WarframeStatusClient is the async client: every accessor builds a cache key
from (resource, platform, language) and asks the shared ResponseCache to
either return a live entry or fetch, validate and store a fresh payload.
StatusClient wraps it with a blocking interface for scripts.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .cache import CacheKey, ResponseCache
from .config_loader import config
from .exceptions import DecodeError
from .fetcher import StatusFetcher
from .models import (
    Alert,
    Arbitration,
    CambionCycle,
    CetusCycle,
    EarthCycle,
    Event,
    Fissure,
    Invasion,
    Language,
    NewsItem,
    Nightwave,
    Platform,
    Resource,
    Sortie,
    VallisCycle,
    VoidTrader,
)
from .service_base import BaseService

PlatformLike = Platform | str | None
LanguageLike = Language | str | None


class WarframeStatusClient(BaseService):
    """
    Async client returning typed world-state records.

    Clients built without a cache get a private one; pass the same
    ResponseCache to several clients to share entries between them.
    """

    def __init__(
        self,
        *,
        platform: PlatformLike = None,
        language: LanguageLike = None,
        cache: ResponseCache | None = None,
        fetcher: StatusFetcher | None = None,
        ttl: float | timedelta | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(logger=logger)
        self.platform = Platform.parse(platform or config.platform)
        self.language = Language.parse(language or config.language)
        self.cache = cache if cache is not None else ResponseCache()
        self.fetcher = fetcher or StatusFetcher(logger=self.logger)
        self.ttl = ttl
        self._adapters: dict[Any, TypeAdapter] = {}

    async def get(
        self,
        resource: str,
        model: Any = None,
        *,
        platform: PlatformLike = None,
        language: LanguageLike = None,
        ttl: float | timedelta | None = None,
    ) -> Any:
        """
        Fetch a resource through the cache.

        Args:
            resource: Endpoint name, e.g. "alerts".
            model: Type the JSON payload is validated against (a pydantic
                model or e.g. list[Alert]). None returns the raw JSON.
            platform: Overrides the client's platform for this call.
            language: Overrides the client's language for this call.
            ttl: Overrides the configured TTL for this call.

        Raises:
            FetchError: The fetch or the validation failed; nothing is cached.
        """
        key = CacheKey(
            resource,
            Platform.parse(platform or self.platform),
            Language.parse(language or self.language),
        )
        if ttl is None:
            ttl = self.ttl if self.ttl is not None else config.ttl_for(resource)

        async def compute() -> Any:
            payload = await self.fetcher.fetch(key.resource, key.platform, key.language)
            if model is None:
                return payload
            try:
                return self._adapter(model).validate_python(payload)
            except ValidationError as exc:
                self.logger.warning("Unexpected payload shape for %s: %s", key, exc)
                raise DecodeError(
                    f"Response for {resource} does not match {model!r}",
                    resource=key.resource,
                    platform=key.platform,
                    language=key.language,
                    details={"errors": exc.errors(include_url=False)},
                ) from exc

        return await self.cache.get_or_compute(key, ttl, compute)

    def _adapter(self, model: Any) -> TypeAdapter:
        adapter = self._adapters.get(model)
        if adapter is None:
            adapter = self._adapters[model] = TypeAdapter(model)
        return adapter

    async def alerts(self, **kwargs: Any) -> list[Alert]:
        return await self.get(Resource.ALERTS, list[Alert], **kwargs)

    async def arbitration(self, **kwargs: Any) -> Arbitration:
        return await self.get(Resource.ARBITRATION, Arbitration, **kwargs)

    async def cambion_cycle(self, **kwargs: Any) -> CambionCycle:
        return await self.get(Resource.CAMBION_CYCLE, CambionCycle, **kwargs)

    async def cetus_cycle(self, **kwargs: Any) -> CetusCycle:
        return await self.get(Resource.CETUS_CYCLE, CetusCycle, **kwargs)

    async def earth_cycle(self, **kwargs: Any) -> EarthCycle:
        return await self.get(Resource.EARTH_CYCLE, EarthCycle, **kwargs)

    async def events(self, **kwargs: Any) -> list[Event]:
        return await self.get(Resource.EVENTS, list[Event], **kwargs)

    async def fissures(self, **kwargs: Any) -> list[Fissure]:
        return await self.get(Resource.FISSURES, list[Fissure], **kwargs)

    async def invasions(self, **kwargs: Any) -> list[Invasion]:
        return await self.get(Resource.INVASIONS, list[Invasion], **kwargs)

    async def news(self, **kwargs: Any) -> list[NewsItem]:
        return await self.get(Resource.NEWS, list[NewsItem], **kwargs)

    async def nightwave(self, **kwargs: Any) -> Nightwave:
        return await self.get(Resource.NIGHTWAVE, Nightwave, **kwargs)

    async def sortie(self, **kwargs: Any) -> Sortie:
        return await self.get(Resource.SORTIE, Sortie, **kwargs)

    async def vallis_cycle(self, **kwargs: Any) -> VallisCycle:
        return await self.get(Resource.VALLIS_CYCLE, VallisCycle, **kwargs)

    async def void_trader(self, **kwargs: Any) -> VoidTrader:
        return await self.get(Resource.VOID_TRADER, VoidTrader, **kwargs)


class StatusClient:
    """
    Blocking facade over WarframeStatusClient.

    Each call runs the async accessor with asyncio.run, so it must not be
    used from inside a running event loop. The cache is kept across calls.
    """

    def __init__(self, **kwargs: Any):
        self._client = WarframeStatusClient(**kwargs)

    @property
    def cache(self) -> ResponseCache:
        return self._client.cache

    def get(self, resource: str, model: Any = None, **kwargs: Any) -> Any:
        return asyncio.run(self._client.get(resource, model, **kwargs))

    def alerts(self, **kwargs: Any) -> list[Alert]:
        return asyncio.run(self._client.alerts(**kwargs))

    def arbitration(self, **kwargs: Any) -> Arbitration:
        return asyncio.run(self._client.arbitration(**kwargs))

    def cambion_cycle(self, **kwargs: Any) -> CambionCycle:
        return asyncio.run(self._client.cambion_cycle(**kwargs))

    def cetus_cycle(self, **kwargs: Any) -> CetusCycle:
        return asyncio.run(self._client.cetus_cycle(**kwargs))

    def earth_cycle(self, **kwargs: Any) -> EarthCycle:
        return asyncio.run(self._client.earth_cycle(**kwargs))

    def events(self, **kwargs: Any) -> list[Event]:
        return asyncio.run(self._client.events(**kwargs))

    def fissures(self, **kwargs: Any) -> list[Fissure]:
        return asyncio.run(self._client.fissures(**kwargs))

    def invasions(self, **kwargs: Any) -> list[Invasion]:
        return asyncio.run(self._client.invasions(**kwargs))

    def news(self, **kwargs: Any) -> list[NewsItem]:
        return asyncio.run(self._client.news(**kwargs))

    def nightwave(self, **kwargs: Any) -> Nightwave:
        return asyncio.run(self._client.nightwave(**kwargs))

    def sortie(self, **kwargs: Any) -> Sortie:
        return asyncio.run(self._client.sortie(**kwargs))

    def vallis_cycle(self, **kwargs: Any) -> VallisCycle:
        return asyncio.run(self._client.vallis_cycle(**kwargs))

    def void_trader(self, **kwargs: Any) -> VoidTrader:
        return asyncio.run(self._client.void_trader(**kwargs))


__all__ = ["StatusClient", "WarframeStatusClient"]
