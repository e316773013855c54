"""
Warframe world-state client package.

An aiohttp client for api.warframestat.us with a thread-safe, time-bounded
response cache keyed by resource, platform and language.
"""
from .cache import CacheEntry, CacheKey, ResponseCache
from .client import StatusClient, WarframeStatusClient
from .exceptions import DecodeError, FetchError, HTTPStatusError, TransportError
from .fetcher import StatusFetcher
from .models import Language, Platform, Resource

__version__ = "1.0.0"
__all__ = [
    "CacheEntry",
    "CacheKey",
    "DecodeError",
    "FetchError",
    "HTTPStatusError",
    "Language",
    "Platform",
    "Resource",
    "ResponseCache",
    "StatusClient",
    "StatusFetcher",
    "TransportError",
    "WarframeStatusClient",
]
