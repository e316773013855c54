"""Thin HTTP fetcher for the world-state API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .config_loader import config
from .exceptions import DecodeError, HTTPStatusError, TransportError
from .models import Language, Platform
from .service_base import BaseService


class StatusFetcher(BaseService):
    """Encapsulates world-state HTTP calls so the client stays focused on caching."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(logger=logger)
        self.base_url = (base_url or config.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.timeout
        self.user_agent = user_agent or config.user_agent

    def url_for(self, resource: str, platform: Platform) -> str:
        return f"{self.base_url}/{platform.code}/{resource}"

    async def fetch(self, resource: str, platform: Platform, language: Language) -> Any:
        """
        GET a resource for a platform and language and return the decoded JSON body.

        Raises:
            HTTPStatusError: The endpoint answered with a status other than 200.
            DecodeError: The body is not valid JSON.
            TransportError: Connection failure or timeout.
        """
        url = self.url_for(resource, platform)
        context = {"resource": resource, "platform": platform, "language": language}
        headers = {
            "Accept": "application/json",
            "Accept-Language": language.code,
            "User-Agent": self.user_agent,
        }

        async with aiohttp.ClientSession() as session:
            try:
                async with session.get(
                    url,
                    params={"language": language.code},
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        self.logger.error(
                            "World-state API returned %s for %s: %s",
                            response.status,
                            url,
                            error_text[:500],
                        )
                        raise HTTPStatusError(
                            f"Request for {resource} failed with status {response.status}",
                            status=response.status,
                            **context,
                        )
                    try:
                        return await response.json(content_type=None)
                    except ValueError as exc:
                        self.logger.warning("Malformed JSON from %s: %s", url, exc)
                        raise DecodeError(
                            f"Response for {resource} is not valid JSON", **context
                        ) from exc
            except TimeoutError as exc:
                self.logger.warning("World-state API timeout for %s", url)
                raise TransportError(f"Request for {resource} timed out", **context) from exc
            except aiohttp.ClientError as exc:
                self.logger.error("World-state API connection error for %s: %s", url, exc)
                raise TransportError(
                    f"Cannot connect to world-state API: {exc}", **context
                ) from exc


__all__ = ["StatusFetcher"]
