"""
Configuration loader for the world-state client.

Looks for config.yaml in this order:
1. Explicit path passed to Config
2. Environment variable WARFRAME_STATUS_CONFIG
3. ./config.yaml (local development)
4. Falls back to default config
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.warframestat.us"


class Config:
    def __init__(self, config_path: str | None = None):
        if config_path:
            self.config_path = Path(config_path)
        elif os.getenv("WARFRAME_STATUS_CONFIG"):
            self.config_path = Path(os.getenv("WARFRAME_STATUS_CONFIG"))
        elif Path("./config.yaml").exists():
            self.config_path = Path("./config.yaml")
        else:
            # No config found, will use defaults
            self.config_path = None

        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """
        Load configuration from the YAML file.

        Returns default config if the file is missing, unreadable or not a mapping.
        """
        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.error("Error loading config from %s: %s", self.config_path, e)
            else:
                if isinstance(config_data, dict):
                    logger.info("Loaded config from: %s", self.config_path)
                    return config_data
                logger.error("Config %s is not a mapping, using defaults", self.config_path)
        elif self.config_path:
            logger.warning("Config file not found: %s, using defaults", self.config_path)

        return {
            "client": {
                "api_url": DEFAULT_API_URL,
                "timeout": 10,
                "user_agent": "warframe-status/1.0",
                "platform": "pc",
                "language": "en",
            },
            "cache": {
                "ttl_seconds": 60,
                "ttl_overrides": {},
            },
        }

    def _section(self, name: str) -> dict[str, Any]:
        section = self._config.get(name) or {}
        return section if isinstance(section, dict) else {}

    @property
    def api_url(self) -> str:
        env_url = os.getenv("WARFRAME_STATUS_URL")
        if env_url:
            return env_url
        return self._section("client").get("api_url", DEFAULT_API_URL)

    @property
    def timeout(self) -> float:
        """Total request timeout in seconds (default 10)."""
        return self._section("client").get("timeout", 10)

    @property
    def user_agent(self) -> str:
        return self._section("client").get("user_agent", "warframe-status/1.0")

    @property
    def platform(self) -> str:
        """Default platform code or name, overridable with WARFRAME_PLATFORM."""
        return os.getenv("WARFRAME_PLATFORM") or self._section("client").get("platform", "pc")

    @property
    def language(self) -> str:
        """Default language code or name, overridable with WARFRAME_LANGUAGE."""
        return os.getenv("WARFRAME_LANGUAGE") or self._section("client").get("language", "en")

    @property
    def cache_ttl(self) -> float:
        return self._section("cache").get("ttl_seconds", 60)

    @property
    def cache_ttl_overrides(self) -> dict[str, float]:
        overrides = self._section("cache").get("ttl_overrides", {})
        return overrides if isinstance(overrides, dict) else {}

    def ttl_for(self, resource: str) -> float:
        """TTL in seconds for a resource, falling back to cache.ttl_seconds."""
        return self.cache_ttl_overrides.get(resource, self.cache_ttl)


# Global config singleton used across the client
config = Config()
