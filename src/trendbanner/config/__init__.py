"""Application configuration helpers."""

from __future__ import annotations

from .banner import BannerConfig, get_banner_config
from .env import int_env_var, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig
from .jellyfin import JellyfinConfig, get_jellyfin_config
from .logging import configure_logging
from .storage import StorageConfig, get_http_cache_path, get_storage_config
from .tmdb import TmdbConfig, get_tmdb_config, tmdb_resilience

__all__ = [
    "BannerConfig",
    "CacheConfig",
    "ConfigurationError",
    "JellyfinConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "StorageConfig",
    "TmdbConfig",
    "configure_logging",
    "get_banner_config",
    "get_http_cache_path",
    "get_jellyfin_config",
    "get_storage_config",
    "get_tmdb_config",
    "int_env_var",
    "optional_env_var",
    "require_env_vars",
    "tmdb_resilience",
]
