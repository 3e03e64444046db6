"""
Configuration management: models, loading, and validation.

Handles:
- AppConfig: store, taxonomy source, timezone, server and logging settings
- Backend configs: in-memory and KV REST list stores
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import build_app_config, load_app_config
from infrastructure.config.models import (
    AppConfig,
    KvRestConfig,
    MemoryConfig,
    ServerConfig,
    StoreBackend,
    StoreConfig,
)

__all__ = [
    # Main config (most commonly used)
    "AppConfig",
    "load_app_config",
    "build_app_config",
    # Enums
    "StoreBackend",
    # Sections
    "StoreConfig",
    "ServerConfig",
    # Backend configs
    "MemoryConfig",
    "KvRestConfig",
]
