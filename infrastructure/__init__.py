"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- List stores (in-memory, Vercel KV / Upstash REST)
- Configuration loading (YAML, environment)
- Taxonomy resource reads (filesystem, HTTP)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    AppConfig,
    StoreBackend,
    load_app_config,
)
from infrastructure.stores import ListStore, make_store

__all__ = [
    # Stores (most commonly used)
    "make_store",
    "ListStore",
    # Configuration (most commonly used)
    "load_app_config",
    "AppConfig",
    "StoreBackend",
]
