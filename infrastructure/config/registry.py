from typing import Any

from .models import KvRestConfig, MemoryConfig, StoreBackend

# Backend -> params config model
# Add future backends here
PARAM_MODEL_BY_BACKEND: dict[StoreBackend, type[Any]] = {
    StoreBackend.MEMORY: MemoryConfig,
    StoreBackend.KV_REST: KvRestConfig,
}
