"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import (
    DEFAULT_LIST_LIMIT,
    DISPLAY_TIMEZONE,
    MAX_SUBMISSIONS,
    SURVEY_LIST_KEY,
    TAXONOMY_CSV_FILE,
)


class StoreBackend(str, Enum):
    """Supported list-store backends."""

    MEMORY = "memory"
    KV_REST = "kv_rest"


class MemoryConfig(BaseModel):
    """Process-local store; nothing to configure beyond optional seed entries."""

    seed_entries: list[str] = Field(default_factory=list)


class KvRestConfig(BaseModel):
    """Vercel KV / Upstash REST endpoint configuration."""

    url: str | None = None
    token: str | None = Field(default=None, repr=False)
    timeout_s: float = 10.0


class StoreConfig(BaseModel):
    """Where and how submissions are persisted."""

    backend: StoreBackend = StoreBackend.MEMORY
    list_key: str = SURVEY_LIST_KEY
    max_entries: int = Field(default=MAX_SUBMISSIONS, ge=1)
    default_limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=1)


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class AppConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/app.yaml
    - Environment overrides applied by the configuration loader
    - Consumed by the store factory, submission log and HTTP app
    """

    store: StoreConfig = Field(default_factory=StoreConfig)

    # Backend params (field name must match StoreBackend.value)
    memory: MemoryConfig | None = None
    kv_rest: KvRestConfig | None = None

    taxonomy_source: str = Field(
        default_factory=lambda: str(TAXONOMY_CSV_FILE),
        description="Filesystem path or http(s) URL of the flavor wheel CSV.",
    )
    timezone: str = Field(default=DISPLAY_TIMEZONE, description="IANA zone for display timestamps.")
    server: ServerConfig = Field(default_factory=ServerConfig)
    log_file: Path | None = None

    @model_validator(mode="after")
    def _validate(self) -> "AppConfig":
        if self.store.default_limit > self.store.max_entries:
            raise ValueError("store.default_limit cannot exceed store.max_entries")

        if self.store.backend is StoreBackend.KV_REST:
            if self.kv_rest is None or not self.kv_rest.url or not self.kv_rest.token:
                raise ValueError(
                    "kv_rest backend requires kv_rest.url and kv_rest.token "
                    "(or KV_REST_API_URL / KV_REST_API_TOKEN in the environment)"
                )
        if self.store.backend is StoreBackend.MEMORY and self.memory is None:
            self.memory = MemoryConfig()

        if not str(self.taxonomy_source).strip():
            raise ValueError("taxonomy_source must not be empty")

        return self
