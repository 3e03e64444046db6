"""Configuration loading from YAML files and environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import AppConfig, ServerConfig, StoreBackend, StoreConfig
from infrastructure.constants import (
    ENV_KV_REST_TOKEN,
    ENV_KV_REST_URL,
    ENV_STORE_BACKEND,
    ENV_TAXONOMY_SOURCE,
)

from .registry import PARAM_MODEL_BY_BACKEND


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _env(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def build_app_config(data: dict[str, Any], env: Mapping[str, str] | None = None) -> AppConfig:
    """
    Build an AppConfig from a parsed YAML mapping plus environment overrides.

    Overrides (non-empty values win over the YAML):
    - SURVEY_STORE_BACKEND -> store.backend
    - KV_REST_API_URL / KV_REST_API_TOKEN -> kv_rest.url / kv_rest.token
    - TAXONOMY_SOURCE -> taxonomy_source

    Conventions:
    - The StoreBackend enum value must match the AppConfig field holding the
      backend params (e.g. StoreBackend.KV_REST.value == "kv_rest" -> AppConfig.kv_rest).
    """
    env = os.environ if env is None else env

    store_raw = dict(data.get("store") or {})
    backend_override = _env(env, ENV_STORE_BACKEND)
    if backend_override is not None:
        store_raw["backend"] = backend_override.lower()
    try:
        store = StoreConfig(**store_raw)
    except ValueError as e:
        raise ValueError(f"Invalid store configuration: {store_raw!r}") from e

    backend_kwargs: dict[str, Any] = {}
    for backend, param_model_cls in PARAM_MODEL_BY_BACKEND.items():
        if backend.value not in AppConfig.model_fields:
            raise ValueError(
                f"AppConfig has no field '{backend.value}'. "
                f"Add `{backend.value}: Optional[<YourBackendConfig>] = None` to AppConfig "
                f"(field name must match StoreBackend.value)."
            )
        params = dict(data.get(backend.value) or {})
        if backend is StoreBackend.KV_REST:
            url = _env(env, ENV_KV_REST_URL)
            token = _env(env, ENV_KV_REST_TOKEN)
            if url is not None:
                params["url"] = url
            if token is not None:
                params["token"] = token
        if params or backend is store.backend:
            backend_kwargs[backend.value] = param_model_cls(**params)

    taxonomy_source = _env(env, ENV_TAXONOMY_SOURCE) or data.get("taxonomy_source")
    log_file = data.get("log_file")

    optional: dict[str, Any] = {}
    if taxonomy_source:
        optional["taxonomy_source"] = str(taxonomy_source)
    if data.get("timezone"):
        optional["timezone"] = str(data["timezone"])

    return AppConfig(
        store=store,
        server=ServerConfig(**(data.get("server") or {})),
        log_file=Path(log_file) if log_file else None,
        **optional,
        **backend_kwargs,
    )


def load_app_config(path: Path, env: Mapping[str, str] | None = None) -> AppConfig:
    """
    Load app.yaml and construct a fully-resolved AppConfig.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    return build_app_config(_load_yaml(path), env=env)
