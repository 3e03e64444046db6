from pathlib import Path

import pytest

from infrastructure.config import StoreBackend, build_app_config, load_app_config


def test_defaults_use_memory_store() -> None:
    cfg = build_app_config({}, env={})

    assert cfg.store.backend is StoreBackend.MEMORY
    assert cfg.store.list_key == "coffee-surveys"
    assert cfg.store.max_entries == 1000
    assert cfg.store.default_limit == 100
    assert cfg.timezone == "Asia/Tokyo"
    assert cfg.memory is not None


def test_kv_rest_requires_credentials() -> None:
    with pytest.raises(ValueError, match="kv_rest backend requires"):
        build_app_config({"store": {"backend": "kv_rest"}}, env={})


def test_environment_overrides_yaml() -> None:
    cfg = build_app_config(
        {"store": {"backend": "memory"}, "taxonomy_source": "data/a.csv", "kv_rest": {"timeout_s": 3}},
        env={
            "SURVEY_STORE_BACKEND": "KV_REST",
            "KV_REST_API_URL": "https://kv.example.test",
            "KV_REST_API_TOKEN": "secret",
            "TAXONOMY_SOURCE": "https://cdn.example.test/wheel.csv",
        },
    )

    assert cfg.store.backend is StoreBackend.KV_REST
    assert cfg.kv_rest is not None
    assert cfg.kv_rest.url == "https://kv.example.test"
    assert cfg.kv_rest.timeout_s == 3
    assert cfg.taxonomy_source == "https://cdn.example.test/wheel.csv"
    assert "secret" not in repr(cfg.kv_rest)


def test_blank_env_values_are_ignored() -> None:
    cfg = build_app_config({}, env={"SURVEY_STORE_BACKEND": "  ", "TAXONOMY_SOURCE": ""})

    assert cfg.store.backend is StoreBackend.MEMORY
    assert cfg.taxonomy_source.endswith("coffeeflavorwheel.csv")


def test_default_limit_cannot_exceed_max_entries() -> None:
    with pytest.raises(ValueError):
        build_app_config({"store": {"max_entries": 10, "default_limit": 50}}, env={})


def test_load_app_config_from_yaml(tmp_path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text(
        "store:\n  list_key: test-surveys\nserver:\n  port: 9000\nlog_file: logs/test.log\n",
        encoding="utf-8",
    )

    cfg = load_app_config(path, env={})

    assert cfg.store.list_key == "test-surveys"
    assert cfg.server.port == 9000
    assert cfg.log_file == Path("logs/test.log")


def test_load_app_config_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_app_config(path, env={})


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "missing.yaml", env={})


def test_shipped_config_loads() -> None:
    path = Path(__file__).resolve().parents[2] / "configs" / "app.yaml"

    cfg = load_app_config(path, env={})

    assert cfg.store.backend is StoreBackend.MEMORY
    assert cfg.store.list_key == "coffee-surveys"
