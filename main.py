"""
CLI entrypoint for the coffee flavor wheel survey server.

This script performs the following steps:
- loads .env, configs/app.yaml (with environment overrides)
- configures console + rotating file logging
- loads the flavor taxonomy (falls back to the built-in dataset)
- builds the configured list store and the submission log
- serves the HTTP API with uvicorn
"""

import argparse
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from application import SubmissionLog, create_app, load_taxonomy
from infrastructure.config import AppConfig, load_app_config
from infrastructure.constants import APP_CONFIG_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, set_log_context
from infrastructure.stores import make_store

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Serve the coffee flavor wheel survey API")
    p.add_argument(
        "--config",
        type=str,
        default=str(APP_CONFIG_FILE),
        help="Path to app.yaml (default: configs/app.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument(
        "--memory",
        action="store_true",
        help="Use the in-memory store instead of the configured backend.",
    )
    p.add_argument("--host", type=str, default=None, help="Bind host (default: server.host)")
    p.add_argument("--port", type=int, default=None, help="Bind port (default: server.port)")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def build_app(cfg: AppConfig, *, use_memory: bool = False) -> FastAPI:
    """Wire taxonomy, store and submission log into the HTTP app."""
    taxonomy = load_taxonomy(cfg.taxonomy_source)
    store = make_store(cfg, use_memory=use_memory)
    set_log_context(store_backend=store.backend.value)

    log = SubmissionLog.from_cfg(cfg, store)
    return create_app(cfg, log=log, taxonomy=taxonomy, on_shutdown=store.close)


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "app.yaml")
    cfg = load_app_config(config_path)

    configure_logging(
        log_file=cfg.log_file,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    logger.info(
        "Starting survey server (store=%s, list_key=%s, max_entries=%d)",
        "memory" if args.memory else cfg.store.backend.value,
        cfg.store.list_key,
        cfg.store.max_entries,
    )

    app = build_app(cfg, use_memory=bool(args.memory))

    host = args.host or cfg.server.host
    port = args.port or cfg.server.port
    logger.info("Listening on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
