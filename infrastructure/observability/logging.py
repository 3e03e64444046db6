"""
Logging setup with contextvars-based metadata injection.

- Adds request tag and route into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (httpx, uvicorn access, etc.).
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_request_tag = contextvars.ContextVar("request_tag", default="-")
cv_route = contextvars.ContextVar("route", default="-")

# Kept in context for metadata (not printed every line)
cv_request_id_full = contextvars.ContextVar("request_id_full", default="-")
cv_store_backend = contextvars.ContextVar("store_backend", default="-")


def make_request_tag(request_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full request id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(request_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.req = cv_request_tag.get() or "-"
        record.route = cv_route.get() or "-"
        return True


def set_log_context(
    *,
    request_id_full: str | None = None,
    route: str | None = None,
    store_backend: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if request_id_full is not None:
        cv_request_id_full.set(str(request_id_full))
        cv_request_tag.set(make_request_tag(str(request_id_full)))

    if route is not None:
        cv_route.set(str(route))

    if store_backend is not None:
        cv_store_backend.set(str(store_backend))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "request_tag": str(cv_request_tag.get() or "-"),
        "request_id_full": str(cv_request_id_full.get() or "-"),
        "route": str(cv_route.get() or "-"),
        "store_backend": str(cv_store_backend.get() or "-"),
    }


def clear_request_context() -> None:
    """Reset per-request context to defaults (keep backend info)."""
    cv_request_tag.set("-")
    cv_request_id_full.set("-")
    cv_route.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] req=%(req)s %(route)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | req=%(req)s %(route)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Third-party library log levels
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
