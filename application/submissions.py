"""Submission log: bounded, newest-first survey responses in a shared list store."""

import json
import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from domain.errors import InvalidInputError, RecordParseError, StoreUnavailableError
from domain.schemas import SubmissionRecord
from domain.submission import build_record, epoch_millis, validate_submission
from infrastructure.config.models import AppConfig
from infrastructure.constants import DEFAULT_LIST_LIMIT, DISPLAY_TIMEZONE, MAX_SUBMISSIONS, SURVEY_LIST_KEY
from infrastructure.stores.base import ListStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def decode_entry(entry: Any, position: int) -> SubmissionRecord:
    """Decode one stored entry; text is JSON-decoded, mappings pass straight to validation."""
    try:
        data = json.loads(entry) if isinstance(entry, (str, bytes)) else entry
        return SubmissionRecord.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise RecordParseError(f"Malformed submission entry at position {position}: {e}") from e


class SubmissionLog:
    """
    Narrow access contract over the shared list:

    - list_recent(limit): read the newest `limit` records
    - append(payload): validate, create, prepend, then trim to max_entries
    - clear_all(): delete the whole list

    Prepend and trim are separate store operations; a crash between them can
    leave the list briefly longer than max_entries until the next append.
    """

    def __init__(
        self,
        store: ListStore,
        *,
        key: str = SURVEY_LIST_KEY,
        max_entries: int = MAX_SUBMISSIONS,
        default_limit: int = DEFAULT_LIST_LIMIT,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.store = store
        self.key = key
        self.max_entries = max_entries
        self.default_limit = default_limit
        self.tz = tz or ZoneInfo(DISPLAY_TIMEZONE)
        self.clock = clock
        self._last_id = 0
        self._id_lock = threading.Lock()

    @classmethod
    def from_cfg(cls, cfg: AppConfig, store: ListStore, **kwargs: Any) -> "SubmissionLog":
        return cls(
            store,
            key=cfg.store.list_key,
            max_entries=cfg.store.max_entries,
            default_limit=cfg.store.default_limit,
            tz=ZoneInfo(cfg.timezone),
            **kwargs,
        )

    def _next_id(self, created_at: datetime) -> int:
        # Creation-time millis, bumped so ids never repeat or go backwards in this process.
        with self._id_lock:
            record_id = max(epoch_millis(created_at), self._last_id + 1)
            self._last_id = record_id
            return record_id

    def list_recent(self, limit: int | None = None) -> list[SubmissionRecord]:
        """
        Return up to `limit` records, newest first.

        Raises:
            InvalidInputError: limit < 1
            StoreUnavailableError: store unreachable
            RecordParseError: a stored entry is malformed
        """
        limit = self.default_limit if limit is None else int(limit)
        if limit < 1:
            raise InvalidInputError("limit", "limit must be a positive integer")

        try:
            entries = self.store.lrange(self.key, 0, limit - 1)
        except StoreUnavailableError:
            raise
        except Exception as e:
            raise StoreUnavailableError(f"Could not read {self.key!r}: {e}") from e

        records = [decode_entry(entry, i) for i, entry in enumerate(entries)]
        logger.debug("Listed %d submissions (limit=%d)", len(records), limit)
        return records

    def append(self, payload: object) -> SubmissionRecord:
        """
        Validate and persist one submission; returns the created record.

        Raises:
            InvalidInputError: before any store mutation
            StoreUnavailableError: push or trim failed
        """
        candidate = validate_submission(payload)

        created_at = self.clock()
        record = build_record(
            candidate,
            record_id=self._next_id(created_at),
            created_at=created_at,
            tz=self.tz,
        )

        try:
            length = self.store.lpush(self.key, record.to_json())
            self.store.ltrim(self.key, 0, self.max_entries - 1)
        except StoreUnavailableError:
            raise
        except Exception as e:
            raise StoreUnavailableError(f"Could not write {self.key!r}: {e}") from e

        logger.info(
            "Saved submission id=%d (flavors=%d, items=%d, list_length=%d)",
            record.id,
            len(record.flavors),
            len(record.items),
            min(length, self.max_entries),
        )
        return record

    def clear_all(self) -> None:
        """Delete every stored submission. Idempotent."""
        try:
            removed = self.store.delete(self.key)
        except StoreUnavailableError:
            raise
        except Exception as e:
            raise StoreUnavailableError(f"Could not delete {self.key!r}: {e}") from e
        logger.warning("Cleared all submissions (key=%s, removed=%d)", self.key, removed)
