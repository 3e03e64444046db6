"""Submission validation and record construction (pure, clock-free)."""

import math
import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from pydantic import BaseModel, ValidationError

from domain.errors import InvalidInputError
from domain.schemas import (
    SUBMISSION_SCHEMA_VERSION,
    FlavorItem,
    SelectionItem,
    SubmissionCandidate,
    SubmissionRecord,
)

MIN_AGE = 1
MAX_AGE = 120

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_age(raw: object) -> int | None:
    """
    Parse an age the way the web form's integer parsing does.

    Examples:
        >>> parse_age("29")
        29
        >>> parse_age("29 years")
        29
        >>> parse_age(29.9)
        29
        >>> parse_age("abc") is None
        True
        >>> parse_age("\uff12\uff19") is None
        True
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        return int(m.group(0)) if m else None
    return None


def _required_text(payload: Mapping[str, Any], key: str, label: str) -> str:
    raw = payload.get(key)
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInputError(key, f"{label} is required")
    return raw.strip()


def _validate_list(raw: list, model: type[BaseModel], field: str) -> list:
    out = []
    for i, entry in enumerate(raw):
        try:
            out.append(model.model_validate(entry))
        except ValidationError as e:
            first = e.errors()[0]
            raise InvalidInputError(f"{field}[{i}]", f"Invalid {field} entry at index {i}: {first['msg']}") from e
    return out


def validate_submission(payload: object) -> SubmissionCandidate:
    """
    Validate a raw request body into a SubmissionCandidate.

    Required: name, age, coffeeName, flavors (a list, possibly empty when the
    participant only picked categories/subcategories). Optional: items.
    At least one flavor or item must be present.

    Raises:
        InvalidInputError: naming the first field that failed
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError("body", "Request body must be a JSON object")

    name = _required_text(payload, "name", "Name")

    raw_age = payload.get("age")
    if raw_age is None or raw_age == "":
        raise InvalidInputError("age", "Age is required")
    age = parse_age(raw_age)
    if age is None or not MIN_AGE <= age <= MAX_AGE:
        raise InvalidInputError("age", f"Age must be between {MIN_AGE} and {MAX_AGE}")

    coffee_name = _required_text(payload, "coffeeName", "Coffee name")

    raw_flavors = payload.get("flavors")
    if not isinstance(raw_flavors, list):
        raise InvalidInputError("flavors", "Flavors must be a list")
    flavors = _validate_list(raw_flavors, FlavorItem, "flavors")

    raw_items = payload.get("items")
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise InvalidInputError("items", "Items must be a list")
    items = _validate_list(raw_items, SelectionItem, "items")
    if not flavors and not items:
        raise InvalidInputError("flavors", "At least one flavor or item must be selected")

    return SubmissionCandidate(name=name, age=age, coffee_name=coffee_name, flavors=flavors, items=items)


def epoch_millis(instant: datetime) -> int:
    """Milliseconds since the Unix epoch for an aware datetime."""
    return (instant - _EPOCH) // timedelta(milliseconds=1)


def format_display_timestamp(instant: datetime, tz: tzinfo) -> str:
    """Render like a ja-JP locale string: YYYY/M/D H:MM:SS."""
    local = instant.astimezone(tz)
    return f"{local.year}/{local.month}/{local.day} {local.hour}:{local.minute:02d}:{local.second:02d}"


def format_iso_timestamp(instant: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"


def build_record(
    candidate: SubmissionCandidate,
    *,
    record_id: int,
    created_at: datetime,
    tz: tzinfo,
) -> SubmissionRecord:
    return SubmissionRecord(
        schema_version=SUBMISSION_SCHEMA_VERSION,
        id=record_id,
        name=candidate.name,
        age=candidate.age,
        coffee_name=candidate.coffee_name,
        flavors=list(candidate.flavors),
        items=list(candidate.items),
        timestamp=format_display_timestamp(created_at, tz),
        raw_timestamp=format_iso_timestamp(created_at),
    )
