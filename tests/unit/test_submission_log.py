import json
from datetime import datetime, timezone

import pytest

from application.submissions import SubmissionLog
from domain.errors import InvalidInputError, RecordParseError, StoreUnavailableError
from domain.schemas import SUBMISSION_SCHEMA_VERSION
from infrastructure.stores import InMemoryListStore

KEY = "coffee-surveys"


class RecordingStore(InMemoryListStore):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    def lpush(self, key, value):
        self.calls.append(("lpush", key))
        return super().lpush(key, value)

    def ltrim(self, key, start, stop):
        self.calls.append(("ltrim", key, start, stop))
        return super().ltrim(key, start, stop)


class BrokenStore(InMemoryListStore):
    def lrange(self, key, start, stop):
        raise StoreUnavailableError("connection refused")

    def lpush(self, key, value):
        raise ConnectionError("connection reset")

    def delete(self, key):
        raise StoreUnavailableError("connection refused")


def _payload(name: str = "Aya", age: object = 29) -> dict:
    return {
        "name": name,
        "age": age,
        "coffeeName": "Yirgacheffe",
        "flavors": [{"category": "FRUITS", "subcategory": "BERRY", "flavor": "STRAWBERRY"}],
    }


def test_append_then_list_returns_the_record(submission_log, aya_payload) -> None:
    record = submission_log.append(aya_payload)

    assert record.age == 29
    assert len(record.flavors) == 1
    assert isinstance(record.id, int) and record.id > 0
    assert record.id == 1736035387123
    assert record.timestamp == "2025/1/5 9:03:07"
    parsed = datetime.fromisoformat(record.raw_timestamp.replace("Z", "+00:00"))
    assert parsed == datetime(2025, 1, 5, 0, 3, 7, 123000, tzinfo=timezone.utc)
    assert record.schema_version == SUBMISSION_SCHEMA_VERSION

    assert submission_log.list_recent() == [record]


def test_record_is_stored_as_camel_case_json(submission_log, store, aya_payload) -> None:
    submission_log.append(aya_payload)

    stored = json.loads(store.lrange(KEY, 0, 0)[0])

    assert stored["coffeeName"] == "Yirgacheffe"
    assert "rawTimestamp" in stored
    assert stored["flavors"] == aya_payload["flavors"]


@pytest.mark.parametrize("age", [0, 121, "abc", None, -1, 1000])
def test_invalid_age_does_not_touch_the_store(submission_log, store, age) -> None:
    submission_log.append(_payload(name="First"))

    with pytest.raises(InvalidInputError) as exc_info:
        submission_log.append(_payload(age=age))

    assert exc_info.value.field == "age"
    assert len(submission_log.list_recent()) == 1
    assert store.llen(KEY) == 1


def test_newest_record_is_first_and_length_grows_by_one(submission_log, store) -> None:
    for i in range(5):
        before = store.llen(KEY)
        record = submission_log.append(_payload(name=f"p{i}"))
        assert store.llen(KEY) == min(before + 1, 1000)
        assert submission_log.list_recent(1)[0] == record

    assert [r.name for r in submission_log.list_recent()] == ["p4", "p3", "p2", "p1", "p0"]


def test_list_is_capped_at_1000(submission_log) -> None:
    first = submission_log.append(_payload(name="oldest"))
    for i in range(1000):
        submission_log.append(_payload(name=f"p{i}"))

    records = submission_log.list_recent(1000)

    assert len(records) == 1000
    assert first.id not in {r.id for r in records}
    assert records[0].name == "p999"
    assert records[-1].name == "p0"


def test_push_and_trim_are_separate_store_calls(cfg, clock, aya_payload) -> None:
    store = RecordingStore()
    log = SubmissionLog.from_cfg(cfg, store, clock=clock)

    log.append(aya_payload)

    assert store.calls == [("lpush", KEY), ("ltrim", KEY, 0, 999)]


def test_list_recent_respects_limit(submission_log) -> None:
    for i in range(5):
        submission_log.append(_payload(name=f"p{i}"))

    assert [r.name for r in submission_log.list_recent(2)] == ["p4", "p3"]


def test_default_limit_is_100(submission_log) -> None:
    for i in range(105):
        submission_log.append(_payload(name=f"p{i}"))

    assert len(submission_log.list_recent()) == 100


def test_non_positive_limit_is_rejected(submission_log) -> None:
    with pytest.raises(InvalidInputError):
        submission_log.list_recent(0)


def test_ids_stay_unique_when_clock_does_not_advance(cfg, store) -> None:
    frozen = datetime(2025, 1, 5, tzinfo=timezone.utc)
    log = SubmissionLog.from_cfg(cfg, store, clock=lambda: frozen)

    ids = [log.append(_payload()).id for _ in range(3)]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_clear_all_is_idempotent(submission_log) -> None:
    submission_log.append(_payload())

    submission_log.clear_all()
    assert submission_log.list_recent() == []
    submission_log.clear_all()
    assert submission_log.list_recent() == []


def test_structured_and_legacy_entries_are_accepted(cfg) -> None:
    legacy = {
        "id": 1700000000000,
        "name": "Ken",
        "age": 40,
        "coffeeName": "Kona",
        "flavors": [],
        "timestamp": "2023/11/15 7:13:20",
        "rawTimestamp": "2023-11-14T22:13:20.000Z",
    }
    store = InMemoryListStore(seed={KEY: [legacy, json.dumps(legacy)]})
    log = SubmissionLog.from_cfg(cfg, store)

    records = log.list_recent()

    assert len(records) == 2
    assert records[0] == records[1]
    assert records[0].schema_version == 1
    assert records[0].items == []


def test_malformed_entry_raises_parse_error(cfg) -> None:
    store = InMemoryListStore(seed={KEY: ["{not json"]})
    log = SubmissionLog.from_cfg(cfg, store)

    with pytest.raises(RecordParseError):
        log.list_recent()


def test_store_failures_surface_as_store_unavailable(cfg) -> None:
    log = SubmissionLog.from_cfg(cfg, BrokenStore())

    with pytest.raises(StoreUnavailableError):
        log.list_recent()
    with pytest.raises(StoreUnavailableError):
        log.append(_payload())
    with pytest.raises(StoreUnavailableError):
        log.clear_all()
