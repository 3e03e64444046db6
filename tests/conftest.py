from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from application import SubmissionLog, create_app
from domain.taxonomy import DEFAULT_TAXONOMY
from infrastructure.config import build_app_config
from infrastructure.stores import InMemoryListStore

FIXED_INSTANT = datetime(2025, 1, 5, 0, 3, 7, 123000, tzinfo=timezone.utc)


class StepClock:
    """Returns FIXED_INSTANT, then advances by `step` on every call."""

    def __init__(self, start: datetime = FIXED_INSTANT, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def cfg():
    return build_app_config({}, env={})


@pytest.fixture
def store() -> InMemoryListStore:
    return InMemoryListStore()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def submission_log(cfg, store, clock) -> SubmissionLog:
    return SubmissionLog.from_cfg(cfg, store, clock=clock)


@pytest.fixture
def client(cfg, submission_log):
    app = create_app(cfg, log=submission_log, taxonomy=DEFAULT_TAXONOMY)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def aya_payload() -> dict:
    return {
        "name": "Aya",
        "age": 29,
        "coffeeName": "Yirgacheffe",
        "flavors": [{"category": "FRUITS", "subcategory": "BERRY", "flavor": "STRAWBERRY"}],
    }
