"""CSV download of survey submissions."""

from collections.abc import Sequence
from datetime import date

import pandas as pd

from application.constants import (
    EXPORT_COLUMNS,
    EXPORT_FILENAME_TEMPLATE,
    EXPORT_FLAVOR_JOIN,
    EXPORT_FLAVOR_SEP,
)
from domain.schemas import SubmissionRecord


def submissions_to_frame(records: Sequence[SubmissionRecord]) -> pd.DataFrame:
    """One row per submission, newest first (input order is kept)."""
    rows = [
        [
            r.id,
            r.name,
            r.age,
            r.coffee_name,
            r.timestamp,
            len(r.flavors),
            EXPORT_FLAVOR_JOIN.join(f.label(EXPORT_FLAVOR_SEP) for f in r.flavors),
        ]
        for r in records
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def submissions_to_csv(records: Sequence[SubmissionRecord]) -> str:
    """Render submissions as CSV text with a header row."""
    return submissions_to_frame(records).to_csv(index=False, lineterminator="\n")


def export_filename(today: date) -> str:
    return EXPORT_FILENAME_TEMPLATE.format(date=today.isoformat())
