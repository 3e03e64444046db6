"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for submissions and flavor picks
- submission: request validation and record construction
- selection: session selection state (SelectionId, SurveyDraft)
- taxonomy: flavor taxonomy model, CSV parsing and default dataset
- wheel: sunburst layout and hit-testing
"""

from domain.errors import InvalidInputError, RecordParseError, StoreUnavailableError, SurveyError
from domain.schemas import FlavorItem, SelectionItem, SubmissionCandidate, SubmissionRecord
from domain.selection import SelectionId, SurveyDraft
from domain.submission import validate_submission

__all__ = [
    "FlavorItem",
    "SelectionItem",
    "SubmissionCandidate",
    "SubmissionRecord",
    "SelectionId",
    "SurveyDraft",
    "validate_submission",
    # Errors
    "SurveyError",
    "InvalidInputError",
    "StoreUnavailableError",
    "RecordParseError",
]
