"""Error types shared by the survey domain, application and infrastructure layers."""


class SurveyError(Exception):
    """Base class for survey errors surfaced to callers."""


class InvalidInputError(SurveyError, ValueError):
    """A submission (or query) failed validation before any store mutation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StoreUnavailableError(SurveyError):
    """The list store could not be reached or rejected the command."""


class RecordParseError(SurveyError):
    """A persisted entry could not be decoded into a SubmissionRecord."""
