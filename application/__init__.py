"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure:
taxonomy loading with fallback, the bounded submission log, CSV export,
and the HTTP app that exposes them.
"""

from application.api import create_app
from application.export import export_filename, submissions_to_csv
from application.submissions import SubmissionLog
from application.taxonomy import load_taxonomy

__all__ = [
    # Main workflows
    "SubmissionLog",
    "load_taxonomy",
    # HTTP
    "create_app",
    # Export
    "submissions_to_csv",
    "export_filename",
]
