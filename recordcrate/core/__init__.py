"""Core model: record store, validators, filtering, form state and view."""
from recordcrate.core.errors import FetchFailed, RecordsApiError, SubmissionFailed
from recordcrate.core.form import SessionState, update
from recordcrate.core.record_store import RecordStore
from recordcrate.core.view import View, derive_view

__all__ = [
    "FetchFailed",
    "RecordsApiError",
    "SubmissionFailed",
    "RecordStore",
    "SessionState",
    "update",
    "View",
    "derive_view",
]
