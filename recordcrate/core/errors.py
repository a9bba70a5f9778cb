"""Failures of the records API as seen by the client."""


class RecordsApiError(Exception):
    """Base class for records API failures."""


class FetchFailed(RecordsApiError):
    """The initial GET /records did not complete."""


class SubmissionFailed(RecordsApiError):
    """POST /records/new failed or returned a malformed record."""
