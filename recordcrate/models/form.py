"""Form, field and list status values derived by the session model."""
from dataclasses import dataclass
from enum import Enum


class FieldStatus(str, Enum):
    """Display status of one form field."""
    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


class FormPhase(str, Enum):
    INCOMPLETE = "incomplete"
    SUBMITTABLE = "submittable"
    SUBMITTING = "submitting"


class ListStatus(str, Enum):
    """State of the initial record fetch."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FieldState:
    """Current raw value of a form field and its derived validity."""
    name: str
    value: str
    valid: bool
    status: FieldStatus
