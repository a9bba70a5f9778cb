"""Data models for records, form fields and list state."""
from recordcrate.models.form import FieldState, FieldStatus, FormPhase, ListStatus
from recordcrate.models.record import RECORD_FIELDS, Record, RecordList

__all__ = [
    "Record",
    "RecordList",
    "RECORD_FIELDS",
    "FieldState",
    "FieldStatus",
    "FormPhase",
    "ListStatus",
]
