"""Session state and the single update function that drives it.

All view state (field validity, form phase, visible records) is derived from
one immutable SessionState. Events are applied with update(state, event),
which never mutates its input and has no IO. The session wires the async
fetch/submit results back in as events.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Mapping, Union

from recordcrate.core.errors import FetchFailed, SubmissionFailed
from recordcrate.core.record_store import RecordStore
from recordcrate.core.validators import VALIDATORS, field_status
from recordcrate.models.form import FieldState, FormPhase, ListStatus
from recordcrate.models.record import RECORD_FIELDS, Record

logger = logging.getLogger(__name__)


def _empty_values() -> Dict[str, str]:
    return dict.fromkeys(RECORD_FIELDS, "")


@dataclass(frozen=True)
class SessionState:
    store: RecordStore = field(default_factory=RecordStore)
    values: Mapping[str, str] = field(default_factory=_empty_values)
    filter_text: str = ""
    list_status: ListStatus = ListStatus.LOADING
    submitting: bool = False
    submit_error: bool = False


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RecordsLoaded:
    store: RecordStore


@dataclass(frozen=True)
class RecordsFailed:
    error: FetchFailed


@dataclass(frozen=True)
class FieldEdited:
    name: str
    value: str


@dataclass(frozen=True)
class FilterEdited:
    text: str


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    record: Record


@dataclass(frozen=True)
class SubmitFailed:
    error: SubmissionFailed


Event = Union[
    RecordsLoaded,
    RecordsFailed,
    FieldEdited,
    FilterEdited,
    SubmitRequested,
    SubmitSucceeded,
    SubmitFailed,
]


# ---------------------------------------------------------------------------
# Derived state
# ---------------------------------------------------------------------------


def fields(state: SessionState) -> Dict[str, FieldState]:
    """Validity and display status of every form field against the current store."""
    out = {}
    for name in RECORD_FIELDS:
        value = state.values[name]
        valid = VALIDATORS[name](value, state.store)
        out[name] = FieldState(name=name, value=value, valid=valid, status=field_status(value, valid))
    return out


def phase(state: SessionState) -> FormPhase:
    if state.submitting:
        return FormPhase.SUBMITTING
    # Uniqueness is only meaningful against the loaded store
    if state.list_status is not ListStatus.READY:
        return FormPhase.INCOMPLETE
    if all(f.valid for f in fields(state).values()):
        return FormPhase.SUBMITTABLE
    return FormPhase.INCOMPLETE


def can_submit(state: SessionState) -> bool:
    return phase(state) is FormPhase.SUBMITTABLE


def candidate(state: SessionState) -> Record:
    """The record that a submit would send, built from the current field values."""
    return Record(**{name: state.values[name] for name in RECORD_FIELDS})


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


def update(state: SessionState, event: Event) -> SessionState:
    """Apply one event and return the next state. Inapplicable events return state unchanged."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unknown event: {event!r}")
    return handler(state, event)


def _records_loaded(state: SessionState, event: RecordsLoaded) -> SessionState:
    if state.list_status is not ListStatus.LOADING:
        logger.warning("Ignoring record list loaded after initial fetch")
        return state
    return replace(state, store=event.store, list_status=ListStatus.READY)


def _records_failed(state: SessionState, event: RecordsFailed) -> SessionState:
    if state.list_status is not ListStatus.LOADING:
        return state
    return replace(state, list_status=ListStatus.FAILED)


def _field_edited(state: SessionState, event: FieldEdited) -> SessionState:
    if event.name not in VALIDATORS:
        raise ValueError(f"Unknown field: {event.name}")
    values = dict(state.values)
    values[event.name] = event.value
    return replace(state, values=values)


def _filter_edited(state: SessionState, event: FilterEdited) -> SessionState:
    return replace(state, filter_text=event.text)


def _submit_requested(state: SessionState, event: SubmitRequested) -> SessionState:
    if not can_submit(state):
        logger.debug("Submit ignored in phase %s", phase(state).value)
        return state
    return replace(state, submitting=True, submit_error=False)


def _submit_succeeded(state: SessionState, event: SubmitSucceeded) -> SessionState:
    if not state.submitting:
        return state
    return replace(
        state,
        store=state.store.append(event.record),
        values=_empty_values(),
        submitting=False,
        submit_error=False,
    )


def _submit_failed(state: SessionState, event: SubmitFailed) -> SessionState:
    if not state.submitting:
        return state
    return replace(state, submitting=False, submit_error=True)


_HANDLERS: Dict[type, Callable[[SessionState, Event], SessionState]] = {
    RecordsLoaded: _records_loaded,
    RecordsFailed: _records_failed,
    FieldEdited: _field_edited,
    FilterEdited: _filter_edited,
    SubmitRequested: _submit_requested,
    SubmitSucceeded: _submit_succeeded,
    SubmitFailed: _submit_failed,
}
