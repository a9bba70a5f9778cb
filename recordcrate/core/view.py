"""Everything a front end needs to draw, derived from SessionState."""
from dataclasses import dataclass
from typing import Dict, List

from recordcrate.core.filtering import visible
from recordcrate.core.form import SessionState, fields, phase
from recordcrate.models.form import FieldState, FormPhase, ListStatus
from recordcrate.models.record import Record


@dataclass(frozen=True)
class View:
    records: List[Record]  # visible under the current filter
    total: int
    list_status: ListStatus
    filter_text: str
    fields: Dict[str, FieldState]
    phase: FormPhase
    submit_error: bool

    @property
    def loading(self) -> bool:
        return self.list_status is ListStatus.LOADING

    @property
    def fetch_failed(self) -> bool:
        return self.list_status is ListStatus.FAILED

    @property
    def submitting(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    @property
    def submit_enabled(self) -> bool:
        return self.phase is FormPhase.SUBMITTABLE


def derive_view(state: SessionState) -> View:
    records = state.store.all()
    return View(
        records=visible(records, state.filter_text),
        total=len(records),
        list_status=state.list_status,
        filter_text=state.filter_text,
        fields=fields(state),
        phase=phase(state),
        submit_error=state.submit_error,
    )
