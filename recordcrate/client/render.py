"""Plain-text rendering of the record list and the add-record form."""
from typing import Iterable

from recordcrate.core.view import View
from recordcrate.models.form import FieldStatus
from recordcrate.models.record import RECORD_FIELDS, Record

STATUS_ICONS = {
    FieldStatus.EMPTY: "*",
    FieldStatus.VALID: "ok",
    FieldStatus.INVALID: "!",
}


def render_records(records: Iterable[Record]) -> str:
    lines = []
    for r in records:
        lines.append(r.album)
        lines.append(f"  Artist: {r.artist}")
        lines.append(f"  Year: {r.year}")
        lines.append(f"  Genre: {r.genre}")
    return "\n".join(lines)


def render_list(view: View) -> str:
    if view.loading:
        return "Loading records..."
    if view.fetch_failed:
        return "Failed to get records from server"
    if not view.records:
        return "No matching records" if view.total else "No records"
    return render_records(view.records)


def render_form(view: View) -> str:
    lines = []
    for name in RECORD_FIELDS:
        f = view.fields[name]
        lines.append(f"[{STATUS_ICONS[f.status]:>2}] {name}: {f.value}")
    if view.submitting:
        lines.append("Submitting...")
    if view.submit_error:
        lines.append("Failed to save record, please try again")
    return "\n".join(lines)
