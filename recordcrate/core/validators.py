"""Per-field validity rules and the display status derived from them."""
import re
from typing import Callable, Dict

from recordcrate.core.record_store import RecordStore
from recordcrate.models.form import FieldStatus

_YEAR_REGEX = re.compile(r"[0-9]{4}")


def validate_album(value: str, store: RecordStore) -> bool:
    """Non-empty and not already in the store (case-insensitive)."""
    return bool(value) and not store.has_album(value)


def validate_artist(value: str, store: RecordStore) -> bool:
    return bool(value)


def validate_year(value: str, store: RecordStore) -> bool:
    """Exactly four ASCII digits."""
    return _YEAR_REGEX.fullmatch(value) is not None


def validate_genre(value: str, store: RecordStore) -> bool:
    return bool(value)


VALIDATORS: Dict[str, Callable[[str, RecordStore], bool]] = {
    "album": validate_album,
    "artist": validate_artist,
    "year": validate_year,
    "genre": validate_genre,
}


def field_status(value: str, valid: bool) -> FieldStatus:
    if not value:
        return FieldStatus.EMPTY
    return FieldStatus.VALID if valid else FieldStatus.INVALID
