"""Record shape shared by the fixture, the API and the client store."""
from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter

RECORD_FIELDS = ("album", "artist", "year", "genre")


class Record(BaseModel):
    """A music album entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    album: str
    artist: str
    year: str
    genre: str

    def values(self) -> List[str]:
        return [getattr(self, name) for name in RECORD_FIELDS]


RecordList = TypeAdapter(List[Record])
