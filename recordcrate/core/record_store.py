"""Records fixture on the server side and the client-side record cache."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from recordcrate.core.errors import FetchFailed
from recordcrate.models.record import Record

logger = logging.getLogger(__name__)


def read_fixture(path: Path) -> bytes:
    """Return the raw JSON bytes of the records fixture. Raises OSError if unreadable."""
    return path.read_bytes()


@dataclass(frozen=True)
class LoadResult:
    """Outcome of RecordStore.load: a store, or the fetch failure."""
    store: Optional["RecordStore"] = None
    error: Optional[FetchFailed] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RecordStore:
    """Append-only, insertion-ordered cache of records held by one client session."""
    records: Tuple[Record, ...] = ()

    @classmethod
    async def load(cls, fetch: Callable[[], Awaitable[List[Record]]]) -> LoadResult:
        """Run the initial fetch. Failure is returned, not raised."""
        try:
            records = await fetch()
        except FetchFailed as e:
            logger.warning("Record fetch failed: %s", e)
            return LoadResult(error=e)
        return LoadResult(store=cls(tuple(records)))

    def all(self) -> Tuple[Record, ...]:
        return self.records

    def append(self, record: Record) -> "RecordStore":
        """Return a new store with record added at the end."""
        return RecordStore(self.records + (record,))

    def has_album(self, album: str) -> bool:
        """True if any record has this album title (case-insensitive)."""
        wanted = album.lower()
        return any(r.album.lower() == wanted for r in self.records)

    def __len__(self) -> int:
        return len(self.records)

    @classmethod
    def of(cls, records: Sequence[Record]) -> "RecordStore":
        return cls(tuple(records))
