"""Client session: owns the state, applies events, runs fetch and submit."""
import logging
from typing import Callable, List, Optional

from recordcrate.client.api import RecordsClient
from recordcrate.core.errors import SubmissionFailed
from recordcrate.core.form import (
    FieldEdited,
    FilterEdited,
    RecordsFailed,
    RecordsLoaded,
    SessionState,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    candidate,
    update,
)
from recordcrate.core.record_store import RecordStore
from recordcrate.core.view import View, derive_view

logger = logging.getLogger(__name__)

Subscriber = Callable[[View], None]


class Session:
    """One user's record list and add-record form.

    Every change goes through dispatch(), which runs the pure update function
    and hands the re-derived View to each subscriber. Fetch and submit
    failures end up as flags on the state; they are never raised.
    """

    def __init__(self, client: RecordsClient, state: Optional[SessionState] = None) -> None:
        self._client = client
        self._state = state or SessionState()
        self._subscribers: List[Subscriber] = []
        self._started = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def view(self) -> View:
        return derive_view(self._state)

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a render callback; returns a function that unregisters it."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def dispatch(self, event) -> View:
        previous = self._state
        self._state = update(previous, event)
        view = derive_view(self._state)
        if self._state is not previous:
            for subscriber in list(self._subscribers):
                subscriber(view)
        return view

    async def start(self) -> View:
        """Fetch the record list once."""
        if self._started:
            raise RuntimeError("Session already started")
        self._started = True
        result = await RecordStore.load(self._client.fetch_records)
        if result.ok:
            logger.info("Loaded %d records", len(result.store))
            return self.dispatch(RecordsLoaded(result.store))
        return self.dispatch(RecordsFailed(result.error))

    def edit(self, name: str, value: str) -> View:
        return self.dispatch(FieldEdited(name, value))

    def set_filter(self, text: str) -> View:
        return self.dispatch(FilterEdited(text))

    async def submit(self) -> bool:
        """Submit the form if it is Submittable. Returns True if a record was created."""
        before = self._state
        self.dispatch(SubmitRequested())
        if self._state is before:
            return False
        record = candidate(self._state)
        try:
            created = await self._client.create_record(record)
        except SubmissionFailed as e:
            logger.warning("Submission failed: %s", e)
            self.dispatch(SubmitFailed(e))
            return False
        self.dispatch(SubmitSucceeded(created))
        return True
