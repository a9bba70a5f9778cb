"""End-to-end tests for the client session against the in-process app."""

import asyncio

import httpx
import pytest
from httpx import ASGITransport

from recordcrate.api.app import app
from recordcrate.client.api import RecordsClient
from recordcrate.client.session import Session
from recordcrate.models.form import FormPhase, ListStatus
from recordcrate.models.record import Record

X = Record(album="X", artist="Y", year="2020", genre="Rock")


def _fill(session: Session, record: Record = X) -> None:
    for name, value in record.model_dump().items():
        session.edit(name, value)


@pytest.fixture
async def session(empty_fixture):
    async with RecordsClient("http://test", transport=ASGITransport(app=app)) as client:
        yield Session(client)


def _failing_submit_client() -> RecordsClient:
    def handler(request):
        if request.url.path == "/records":
            return httpx.Response(200, json=[])
        return httpx.Response(500)

    return RecordsClient("http://test", transport=httpx.MockTransport(handler))


async def test_start_loads_store(records_client, records):
    session = Session(records_client)
    assert session.view.loading

    view = await session.start()

    assert view.list_status is ListStatus.READY
    assert view.records == records
    assert view.total == len(records)


async def test_start_failure_sets_fetch_failed():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with RecordsClient("http://test", transport=httpx.MockTransport(handler)) as client:
        view = await Session(client).start()

    assert view.fetch_failed
    assert view.records == []


async def test_start_only_once(session):
    await session.start()

    with pytest.raises(RuntimeError):
        await session.start()


async def test_submit_success_end_to_end(session):
    await session.start()
    _fill(session)
    assert session.view.phase is FormPhase.SUBMITTABLE

    created = await session.submit()

    view = session.view
    assert created
    assert view.records == [X]
    assert all(f.value == "" for f in view.fields.values())
    assert view.phase is FormPhase.INCOMPLETE
    assert not view.submit_error


async def test_resubmitting_same_album_is_blocked(session):
    await session.start()
    _fill(session)
    await session.submit()

    _fill(session)

    assert not session.view.fields["album"].valid
    assert not await session.submit()
    assert len(session.state.store) == 1


async def test_submit_failure_end_to_end():
    async with _failing_submit_client() as client:
        session = Session(client)
        await session.start()
        _fill(session)

        created = await session.submit()

    view = session.view
    assert not created
    assert view.submit_error
    assert {name: f.value for name, f in view.fields.items()} == X.model_dump()
    assert view.records == []
    assert view.submit_enabled


async def test_retry_after_failure_clears_error():
    attempts = []

    def handler(request):
        if request.url.path == "/records":
            return httpx.Response(200, json=[])
        attempts.append(request)
        if len(attempts) == 1:
            return httpx.Response(500)
        return httpx.Response(200, content=request.content)

    async with RecordsClient("http://test", transport=httpx.MockTransport(handler)) as client:
        session = Session(client)
        await session.start()
        _fill(session)
        assert not await session.submit()
        assert await session.submit()

    assert not session.view.submit_error
    assert session.view.records == [X]


async def test_submit_inert_when_incomplete(session):
    await session.start()
    session.edit("album", "X")

    assert not await session.submit()
    assert not session.view.submitting


async def test_only_one_submission_in_flight(session):
    await session.start()
    _fill(session)

    results = await asyncio.gather(session.submit(), session.submit())

    assert sorted(results) == [False, True]
    assert session.view.records == [X]


async def test_filter_view_follows_store(session):
    await session.start()
    session.set_filter("rock")
    assert session.view.records == []

    _fill(session)
    await session.submit()

    assert session.view.filter_text == "rock"
    assert session.view.records == [X]


async def test_subscribers_see_each_change(session):
    seen = []
    unsubscribe = session.subscribe(seen.append)

    await session.start()
    _fill(session)
    await session.submit()
    unsubscribe()
    session.set_filter("x")

    phases = [v.phase for v in seen]
    assert seen[0].list_status is ListStatus.READY
    assert FormPhase.SUBMITTING in phases
    assert phases[-1] is FormPhase.INCOMPLETE
    assert seen[-1].records == [X]


async def test_inert_events_do_not_notify(session):
    await session.start()
    seen = []
    session.subscribe(seen.append)

    await session.submit()

    assert seen == []


async def test_submit_inert_until_records_loaded():
    existing = Record(album="OK Computer", artist="Radiohead", year="1997", genre="Rock")
    release = asyncio.Event()
    posts = []

    async def handler(request):
        if request.url.path == "/records":
            await release.wait()
            return httpx.Response(200, json=[existing.model_dump()])
        posts.append(request)
        return httpx.Response(200, content=request.content)

    async with RecordsClient("http://test", transport=httpx.MockTransport(handler)) as client:
        session = Session(client)
        loading = asyncio.create_task(session.start())
        await asyncio.sleep(0)
        _fill(session)

        assert session.view.loading
        assert not session.view.submit_enabled
        assert not await session.submit()

        release.set()
        await loading

        assert session.view.submit_enabled
        assert await session.submit()

    assert len(posts) == 1
    assert session.view.records == [existing, X]


async def test_unsubscribe_twice_is_harmless(session):
    unsubscribe = session.subscribe(lambda view: None)

    unsubscribe()
    unsubscribe()

    session.set_filter("x")
