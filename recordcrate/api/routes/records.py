"""Records fixture listing and the simulated-latency create endpoint."""
import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from recordcrate.api.state import AppState, get_state
from recordcrate.core.record_store import read_fixture

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_records(state: AppState = Depends(get_state)):
    """Return the records fixture as-is."""
    try:
        body = read_fixture(state.records_path)
    except OSError as e:
        logger.warning("Records fixture %s unreadable: %s", state.records_path, e)
        raise HTTPException(status_code=503, detail="Records unavailable")
    return Response(content=body, media_type="application/json")


@router.post("/new")
async def create_record(request: Request, state: AppState = Depends(get_state)):
    """Echo the submitted record back after a delay. Nothing is stored."""
    body = await request.body()
    logger.info("Create record: echoing %d bytes after %.1fs", len(body), state.create_delay_sec)
    await asyncio.sleep(state.create_delay_sec)
    return Response(content=body, media_type="application/json")
