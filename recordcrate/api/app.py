"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordcrate.config import LOG_FORMAT

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

from recordcrate.api.state import AppState, get_state

from recordcrate.api.routes import records, static

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    if not state.records_path.is_file():
        logger.warning("Records fixture not found at %s", state.records_path)
    logger.info("Serving static files from %s", state.public_dir)
    yield


app = FastAPI(
    title="recordcrate",
    description="Record collection fixture API and static front end",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(records.router, prefix="/records", tags=["records"])
# Catch-all; must be registered after the API routes
app.include_router(static.router, tags=["static"])
