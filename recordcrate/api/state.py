"""Shared application state (injected into routes)."""
from pathlib import Path

from recordcrate.config import CREATE_DELAY_SEC, PUBLIC_DIR, RECORDS_PATH


class AppState:
    def __init__(
        self,
        records_path: Path = RECORDS_PATH,
        public_dir: Path = PUBLIC_DIR,
        create_delay_sec: float = CREATE_DELAY_SEC,
    ) -> None:
        self.records_path = records_path
        self.public_dir = public_dir
        self.create_delay_sec = create_delay_sec


_state = AppState()


def get_state() -> AppState:
    return _state
