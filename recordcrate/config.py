"""Configuration: env, fixture and public paths, echo delay, client endpoint."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of recordcrate package)
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"
RECORDS_PATH = Path(os.getenv("RECORDCRATE_RECORDS_PATH", str(DATA_DIR / "records.json")))
PUBLIC_DIR = Path(os.getenv("RECORDCRATE_PUBLIC_DIR", str(BASE_DIR / "public")))

# API
API_HOST = os.getenv("RECORDCRATE_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", "5000"))

# Simulated latency of POST /records/new
CREATE_DELAY_SEC = float(os.getenv("RECORDCRATE_CREATE_DELAY_SEC", "2.0"))

# Shared by server and CLI log output
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

# Client
API_URL = os.getenv("RECORDCRATE_API_URL", f"http://localhost:{API_PORT}")
CLIENT_TIMEOUT_SEC = float(os.getenv("RECORDCRATE_CLIENT_TIMEOUT_SEC", "10.0"))
