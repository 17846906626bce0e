"""Configuration: env, API address, store backend, exports, client session."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of recordshop package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so RECORDSHOP_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"

# API
API_HOST = os.getenv("RECORDSHOP_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("RECORDSHOP_API_PORT", "8000"))
# Auto-reload on code changes (development only)
API_RELOAD = os.getenv("RECORDSHOP_API_RELOAD", "0").lower() in ("1", "true", "yes")
# Server the client talks to (routes live under /api)
API_BASE_URL = os.getenv("RECORDSHOP_API_BASE_URL", f"http://localhost:{API_PORT}")

# Re-check role permissions on mutating endpoints (off = advisory roles only)
ENFORCE_ROLES = os.getenv("RECORDSHOP_ENFORCE_ROLES", "0").lower() in ("1", "true", "yes")

# Empty = in-memory store, data resets on restart
STORE_PATH = os.getenv("RECORDSHOP_STORE_PATH", "")

# Client side
EXPORT_DIR = Path(os.getenv("RECORDSHOP_EXPORT_DIR", str(DATA_DIR / "exports")))
SESSION_PATH = Path(os.getenv("RECORDSHOP_SESSION_PATH", str(DATA_DIR / "session.json")))
SESSION_KEY = "currentUser"
SESSION_MAX_AGE_HOURS = float(os.getenv("RECORDSHOP_SESSION_MAX_AGE_HOURS", "8"))


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
