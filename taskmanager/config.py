from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

DEFAULT_API_URL = "http://localhost:8000"

_api_timeout = os.getenv("TASKS_API_TIMEOUT", "").strip()
TASKS_API_TIMEOUT = float(_api_timeout) if _api_timeout else None


def get_api_url() -> str:
    """Base URL of the task API, read from the environment on every call."""
    return os.getenv("TASKS_API_URL", "").strip() or DEFAULT_API_URL
