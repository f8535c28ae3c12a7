import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def normalize_database_url(url: str) -> str:
    """Point bare postgres URLs at the psycopg (v3) driver."""
    for scheme in ("postgres://", "postgresql://"):
        if url.startswith(scheme):
            return "postgresql+psycopg://" + url[len(scheme):]
    return url


# --- Database ---
# Default to local SQLite, but prefer environment variable
DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL", "sqlite:///./data/savings.db"))

# --- Server ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Contributions ---
# Off by default: the client only warns when a deposit would pass the target.
REJECT_OVER_TARGET = _as_bool(os.getenv("REJECT_OVER_TARGET", "false"))
