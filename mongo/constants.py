import os
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

# Configure logging
logger = logging.getLogger(__name__)

# Database configuration
DATABASE_NAME = os.getenv("MONGODB_DATABASE", "app")
_DEFAULT_MONGODB_URI = "mongodb://localhost:27017"

def _resolve_mongo_uri() -> str:
    """Resolve the MongoDB connection string with sane fallbacks."""
    candidates = [
        ("MONGODB_URI", os.getenv("MONGODB_URI")),
        ("MONGODB_CONNECTION_STRING", os.getenv("MONGODB_CONNECTION_STRING")),
    ]

    for _, candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()

    for name, candidate in candidates:
        if candidate is not None and not candidate.strip():
            logger.warning(f"{name} was empty; falling back to default URI.")

    return _DEFAULT_MONGODB_URI

MONGODB_CONNECTION_STRING = _resolve_mongo_uri()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        value = int(raw)
    except ValueError:
        if raw.strip():
            logger.warning(f"{name}={raw!r} is not an integer; using {default}.")
        return default
    return value if value > 0 else default

# Pagination defaults
DEFAULT_LIMIT: int = _int_env("PAGINATE_DEFAULT_LIMIT", 10)

# Timestamp fields: `date` in sortBy maps to CREATED_AT_FIELD, which is also the default sort
CREATED_AT_FIELD = os.getenv("PAGINATE_CREATED_AT_FIELD", "createdAt")
UPDATED_AT_FIELD = os.getenv("PAGINATE_UPDATED_AT_FIELD", "updatedAt")

# Identity field written by the store and exposed as `id`
ID_FIELD = "_id"
