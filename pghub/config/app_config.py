"""
Application Configuration

Reads runtime settings from environment variables once at import time.
Every setting has a default suitable for local development.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = 'false') -> bool:
    """Interpret an environment variable as a boolean flag."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to the default on bad input."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


DATABASE_URL = os.environ.get('PGHUB_DATABASE_URL', 'sqlite:///./pghub.db')
DB_ECHO = _env_bool('PGHUB_DB_ECHO')
DB_POOL_SIZE = _env_int('PGHUB_DB_POOL_SIZE', 20)
DB_MAX_OVERFLOW = _env_int('PGHUB_DB_MAX_OVERFLOW', 30)

LOG_LEVEL = os.environ.get('PGHUB_LOG_LEVEL', 'INFO').upper()
LOG_DIR = Path(os.environ.get('PGHUB_LOG_DIR', './logs'))

DEFAULT_PAGE_SIZE = _env_int('PGHUB_DEFAULT_PAGE_SIZE', 10)
MAX_PAGE_SIZE = _env_int('PGHUB_MAX_PAGE_SIZE', 100)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('PGHUB_CORS_ORIGINS', '*').split(',')
    if origin.strip()
]
