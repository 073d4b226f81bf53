from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from logging.handlers import RotatingFileHandler
import sys
import time

from pghub import __version__
from pghub.api import posts, users
from pghub.config.app_config import LOG_DIR, LOG_LEVEL, CORS_ORIGINS
from pghub.init_db import init_database
from pghub.utils.logging_utils import clear_logging_context, set_logging_context
from pghub.utils.uuid_helper import generate_uuid


def configure_logging():
    """Attach rotating file and console handlers to the root logger."""
    root_logger = logging.getLogger()
    if any(getattr(handler, "_pghub_handler", False) for handler in root_logger.handlers):
        return

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "pghub.log"

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    for handler in (file_handler, console_handler):
        handler._pghub_handler = True

    root_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    configure_logging()
    logger.info(f"Starting PGHub API v{__version__}")
    init_database()
    yield
    logger.info("PGHub API shut down")


app = FastAPI(
    title="PGHub API",
    description="Posts with attachments, and users",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with its ID and report its duration."""
    request_id = request.headers.get("X-Request-ID") or generate_uuid()
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        clear_logging_context()


app.include_router(posts.router, prefix="/api", tags=["posts"])
app.include_router(users.router, prefix="/api", tags=["users"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pghub.main:app", host="0.0.0.0", port=8000)
