"""
FastAPI Application

HTTP API server for candidate intake.
"""

import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_config
from app.db.database import get_engine, init_db, ping
from app.utils.logger import get_logger

logger = get_logger(__name__)
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Candidate Intake API",
    description="API for candidate form submission and resume upload",
    version="1.0.0",
)

# CORS middleware: with allow_credentials=True, origins cannot be "*" (must be explicit).
_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
if config.server.frontend_url:
    _cors_origins.append(config.server.frontend_url.rstrip("/"))
# Extra origins from env (comma-separated), e.g. CORS_ORIGINS=http://192.168.1.5:3000,http://10.0.0.1:3000
_extra_origins = os.getenv("CORS_ORIGINS", "")
if _extra_origins:
    for o in _extra_origins.split(","):
        o = o.strip().rstrip("/")
        if o and o not in _cors_origins:
            _cors_origins.append(o)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_init_db():
    """Create candidate tables if they are missing."""
    engine = get_engine(config)
    try:
        init_db(engine)
        logger.info(f"[API] Database ready: {engine.url.render_as_string(hide_password=True)}")
    except Exception as e:
        logger.warning(f"[API] Table creation skipped: {e}")


@app.get("/health")
async def health():
    """Liveness probe: returns 200 if the process is running."""
    return {"status": "ok"}


@app.get("/ready")
async def ready():
    """Readiness probe: returns 200 if the app can serve traffic (e.g. DB reachable)."""
    try:
        ping(get_engine(config))
        return {"status": "ready"}
    except Exception as e:
        logger.warning(f"[API] Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Service not ready")
