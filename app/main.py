"""
Application entrypoint.

Re-exports the FastAPI `app` instance from `app.api.main` with logging
configured and the feature routers registered.
"""

from app.api.main import app  # noqa: F401
from app.utils.logger import get_logger, setup_logging
from app.config import get_config

config = get_config()
setup_logging(config)
logger = get_logger(__name__)

from app.api import candidates as candidates_api  # noqa: E402
from app.api import resume as resume_api  # noqa: E402

app.include_router(candidates_api.router)
app.include_router(resume_api.router)
