import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from fw_drop.backend.app.api.router import api_router
from fw_drop.backend.app.core import settings
from fw_drop.backend.app.core.logging_config import setup_logging
from fw_drop.backend.app.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app():
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        # the directory itself only appears with the first upload
        logger.info("Upload directory: %s", Path(settings.UPLOAD_DIR).resolve())
        yield

    app = FastAPI(lifespan=lifespan, title="fw-drop")
    app.include_router(api_router)
    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app

app = create_app()
