from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.health import router as health_router
from app.api.http.files import router as files_router
from app.core.config import settings
from app.db.repositories.file_record_repository import FileRecordRepository, InMemoryFileRecordRepository
from app.domains.conversion import ConverterGateway, UnconfiguredConverter

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[FileRecordRepository] = None,
    converter: Optional[ConverterGateway] = None
) -> FastAPI:
    """Build the application around the given repository and converter"""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title=settings.app_name,
        description="Stores uploaded spreadsheets and documents with their HTML and JSONL conversions",
        version="1.0.0"
    )

    # CORS for the browser frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.repository = repository if repository is not None else InMemoryFileRecordRepository()
    app.state.converter = converter if converter is not None else UnconfiguredConverter()
    if converter is None:
        logger.warning("No document converter configured; uploads will be rejected")

    app.include_router(health_router)
    app.include_router(files_router)

    @app.get("/")
    async def root():
        """Service information"""
        return {
            "message": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
