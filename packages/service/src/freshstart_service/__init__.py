"""FreshStart IL Service - Document generation orchestration and persistence."""

from freshstart_service.config import (
    DatabaseConfig,
    DocumentConfig,
    FreshStartConfig,
)
from freshstart_service.db import Database
from freshstart_service.logging import configure_logging
from freshstart_service.orchestrator import DocumentGenerationService, list_document_types
from freshstart_service.packager import PackageService

__version__ = "0.1.0"

__all__ = [
    "Database",
    "DatabaseConfig",
    "DocumentConfig",
    "DocumentGenerationService",
    "FreshStartConfig",
    "PackageService",
    "configure_logging",
    "list_document_types",
]
