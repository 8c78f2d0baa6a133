"""Strategy interfaces and data types for document generation."""

from freshstart_service.interfaces.base import (
    GenerationStrategy,
    StrategyResult,
    StrategyStatus,
)
from freshstart_service.interfaces.types import (
    DocumentSummary,
    DocumentTypeInfo,
    GenerationContext,
    GenerationOutcome,
    GenerationRequest,
    RenderedDocument,
    StrategyAttempt,
)

__all__ = [
    # Base
    "GenerationStrategy",
    "StrategyResult",
    "StrategyStatus",
    # Types
    "DocumentSummary",
    "DocumentTypeInfo",
    "GenerationContext",
    "GenerationOutcome",
    "GenerationRequest",
    "RenderedDocument",
    "StrategyAttempt",
]
