"""Request and result types for document generation.

These models carry a generation request through validation, the strategy
chain and persistence, and describe what was produced to the caller.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from freshstart_core.models import DocumentStatus, GenerationMode, MimeType

from .base import StrategyStatus


# =============================================================================
# REQUESTS
# =============================================================================


class GenerationRequest(BaseModel):
    """A request to generate (or regenerate) one document."""

    user_id: str
    questionnaire_response_id: str = ""
    document_type: str = ""
    document_id: Optional[str] = Field(
        default=None,
        description="Existing document to overwrite instead of creating a new one",
    )
    generation_mode: GenerationMode = GenerationMode.SUMMARY
    flatten: Optional[bool] = Field(
        default=None,
        description="Mark official form fields read-only; None uses the configured default",
    )

    @field_validator("questionnaire_response_id", "document_type", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> str:
        return str(v or "").strip()

    @field_validator("document_id", mode="before")
    @classmethod
    def blank_document_id(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v).strip() or None


class GenerationContext(BaseModel):
    """Everything a strategy needs to produce a document."""

    request: GenerationRequest
    responses: dict[str, Any] = Field(default_factory=dict)
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    generated_at: datetime
    uploaded_prenup_documents: list[str] = Field(default_factory=list)
    failed_strategies: list[str] = Field(
        default_factory=list,
        description="Names of strategies that applied but failed, in order",
    )

    @property
    def is_fallback(self) -> bool:
        return bool(self.failed_strategies)


# =============================================================================
# RESULTS
# =============================================================================


class RenderedDocument(BaseModel):
    """Bytes produced by a strategy, before persistence."""

    file_name: str
    content: bytes
    mime_type: MimeType
    message: str
    is_official_form: bool = False


class StrategyAttempt(BaseModel):
    """One entry in the record of strategies tried for a request."""

    strategy: str
    status: StrategyStatus
    error: Optional[str] = None


class DocumentSummary(BaseModel):
    """Caller-facing description of a persisted document."""

    id: str
    file_name: str
    type: str
    status: DocumentStatus
    generated_at: datetime
    mime_type: MimeType
    is_official_form: bool = False
    strategy: str
    fallback: bool = False


class GenerationOutcome(BaseModel):
    """Result of a generation request."""

    document: DocumentSummary
    message: str
    created: bool = Field(
        default=True,
        description="False when an existing document was regenerated",
    )
    attempts: list[StrategyAttempt] = Field(default_factory=list)


class DocumentTypeInfo(BaseModel):
    """A generatable document type and its official form support."""

    type: str
    name: str
    supports_official_form: bool
    official_form_types: list[str] = Field(default_factory=list)
    description: str
