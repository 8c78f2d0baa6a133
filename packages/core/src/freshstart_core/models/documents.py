"""Document-level enumerations and rendering metadata."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DocumentKind(str, Enum):
    """Document families that have a dedicated summary renderer."""

    PETITION = "petition"
    FINANCIAL_AFFIDAVIT = "financial-affidavit"
    PARENTING_PLAN = "parenting-plan"
    MARITAL_SETTLEMENT = "marital-settlement"


DOCUMENT_TYPE_ALIASES: dict[str, DocumentKind] = {
    "petition": DocumentKind.PETITION,
    "petition-no-children": DocumentKind.PETITION,
    "petition-with-children": DocumentKind.PETITION,
    "financial-affidavit": DocumentKind.FINANCIAL_AFFIDAVIT,
    "financial_affidavit": DocumentKind.FINANCIAL_AFFIDAVIT,
    "financial_affidavit_short": DocumentKind.FINANCIAL_AFFIDAVIT,
    "parenting-plan": DocumentKind.PARENTING_PLAN,
    "parenting_plan": DocumentKind.PARENTING_PLAN,
    "marital-settlement": DocumentKind.MARITAL_SETTLEMENT,
    "marital_settlement": DocumentKind.MARITAL_SETTLEMENT,
}
"""Accepted document type spellings mapped to their renderer family."""


def resolve_document_kind(document_type: str) -> Optional[DocumentKind]:
    """Return the renderer family for a document type, or None if unknown."""
    return DOCUMENT_TYPE_ALIASES.get(document_type)


class GenerationMode(str, Enum):
    """Which rendering path the caller prefers."""

    SUMMARY = "summary"
    OFFICIAL = "official"


class DocumentStatus(str, Enum):
    READY = "ready"
    FAILED = "failed"


class MimeType(str, Enum):
    PDF = "application/pdf"
    TEXT = "text/plain"


class DocumentMetadata(BaseModel):
    """Context a renderer needs beyond the questionnaire answers.

    ``generated_at`` is injected so that two renders of the same input
    produce identical bytes.
    """

    user_name: Optional[str] = None
    user_email: Optional[str] = None
    generated_at: datetime = Field(default_factory=datetime.now)
    uploaded_prenup_documents: list[str] = Field(default_factory=list)
