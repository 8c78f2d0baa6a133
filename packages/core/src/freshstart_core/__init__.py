"""FreshStart IL Core - Divorce document generation and guideline calculations."""

__version__ = "0.1.0"

from .calculators import calculate_child_support, calculate_spousal_maintenance
from .models import DocumentMetadata, FinancialData, PetitionData
from .packaging import build_package
from .rendering import (
    build_text_document,
    render_financial_affidavit,
    render_parenting_plan,
    render_petition,
    render_settlement_agreement,
)
from .transform import normalize_financial_responses

__all__ = [
    "DocumentMetadata",
    "FinancialData",
    "PetitionData",
    "build_package",
    "build_text_document",
    "calculate_child_support",
    "calculate_spousal_maintenance",
    "normalize_financial_responses",
    "render_financial_affidavit",
    "render_parenting_plan",
    "render_petition",
    "render_settlement_agreement",
]
