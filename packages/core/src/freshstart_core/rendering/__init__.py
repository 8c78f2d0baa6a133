"""Summary PDF renderers and the plain-text fallback."""

from .affidavit import render_financial_affidavit
from .layout import PdfPage
from .parenting_plan import render_parenting_plan
from .petition import render_petition
from .settlement import render_settlement_agreement
from .text_fallback import build_text_document

__all__ = [
    "PdfPage",
    "build_text_document",
    "render_financial_affidavit",
    "render_parenting_plan",
    "render_petition",
    "render_settlement_agreement",
]
