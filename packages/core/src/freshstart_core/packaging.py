"""Bundle generated documents into a downloadable ZIP package.

The archive holds every ready document under ``documents/`` plus three
generated text files: a cover sheet, county-aware filing instructions and
a filing checklist. A document whose content cannot be decoded is skipped
with a warning rather than failing the whole package.
"""

import base64
import binascii
import io
import zipfile
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Optional

import structlog
from pydantic import BaseModel, Field

from .counties import county_instructions, get_county
from .exceptions import PackagingError
from .formatting import format_full_date, format_short_date, humanize_key
from .models import MimeType

logger = structlog.get_logger()

WIDTH = 70
HEAVY_RULE = "═" * WIDTH
LIGHT_RULE = "─" * WIDTH
STEP_RULE = "─" * 35
COMPRESS_LEVEL = 6

COVER_SHEET_NAME = "00_COVER_SHEET.txt"
INSTRUCTIONS_NAME = "01_FILING_INSTRUCTIONS.txt"
CHECKLIST_NAME = "02_FILING_CHECKLIST.txt"

NO_DOCUMENTS_MESSAGE = "No documents found. Please generate documents first."

DISCLAIMER_TEXT = (
    "DISCLAIMER: This document was prepared using FreshStart IL, a document preparation "
    "service. FreshStart IL is not a law firm and does not provide legal advice. This "
    "document is provided for informational purposes only. Users should review all "
    "documents carefully and consult with an attorney before filing with the court. "
    "Court requirements may vary by county."
)

DOCUMENT_TYPE_NAMES = {
    "petition": "Petition for Dissolution of Marriage",
    "petition-no-children": "Petition for Dissolution (No Children)",
    "petition-with-children": "Petition for Dissolution (With Children)",
    "financial-affidavit": "Financial Affidavit",
    "financial_affidavit": "Financial Affidavit",
    "parenting-plan": "Parenting Plan",
    "parenting_plan": "Parenting Plan",
    "marital-settlement": "Marital Settlement Agreement",
    "marital_settlement": "Marital Settlement Agreement",
}

CHECKLIST_ITEMS: tuple[tuple[frozenset[str], tuple[str, ...]], ...] = (
    (
        frozenset({"petition", "petition-no-children", "petition-with-children"}),
        ("[ ] Petition for Dissolution of Marriage", "[ ] Summons"),
    ),
    (
        frozenset({"financial-affidavit", "financial_affidavit"}),
        ("[ ] Financial Affidavit", "[ ] Supporting schedules (if applicable)"),
    ),
    (
        frozenset({"parenting-plan", "parenting_plan"}),
        ("[ ] Parenting Plan", "[ ] Parenting education certificate (if required)"),
    ),
    (
        frozenset({"marital-settlement", "marital_settlement"}),
        ("[ ] Marital Settlement Agreement",),
    ),
)


class PackageDocument(BaseModel):
    """A stored document as the packager sees it."""

    file_name: str
    type: str
    content: Optional[str] = None
    mime_type: str = MimeType.PDF.value
    generated_at: datetime


class DocumentPackage(BaseModel):
    """A built archive and what went into it."""

    file_name: str
    content: bytes
    included: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


def format_document_type(document_type: str) -> str:
    """Display name for a stored document type."""
    return DOCUMENT_TYPE_NAMES.get(document_type) or humanize_key(document_type)


def decode_content(document: PackageDocument) -> bytes:
    """Raw file bytes for a stored document.

    Raises:
        ValueError: If the content is empty or not valid base64 for a PDF.
    """
    if not document.content:
        raise ValueError("no content")
    if document.mime_type == MimeType.PDF.value:
        try:
            return base64.b64decode(document.content, validate=True)
        except binascii.Error as e:
            raise ValueError(f"invalid base64 content: {e}") from e
    return document.content.encode("utf-8")


# =============================================================================
# TEXT ARTIFACTS
# =============================================================================

def build_cover_sheet(
    *,
    user_name: str,
    user_email: str,
    documents: Sequence[PackageDocument],
    created_at: datetime,
    county: Optional[str] = None,
) -> str:
    lines = [
        HEAVY_RULE,
        "                    FRESHSTART IL DOCUMENT PACKAGE",
        HEAVY_RULE,
        "",
        f"Prepared for: {user_name}",
        f"Email: {user_email}",
        f"Package Created: {format_full_date(created_at)}",
    ]
    if county:
        info = get_county(county)
        lines.append(f"Filing County: {info.name if info else county}")
    lines.extend([
        "",
        LIGHT_RULE,
        "                         DOCUMENTS INCLUDED",
        LIGHT_RULE,
        "",
    ])
    for number, document in enumerate(documents, start=1):
        lines.append(f"  {number}. {format_document_type(document.type)}")
        lines.append(f"     File: {document.file_name}")
        lines.append(f"     Generated: {format_short_date(document.generated_at)}")
        lines.append("")
    lines.extend([
        LIGHT_RULE,
        "                         IMPORTANT NOTES",
        LIGHT_RULE,
        "",
        "  1. Review all documents carefully before filing",
        "  2. Sign documents where indicated",
        "  3. Make copies for your records",
        "  4. Check county-specific requirements",
        "  5. Pay required filing fees",
        "",
        LIGHT_RULE,
        "                           DISCLAIMER",
        LIGHT_RULE,
        "",
        DISCLAIMER_TEXT,
        "",
        HEAVY_RULE,
    ])
    return "\n".join(lines)


def _court_details(county_id: Optional[str]) -> list[str]:
    county = get_county(county_id)
    if county is None:
        return [
            "  - Contact your local circuit court clerk for specific",
            "    filing procedures and fees",
            "  - Most Illinois counties require e-filing",
            "  - Standard petition filing fee is approximately $337",
        ]

    lines = [
        f"  County: {county.name}",
        f"  Court: {county.full_name}",
        f"  Address: {county.court_address}",
        f"           {county.court_city}, IL {county.court_zip}",
    ]
    if county.court_phone:
        lines.append(f"  Phone: {county.court_phone}")
    lines.append("")
    if county.e_filing_required:
        lines.append("  *** E-FILING IS REQUIRED ***")
        if county.e_filing_url:
            lines.append(f"  E-Filing Portal: {county.e_filing_url}")
    lines.append("")
    lines.append("  Filing Fees:")
    lines.append(f"    Petition: ${county.fees.petition_filing}")
    lines.append(f"    Response: ${county.fees.response_filing}")
    if county.fees.fee_waiver_available:
        lines.append("    Fee Waiver: Available if you qualify")

    requirements = county_instructions(county_id)
    if requirements:
        lines.append("")
        lines.append("  County-Specific Requirements:")
        lines.extend(f"    - {item}" for item in requirements)
    return lines


def build_filing_instructions(county: Optional[str] = None) -> str:
    lines = [
        HEAVY_RULE,
        "                      FILING INSTRUCTIONS",
        HEAVY_RULE,
        "",
        "STEP 1: REVIEW YOUR DOCUMENTS",
        STEP_RULE,
        "  - Read through each document carefully",
        "  - Verify all names, dates, and addresses are correct",
        "  - Ensure all required information is complete",
        "  - Make any necessary corrections BEFORE filing",
        "",
        "STEP 2: SIGN YOUR DOCUMENTS",
        STEP_RULE,
        "  - Sign and date documents where indicated",
        "  - Some documents may require notarization",
        "  - Do NOT sign the Summons (the clerk will do this)",
        "",
        "STEP 3: MAKE COPIES",
        STEP_RULE,
        "  - Original: File with the court",
        "  - Copy 1: For your spouse (to be served)",
        "  - Copy 2: For your records",
        "",
        "STEP 4: FILE WITH THE COURT",
        STEP_RULE,
    ]
    lines.extend(_court_details(county))
    lines.extend([
        "",
        "STEP 5: SERVE YOUR SPOUSE",
        STEP_RULE,
        "  After filing, your spouse must be officially served:",
        "  - Sheriff service (most common)",
        "  - Special process server",
        "  - Waiver of service (if spouse agrees)",
        "",
        "STEP 6: ATTEND COURT DATES",
        STEP_RULE,
        "  - Keep track of all court dates",
        "  - Arrive early and dress appropriately",
        "  - Bring copies of all filed documents",
        "",
        HEAVY_RULE,
        "",
        "For more information, visit our E-Filing Guide at:",
        "https://freshstart-il.com/dashboard/efiling",
        "",
        HEAVY_RULE,
    ])
    return "\n".join(lines)


def build_checklist(document_types: Iterable[str]) -> str:
    present = set(document_types)
    lines = [
        HEAVY_RULE,
        "                        FILING CHECKLIST",
        HEAVY_RULE,
        "",
        "Use this checklist to ensure you have completed all necessary steps.",
        "",
        "BEFORE FILING:",
        STEP_RULE,
        "[ ] All questionnaires completed",
        "[ ] All documents generated",
        "[ ] Documents reviewed for accuracy",
        "[ ] Documents signed where required",
        "[ ] Made copies (original + 2 copies)",
        "",
        "DOCUMENTS TO FILE:",
        STEP_RULE,
    ]
    for types, items in CHECKLIST_ITEMS:
        if present & types:
            lines.extend(items)
    lines.extend([
        "",
        "AT THE COURTHOUSE / E-FILING:",
        STEP_RULE,
        "[ ] Pay filing fee (or submit fee waiver)",
        "[ ] Receive case number",
        "[ ] Get file-stamped copies",
        "[ ] Schedule service on spouse",
        "",
        "AFTER FILING:",
        STEP_RULE,
        "[ ] Serve spouse with papers",
        "[ ] File proof of service",
        "[ ] Calendar court dates",
        "[ ] Prepare for hearing/trial",
        "",
        HEAVY_RULE,
        "",
        "Questions? Visit https://freshstart-il.com/legal-info/faq",
        "",
    ])
    return "\n".join(lines)


# =============================================================================
# ARCHIVE
# =============================================================================

def package_file_name(created_at: datetime) -> str:
    return f"FreshStart_IL_Documents_{created_at:%Y-%m-%d}.zip"


def _write(archive: zipfile.ZipFile, name: str, data: bytes, created_at: datetime) -> None:
    info = zipfile.ZipInfo(name, date_time=created_at.timetuple()[:6])
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    archive.writestr(info, data, compresslevel=COMPRESS_LEVEL)


def build_package(
    documents: Sequence[PackageDocument],
    *,
    user_name: str = "User",
    user_email: str = "",
    county: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> DocumentPackage:
    """Build the ZIP package for a user's ready documents.

    Args:
        documents: Ready documents, newest first.
        user_name: Name printed on the cover sheet.
        user_email: Email printed on the cover sheet.
        county: Filing county id, used for court details.
        created_at: Package timestamp; also stamped on every archive entry.

    Raises:
        PackagingError: If ``documents`` is empty.
    """
    if not documents:
        raise PackagingError(NO_DOCUMENTS_MESSAGE)
    created_at = created_at or datetime.now()

    buffer = io.BytesIO()
    included: list[PackageDocument] = []
    skipped: list[str] = []
    names: set[str] = set()

    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for document in documents:
            if document.file_name in names:
                logger.warning("package_entry_skipped", file_name=document.file_name, reason="duplicate name")
                skipped.append(document.file_name)
                continue
            try:
                data = decode_content(document)
            except ValueError as e:
                logger.warning("package_entry_skipped", file_name=document.file_name, reason=str(e))
                skipped.append(document.file_name)
                continue
            _write(archive, f"documents/{document.file_name}", data, created_at)
            names.add(document.file_name)
            included.append(document)

        cover = build_cover_sheet(
            user_name=user_name,
            user_email=user_email,
            documents=included,
            created_at=created_at,
            county=county,
        )
        _write(archive, COVER_SHEET_NAME, cover.encode("utf-8"), created_at)
        _write(archive, INSTRUCTIONS_NAME, build_filing_instructions(county).encode("utf-8"), created_at)
        checklist = build_checklist(document.type for document in documents)
        _write(archive, CHECKLIST_NAME, checklist.encode("utf-8"), created_at)

    logger.info(
        "document_package_built",
        included=len(included),
        skipped=len(skipped),
        size=buffer.tell(),
    )
    return DocumentPackage(
        file_name=package_file_name(created_at),
        content=buffer.getvalue(),
        included=[document.file_name for document in included],
        skipped=skipped,
    )
