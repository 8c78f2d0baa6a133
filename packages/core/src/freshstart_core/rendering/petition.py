"""Petition for Dissolution of Marriage summary PDF.

Produces the court caption, numbered allegations, prayer for relief,
signature block and the 735 ILCS 5/1-109 verification.
"""

from typing import Optional

from ..formatting import (
    NAME_PLACEHOLDER,
    display_county,
    format_long_date,
    format_timestamp,
)
from ..models import DocumentMetadata, PetitionData
from .layout import TIMES, PdfPage, draw_disclaimer_footer

PAGE_BREAK_AT = 80
SIGNATURE_HEIGHT = 105
VERIFICATION_HEIGHT = 162

DISCLAIMER_LINES = (
    "DISCLAIMER: This document was generated by FreshStart IL for informational purposes only.",
    "This is not legal advice. Please consult with an attorney before filing with the court.",
)

IRRECONCILABLE_GROUNDS = (
    "Irreconcilable differences have caused the irretrievable breakdown of the",
    "marriage. The parties have lived separate and apart for a continuous period",
    "of approximately {months} months. Efforts at reconciliation have failed or",
    "future attempts at reconciliation would be impracticable and not in the best",
    "interests of the family.",
)

VERIFICATION_TEXT = (
    "Under penalties as provided by law pursuant to Section 1-109 of the Code",
    "of Civil Procedure, the undersigned certifies that the statements set forth",
    "in this instrument are true and correct, except as to matters therein stated",
    "to be on information and belief and as to such matters the undersigned",
    "certifies as aforesaid that the undersigned verily believes the same to be true.",
)

PRAYER = (
    ("A.", "Enter a Judgment dissolving the marriage between the parties;"),
    ("B.", "Divide the marital property equitably between the parties;"),
    ("C.", "Award such other and further relief as the Court deems just and proper."),
)


class PetitionRenderer:
    """Lay out one petition. Paragraph numbers are assigned in order."""

    def __init__(self, data: PetitionData, metadata: DocumentMetadata, *, compress: bool = False):
        self.data = data
        self.metadata = metadata
        self.page = PdfPage(
            "Petition for Dissolution of Marriage",
            fonts=TIMES,
            font_size=11,
            top=740,
            bottom_margin=PAGE_BREAK_AT,
            compress=compress,
        )
        self.county = display_county(data.petitioner_county)
        self.petitioner = (
            f"{data.petitioner_first_name or NAME_PLACEHOLDER} "
            f"{data.petitioner_last_name or NAME_PLACEHOLDER}"
        )
        self.respondent = (
            f"{data.spouse_first_name or NAME_PLACEHOLDER} "
            f"{data.spouse_last_name or NAME_PLACEHOLDER}"
        )
        self._paragraph = 0

    def _paragraph_lines(self, lines: tuple[str, ...], *, heading: Optional[str] = None) -> None:
        page = self.page
        body_lines = len(lines) + (1 if heading else 0)
        page.reserve(max(body_lines - 1, 0) * page.line_height)
        self._paragraph += 1
        page.text(f"{self._paragraph}.", 50, style="bold")
        if heading:
            page.text(heading, 70, style="bold")
            page.newline()
        for index, line in enumerate(lines):
            if index:
                page.newline()
            page.text(line, 70)

    def _header(self) -> None:
        page = self.page
        county_upper = self.county.upper()
        page.text("IN THE CIRCUIT COURT OF THE", style="bold", size=12, centered=True)
        page.newline(2)
        page.text(f"{county_upper} JUDICIAL CIRCUIT", style="bold", size=12, centered=True)
        page.newline(2)
        page.text(f"{county_upper} COUNTY, ILLINOIS", style="bold", size=12, centered=True)
        page.newline(15)

    def _caption(self) -> None:
        page = self.page
        page.text("In re the Marriage of:", 50, style="italic")
        page.newline(10)

        page.text(self.petitioner.upper(), 50, style="bold")
        page.newline()
        page.text("Petitioner,", 100)
        page.newline(5)

        page.text("and", 50)
        page.newline(5)

        page.text(self.respondent.upper(), 50, style="bold")
        page.newline()
        page.text("Respondent.", 100)
        page.newline(5)

        page.text("Case No.: _______________", 400, y=page.y + 60)

        page.down(10)
        page.line()
        page.down(20)

        page.text("PETITION FOR DISSOLUTION OF MARRIAGE", style="bold", size=14, centered=True)
        page.newline(15)

        page.text(f"NOW COMES the Petitioner, {self.petitioner}, and states as follows:", 50)
        page.newline(15)

    def _allegations(self) -> None:
        page = self.page
        data = self.data

        self._paragraph_lines((
            "RESIDENCY: Petitioner has been a resident of the State of Illinois for at",
            "least 90 days prior to the filing of this petition. Petitioner has resided in",
            f"{self.county} County for approximately "
            f"{data.residency_duration_months or '___'} months.",
        ))
        page.newline(10)
        page.ensure_space()

        self._paragraph_lines((
            f"MARRIAGE: The parties were married on {format_long_date(data.marriage_date)}.",
        ))
        page.newline(10)

        self._paragraph_lines((
            "SEPARATION: The parties separated on or about "
            f"{format_long_date(data.separation_date)}.",
        ))
        page.newline(10)
        page.ensure_space()

        if data.grounds_type == "irreconcilable":
            months = data.irreconcilable_duration or "___"
            grounds = tuple(line.format(months=months) for line in IRRECONCILABLE_GROUNDS)
        else:
            grounds = (f"[Grounds: {data.grounds_type or 'Not specified'}]",)
        self._paragraph_lines(grounds, heading="GROUNDS FOR DISSOLUTION:")
        page.newline(10)
        page.ensure_space()

        page.reserve(2 * page.line_height)
        self._paragraph_lines((), heading="CHILDREN:")
        if data.has_children:
            page.text("There are minor children born or adopted of this marriage.", 70)
            page.newline()
            page.text("[Child information to be provided in separate filing]", 70, style="italic")
        else:
            page.text("There are no minor children born or adopted of this marriage.", 70)
        page.newline(10)
        page.ensure_space()

        self._paragraph_lines((
            "PROPERTY: The parties have acquired property during the marriage which",
            "should be divided equitably between the parties.",
        ))
        page.newline(10)

        self._paragraph_lines((
            "OTHER PROCEEDINGS: To the best of Petitioner's knowledge, no other",
            "action for dissolution, legal separation, or declaration of invalidity of",
            "marriage is pending in any court.",
        ))
        page.newline(15)
        page.ensure_space()

    def _prayer(self) -> None:
        page = self.page
        page.reserve(page.line_height + 5 + (len(PRAYER) - 1) * page.line_height)
        page.text("WHEREFORE, Petitioner prays that this Court:", 50, style="bold")
        page.newline(5)
        for letter_label, text in PRAYER:
            page.text(letter_label, 70, style="bold")
            page.text(text, 90)
            page.newline()
        page.down(20)
        page.ensure_space()

    def _signature(self) -> None:
        page = self.page
        page.reserve(SIGNATURE_HEIGHT)
        page.text("Respectfully submitted,", 50)
        page.newline(30)
        page.line(50, 250)
        page.newline()
        page.text(self.petitioner, 50)
        page.newline()
        page.text("Petitioner, Pro Se", 50, style="italic")
        page.newline(5)
        page.text(self.data.petitioner_address or "___________________________", 50)
        page.newline()
        page.text(f"{self.county} County, Illinois", 50)
        page.newline(20)

    def _verification(self) -> None:
        page = self.page
        page.reserve(VERIFICATION_HEIGHT)
        page.line()
        page.down(15)
        page.text("VERIFICATION", style="bold", size=12, centered=True)
        page.newline(10)
        for index, line in enumerate(VERIFICATION_TEXT):
            if index:
                page.newline()
            page.text(line, 50)
        page.newline(20)
        page.line(50, 250)
        page.newline()
        page.text("Petitioner Signature", 50, style="italic", size=9)
        page.newline(5)
        page.text("Date: _______________", 50)
        page.newline(20)

    def render(self) -> bytes:
        self._header()
        self._caption()
        self._allegations()
        self._prayer()
        self._signature()
        self._verification()
        draw_disclaimer_footer(
            self.page,
            DISCLAIMER_LINES,
            format_timestamp(self.metadata.generated_at),
            at_bottom=True,
        )
        return self.page.finish()


def render_petition(
    data: PetitionData,
    metadata: Optional[DocumentMetadata] = None,
    *,
    compress: bool = False,
) -> bytes:
    """Render a Petition for Dissolution of Marriage."""
    return PetitionRenderer(data, metadata or DocumentMetadata(), compress=compress).render()
