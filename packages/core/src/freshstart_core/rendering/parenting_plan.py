"""Parenting plan summary PDF (750 ILCS 5/602.10).

Questionnaire answers are enumerated codes (``week_on_off``, ``parent1``);
the label tables below turn them into display text. A code with no label
prints as-is.
"""

from collections.abc import Callable
from typing import Optional

from ..formatting import capitalize, format_timestamp
from ..models import DocumentMetadata
from ..responses import QuestionnaireResponses, ResponseReader
from .layout import FOOTER_SPACE, HELVETICA, LIGHT_GREY, PdfPage, draw_disclaimer_footer, wrap_chars

# Signature heading down to the second role line.
SIGNATURES_HEIGHT = 118
FOOTER_GAP = 40

DISCLAIMER_LINES = (
    "DISCLAIMER: This document is generated for informational purposes only.",
    "This is not legal advice. Consult with an attorney before filing with the court.",
)

AUTHORITY_LABELS = {"parent1": "Parent 1", "parent2": "Parent 2", "joint": "Joint"}

PARENT_LABELS = {
    "parent1": "Parent 1",
    "parent2": "Parent 2",
    "both": "Both Parents",
    "alternating": "Alternating",
}

COMMUNICATION_LABELS = {
    "email": "Email",
    "text": "Text Message",
    "phone": "Phone Call",
    "app": "Co-parenting App (OurFamilyWizard, TalkingParents)",
    "in_person": "In Person",
}

SCHEDULE_LABELS = {
    "standard": "Standard - Every other weekend with one parent",
    "week_on_off": "50/50 - Week on/week off",
    "2_2_3": "50/50 - 2-2-3 rotation",
    "3_4_4_3": "50/50 - 3-4-4-3 rotation",
    "60_40": "60/40 split",
    "custom": "Custom schedule",
}

EXCHANGE_TIME_LABELS = {
    "friday_school": "Friday after school",
    "friday_6pm": "Friday at 6:00 PM",
    "saturday_morning": "Saturday morning",
    "sunday_6pm": "Sunday at 6:00 PM",
    "monday_school": "Monday morning (drop at school)",
}

HOLIDAY_LABELS = {
    "alternate": "Alternate years (odd/even)",
    "split": "Split each holiday",
    "specific": "Specific holidays to each parent",
}

BIRTHDAY_LABELS = {
    "alternate": "Alternate years",
    "split": "Split the day",
    "together": "Celebrate with both parents together",
    "separate": "Each parent celebrates separately",
}

BREAK_LABELS = {
    "alternate": "Alternate years",
    "split": "Split (first half/second half)",
    "regular": "Follow regular schedule",
}

SUMMER_LABELS = {
    "regular": "Continue regular schedule",
    "extended": "Extended time with non-custodial parent",
    "fifty_fifty": "50/50 split (2 weeks each alternating)",
    "custom": "Custom arrangement",
}

RESPONSE_TIME_LABELS = {
    "24_hours": "Within 24 hours",
    "48_hours": "Within 48 hours",
    "72_hours": "Within 72 hours",
}

CONTACT_FREQUENCY_LABELS = {
    "daily": "Daily",
    "every_other_day": "Every other day",
    "twice_weekly": "Twice per week",
    "reasonable": "As reasonable",
}

EXCHANGE_LOCATION_LABELS = {
    "parent1_home": "Parent 1's residence",
    "parent2_home": "Parent 2's residence",
    "school": "School (drop off/pick up)",
    "public": "Public location (police station, restaurant)",
    "midpoint": "Midpoint between homes",
}

TRANSPORTATION_LABELS = {
    "receiving": "Receiving parent picks up",
    "sending": "Sending parent drops off",
    "split": "Split - each drives one way",
}

PARTNER_INTRO_LABELS = {
    "none": "No restrictions",
    "3_months": "After 3 months of dating",
    "6_months": "After 6 months of dating",
    "committed": "Not until engaged/committed",
}


def label(table: dict[str, str]) -> Callable[[str], str]:
    """Build a formatter that maps a code through ``table``."""
    return lambda value: table.get(value, value)


def format_parent(value: str) -> str:
    return PARENT_LABELS.get(value, value or "Not specified")


def _yes_no(value: str) -> str:
    return "Yes" if value == "yes" else "No"


Row = tuple[str, str, Callable[[str], str]]

DECISION_ROWS: tuple[Row, ...] = (
    ("Education Decisions", "education-authority", label(AUTHORITY_LABELS)),
    ("Healthcare Decisions", "healthcare-authority", label(AUTHORITY_LABELS)),
    ("Religious Decisions", "religious-authority", label(AUTHORITY_LABELS)),
    ("Extracurricular Activities", "extracurricular-authority", label(AUTHORITY_LABELS)),
)

SCHEDULE_ROWS: tuple[Row, ...] = (
    ("Schedule Type", "schedule-type", label(SCHEDULE_LABELS)),
    ("Primary Residential Parent", "primary-residence", format_parent),
    ("School Nights (Mon-Thu)", "weekday-parent", format_parent),
    ("Weekends Start", "weekend-exchange-day", label(EXCHANGE_TIME_LABELS)),
    ("Weekends End", "weekend-return-day", label(EXCHANGE_TIME_LABELS)),
)

HOLIDAY_ROWS: tuple[Row, ...] = (
    ("General Approach", "holiday-approach", label(HOLIDAY_LABELS)),
    ("Thanksgiving (Odd Years)", "thanksgiving-odd-years", format_parent),
    ("Christmas Eve (Odd Years)", "christmas-eve-odd-years", format_parent),
    ("Christmas Day (Odd Years)", "christmas-day-odd-years", format_parent),
    (
        "Mother's Day",
        "mothers-day",
        lambda v: "Always with Mother" if v == "mother" else "Follow Regular Schedule",
    ),
    (
        "Father's Day",
        "fathers-day",
        lambda v: "Always with Father" if v == "father" else "Follow Regular Schedule",
    ),
    ("Children's Birthdays", "child-birthday", label(BIRTHDAY_LABELS)),
    ("Spring Break", "spring-break", label(BREAK_LABELS)),
)

SUMMER_ROWS: tuple[Row, ...] = (
    ("Approach", "summer-approach", label(SUMMER_LABELS)),
    ("Vacation Weeks Per Parent", "summer-vacation-weeks", str),
    ("Vacation Notice Required", "vacation-notice-days", lambda v: f"{v} days"),
)

COMMUNICATION_ROWS: tuple[Row, ...] = (
    ("Primary Method", "communication-method", label(COMMUNICATION_LABELS)),
    ("Expected Response Time", "response-time", label(RESPONSE_TIME_LABELS)),
)

TRANSPORTATION_ROWS: tuple[Row, ...] = (
    ("Exchange Location", "exchange-location", label(EXCHANGE_LOCATION_LABELS)),
    ("Transportation", "transportation-responsibility", label(TRANSPORTATION_LABELS)),
    ("Grace Period", "exchange-time-flexibility", lambda v: f"{v} minutes"),
)


class ParentingPlanRenderer:
    """Lay out the parenting plan section by section."""

    def __init__(
        self,
        responses: QuestionnaireResponses,
        metadata: DocumentMetadata,
        *,
        compress: bool = False,
    ) -> None:
        self.reader = ResponseReader(responses)
        self.metadata = metadata
        self.generated = format_timestamp(metadata.generated_at)
        self.page = PdfPage("Parenting Plan", fonts=HELVETICA, top=750, compress=compress)

    def _line(self, text: str, x: float = 50) -> None:
        self.page.ensure_space()
        self.page.text(text, x)
        self.page.newline()

    def _heading(self, title: str, min_space: Optional[float] = None) -> None:
        if min_space is not None:
            self.page.ensure_space(min_space)
        self.page.reserve(20 + self.page.line_height)
        self.page.text(title, 50, style="bold", size=12)
        self.page.down(20)

    def _rows(self, rows: tuple[Row, ...]) -> None:
        for caption, field, formatter in rows:
            value = self.reader.text(field)
            if value:
                self._line(f"{caption}: {formatter(value)}")

    def _header(self) -> None:
        page = self.page
        page.text("PARENTING PLAN", 50, style="bold", size=16)
        page.down(20)
        page.text("State of Illinois", 50)
        page.down(30)

        self._heading("PETITIONER INFORMATION")
        self._line(f"Name: {self.metadata.user_name or 'N/A'}")
        self._line(f"Email: {self.metadata.user_email or ''}")
        page.text(f"Generated: {self.generated}", 50)
        page.down(30)

    def _children(self) -> None:
        reader = self.reader
        first_child = reader.text("child-1-name")
        if not first_child:
            return
        self._heading("CHILDREN")
        self.page.text(f"Number of Children: {reader.text('children-count') or 1}", 50)
        self.page.newline(5)

        self._line(f"Child 1: {first_child}")
        for caption, field in (
            ("Date of Birth", "child-1-dob"),
            ("School", "child-1-school"),
            ("Special Needs", "child-1-special-needs"),
        ):
            if reader.text(field):
                self._line(f"   {caption}: {reader.text(field)}")

        for number in (2, 3):
            name = reader.text(f"child-{number}-name")
            if not name:
                continue
            self.page.down(5)
            self._line(f"Child {number}: {name}")
            dob = reader.text(f"child-{number}-dob")
            if dob:
                self._line(f"   Date of Birth: {dob}")
        self.page.down(20)

    def _schedule(self) -> None:
        self._heading("REGULAR PARENTING SCHEDULE", 200)
        self._rows(SCHEDULE_ROWS)
        midweek_day = self.reader.text("midweek-visit-day")
        if self.reader.text("midweek-visit") == "yes" and midweek_day:
            self._line(f"Midweek Visit: {capitalize(midweek_day)}")
        self.page.down(20)

    def _communication(self) -> None:
        self._heading("COMMUNICATION PROTOCOLS", 150)
        self._rows(COMMUNICATION_ROWS)
        phone_contact = self.reader.text("child-phone-contact")
        if phone_contact:
            self._line(f"Child Phone/Video Contact: {_yes_no(phone_contact)}")
            frequency = self.reader.text("phone-contact-frequency")
            if phone_contact == "yes" and frequency:
                self._line(f"   Frequency: {CONTACT_FREQUENCY_LABELS.get(frequency, frequency)}")
        self.page.down(20)

    def _provisions(self) -> None:
        reader = self.reader
        self._heading("ADDITIONAL PROVISIONS", 150)
        refusal = reader.text("right-of-first-refusal")
        if refusal:
            self._line(f"Right of First Refusal: {_yes_no(refusal)}")
            hours = reader.text("refusal-hours")
            if refusal == "yes" and hours:
                self._line(f"   Applies after: {hours} hours")
        relocation = reader.text("relocation-notice")
        if relocation:
            self._line(f"Relocation Notice Required: {relocation} days")
        partners = reader.text("introduce-partners")
        if partners:
            self._line(f"New Partner Introduction: {PARTNER_INTRO_LABELS.get(partners, partners)}")

        notes = reader.text("additional-notes")
        if notes:
            self.page.down(10)
            self._line("Additional Notes:")
            for line in wrap_chars(notes, 80):
                self._line(line, 70)

    def _signatures(self) -> None:
        page = self.page
        page.reserve(SIGNATURES_HEIGHT)
        page.down(30)
        page.text("SIGNATURES", 50, style="bold", size=12)
        page.down(30)
        for index, role in enumerate(("Parent 1 (Petitioner)", "Parent 2 (Respondent)")):
            if index:
                page.down(30)
            page.line(50, 250, offset=0)
            page.newline()
            page.text(role, 50)
            page.text("Date: _______________", 300)

    def render(self) -> bytes:
        self._header()
        self._children()

        self._heading("DECISION-MAKING AUTHORITY")
        self._rows(DECISION_ROWS)
        self.page.down(20)

        self._schedule()

        self._heading("HOLIDAY SCHEDULE", 200)
        self._rows(HOLIDAY_ROWS)
        self.page.down(20)

        self._heading("SUMMER VACATION SCHEDULE", 150)
        self._rows(SUMMER_ROWS)
        self.page.down(20)

        self._communication()

        self._heading("TRANSPORTATION & EXCHANGES", 150)
        self._rows(TRANSPORTATION_ROWS)
        self.page.down(20)

        self._provisions()
        self._signatures()

        self.page.ensure_space(FOOTER_SPACE + FOOTER_GAP)
        self.page.down(FOOTER_GAP)
        self.page.line(offset=10, color=LIGHT_GREY)
        draw_disclaimer_footer(self.page, DISCLAIMER_LINES, self.generated)
        return self.page.finish()


def render_parenting_plan(
    responses: QuestionnaireResponses,
    metadata: Optional[DocumentMetadata] = None,
    *,
    compress: bool = False,
) -> bytes:
    """Render a parenting plan from raw parenting questionnaire responses."""
    return ParentingPlanRenderer(
        responses, metadata or DocumentMetadata(), compress=compress
    ).render()
