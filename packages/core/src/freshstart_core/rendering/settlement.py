"""Marital Settlement Agreement summary PDF.

Each section is assembled as a list of sentences from the questionnaire
answers, then drawn as an auto-numbered paragraph with word wrapping.
Sections whose answers are missing still print their heading so the
parties can see which terms remain open.
"""

from decimal import Decimal
from typing import Any, Optional

from ..formatting import SIGNATURE_NAME_PLACEHOLDER, format_currency, format_long_date, format_timestamp
from ..models import DocumentMetadata
from ..responses import QuestionnaireResponses, ResponseReader
from .layout import TIMES, PdfPage, draw_disclaimer_footer

PAGE_BREAK_AT = 80
WRAP_WIDTH = 480
# Witness line down to the respondent's "Date:" line.
SIGNATURES_HEIGHT = 182

DISCLAIMER_LINES = (
    "DISCLAIMER: This document was generated by FreshStart IL for informational purposes only.",
    "This is not legal advice. Please consult with an attorney before signing or filing with the court.",
)

GENERAL_PROVISIONS = [
    "This Agreement constitutes the entire agreement between the Parties and supersedes all prior negotiations and agreements.",
    "This Agreement may only be modified by written agreement signed by both Parties.",
    "Each party acknowledges that they have had the opportunity to consult with independent legal counsel before signing this Agreement.",
    "Both Parties agree to execute any documents necessary to effectuate the terms of this Agreement.",
]

PRENUP_TYPE_TEXT = {"prenup": "prenuptial", "postnup": "postnuptial"}

PRE_MARITAL_RULES = {
    "each_keeps_own": "Each party retains property owned before marriage",
    "some_shared": "Some pre-marital property is shared or split",
}
MARITAL_RULES = {
    "each_keeps_own": "Each party keeps property in their own name",
    "mixed": "Some property is shared/split, others are separate",
}
DEBT_RULES = {"each_keeps_own": "Each party is responsible for debts in their own name"}
MAINTENANCE_TERMS = {
    "waiver": "The prenuptial/postnuptial agreement provides for a waiver of spousal maintenance.",
    "formula_or_amount": "The prenuptial/postnuptial agreement sets specific terms for spousal maintenance.",
    "refer_to_law": "The prenuptial/postnuptial agreement leaves maintenance to Illinois law and court decisions.",
}
UNSETTLED_RULES = {"not_sure", "not_addressed"}

HOME_DISPOSITIONS = {
    "petitioner_keeps": (
        "Petitioner shall retain the marital home. Petitioner shall be solely responsible for "
        "the mortgage and shall hold Respondent harmless from any obligations related to the property."
    ),
    "respondent_keeps": (
        "Respondent shall retain the marital home. Respondent shall be solely responsible for "
        "the mortgage and shall hold Petitioner harmless from any obligations related to the property."
    ),
    "sell_split": (
        "The marital home shall be listed for sale within 90 days. The net proceeds (after payment "
        "of mortgage, closing costs, and realtor fees) shall be divided equally (50/50) between the Parties."
    ),
}

JOINT_SPLITS = {
    "fifty_fifty": "equally (50/50)",
    "sixty_forty_p": "60% to Petitioner, 40% to Respondent",
    "sixty_forty_r": "40% to Petitioner, 60% to Respondent",
}

RETIREMENT_DIVISIONS = {
    "keep_own": "Each party shall retain their own retirement accounts without division.",
    "qdro_split": (
        "Retirement accounts acquired during the marriage shall be divided equally via "
        "Qualified Domestic Relations Order (QDRO)."
    ),
    "offset": "Retirement account values shall be offset against other marital assets.",
}

HEALTH_INSURANCE = {
    "petitioner": "Petitioner shall provide health insurance for the minor children.",
    "respondent": "Respondent shall provide health insurance for the minor children.",
    "both": "The Parties shall share the cost of health insurance for the minor children.",
}

ATTORNEY_FEES = {
    "own": "Each party shall be responsible for their own attorney fees and costs.",
    "petitioner": "Petitioner shall pay all attorney fees and costs incurred by both parties.",
    "respondent": "Respondent shall pay all attorney fees and costs incurred by both parties.",
    "split": "Attorney fees and costs shall be divided equally between the Parties.",
}

MAINTENANCE_TERMINATION = (
    "Maintenance shall terminate upon the death of either party, remarriage of the receiving party, "
    "or cohabitation of the receiving party with another person on a resident, continuing conjugal basis."
)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def describe_duration(months: int) -> str:
    """``30`` -> ``2 years and 6 months``; under a year gives months only."""
    years, remainder = divmod(months, 12)
    if not years:
        return _plural(remainder, "month")
    text = _plural(years, "year")
    if remainder:
        text += f" and {_plural(remainder, 'month')}"
    return text


def _percent(value: Decimal) -> Any:
    return int(value) if value == value.to_integral_value() else value


def _parties(choice: str) -> tuple[str, str]:
    """Payer and payee for a ``petitioner_pays``/``respondent_pays`` answer."""
    if choice == "petitioner_pays":
        return "Petitioner", "Respondent"
    return "Respondent", "Petitioner"


class SettlementRenderer:
    """Lay out a settlement agreement from raw questionnaire responses."""

    def __init__(
        self,
        responses: QuestionnaireResponses,
        metadata: DocumentMetadata,
        *,
        compress: bool = False,
    ):
        self.reader = ResponseReader(responses)
        self.metadata = metadata
        self.page = PdfPage(
            "Marital Settlement Agreement",
            fonts=TIMES,
            font_size=11,
            top=740,
            bottom_margin=PAGE_BREAK_AT,
            compress=compress,
        )
        self.petitioner = self.reader.text("petitioner-name", SIGNATURE_NAME_PLACEHOLDER)
        self.respondent = self.reader.text("respondent-name", SIGNATURE_NAME_PLACEHOLDER)
        self._number = 1

    # -- drawing ----------------------------------------------------------

    def _paragraph(self, title: str, lines: list[str]) -> None:
        page = self.page
        page.reserve(page.line_height + 5 if lines else 0)
        page.text(f"{self._number}.", 50, style="bold")
        page.text(title.upper(), 70, style="bold")
        page.newline(5)
        for line in lines:
            page.ensure_space()
            wrapped = page.wrap(line, WRAP_WIDTH) if line else []
            for index, chunk in enumerate(wrapped):
                if index:
                    page.ensure_space()
                page.text(chunk, 70)
                page.newline()
        page.down(10)
        self._number += 1

    def _party_line(self, name: str, role: str) -> None:
        page = self.page
        end = page.text(name.upper(), 50, style="bold")
        page.text(f", {role}", end + 5)

    def _header(self) -> None:
        page = self.page
        page.text("IN THE CIRCUIT COURT OF ILLINOIS", style="bold", size=12, centered=True)
        page.newline(10)
        page.text("In re the Marriage of:", 50, style="italic")
        page.newline(5)
        self._party_line(self.petitioner, "Petitioner")
        page.newline()
        page.text("and", 50)
        page.newline()
        self._party_line(self.respondent, "Respondent")
        page.newline(5)
        page.text("Case No.: _______________", 400)
        page.newline(15)
        page.text("MARITAL SETTLEMENT AGREEMENT", style="bold", size=14, centered=True)
        page.newline(20)

    # -- section text -----------------------------------------------------

    def uploaded_prenup_documents(self) -> list[str]:
        """Stored prenup uploads, else any names carried in the responses."""
        if self.metadata.uploaded_prenup_documents:
            return list(self.metadata.uploaded_prenup_documents)
        value = self.reader.raw("uploaded-prenup-documents")
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(name) for name in value if name]
        return []

    def introduction(self) -> list[str]:
        reader = self.reader
        separation = reader.text("separation-date")
        lines = [
            f'This Marital Settlement Agreement ("Agreement") is entered into between {self.petitioner} '
            f'("Petitioner") and {self.respondent} ("Respondent"), collectively referred to as "the Parties."',
            f"The Parties were married on {format_long_date(reader.text('marriage-date'))}.",
        ]
        if separation:
            lines.append(f"The Parties separated on or about {format_long_date(separation)}.")
        if reader.is_yes("has-prenup"):
            kind = PRENUP_TYPE_TEXT.get(reader.text("prenup-type"), "prenuptial/postnuptial")
            lines.append(
                f"The Parties have a {kind} agreement and intend for the provisions of this Agreement "
                "to be consistent with that agreement, subject to court approval."
            )
            if reader.text("prenup-follow-status") != "both_follow":
                lines.append(
                    "The Parties acknowledge that certain terms may differ from the original "
                    "agreement and have agreed to these modifications."
                )
        lines.append(
            "The Parties desire to settle all matters arising from their marriage, including the "
            "division of property, allocation of debts, and any other matters between them."
        )
        return lines

    def prenup(self) -> list[str]:
        reader = self.reader
        lines = [
            "The Parties acknowledge that they have a prenuptial/postnuptial agreement that addresses "
            "certain aspects of property division, debt allocation, and/or spousal maintenance."
        ]
        pre_marital = reader.text("prenup-pre-marital-property-rule")
        if pre_marital and pre_marital not in UNSETTLED_RULES:
            text = PRE_MARITAL_RULES.get(pre_marital, "Most property is treated as shared/marital")
            lines.append(f"Regarding pre-marital property: {text}.")
        marital = reader.text("prenup-marital-property-rule")
        if marital and marital not in UNSETTLED_RULES:
            text = MARITAL_RULES.get(marital, "Most or all property is shared/split")
            lines.append(f"Regarding marital property: {text}.")
        debt = reader.text("prenup-debt-rule")
        if debt and debt not in UNSETTLED_RULES:
            lines.append(f"Regarding debts: {DEBT_RULES.get(debt, 'Most debts are shared/split')}.")
        maintenance = MAINTENANCE_TERMS.get(reader.text("prenup-maintenance-terms"))
        if maintenance:
            lines.append(maintenance)
        other = reader.text("prenup-other-key-terms")
        if other:
            lines.append(f"Additional terms from the agreement: {other}")
        lines.append(
            "The provisions of this Marital Settlement Agreement are intended to be consistent with "
            "the prenuptial/postnuptial agreement, subject to court approval and any modifications "
            "agreed upon by the Parties."
        )

        uploaded = self.uploaded_prenup_documents()
        if uploaded:
            lines.append("")
            lines.append(
                "The Parties have uploaded the following prenuptial/postnuptial agreement "
                "document(s) with this case:"
            )
            lines.extend(f"  • {name}" for name in uploaded)
            lines.append(
                "These documents are available for reference and should be provided to the "
                "court if requested."
            )
        return lines

    def real_estate(self) -> list[str]:
        reader = self.reader
        if not reader.is_yes("has-marital-home"):
            return ["The Parties do not own any real estate subject to division in this Agreement."]

        address = reader.text("marital-home-address")
        lines = [f"The marital home is located at: {address}" if address else "The Parties own a marital home."]
        value = reader.amount("marital-home-value")
        if value:
            lines.append(f"Estimated market value: {format_currency(value)}")
        mortgage = reader.amount("marital-home-mortgage")
        if mortgage:
            lines.append(f"Remaining mortgage balance: {format_currency(mortgage)}")

        disposition = reader.text("marital-home-disposition")
        if disposition in HOME_DISPOSITIONS:
            lines.append(HOME_DISPOSITIONS[disposition])
        elif disposition == "sell_unequal":
            share = _percent(reader.amount("split-percentage-petitioner") or Decimal(50))
            lines.append(
                "The marital home shall be listed for sale. The net proceeds shall be divided "
                f"{share}% to Petitioner and {100 - share}% to Respondent."
            )
        elif disposition == "buyout":
            buyout = format_currency(reader.amount("home-buyout-amount"))
            lines.append(
                f"One party shall buy out the other's interest in the marital home for {buyout}, "
                "to be paid within 90 days of the entry of the Judgment of Dissolution."
            )
        return lines

    def vehicles(self) -> list[str]:
        lines = []
        for number in (1, 2):
            description = self.reader.text(f"vehicle-{number}-description")
            if not description:
                continue
            owner = self.reader.text(f"vehicle-{number}-owner")
            awarded = {"petitioner": "Petitioner", "respondent": "Respondent"}.get(owner, "to be sold")
            lines.append(
                f"{description}: Awarded to {awarded}. The receiving party shall be responsible "
                "for any remaining loan balance."
            )
        return lines or ["Each party shall retain any vehicle currently titled in their individual name."]

    def financial_accounts(self) -> list[str]:
        reader = self.reader
        approach = reader.text("bank-account-approach")
        if approach == "keep_own":
            lines = ["Each party shall retain all bank accounts currently held in their individual name."]
        elif approach == "split_equal":
            lines = ["All bank accounts shall be divided equally (50/50) between the Parties."]
        else:
            lines = ["Bank accounts shall be divided as agreed between the Parties."]

        joint = reader.amount("joint-account-balance")
        if joint > 0:
            split = JOINT_SPLITS.get(reader.text("joint-account-split"), "as agreed")
            lines.append(f"Joint accounts totaling {format_currency(joint)} shall be divided {split}.")

        retirement = RETIREMENT_DIVISIONS.get(reader.text("retirement-division"))
        if retirement:
            lines.append(retirement)
        return lines

    def debts(self) -> list[str]:
        reader = self.reader
        lines = []
        approach = reader.text("debt-approach")
        if approach == "own_debts":
            lines.append("Each party shall be responsible for debts incurred in their individual name.")
        elif approach == "split_equal":
            lines.append("All marital debts shall be divided equally (50/50) between the Parties.")

        total = reader.amount("credit-card-debt-total")
        if total > 0:
            petitioner = reader.amount("credit-card-petitioner-responsibility")
            respondent = reader.amount("credit-card-respondent-responsibility")
            if petitioner and respondent:
                lines.append(
                    f"Credit card debt of {format_currency(total)}: Petitioner responsible for "
                    f"{format_currency(petitioner)}; Respondent responsible for {format_currency(respondent)}."
                )
            else:
                lines.append(f"Total credit card debt: {format_currency(total)} to be allocated as agreed.")

        other = reader.text("other-debt-allocation")
        if other:
            lines.append(f"Other debts: {other}")
        return lines or [
            "Each party shall be responsible for debts in their own name. "
            "Neither party shall incur debt in the other's name."
        ]

    def maintenance(self) -> list[str]:
        reader = self.reader
        agreement = reader.text("maintenance-agreement")
        if agreement == "none":
            return [
                "Neither party shall pay spousal maintenance to the other.",
                "Each party hereby waives any right to spousal maintenance, now and in the future.",
            ]
        if agreement == "reserved":
            return ["The issue of spousal maintenance is reserved for future determination by the Court."]
        if agreement not in ("petitioner_pays", "respondent_pays"):
            return []

        payer, payee = _parties(agreement)
        amount = format_currency(reader.amount("maintenance-amount"))
        lines = [f"{payer} shall pay {payee} spousal maintenance in the amount of {amount} per month."]
        duration = reader.integer("maintenance-duration")
        if duration > 0:
            lines.append(f"Maintenance shall continue for a period of {describe_duration(duration)}.")
        else:
            lines.append("Maintenance shall continue until further order of the Court.")
        modifiable = "is" if reader.text("maintenance-modifiable") == "yes" else "is not"
        lines.append(f"This maintenance obligation {modifiable} modifiable.")
        lines.append(MAINTENANCE_TERMINATION)
        return lines

    def child_support(self) -> Optional[list[str]]:
        """None when the section does not apply."""
        reader = self.reader
        agreement = reader.text("child-support-agreement")
        if not reader.is_yes("has-children") or not agreement or agreement == "na":
            return None

        if agreement == "none":
            lines = ["Due to equal parenting time, no child support shall be exchanged between the Parties."]
        elif agreement == "guidelines":
            lines = [
                "Child support shall be calculated pursuant to Illinois statutory guidelines based "
                "on the parties' incomes and parenting time."
            ]
        else:
            payer, payee = _parties(agreement)
            amount = format_currency(reader.amount("child-support-amount"))
            lines = [f"{payer} shall pay {payee} child support in the amount of {amount} per month."]

        insurance = HEALTH_INSURANCE.get(reader.text("health-insurance-children"))
        if insurance:
            lines.append(insurance)
        lines.append(
            "Uncovered medical, dental, and vision expenses for the children shall be divided "
            "between the Parties in proportion to their respective incomes."
        )
        return lines

    def personal_property(self) -> list[str]:
        reader = self.reader
        approach = reader.text("personal-property-approach")
        if approach == "already_divided":
            return [
                "The Parties have already divided their personal property to their mutual satisfaction.",
                "Each party shall retain all personal property currently in their possession.",
            ]
        if approach == "list_items":
            lines = []
            petitioner_items = reader.text("petitioner-keeps-items")
            if petitioner_items:
                lines.append(f"Petitioner shall retain: {petitioner_items}")
            respondent_items = reader.text("respondent-keeps-items")
            if respondent_items:
                lines.append(f"Respondent shall retain: {respondent_items}")
            return lines
        return ["Personal property shall be divided by agreement of the Parties."]

    def name_restoration(self) -> Optional[list[str]]:
        name = self.reader.text("name-to-restore")
        if not (self.reader.is_yes("name-change") and name):
            return None
        party = "Petitioner" if name == self.petitioner else "Respondent"
        return [f"{party} shall be restored to the former name of {name}."]

    def attorney_fees(self) -> list[str]:
        text = ATTORNEY_FEES.get(self.reader.text("attorney-fees"))
        return [text] if text else []

    # -- document ---------------------------------------------------------

    def _signature_block(self, name: str, role: str) -> None:
        page = self.page
        page.line(50, 250)
        page.newline()
        page.text(name, 50)
        page.newline()
        page.text(role, 50, style="italic")
        page.newline()
        page.text("Date: _______________", 50)

    def _signatures(self) -> None:
        page = self.page
        page.reserve(SIGNATURES_HEIGHT)
        page.down(20)
        page.text("IN WITNESS WHEREOF, the Parties have executed this Agreement.", 50)
        page.newline(30)
        self._signature_block(self.petitioner, "Petitioner")
        page.newline(20)
        self._signature_block(self.respondent, "Respondent")
        page.newline(30)

    def render(self) -> bytes:
        self._header()
        self._paragraph("Introduction", self.introduction())
        if self.reader.is_yes("has-prenup"):
            self._paragraph("Prenuptial/Postnuptial Agreement", self.prenup())
        self._paragraph("Real Estate", self.real_estate())
        self._paragraph("Vehicles", self.vehicles())
        self._paragraph("Financial Accounts", self.financial_accounts())
        self._paragraph("Allocation of Debts", self.debts())
        self._paragraph("Spousal Maintenance", self.maintenance())
        child_support = self.child_support()
        if child_support is not None:
            self._paragraph("Child Support", child_support)
        self._paragraph("Personal Property", self.personal_property())
        restoration = self.name_restoration()
        if restoration is not None:
            self._paragraph("Name Restoration", restoration)
        self._paragraph("Attorney Fees", self.attorney_fees())
        additional = self.reader.text("additional-terms")
        if additional:
            self._paragraph("Additional Terms", [additional])
        self._paragraph("General Provisions", GENERAL_PROVISIONS)
        self._signatures()
        draw_disclaimer_footer(
            self.page,
            DISCLAIMER_LINES,
            format_timestamp(self.metadata.generated_at),
            at_bottom=True,
        )
        return self.page.finish()


def render_settlement_agreement(
    responses: QuestionnaireResponses,
    metadata: Optional[DocumentMetadata] = None,
    *,
    compress: bool = False,
) -> bytes:
    """Render a Marital Settlement Agreement from questionnaire responses."""
    return SettlementRenderer(responses, metadata or DocumentMetadata(), compress=compress).render()
