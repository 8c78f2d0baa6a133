"""Illinois spousal maintenance guideline (750 ILCS 5/504)."""

from decimal import ROUND_HALF_UP, Decimal

import structlog

from ..models import SpousalMaintenanceCalculation, SpousalMaintenanceInput
from ._rounding import to_cents

logger = structlog.get_logger()

GUIDELINE_INCOME_LIMIT = Decimal("500000")
PAYER_RATE = Decimal("0.3333")
PAYEE_RATE = Decimal("0.25")
CAP_RATE = Decimal("0.4")

DURATION_TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("5"), Decimal("1")),
    (Decimal("10"), Decimal("0.6")),
    (Decimal("15"), Decimal("0.7")),
    (Decimal("20"), Decimal("0.8")),
)
"""(marriage years upper bound, fraction of marriage length in months)."""

OVER_LIMIT_NOTE = (
    "Guidelines do not apply when combined gross income exceeds $500,000. "
    "Court will determine maintenance based on statutory factors."
)
LONG_MARRIAGE_NOTE = (
    "For marriages of 20+ years, maintenance may be permanent or until "
    "remarriage/death of either party."
)
ZERO_AMOUNT_NOTE = (
    "Guideline calculation results in $0 maintenance. Court may still award "
    "maintenance based on statutory factors."
)
DEVIATION_NOTE = (
    "These are guidelines only. Court may deviate based on statutory factors "
    "including: standard of living, age/health, earning capacity, contributions "
    "to marriage, property division, and other relevant factors."
)


def maintenance_guidelines_apply(combined_gross_income: Decimal) -> bool:
    """Guidelines apply when combined gross income is $500,000 or less."""
    return Decimal(combined_gross_income) <= GUIDELINE_INCOME_LIMIT


class SpousalMaintenanceCalculator:
    """Compute guideline maintenance amount and duration."""

    def _log_step(self, step: str, input_value: str, output_value: str) -> None:
        logger.debug(
            "calculation_step",
            calculator="spousal_maintenance",
            step=step,
            input=input_value,
            output=output_value,
            source="750 ILCS 5/504",
        )

    def _duration_months(self, years: Decimal) -> tuple[int, bool]:
        """Return (rounded months, whether the long marriage rule applied)."""
        months = years * 12
        for upper_bound, fraction in DURATION_TIERS:
            if years < upper_bound:
                months = months * fraction
                break
        long_marriage = years >= DURATION_TIERS[-1][0]
        rounded = int(months.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return rounded, long_marriage

    def calculate(self, data: SpousalMaintenanceInput) -> SpousalMaintenanceCalculation:
        """Apply the guideline formula.

        Above the income limit the result is zero amount and zero duration
        with an explanatory note.
        """
        if not maintenance_guidelines_apply(data.combined_gross_income):
            self._log_step(
                "income_limit",
                f"combined={data.combined_gross_income}",
                "guidelines_not_applicable",
            )
            return SpousalMaintenanceCalculation(
                guideline_amount=Decimal("0.00"),
                guideline_duration=0,
                notes=[OVER_LIMIT_NOTE],
            )

        notes: list[str] = []
        guideline = data.payer_gross_income * PAYER_RATE - data.payee_gross_income * PAYEE_RATE
        cap = data.combined_gross_income * CAP_RATE - data.payee_gross_income
        amount = max(Decimal("0"), min(guideline, cap))
        self._log_step(
            "guideline_amount",
            f"guideline={guideline}, cap={cap}",
            str(amount),
        )

        duration, long_marriage = self._duration_months(data.duration_of_marriage)
        if long_marriage:
            notes.append(LONG_MARRIAGE_NOTE)
        self._log_step("duration", f"years={data.duration_of_marriage}", str(duration))

        amount = to_cents(amount)
        if amount <= 0:
            notes.append(ZERO_AMOUNT_NOTE)
        else:
            years = Decimal(duration) / 12
            notes.append(
                f"Guideline maintenance: ${amount:.2f}/month for {duration} months "
                f"({years:.1f} years)."
            )
        notes.append(DEVIATION_NOTE)

        return SpousalMaintenanceCalculation(
            guideline_amount=amount,
            guideline_duration=duration,
            notes=notes,
        )


def calculate_spousal_maintenance(
    data: SpousalMaintenanceInput,
) -> SpousalMaintenanceCalculation:
    """Convenience wrapper around :class:`SpousalMaintenanceCalculator`."""
    return SpousalMaintenanceCalculator().calculate(data)
