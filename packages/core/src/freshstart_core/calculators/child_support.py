"""Illinois child support guideline (750 ILCS 5/505).

Income shares model: a percentage of combined net income keyed by the
number of children, with a flat marginal rate above the table ceiling,
a shared parenting adjustment, and extra costs apportioned by income.
"""

from decimal import Decimal
from typing import Optional

import structlog

from ..models import ChildSupportCalculation, ChildSupportInput, NetIncomeDeductions
from ._rounding import to_cents

logger = structlog.get_logger()

BASIC_SUPPORT_TABLE: dict[int, Decimal] = {
    1: Decimal("0.20"),
    2: Decimal("0.28"),
    3: Decimal("0.32"),
    4: Decimal("0.40"),
    5: Decimal("0.45"),
    6: Decimal("0.50"),
}
"""Share of combined net income for 1..6+ children."""

MAX_COMBINED_NET_INCOME = Decimal("12000")
EXCESS_INCOME_RATE = Decimal("0.1")
SIGNIFICANT_TIME_THRESHOLD = Decimal("20")
SHARED_PARENTING_FACTOR = Decimal("0.5")

ZERO = Decimal("0")


def support_percentage(number_of_children: int) -> Decimal:
    """Guideline percentage; six or more children use the 50% bracket."""
    return BASIC_SUPPORT_TABLE.get(number_of_children, BASIC_SUPPORT_TABLE[6])


class ChildSupportCalculator:
    """Compute guideline child support with a logged step trail."""

    source = "750 ILCS 5/505"

    def _log_step(self, step: str, input_value: str, output_value: str) -> None:
        logger.debug(
            "calculation_step",
            calculator="child_support",
            step=step,
            input=input_value,
            output=output_value,
            source=self.source,
        )

    def calculate(self, data: ChildSupportInput) -> ChildSupportCalculation:
        """Calculate the support obligation and who owes it.

        The parent with less parenting time owes the difference between
        the two income-weighted shares. With equal time, the higher earner
        owes; with equal time and income, nothing is owed.
        """
        p1_income = data.parent1_net_income
        p2_income = data.parent2_net_income
        combined = p1_income + p2_income

        percentage = support_percentage(data.number_of_children)
        if combined > MAX_COMBINED_NET_INCOME:
            excess = combined - MAX_COMBINED_NET_INCOME
            basic = MAX_COMBINED_NET_INCOME * percentage + excess * EXCESS_INCOME_RATE
        else:
            basic = combined * percentage
        self._log_step(
            "basic_obligation",
            f"combined={combined}, children={data.number_of_children}, rate={percentage}",
            str(basic),
        )

        if combined > 0:
            p1_share = p1_income / combined
            p2_share = p2_income / combined
        else:
            p1_share = p2_share = ZERO

        time1 = data.parenting_time_parent1
        time2 = data.parenting_time_parent2
        shared_adjustment = ZERO
        if time1 >= SIGNIFICANT_TIME_THRESHOLD and time2 >= SIGNIFICANT_TIME_THRESHOLD:
            shared_adjustment = basic * (abs(time1 - time2) / 100) * SHARED_PARENTING_FACTOR
            self._log_step(
                "shared_parenting_adjustment",
                f"time1={time1}, time2={time2}",
                str(shared_adjustment),
            )

        health = data.health_insurance_cost * p1_share
        childcare = data.childcare_cost * p1_share
        education = data.educational_expenses * p1_share
        medical = data.extraordinary_medical_expenses * p1_share

        total = basic + shared_adjustment + health + childcare + education + medical
        p1_obligation = total * p1_share
        p2_obligation = total * p2_share

        p1_owed = ZERO
        p2_owed = ZERO
        if time1 < time2:
            p1_owed = max(ZERO, p1_obligation - p2_obligation)
        elif time2 < time1:
            p2_owed = max(ZERO, p2_obligation - p1_obligation)
        elif p1_income > p2_income:
            p1_owed = max(ZERO, p1_obligation - p2_obligation)
        elif p2_income > p1_income:
            p2_owed = max(ZERO, p2_obligation - p1_obligation)

        self._log_step(
            "transfer",
            f"total={total}, share1={p1_share}, share2={p2_share}",
            f"parent1_owed={p1_owed}, parent2_owed={p2_owed}",
        )

        return ChildSupportCalculation(
            combined_net_income=to_cents(combined),
            basic_obligation=to_cents(basic),
            shared_parenting_adjustment=to_cents(shared_adjustment),
            health_insurance_adjustment=to_cents(health),
            childcare_adjustment=to_cents(childcare),
            educational_expenses_adjustment=to_cents(education),
            medical_expenses_adjustment=to_cents(medical),
            total_obligation=to_cents(total),
            parent1_share=to_cents(p1_share),
            parent2_share=to_cents(p2_share),
            parent1_owed=to_cents(p1_owed),
            parent2_owed=to_cents(p2_owed),
        )


def calculate_child_support(data: ChildSupportInput) -> ChildSupportCalculation:
    """Convenience wrapper around :class:`ChildSupportCalculator`."""
    return ChildSupportCalculator().calculate(data)


def calculate_net_income(
    gross_income: Decimal,
    deductions: Optional[NetIncomeDeductions] = None,
) -> Decimal:
    """Estimate net income from gross.

    Taxes, Social Security and Medicare default to 25%, 6.2% and 1.45% of
    gross when not supplied.
    """
    gross = Decimal(gross_income)
    deductions = deductions or NetIncomeDeductions()
    taxes = deductions.taxes if deductions.taxes is not None else gross * Decimal("0.25")
    social_security = (
        deductions.social_security
        if deductions.social_security is not None
        else gross * Decimal("0.062")
    )
    medicare = (
        deductions.medicare if deductions.medicare is not None else gross * Decimal("0.0145")
    )
    return to_cents(
        gross
        - taxes
        - social_security
        - medicare
        - deductions.health_insurance
        - deductions.retirement
        - deductions.other
    )
