"""Tests for the child support and spousal maintenance guidelines."""

from decimal import Decimal

import pytest

from freshstart_core.calculators import (
    calculate_child_support,
    calculate_net_income,
    calculate_spousal_maintenance,
    maintenance_guidelines_apply,
    support_percentage,
)
from freshstart_core.calculators.maintenance import LONG_MARRIAGE_NOTE, OVER_LIMIT_NOTE, ZERO_AMOUNT_NOTE
from freshstart_core.models import ChildSupportInput, NetIncomeDeductions, SpousalMaintenanceInput


def support_input(**overrides) -> ChildSupportInput:
    values = {
        "parent1_net_income": Decimal("4000"),
        "parent2_net_income": Decimal("2000"),
        "number_of_children": 2,
        "parenting_time_parent1": Decimal("50"),
        "parenting_time_parent2": Decimal("50"),
    }
    values.update(overrides)
    return ChildSupportInput(**values)


class TestSupportPercentage:
    """Test suite for the guideline percentage table."""

    @pytest.mark.parametrize(
        "children,expected",
        [(1, "0.20"), (2, "0.28"), (3, "0.32"), (4, "0.40"), (5, "0.45"), (6, "0.50"), (9, "0.50")],
    )
    def test_percentages(self, children: int, expected: str):
        """Six or more children always use the 50% bracket."""
        assert support_percentage(children) == Decimal(expected)


class TestChildSupport:
    """Test suite for calculate_child_support."""

    def test_equal_time_higher_earner_pays(self):
        """With equal parenting time, the higher-income parent owes."""
        result = calculate_child_support(support_input())

        assert result.combined_net_income == Decimal("6000.00")
        assert result.basic_obligation == Decimal("1680.00")
        assert result.shared_parenting_adjustment == Decimal("0.00")
        assert result.total_obligation == Decimal("1680.00")
        assert result.parent1_share == Decimal("0.67")
        assert result.parent2_share == Decimal("0.33")
        assert result.parent1_owed == Decimal("560.00")
        assert result.parent2_owed == Decimal("0.00")

    def test_income_above_ceiling(self):
        """Income above $12,000 is charged at the flat 10% marginal rate."""
        result = calculate_child_support(
            support_input(
                parent1_net_income=Decimal("10000"),
                parent2_net_income=Decimal("5000"),
                number_of_children=1,
            )
        )
        assert result.basic_obligation == Decimal("2700.00")

    def test_shared_parenting_adjustment(self):
        """Both parents at 20% or more triggers the time-difference adjustment."""
        result = calculate_child_support(
            support_input(
                parent1_net_income=Decimal("2000"),
                parent2_net_income=Decimal("4000"),
                parenting_time_parent1=Decimal("70"),
                parenting_time_parent2=Decimal("30"),
            )
        )
        assert result.shared_parenting_adjustment == Decimal("336.00")
        assert result.total_obligation == Decimal("2016.00")
        assert result.parent1_owed == Decimal("0.00")
        assert result.parent2_owed == Decimal("672.00")

    def test_no_adjustment_below_threshold(self):
        """A parent under 20% time means no shared parenting adjustment."""
        result = calculate_child_support(
            support_input(
                parenting_time_parent1=Decimal("85"),
                parenting_time_parent2=Decimal("15"),
            )
        )
        assert result.shared_parenting_adjustment == Decimal("0.00")

    def test_extra_costs_apportioned_by_income(self):
        """Extra costs are charged at parent 1's income share."""
        result = calculate_child_support(
            support_input(health_insurance_cost=Decimal("300"), childcare_cost=Decimal("600"))
        )
        assert result.health_insurance_adjustment == Decimal("200.00")
        assert result.childcare_adjustment == Decimal("400.00")
        assert result.total_obligation == Decimal("2280.00")

    def test_equal_time_and_income_owes_nothing(self):
        """Identical incomes and time produce no transfer."""
        result = calculate_child_support(
            support_input(parent1_net_income=Decimal("3000"), parent2_net_income=Decimal("3000"))
        )
        assert result.parent1_owed == Decimal("0.00")
        assert result.parent2_owed == Decimal("0.00")

    def test_zero_combined_income(self):
        """Zero income yields zero shares instead of dividing by zero."""
        result = calculate_child_support(
            support_input(parent1_net_income=Decimal("0"), parent2_net_income=Decimal("0"))
        )
        assert result.parent1_share == Decimal("0.00")
        assert result.total_obligation == Decimal("0.00")

    @pytest.mark.parametrize(
        "p1,p2,children,t1,t2",
        [
            ("4000", "2000", 1, "50", "50"),
            ("9000", "7000", 3, "60", "40"),
            ("1500", "0", 6, "100", "0"),
            ("2500", "2500", 4, "25", "75"),
        ],
    )
    def test_total_never_below_basic(self, p1, p2, children, t1, t2):
        """Adjustments only add to the basic obligation."""
        result = calculate_child_support(
            support_input(
                parent1_net_income=Decimal(p1),
                parent2_net_income=Decimal(p2),
                number_of_children=children,
                parenting_time_parent1=Decimal(t1),
                parenting_time_parent2=Decimal(t2),
            )
        )
        assert result.total_obligation >= result.basic_obligation

    def test_rejects_zero_children(self):
        """At least one child is required."""
        with pytest.raises(ValueError):
            support_input(number_of_children=0)


class TestNetIncome:
    """Test suite for calculate_net_income."""

    def test_default_deductions(self):
        """Unset taxes, Social Security and Medicare are estimated."""
        assert calculate_net_income(Decimal("5000")) == Decimal("3367.50")

    def test_explicit_deductions(self):
        """Explicit deductions replace the estimates."""
        deductions = NetIncomeDeductions(
            taxes=Decimal("1000"),
            social_security=Decimal("300"),
            medicare=Decimal("70"),
            retirement=Decimal("130"),
        )
        assert calculate_net_income(Decimal("5000"), deductions) == Decimal("3500.00")


class TestSpousalMaintenance:
    """Test suite for calculate_spousal_maintenance."""

    def test_guideline_capped(self):
        """The amount is capped at 40% of combined income less payee income."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("100000"),
                payee_gross_income=Decimal("40000"),
                duration_of_marriage=Decimal("8"),
                combined_gross_income=Decimal("140000"),
            )
        )
        assert result.guideline_amount == Decimal("16000.00")
        assert result.guideline_duration == 58
        assert result.notes[0] == "Guideline maintenance: $16000.00/month for 58 months (4.8 years)."

    def test_uncapped_guideline(self):
        """Below the cap the formula amount is used as is."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("120000"),
                payee_gross_income=Decimal("20000"),
                duration_of_marriage=Decimal("3"),
                combined_gross_income=Decimal("140000"),
            )
        )
        assert result.guideline_amount == Decimal("34996.00")
        assert result.guideline_duration == 36

    def test_over_income_limit(self):
        """Above $500,000 the result is zero with an explanatory note."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("550000"),
                payee_gross_income=Decimal("50000"),
                duration_of_marriage=Decimal("10"),
                combined_gross_income=Decimal("600000"),
            )
        )
        assert result.guideline_amount == Decimal("0")
        assert result.guideline_duration == 0
        assert result.notes == [OVER_LIMIT_NOTE]

    def test_limit_is_inclusive(self):
        assert maintenance_guidelines_apply(Decimal("500000")) is True
        assert maintenance_guidelines_apply(Decimal("500000.01")) is False

    def test_zero_amount_note(self):
        """A payee earning more than the payer gets a zero guideline amount."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("30000"),
                payee_gross_income=Decimal("50000"),
                duration_of_marriage=Decimal("12"),
                combined_gross_income=Decimal("80000"),
            )
        )
        assert result.guideline_amount == Decimal("0.00")
        assert ZERO_AMOUNT_NOTE in result.notes

    @pytest.mark.parametrize(
        "years,months",
        [("4", 48), ("7", 50), ("12", 101), ("18", 173), ("25", 300)],
    )
    def test_duration_tiers(self, years: str, months: int):
        """Duration is a stepped fraction of the marriage length."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("90000"),
                payee_gross_income=Decimal("30000"),
                duration_of_marriage=Decimal(years),
                combined_gross_income=Decimal("120000"),
            )
        )
        assert result.guideline_duration == months

    def test_long_marriage_note(self):
        """Twenty or more years adds the indefinite maintenance note."""
        result = calculate_spousal_maintenance(
            SpousalMaintenanceInput(
                payer_gross_income=Decimal("90000"),
                payee_gross_income=Decimal("30000"),
                duration_of_marriage=Decimal("20"),
                combined_gross_income=Decimal("120000"),
            )
        )
        assert result.guideline_duration == 240
        assert LONG_MARRIAGE_NOTE in result.notes
