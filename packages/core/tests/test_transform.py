"""Tests for financial response normalization."""

from decimal import Decimal

import pytest

from freshstart_core.models import (
    AffidavitFormType,
    AssetType,
    DebtType,
    ExpenseCategory,
    Frequency,
    IncomeSourceType,
    Ownership,
)
from freshstart_core.transform import normalize_financial_responses


class TestNormalizeFinancialResponses:
    """Test suite for normalize_financial_responses."""

    def test_income_entries(self, financial_responses: dict):
        """Salary comes first, then table-driven income in fixed order."""
        data = normalize_financial_responses(financial_responses, "user-1")

        assert data.user_id == "user-1"
        assert [i.type for i in data.income] == [IncomeSourceType.WAGES, IncomeSourceType.RENTAL]
        assert data.income[0].source == "Acme Corp"
        assert data.income[0].amount == Decimal("5000")
        assert data.income[0].frequency == Frequency.MONTHLY
        assert data.income[1].source == "Rental Property"

    def test_expense_groups_sum_raw_fields(self, financial_responses: dict):
        """Utility fields from either spelling are summed into one row."""
        data = normalize_financial_responses(financial_responses, "user-1")

        by_category = {e.category: e for e in data.expenses}
        assert by_category[ExpenseCategory.HOUSING].amount == Decimal("1500")
        assert by_category[ExpenseCategory.UTILITIES].amount == Decimal("220")
        assert by_category[ExpenseCategory.FOOD].amount == Decimal("400")
        assert len(data.expenses) == 3

    def test_zero_entries_are_omitted(self, financial_responses: dict):
        """Only positive amounts appear in the output arrays."""
        data = normalize_financial_responses(financial_responses, "user-1")

        assert all(e.amount > 0 for e in data.expenses)
        assert all(d.balance > 0 for d in data.debts)
        assert DebtType.STUDENT_LOAN not in {d.type for d in data.debts}

    def test_assets_and_ownership_defaults(self, financial_responses: dict):
        """Explicit ownership wins; vehicles default joint, retirement individual."""
        data = normalize_financial_responses(financial_responses, "user-1")

        residence, vehicle, retirement = data.assets
        assert residence.type == AssetType.REAL_ESTATE
        assert residence.ownership == Ownership.INDIVIDUAL
        assert vehicle.description == "2018 Honda Civic"
        assert vehicle.ownership == Ownership.JOINT
        assert retirement.type == AssetType.RETIREMENT
        assert retirement.ownership == Ownership.INDIVIDUAL

    def test_unknown_ownership_falls_back_to_joint(self):
        """An unrecognized ownership answer is treated as joint."""
        data = normalize_financial_responses(
            {"primary-residence-value": "1000", "primary-residence-ownership": "mine"},
            "user-1",
        )
        assert data.assets[0].ownership == Ownership.JOINT

    def test_totals(self, financial_responses: dict):
        """Aggregate totals are derived from the entries."""
        data = normalize_financial_responses(financial_responses, "user-1")

        assert data.total_monthly_income == Decimal("5800")
        assert data.total_monthly_expenses == Decimal("2120")
        assert data.net_monthly_income == Decimal("3680")
        assert data.total_assets == Decimal("292000")
        assert data.total_debts == Decimal("184500")
        assert data.net_worth == Decimal("107500")

    def test_monthly_total_matches_raw_sum(self, financial_responses: dict):
        """Normalizing neither drops nor double counts any expense field."""
        data = normalize_financial_responses(financial_responses, "user-1")

        raw_expense_keys = (
            "monthly-rent-mortgage",
            "electricity",
            "waterSewer",
            "internet-cable",
            "groceries",
        )
        raw_total = sum(Decimal(str(financial_responses[k]).replace(",", "")) for k in raw_expense_keys)
        assert data.total_monthly_expenses == raw_total

    @pytest.mark.parametrize(
        "responses,expected",
        [
            ({"gross-monthly-salary": "6000"}, AffidavitFormType.SHORT),
            ({"gross-monthly-salary": "6250"}, AffidavitFormType.LONG),
            ({"gross-annual-income": "80000", "gross-monthly-salary": "100"}, AffidavitFormType.LONG),
            ({}, AffidavitFormType.SHORT),
        ],
    )
    def test_form_type_threshold(self, responses: dict, expected: AffidavitFormType):
        """Long form applies from $75,000 annual gross income."""
        assert normalize_financial_responses(responses, "u").form_type == expected

    def test_annual_income_used_when_no_monthly_salary(self):
        """Annual gross income becomes a monthly wage entry."""
        data = normalize_financial_responses({"gross-annual-income": "60000"}, "u")
        assert data.income[0].amount == Decimal("5000")
        assert data.income[0].source == "Employer"

    def test_deterministic_regardless_of_key_order(self, financial_responses: dict):
        """Input key order does not affect output order."""
        reversed_responses = dict(reversed(list(financial_responses.items())))

        first = normalize_financial_responses(financial_responses, "u")
        second = normalize_financial_responses(reversed_responses, "u")
        assert first.model_dump_json() == second.model_dump_json()

    def test_empty_responses(self):
        """No answers produce an empty short-form disclosure."""
        data = normalize_financial_responses({}, "u")
        assert data.income == []
        assert data.expenses == []
        assert data.net_worth == Decimal("0")


class TestFrequencyConversion:
    """Test suite for monthly equivalents."""

    @pytest.mark.parametrize(
        "frequency,amount,expected",
        [
            (Frequency.WEEKLY, Decimal("100"), Decimal("433.00")),
            (Frequency.BIWEEKLY, Decimal("100"), Decimal("217.00")),
            (Frequency.MONTHLY, Decimal("100"), Decimal("100")),
            (Frequency.YEARLY, Decimal("1200"), Decimal("100")),
            (Frequency.ONE_TIME, Decimal("500"), Decimal("0")),
        ],
    )
    def test_to_monthly(self, frequency: Frequency, amount: Decimal, expected: Decimal):
        assert frequency.to_monthly(amount) == expected
