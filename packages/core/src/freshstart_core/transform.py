"""Normalize raw financial questionnaire responses into FinancialData.

The field tables below fix the order in which entries are emitted, so the
same response mapping always yields the same structured output regardless
of key order in the input. Entries whose amount sums to zero are omitted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

import structlog

from .models import (
    AffidavitFormType,
    Asset,
    AssetType,
    Debt,
    DebtType,
    Expense,
    ExpenseCategory,
    FinancialData,
    Frequency,
    IncomeSource,
    IncomeSourceType,
    Ownership,
)
from .responses import QuestionnaireResponses, ResponseReader

logger = structlog.get_logger()


# =============================================================================
# FIELD TABLES
# =============================================================================

@dataclass(frozen=True)
class IncomeField:
    key: str
    type: IncomeSourceType
    source: str
    label_key: Optional[str] = None


@dataclass(frozen=True)
class ExpenseGroup:
    """Raw fields summed into a single expense row."""

    category: ExpenseCategory
    description: str
    keys: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AssetField:
    key: str
    type: AssetType
    description: str
    ownership: Ownership = Ownership.JOINT
    description_key: Optional[str] = None
    ownership_key: Optional[str] = None


@dataclass(frozen=True)
class DebtField:
    key: str
    type: DebtType
    creditor: str
    ownership: Ownership = Ownership.JOINT
    creditor_key: Optional[str] = None


INCOME_FIELDS: tuple[IncomeField, ...] = (
    IncomeField("overtime-income", IncomeSourceType.WAGES, "Overtime Income"),
    IncomeField("bonus-income", IncomeSourceType.WAGES, "Bonus/Commission"),
    IncomeField("rental-income", IncomeSourceType.RENTAL, "Rental Property"),
    IncomeField("investment-income", IncomeSourceType.INVESTMENT, "Investments/Dividends"),
    IncomeField("social-security-income", IncomeSourceType.SOCIAL_SECURITY, "Social Security"),
    IncomeField("pension-income", IncomeSourceType.PENSION, "Pension/Retirement"),
    IncomeField("disability-income", IncomeSourceType.OTHER, "Disability Benefits"),
    IncomeField("unemployment-income", IncomeSourceType.UNEMPLOYMENT, "Unemployment Benefits"),
    IncomeField("child-support-received", IncomeSourceType.OTHER, "Child Support Received"),
    IncomeField("spousal-support-received", IncomeSourceType.OTHER, "Spousal Support Received"),
    IncomeField(
        "other-income-amount",
        IncomeSourceType.OTHER,
        "Other Income",
        label_key="other-income-description",
    ),
)

EXPENSE_GROUPS: tuple[ExpenseGroup, ...] = (
    ExpenseGroup(ExpenseCategory.HOUSING, "Rent/Mortgage", ("monthly-housing-cost",)),
    ExpenseGroup(ExpenseCategory.HOUSING, "Property Taxes", ("property-taxes",)),
    ExpenseGroup(
        ExpenseCategory.INSURANCE,
        "Homeowners/Renters Insurance",
        ("homeowners-insurance",),
    ),
    ExpenseGroup(ExpenseCategory.HOUSING, "HOA/Condo Fees", ("hoa-fees",)),
    ExpenseGroup(
        ExpenseCategory.UTILITIES,
        "Utilities (electric, gas, water, phone, internet)",
        (
            "electricity",
            "gas-heating",
            "water-sewer",
            "trash-collection",
            "phone-cell",
            "internet-cable",
            "monthly-utilities",
        ),
    ),
    ExpenseGroup(
        ExpenseCategory.TRANSPORTATION,
        "Transportation (car, insurance, fuel, etc.)",
        (
            "car-payment",
            "car-insurance",
            "gas-fuel",
            "car-maintenance",
            "parking-tolls",
            "public-transportation",
            "monthly-transportation",
        ),
    ),
    ExpenseGroup(
        ExpenseCategory.FOOD,
        "Food (groceries, dining out)",
        ("groceries", "dining-out", "monthly-food"),
    ),
    ExpenseGroup(
        ExpenseCategory.HEALTHCARE,
        "Healthcare (insurance, medical expenses)",
        (
            "health-insurance",
            "dental-insurance",
            "vision-insurance",
            "medical-out-of-pocket",
            "therapy-counseling",
        ),
    ),
    ExpenseGroup(
        ExpenseCategory.CHILDCARE,
        "Children (daycare, school, activities, medical)",
        ("childcare-daycare", "child-tuition", "child-activities", "child-medical"),
    ),
    ExpenseGroup(
        ExpenseCategory.OTHER,
        "Child Support Paid (other cases)",
        ("child-support-paid",),
    ),
    ExpenseGroup(
        ExpenseCategory.PERSONAL,
        "Personal (clothing, grooming)",
        ("clothing", "personal-care", "dry-cleaning"),
    ),
    ExpenseGroup(ExpenseCategory.INSURANCE, "Life Insurance", ("life-insurance",)),
    ExpenseGroup(
        ExpenseCategory.OTHER,
        "Other (entertainment, subscriptions, pets, etc.)",
        (
            "entertainment",
            "subscriptions",
            "pet-expenses",
            "charitable-contributions",
            "misc-expenses",
            "monthly-other",
        ),
    ),
)

ASSET_FIELDS: tuple[AssetField, ...] = (
    AssetField(
        "primary-residence-value",
        AssetType.REAL_ESTATE,
        "Primary Residence",
        ownership_key="primary-residence-ownership",
    ),
    AssetField("other-property-value", AssetType.REAL_ESTATE, "Other Real Estate"),
    AssetField(
        "vehicle-1-value",
        AssetType.VEHICLE,
        "Vehicle 1",
        description_key="vehicle-1-description",
    ),
    AssetField(
        "vehicle-2-value",
        AssetType.VEHICLE,
        "Vehicle 2",
        description_key="vehicle-2-description",
    ),
    AssetField("checking-balance", AssetType.BANK_ACCOUNT, "Checking Accounts"),
    AssetField("savings-balance", AssetType.BANK_ACCOUNT, "Savings Accounts"),
    AssetField("investment-balance", AssetType.INVESTMENT, "Investment/Brokerage Accounts"),
    AssetField("retirement-401k", AssetType.RETIREMENT, "401(k)/403(b)", Ownership.INDIVIDUAL),
    AssetField("retirement-ira", AssetType.RETIREMENT, "IRA Accounts", Ownership.INDIVIDUAL),
    AssetField("pension-value", AssetType.RETIREMENT, "Pension", Ownership.INDIVIDUAL),
    AssetField("cash-on-hand", AssetType.OTHER, "Cash on Hand", Ownership.INDIVIDUAL),
)

DEBT_FIELDS: tuple[DebtField, ...] = (
    DebtField("primary-residence-mortgage", DebtType.MORTGAGE, "Primary Residence Mortgage"),
    DebtField("other-property-mortgage", DebtType.MORTGAGE, "Other Property Mortgage"),
    DebtField("vehicle-1-loan", DebtType.AUTO_LOAN, "Vehicle 1 Loan"),
    DebtField("vehicle-2-loan", DebtType.AUTO_LOAN, "Vehicle 2 Loan"),
    DebtField("credit-card-debt", DebtType.CREDIT_CARD, "Credit Cards"),
    DebtField("student-loan-debt", DebtType.STUDENT_LOAN, "Student Loans", Ownership.INDIVIDUAL),
    DebtField("personal-loan-debt", DebtType.PERSONAL_LOAN, "Personal Loans"),
    DebtField("medical-debt", DebtType.MEDICAL, "Medical Debt"),
    DebtField("tax-debt", DebtType.TAX_DEBT, "IRS/State Tax Debt"),
    DebtField(
        "other-debt",
        DebtType.OTHER,
        "Other Debt",
        creditor_key="other-debt-description",
    ),
)


# =============================================================================
# NORMALIZER
# =============================================================================

def _annual_gross(reader: ResponseReader) -> Decimal:
    annual = reader.amount("gross-annual-income")
    return annual if annual > 0 else reader.amount("gross-monthly-salary") * 12


def _income(reader: ResponseReader) -> list[IncomeSource]:
    income: list[IncomeSource] = []

    monthly_salary = reader.amount("gross-monthly-salary")
    annual = reader.amount("gross-annual-income")
    if monthly_salary > 0 or annual > 0:
        income.append(
            IncomeSource(
                type=IncomeSourceType.WAGES,
                source=reader.text("employer-name", "Employer"),
                amount=monthly_salary if monthly_salary > 0 else annual / 12,
                frequency=Frequency.MONTHLY,
            )
        )

    for entry in INCOME_FIELDS:
        amount = reader.amount(entry.key)
        if amount <= 0:
            continue
        source = reader.text(entry.label_key, entry.source) if entry.label_key else entry.source
        income.append(
            IncomeSource(
                type=entry.type,
                source=source,
                amount=amount,
                frequency=Frequency.MONTHLY,
            )
        )
    return income


def _expenses(reader: ResponseReader) -> list[Expense]:
    expenses: list[Expense] = []
    for group in EXPENSE_GROUPS:
        total = sum((reader.amount(key) for key in group.keys), Decimal("0"))
        if total > 0:
            expenses.append(
                Expense(
                    category=group.category,
                    description=group.description,
                    amount=total,
                    frequency=Frequency.MONTHLY,
                )
            )
    return expenses


def _assets(reader: ResponseReader) -> list[Asset]:
    assets: list[Asset] = []
    for entry in ASSET_FIELDS:
        value = reader.amount(entry.key)
        if value <= 0:
            continue
        description = entry.description
        if entry.description_key:
            description = reader.text(entry.description_key, entry.description)
        ownership = entry.ownership.value
        if entry.ownership_key:
            ownership = reader.text(entry.ownership_key, entry.ownership.value)
        assets.append(
            Asset(type=entry.type, description=description, value=value, ownership=ownership)
        )
    return assets


def _debts(reader: ResponseReader) -> list[Debt]:
    debts: list[Debt] = []
    for entry in DEBT_FIELDS:
        balance = reader.amount(entry.key)
        if balance <= 0:
            continue
        creditor = entry.creditor
        if entry.creditor_key:
            creditor = reader.text(entry.creditor_key, entry.creditor)
        debts.append(
            Debt(type=entry.type, creditor=creditor, balance=balance, ownership=entry.ownership)
        )
    return debts


def normalize_financial_responses(
    responses: QuestionnaireResponses,
    user_id: str,
) -> FinancialData:
    """Transform flat questionnaire responses into structured FinancialData.

    Args:
        responses: Raw answer mapping with kebab-case or camelCase keys.
        user_id: Owner of the resulting disclosure.

    Returns:
        FinancialData with entries in a fixed order and zero rows omitted.
    """
    reader = ResponseReader(responses)
    data = FinancialData(
        user_id=user_id,
        form_type=AffidavitFormType.for_annual_income(_annual_gross(reader)),
        income=_income(reader),
        expenses=_expenses(reader),
        assets=_assets(reader),
        debts=_debts(reader),
    )
    logger.debug(
        "financial_responses_normalized",
        user_id=user_id,
        form_type=data.form_type.value,
        income_entries=len(data.income),
        expense_entries=len(data.expenses),
        asset_entries=len(data.assets),
        debt_entries=len(data.debts),
    )
    return data


__all__ = [
    "ASSET_FIELDS",
    "DEBT_FIELDS",
    "EXPENSE_GROUPS",
    "INCOME_FIELDS",
    "normalize_financial_responses",
]
