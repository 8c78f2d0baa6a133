"""Structured financial disclosure models.

These models hold the normalized output of a financial questionnaire:
income sources, recurring expenses, assets, and debts. Amounts are stored
in their native frequency; monthly equivalents are always derived so that
repeated conversions never drift.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator

SHORT_FORM_INCOME_LIMIT = Decimal("75000")
"""Annual gross income at or above which the long form affidavit is used."""


class Frequency(str, Enum):
    """How often an income or expense amount recurs."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONE_TIME = "one_time"

    def to_monthly(self, amount: Decimal) -> Decimal:
        """Convert an amount at this frequency to its monthly equivalent."""
        if self is Frequency.WEEKLY:
            return amount * Decimal("4.33")
        if self is Frequency.BIWEEKLY:
            return amount * Decimal("2.17")
        if self is Frequency.YEARLY:
            return amount / Decimal("12")
        if self is Frequency.ONE_TIME:
            return Decimal("0")
        return amount


class IncomeSourceType(str, Enum):
    """Kinds of income reported on the affidavit."""

    WAGES = "wages"
    SELF_EMPLOYMENT = "self_employment"
    UNEMPLOYMENT = "unemployment"
    SOCIAL_SECURITY = "social_security"
    PENSION = "pension"
    INVESTMENT = "investment"
    RENTAL = "rental"
    OTHER = "other"


class ExpenseCategory(str, Enum):
    """Household expense categories."""

    HOUSING = "housing"
    UTILITIES = "utilities"
    FOOD = "food"
    TRANSPORTATION = "transportation"
    HEALTHCARE = "healthcare"
    CHILDCARE = "childcare"
    EDUCATION = "education"
    PERSONAL = "personal"
    INSURANCE = "insurance"
    TAXES = "taxes"
    OTHER = "other"


class AssetType(str, Enum):
    """Kinds of assets."""

    REAL_ESTATE = "real_estate"
    VEHICLE = "vehicle"
    BANK_ACCOUNT = "bank_account"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"
    BUSINESS = "business"
    PERSONAL_PROPERTY = "personal_property"
    OTHER = "other"


class DebtType(str, Enum):
    """Kinds of debts and liabilities."""

    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    CREDIT_CARD = "credit_card"
    STUDENT_LOAN = "student_loan"
    PERSONAL_LOAN = "personal_loan"
    MEDICAL = "medical"
    TAX_DEBT = "tax_debt"
    OTHER = "other"


class Ownership(str, Enum):
    """Who holds title to an asset or liability."""

    INDIVIDUAL = "individual"
    JOINT = "joint"
    SPOUSE = "spouse"


class AffidavitFormType(str, Enum):
    """Financial affidavit variant, derived from gross annual income."""

    SHORT = "short"
    LONG = "long"

    @classmethod
    def for_annual_income(cls, annual_gross: Decimal) -> "AffidavitFormType":
        """Short form below the income limit, long form otherwise."""
        return cls.SHORT if annual_gross < SHORT_FORM_INCOME_LIMIT else cls.LONG


# =============================================================================
# ENTRIES
# =============================================================================

class IncomeSource(BaseModel):
    """A single source of income in its native frequency."""

    type: IncomeSourceType
    source: str = Field(..., description="Employer or label for the income")
    amount: Decimal = Field(..., ge=0)
    frequency: Frequency = Frequency.MONTHLY
    is_current: bool = True

    @property
    def monthly_amount(self) -> Decimal:
        return self.frequency.to_monthly(self.amount)


class Expense(BaseModel):
    """A recurring household expense."""

    category: ExpenseCategory
    description: str
    amount: Decimal = Field(..., ge=0)
    frequency: Frequency = Frequency.MONTHLY

    @property
    def monthly_amount(self) -> Decimal:
        return self.frequency.to_monthly(self.amount)


class Asset(BaseModel):
    """An asset with its estimated current value."""

    type: AssetType
    description: str
    value: Decimal = Field(..., ge=0)
    ownership: Ownership = Ownership.JOINT

    @field_validator("ownership", mode="before")
    @classmethod
    def coerce_ownership(cls, v):
        """Unrecognized ownership answers fall back to joint."""
        if isinstance(v, str) and v not in {o.value for o in Ownership}:
            return Ownership.JOINT
        return v


class Debt(BaseModel):
    """An outstanding liability."""

    type: DebtType
    creditor: str
    balance: Decimal = Field(..., ge=0)
    ownership: Ownership = Ownership.JOINT


# =============================================================================
# AGGREGATE
# =============================================================================

class FinancialData(BaseModel):
    """Complete financial disclosure for one party.

    Totals are computed from the entries on every access. Only current
    income sources count toward monthly income.
    """

    user_id: str
    form_type: AffidavitFormType = AffidavitFormType.SHORT
    income: list[IncomeSource] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    assets: list[Asset] = Field(default_factory=list)
    debts: list[Debt] = Field(default_factory=list)

    @computed_field
    @property
    def total_monthly_income(self) -> Decimal:
        """Sum of monthly equivalents for current income sources."""
        return sum(
            (i.monthly_amount for i in self.income if i.is_current),
            Decimal("0"),
        )

    @computed_field
    @property
    def total_monthly_expenses(self) -> Decimal:
        """Sum of monthly equivalents for all expenses."""
        return sum((e.monthly_amount for e in self.expenses), Decimal("0"))

    @computed_field
    @property
    def net_monthly_income(self) -> Decimal:
        """Monthly income less monthly expenses."""
        return self.total_monthly_income - self.total_monthly_expenses

    @computed_field
    @property
    def total_assets(self) -> Decimal:
        return sum((a.value for a in self.assets), Decimal("0"))

    @computed_field
    @property
    def total_debts(self) -> Decimal:
        return sum((d.balance for d in self.debts), Decimal("0"))

    @computed_field
    @property
    def net_worth(self) -> Decimal:
        """Total assets less total debts."""
        return self.total_assets - self.total_debts
