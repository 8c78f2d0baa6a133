"""Input and output models for guideline calculators and estimators.

All calculator models are pure value types: they have no identity, are
never persisted, and serialize to plain JSON for form handlers.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CaseType(str, Enum):
    """Whether the parties agree on all terms."""

    UNCONTESTED = "uncontested"
    CONTESTED = "contested"


# =============================================================================
# CHILD SUPPORT (750 ILCS 5/505)
# =============================================================================

class ChildSupportInput(BaseModel):
    """Inputs to the income shares child support guideline."""

    parent1_net_income: Decimal = Field(..., ge=0, description="Monthly net income")
    parent2_net_income: Decimal = Field(..., ge=0, description="Monthly net income")
    number_of_children: int = Field(..., ge=1)
    parenting_time_parent1: Decimal = Field(..., ge=0, le=100, description="Percent")
    parenting_time_parent2: Decimal = Field(..., ge=0, le=100, description="Percent")
    health_insurance_cost: Decimal = Field(default=Decimal("0"), ge=0)
    childcare_cost: Decimal = Field(default=Decimal("0"), ge=0)
    educational_expenses: Decimal = Field(default=Decimal("0"), ge=0)
    extraordinary_medical_expenses: Decimal = Field(default=Decimal("0"), ge=0)


class ChildSupportCalculation(BaseModel):
    """Guideline child support result. Every amount is rounded to cents."""

    combined_net_income: Decimal
    basic_obligation: Decimal
    shared_parenting_adjustment: Decimal
    health_insurance_adjustment: Decimal
    childcare_adjustment: Decimal
    educational_expenses_adjustment: Decimal
    medical_expenses_adjustment: Decimal
    total_obligation: Decimal
    parent1_share: Decimal
    parent2_share: Decimal
    parent1_owed: Decimal = Field(..., description="Amount parent 1 owes parent 2")
    parent2_owed: Decimal = Field(..., description="Amount parent 2 owes parent 1")


class NetIncomeDeductions(BaseModel):
    """Optional explicit deductions; unset statutory ones are estimated."""

    taxes: Optional[Decimal] = None
    social_security: Optional[Decimal] = None
    medicare: Optional[Decimal] = None
    health_insurance: Decimal = Decimal("0")
    retirement: Decimal = Decimal("0")
    other: Decimal = Decimal("0")


# =============================================================================
# SPOUSAL MAINTENANCE (750 ILCS 5/504)
# =============================================================================

class SpousalMaintenanceInput(BaseModel):
    """Inputs to the maintenance guideline. Incomes are annual gross."""

    payer_gross_income: Decimal = Field(..., ge=0)
    payee_gross_income: Decimal = Field(..., ge=0)
    duration_of_marriage: Decimal = Field(..., ge=0, description="Years")
    combined_gross_income: Decimal = Field(..., ge=0)


class SpousalMaintenanceCalculation(BaseModel):
    """Guideline maintenance amount, duration in months, and notes."""

    guideline_amount: Decimal
    guideline_duration: int
    notes: list[str] = Field(default_factory=list)


# =============================================================================
# COST ESTIMATE
# =============================================================================

class CostInputs(BaseModel):
    county: str = ""
    type: CaseType = CaseType.UNCONTESTED
    has_children: bool = False
    has_property: bool = False
    needs_service_of_process: bool = True
    needs_mediation: bool = False


class CostItem(BaseModel):
    category: str
    description: str
    amount: Decimal
    required: bool
    notes: Optional[str] = None


class CostEstimate(BaseModel):
    """Itemized cost estimate with the factors that drive it."""

    total: Decimal
    breakdown: list[CostItem] = Field(default_factory=list)
    factors: list[str] = Field(default_factory=list)
    disclaimer: str


class FeeWaiverInfo(BaseModel):
    eligible: str
    requirements: list[str]
    how_to_apply: str
    more_info: str


# =============================================================================
# TIMELINE
# =============================================================================

class TimelineInputs(BaseModel):
    type: CaseType = CaseType.UNCONTESTED
    county: str = ""
    has_children: bool = False
    has_property: bool = False
    has_complex_assets: bool = False
    filing_date: date


class TimelineMilestone(BaseModel):
    name: str
    estimated_date: date
    description: str
    days_from_filing: int


class TimelineResult(BaseModel):
    """Estimated completion date with milestone schedule."""

    estimated_completion: date
    estimated_days: int
    milestones: list[TimelineMilestone] = Field(default_factory=list)
    factors: list[str] = Field(default_factory=list)
