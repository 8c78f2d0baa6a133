"""Cost and timeline estimates for an Illinois dissolution case.

These are planning aids, not guideline formulas: every figure is a typical
value for the county and case type, and each result carries the factors
that moved it.
"""

from datetime import timedelta
from decimal import Decimal

import structlog

from ..models import (
    CaseType,
    CostEstimate,
    CostInputs,
    CostItem,
    FeeWaiverInfo,
    TimelineInputs,
    TimelineMilestone,
    TimelineResult,
)

logger = structlog.get_logger()


# =============================================================================
# COSTS
# =============================================================================

BASE_FILING_FEES: dict[str, Decimal] = {
    "cook": Decimal("388"),
    "dupage": Decimal("388"),
    "will": Decimal("388"),
    "lake": Decimal("388"),
    "kane": Decimal("388"),
    "mchenry": Decimal("388"),
}
DEFAULT_FILING_FEE = Decimal("388")

SERVICE_FEES = {
    "sheriff": Decimal("50"),
    "private": Decimal("75"),
    "publication": Decimal("200"),
}

MEDIATION_SESSION_COST = Decimal("200")
PARENTING_CLASS_COST = Decimal("50")

ATTORNEY_FEES = {
    "uncontested": 1500,
    "contested": 10000,
    "hourly": 250,
}

COST_DISCLAIMER = (
    "These are estimated costs based on typical Illinois divorce proceedings. "
    "Actual costs may vary based on your specific situation, county requirements, "
    "and whether you hire an attorney. Court fees are subject to change. Fee "
    "waivers may be available for low-income individuals."
)


def county_key(county: str) -> str:
    """Normalize a county name for table lookups (``St Clair`` -> ``stclair``)."""
    return "".join(county.lower().split())


def estimate_costs(inputs: CostInputs) -> CostEstimate:
    """Build an itemized cost estimate for the given case profile."""
    contested = inputs.type == CaseType.CONTESTED
    breakdown: list[CostItem] = []
    factors: list[str] = []

    breakdown.append(
        CostItem(
            category="Court Filing Fee",
            description="Filing fee for Petition for Dissolution of Marriage",
            amount=BASE_FILING_FEES.get(county_key(inputs.county), DEFAULT_FILING_FEE),
            required=True,
            notes="Required by all Illinois counties",
        )
    )

    if inputs.needs_service_of_process:
        breakdown.append(
            CostItem(
                category="Service of Process",
                description="Fee to serve divorce papers to spouse",
                amount=SERVICE_FEES["sheriff"],
                required=True,
                notes="Sheriff service fee (private servers may charge more)",
            )
        )

    if inputs.has_children:
        breakdown.append(
            CostItem(
                category="Parent Education Class",
                description="Required parenting education course",
                amount=PARENTING_CLASS_COST,
                required=True,
                notes="Required in many Illinois counties when children are involved",
            )
        )
        factors.append("Parent education class required (varies by county)")

    if inputs.needs_mediation or contested:
        sessions = 3 if contested else 2
        breakdown.append(
            CostItem(
                category="Mediation",
                description=f"Mediation sessions ({sessions} sessions estimated)",
                amount=MEDIATION_SESSION_COST * sessions,
                required=contested,
                notes="May be court-ordered or voluntary",
            )
        )
        factors.append("Mediation may be required or recommended")

    breakdown.append(
        CostItem(
            category="Document Preparation",
            description="Platform provides free document generation",
            amount=Decimal("0"),
            required=False,
            notes="Using FreshStart IL saves hundreds in document preparation fees",
        )
    )

    if contested:
        factors.append(
            f"Attorney fees: ${ATTORNEY_FEES['contested']:,}+ (if hiring attorney)"
        )
        factors.append(
            f"Average hourly rate: ${ATTORNEY_FEES['hourly']}/hour (varies by attorney)"
        )
    else:
        factors.append(
            f"Attorney fees: ${ATTORNEY_FEES['uncontested']:,}+ (if hiring attorney)"
        )

    if inputs.has_property:
        factors.append("Property division may require appraisals or valuations")

    total = sum((item.amount for item in breakdown), Decimal("0"))
    logger.debug("cost_estimated", county=inputs.county, type=inputs.type.value, total=str(total))
    return CostEstimate(
        total=total,
        breakdown=breakdown,
        factors=factors,
        disclaimer=COST_DISCLAIMER,
    )


def get_fee_waiver_info() -> FeeWaiverInfo:
    return FeeWaiverInfo(
        eligible="Low-income individuals may qualify for fee waivers",
        requirements=[
            "Income below 125% of federal poverty guidelines",
            "Receiving public assistance",
            "Unable to pay fees without undue hardship",
        ],
        how_to_apply="File a Petition for Waiver of Court Fees with your divorce petition",
        more_info="Contact your local circuit clerk's office for fee waiver forms",
    )


# =============================================================================
# TIMELINE
# =============================================================================

BASE_TIMELINES = {
    CaseType.UNCONTESTED: 90,
    CaseType.CONTESTED: 180,
}

MINIMUM_TIMELINES = {
    CaseType.UNCONTESTED: 60,
    CaseType.CONTESTED: 120,
}

COUNTY_ADJUSTMENTS: dict[str, int] = {
    "cook": 30,
    "dupage": -15,
    "will": -10,
    "lake": 0,
    "kane": -5,
}

COMPLEXITY_ADJUSTMENTS = {
    "children": 30,
    "property": 20,
    "complex_assets": 45,
}

COMMON_MILESTONES: tuple[tuple[str, int, str], ...] = (
    ("Filing Date", 0, "Petition for Dissolution of Marriage filed"),
    ("Service of Process", 14, "Spouse served with divorce papers"),
    ("Response Deadline", 30, "Spouse must respond (30 days from service)"),
)

CASE_MILESTONES: dict[CaseType, tuple[tuple[str, int, str], ...]] = {
    CaseType.UNCONTESTED: (
        ("Agreement Reached", 45, "Marital Settlement Agreement finalized"),
        ("Final Hearing", 60, "Court hearing to finalize divorce"),
    ),
    CaseType.CONTESTED: (
        ("Discovery Period", 90, "Information gathering and document exchange"),
        ("Mediation/Settlement Conference", 120, "Attempt to reach agreement"),
        ("Trial Date", 150, "Court trial (if no settlement reached)"),
    ),
}


def calculate_timeline(inputs: TimelineInputs) -> TimelineResult:
    """Estimate the days from filing to judgment, with milestones."""
    county_adjustment = COUNTY_ADJUSTMENTS.get(county_key(inputs.county), 0)

    days = BASE_TIMELINES[inputs.type] + county_adjustment
    if inputs.has_children:
        days += COMPLEXITY_ADJUSTMENTS["children"]
    if inputs.has_property:
        days += COMPLEXITY_ADJUSTMENTS["property"]
    if inputs.has_complex_assets:
        days += COMPLEXITY_ADJUSTMENTS["complex_assets"]
    days = max(days, MINIMUM_TIMELINES[inputs.type])

    filing = inputs.filing_date
    milestones = [
        TimelineMilestone(
            name=name,
            estimated_date=filing + timedelta(days=offset),
            description=description,
            days_from_filing=offset,
        )
        for name, offset, description in COMMON_MILESTONES + CASE_MILESTONES[inputs.type]
    ]
    milestones.append(
        TimelineMilestone(
            name="Final Judgment",
            estimated_date=filing + timedelta(days=days),
            description="Divorce finalized by court",
            days_from_filing=days,
        )
    )

    factors: list[str] = []
    if inputs.type == CaseType.CONTESTED:
        factors.append("Contested divorce (longer timeline)")
    if inputs.has_children:
        factors.append("Children involved (custody/parenting time considerations)")
    if inputs.has_property:
        factors.append("Property division required")
    if inputs.has_complex_assets:
        factors.append("Complex assets (businesses, investments) require valuation")
    if county_adjustment > 0:
        factors.append(f"{inputs.county} County typically has longer processing times")
    elif county_adjustment < 0:
        factors.append(f"{inputs.county} County typically processes faster")

    return TimelineResult(
        estimated_completion=filing + timedelta(days=days),
        estimated_days=days,
        milestones=milestones,
        factors=factors,
    )
