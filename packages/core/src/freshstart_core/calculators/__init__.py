"""Guideline calculators and case estimators."""

from .child_support import (
    BASIC_SUPPORT_TABLE,
    ChildSupportCalculator,
    calculate_child_support,
    calculate_net_income,
    support_percentage,
)
from .estimators import calculate_timeline, estimate_costs, get_fee_waiver_info
from .maintenance import (
    SpousalMaintenanceCalculator,
    calculate_spousal_maintenance,
    maintenance_guidelines_apply,
)

__all__ = [
    "BASIC_SUPPORT_TABLE",
    "ChildSupportCalculator",
    "SpousalMaintenanceCalculator",
    "calculate_child_support",
    "calculate_net_income",
    "calculate_spousal_maintenance",
    "calculate_timeline",
    "estimate_costs",
    "get_fee_waiver_info",
    "maintenance_guidelines_apply",
    "support_percentage",
]
