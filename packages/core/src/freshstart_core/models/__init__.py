"""Data models for FreshStart IL documents and calculations."""

from .calculations import (
    CaseType,
    ChildSupportCalculation,
    ChildSupportInput,
    CostEstimate,
    CostInputs,
    CostItem,
    FeeWaiverInfo,
    NetIncomeDeductions,
    SpousalMaintenanceCalculation,
    SpousalMaintenanceInput,
    TimelineInputs,
    TimelineMilestone,
    TimelineResult,
)
from .documents import (
    DOCUMENT_TYPE_ALIASES,
    DocumentKind,
    DocumentMetadata,
    DocumentStatus,
    GenerationMode,
    MimeType,
    resolve_document_kind,
)
from .financial import (
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
from .petition import PetitionData

__all__ = [
    # Financial
    "AffidavitFormType",
    "Asset",
    "AssetType",
    "Debt",
    "DebtType",
    "Expense",
    "ExpenseCategory",
    "FinancialData",
    "Frequency",
    "IncomeSource",
    "IncomeSourceType",
    "Ownership",
    # Calculations
    "CaseType",
    "ChildSupportCalculation",
    "ChildSupportInput",
    "CostEstimate",
    "CostInputs",
    "CostItem",
    "FeeWaiverInfo",
    "NetIncomeDeductions",
    "SpousalMaintenanceCalculation",
    "SpousalMaintenanceInput",
    "TimelineInputs",
    "TimelineMilestone",
    "TimelineResult",
    # Documents
    "PetitionData",
    "DOCUMENT_TYPE_ALIASES",
    "DocumentKind",
    "DocumentMetadata",
    "DocumentStatus",
    "GenerationMode",
    "MimeType",
    "resolve_document_kind",
]
