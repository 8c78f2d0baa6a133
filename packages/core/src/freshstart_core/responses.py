"""Alias-aware access to raw questionnaire responses.

Questionnaire answers arrive as a flat mapping whose keys depend on the
questionnaire version that produced them: the same logical field may be
spelled ``gross-monthly-salary`` or ``grossMonthlySalary``. Every read in
the pipeline goes through :class:`ResponseReader`, which consults the
alias table below and never raises for absent or malformed values.

Example:
    reader = ResponseReader({"grossMonthlySalary": "5000"})
    reader.amount("gross-monthly-salary")  # Decimal("5000")
    reader.text("employer-name", "Employer")  # "Employer"
"""

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

QuestionnaireResponses = Mapping[str, Any]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "phone-cell": ("phone-cell", "phoneCellPhone"),
    "monthly-housing-cost": (
        "monthly-rent-mortgage",
        "monthlyRentMortgage",
        "monthly-housing",
        "monthlyHousing",
    ),
    # Single-word keys that were only ever written one way.
    "electricity": ("electricity",),
    "groceries": ("groceries",),
    "clothing": ("clothing",),
    "entertainment": ("entertainment",),
    "subscriptions": ("subscriptions",),
}
"""Canonical field name to the ordered key variants that may hold it.

Fields not listed here resolve to their kebab-case key followed by the
mechanical camelCase spelling.
"""

_TRUTHY = {"yes", "true", "on", "1", "y"}


def kebab_to_camel(key: str) -> str:
    """Convert ``vehicle-1-value`` style keys to ``vehicle1Value``."""
    head, *rest = key.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def aliases_for(field: str) -> tuple[str, ...]:
    """Return the ordered key variants for a canonical field."""
    if field in FIELD_ALIASES:
        return FIELD_ALIASES[field]
    camel = kebab_to_camel(field)
    return (field,) if camel == field else (field, camel)


def to_decimal(value: Any) -> Decimal:
    """Coerce a raw answer to a non-negative Decimal, defaulting to zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, str):
        value = re.sub(r"[,$\s]", "", value)
        if not value:
            return Decimal("0")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not amount.is_finite() or amount < 0:
        return Decimal("0")
    return amount


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value == 0
    return False


class ResponseReader:
    """Read logical fields from a raw response mapping.

    Lookups try each alias in order and take the first present, non-zero,
    non-empty value. Absence is never an error.
    """

    def __init__(self, responses: Optional[QuestionnaireResponses]) -> None:
        self.responses: QuestionnaireResponses = responses or {}

    def raw(self, field: str) -> Any:
        """Return the first non-blank raw value for ``field``, or None."""
        for key in aliases_for(field):
            value = self.responses.get(key)
            if not _is_blank(value):
                return value
        return None

    def amount(self, field: str) -> Decimal:
        """Return the first non-zero numeric value for ``field``, else 0."""
        for key in aliases_for(field):
            amount = to_decimal(self.responses.get(key))
            if amount > 0:
                return amount
        return Decimal("0")

    def text(self, field: str, default: str = "") -> str:
        value = self.raw(field)
        if value is None:
            return default
        return str(value).strip()

    def integer(self, field: str, default: int = 0) -> int:
        """Return the whole-number value of ``field``, truncating decimals."""
        amount = self.amount(field)
        return int(amount) if amount > 0 else default

    def flag(self, field: str) -> bool:
        """Interpret yes/no, true/false and checkbox style answers."""
        value = self.raw(field)
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in _TRUTHY

    def is_yes(self, field: str) -> bool:
        """True only for an explicit ``yes`` answer."""
        return self.text(field).lower() == "yes"

    def __contains__(self, field: str) -> bool:
        return self.raw(field) is not None


def has_children(responses: QuestionnaireResponses) -> bool:
    """Whether the responses indicate minor children of the marriage.

    Any one signal is enough: an explicit ``has-children`` yes, a boolean
    ``hasChildren`` flag, or a positive ``number-of-children``.
    """
    if str(responses.get("has-children", "")).lower() == "yes":
        return True
    if responses.get("hasChildren") is True:
        return True
    return ResponseReader(responses).integer("number-of-children") > 0


__all__ = [
    "FIELD_ALIASES",
    "QuestionnaireResponses",
    "ResponseReader",
    "aliases_for",
    "has_children",
    "kebab_to_camel",
    "to_decimal",
]
