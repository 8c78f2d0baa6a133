"""Display formatting shared by renderers and packaging."""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

from .responses import to_decimal

NAME_PLACEHOLDER = "___________"
DATE_PLACEHOLDER = "_______________"
SIGNATURE_NAME_PLACEHOLDER = "_______________"

COUNTY_DISPLAY_NAMES: dict[str, str] = {
    "cook": "Cook",
    "dupage": "DuPage",
    "lake": "Lake",
    "will": "Will",
    "kane": "Kane",
    "mchenry": "McHenry",
    "winnebago": "Winnebago",
    "madison": "Madison",
    "st-clair": "St. Clair",
    "stclair": "St. Clair",
    "champaign": "Champaign",
}

DateLike = Union[date, datetime, str, None]


def format_currency(value: Any) -> str:
    """Format as US dollars, e.g. ``$1,234.50``. Blank or invalid is $0.00."""
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        amount = Decimal(str(value))
    else:
        amount = to_decimal(value)
    if not amount.is_finite():
        amount = Decimal("0")
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def parse_date(value: DateLike) -> Optional[date]:
    """Parse an ISO date or datetime string; None if it cannot be read."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for pattern in ("%m/%d/%Y", "%m-%d-%Y", "%B %d, %Y"):
        try:
            return datetime.strptime(text, pattern).date()
        except ValueError:
            continue
    return None


def format_long_date(value: DateLike, placeholder: str = DATE_PLACEHOLDER) -> str:
    """``June 5, 2015``; blank shows the placeholder, unreadable shows raw."""
    if value is None or value == "":
        return placeholder
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_short_date(value: DateLike) -> str:
    """``6/5/2015``."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_form_date(value: DateLike) -> str:
    """``06/05/2015`` for official form fields."""
    parsed = parse_date(value)
    return parsed.strftime("%m/%d/%Y") if parsed else ""


def format_full_date(value: Union[date, datetime]) -> str:
    """``Friday, June 5, 2015``."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time(value: datetime) -> str:
    """``3:45 PM``."""
    hour = value.hour % 12 or 12
    return f"{hour}:{value:%M} {'AM' if value.hour < 12 else 'PM'}"


def format_timestamp(value: datetime) -> str:
    """``Friday, June 5, 2015 at 3:45 PM``."""
    return f"{format_full_date(value)} at {format_time(value)}"


def display_county(county: Optional[str], placeholder: str = NAME_PLACEHOLDER) -> str:
    """County name as written in captions (``dupage`` -> ``DuPage``)."""
    if not county:
        return placeholder
    mapped = COUNTY_DISPLAY_NAMES.get(county.lower())
    if mapped:
        return mapped
    return county[:1].upper() + county[1:]


def humanize_key(key: str) -> str:
    """``employer-name`` -> ``Employer Name``."""
    spaced = re.sub(r"[-_]", " ", key)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def full_name(*parts: Optional[str]) -> str:
    """Join name parts, collapsing blanks and repeated whitespace."""
    return " ".join(" ".join(p or "" for p in parts).split())
