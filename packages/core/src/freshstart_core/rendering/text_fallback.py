"""Plain-text rendering of raw questionnaire responses.

Used for document types with no PDF renderer and as the last resort when
a PDF renderer fails. It does nothing but string formatting, so it cannot
fail on any response mapping.
"""

import json
from datetime import datetime
from typing import Any

from ..formatting import format_timestamp, humanize_key
from ..responses import QuestionnaireResponses

RULE_WIDTH = 60
HEAVY_RULE = "═" * RULE_WIDTH
LIGHT_RULE = "─" * RULE_WIDTH

DISCLAIMER_LINES = (
    "DISCLAIMER: This document is generated for informational purposes",
    "only. This is not legal advice. Please consult with an attorney",
    "before filing with the court.",
)


def format_value(value: Any) -> str:
    """Render one answer on a single line."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


def build_text_document(
    document_type: str,
    responses: QuestionnaireResponses,
    generated_at: datetime,
) -> str:
    """Build the boxed plain-text document for ``document_type``.

    Every response key is listed in mapping order under its humanized
    label (``employer-name`` -> ``Employer Name``).
    """
    title = document_type.upper().replace("-", " ")
    lines = [
        HEAVY_RULE,
        f"  FRESHSTART IL - {title}",
        HEAVY_RULE,
        "",
        f"Generated: {format_timestamp(generated_at)}",
        "",
        LIGHT_RULE,
        "  INFORMATION PROVIDED",
        LIGHT_RULE,
        "",
    ]
    for key, value in responses.items():
        lines.append(f"  {humanize_key(key)}:")
        lines.append(f"    {format_value(value)}")
        lines.append("")
    lines.append(LIGHT_RULE)
    lines.append("")
    lines.extend(DISCLAIMER_LINES)
    lines.append("")
    lines.append(HEAVY_RULE)
    return "\n".join(lines)
