"""Financial affidavit summary PDF."""

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Optional, TypeVar

from ..formatting import format_currency, format_short_date, format_timestamp
from ..models import DocumentMetadata, FinancialData
from .layout import HELVETICA, PdfPage, draw_disclaimer_footer

ItemT = TypeVar("ItemT")

SECTION_HEADING_SPACE = 20

DISCLAIMER_LINES = (
    "DISCLAIMER: This document is generated for informational purposes only.",
    "Consult with an attorney before filing with the court.",
)


def _section(
    page: PdfPage,
    heading: str,
    items: Sequence[ItemT],
    describe: Callable[[ItemT], str],
    empty_message: str,
    total_label: str,
    total: Decimal,
    intro: Optional[str] = None,
) -> None:
    # Heading stays with the line or two under it.
    opening_lines = 2 if items and intro else 1
    page.reserve(SECTION_HEADING_SPACE + (opening_lines - 1) * page.line_height)
    page.text(heading, 50, style="bold", size=12)
    page.down(SECTION_HEADING_SPACE)

    if not items:
        page.text(empty_message, 50)
        page.newline()
        return

    if intro:
        page.text(intro, 50)
        page.newline()

    for item in items:
        page.ensure_space()
        page.text(describe(item), 70)
        page.newline()

    page.ensure_space()
    page.text(f"{total_label}: {format_currency(total)}", 50, style="bold")
    page.down(30)


def render_financial_affidavit(
    data: FinancialData,
    metadata: Optional[DocumentMetadata] = None,
    *,
    compress: bool = False,
) -> bytes:
    """Render a financial affidavit from normalized financial data.

    All amounts are shown as monthly equivalents. Never raises for empty
    sections; each prints a "none reported" line instead.
    """
    metadata = metadata or DocumentMetadata()
    page = PdfPage("Financial Affidavit", fonts=HELVETICA, top=750, compress=compress)

    page.text(
        f"FINANCIAL AFFIDAVIT - {data.form_type.value.upper()} FORM",
        50,
        style="bold",
        size=14,
    )
    page.down(30)

    page.text("PETITIONER INFORMATION", 50, style="bold", size=12)
    page.down(20)
    page.text(f"Name: {metadata.user_name or 'N/A'}", 50)
    page.newline()
    page.text(f"Email: {metadata.user_email or ''}", 50)
    page.newline()
    page.text(f"Date: {format_short_date(metadata.generated_at)}", 50)
    page.down(30)

    _section(
        page,
        "INCOME",
        data.income,
        lambda i: f"• {i.source} ({i.type.value}): {format_currency(i.monthly_amount)}/month",
        "No income sources reported.",
        "Total Monthly Income",
        data.total_monthly_income,
        intro="Income Sources:",
    )
    _section(
        page,
        "MONTHLY EXPENSES",
        data.expenses,
        lambda e: (
            f"• {e.description} ({e.category.value}): "
            f"{format_currency(e.monthly_amount)}/month"
        ),
        "No expenses reported.",
        "Total Monthly Expenses",
        data.total_monthly_expenses,
    )
    _section(
        page,
        "ASSETS",
        data.assets,
        lambda a: (
            f"• {a.description} ({a.type.value}): "
            f"{format_currency(a.value)} - {a.ownership.value}"
        ),
        "No assets reported.",
        "Total Assets",
        data.total_assets,
    )
    _section(
        page,
        "DEBTS AND LIABILITIES",
        data.debts,
        lambda d: f"• {d.creditor} ({d.type.value}): {format_currency(d.balance)}",
        "No debts reported.",
        "Total Debts",
        data.total_debts,
    )

    page.ensure_space(100)
    page.text("SUMMARY", 50, style="bold", size=12)
    page.down(20)
    page.text(f"Net Monthly Income: {format_currency(data.net_monthly_income)}", 50)
    page.newline()
    page.text(f"Net Worth: {format_currency(data.net_worth)}", 50)
    page.down(30)

    draw_disclaimer_footer(page, DISCLAIMER_LINES, format_timestamp(metadata.generated_at))

    return page.finish()
