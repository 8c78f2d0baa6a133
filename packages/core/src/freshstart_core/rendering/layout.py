"""Low-level page layout over a reportlab canvas.

Every summary renderer draws through :class:`PdfPage`, which owns the
vertical cursor and the current page number. Callers reserve the height
of each logical block with :meth:`PdfPage.reserve` before drawing it, and
check single lines with :meth:`PdfPage.ensure_space`. Only the disclaimer
footer is drawn inside the bottom margin.
"""

import io
import textwrap
from dataclasses import dataclass
from typing import Optional

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

PAGE_WIDTH, PAGE_HEIGHT = letter

BLACK = (0.0, 0.0, 0.0)
GREY = (0.5, 0.5, 0.5)
LIGHT_GREY = (0.7, 0.7, 0.7)

FOOTER_SPACE = 80


@dataclass(frozen=True)
class FontFamily:
    regular: str
    bold: str
    italic: str


HELVETICA = FontFamily("Helvetica", "Helvetica-Bold", "Helvetica-Oblique")
TIMES = FontFamily("Times-Roman", "Times-Bold", "Times-Italic")


class PdfPage:
    """A US Letter canvas with a top-down text cursor.

    Args:
        title: PDF document title metadata.
        fonts: Font family used for regular, bold and italic text.
        font_size: Default text size in points.
        line_height: Default vertical advance per line.
        top: Cursor position at the top of each page.
        bottom_margin: Minimum cursor height before a page break.
        compress: Whether to deflate page content streams.
    """

    def __init__(
        self,
        title: str,
        *,
        fonts: FontFamily = HELVETICA,
        font_size: float = 10,
        line_height: float = 14,
        top: float = 750,
        bottom_margin: float = 50,
        compress: bool = False,
    ) -> None:
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=letter,
            invariant=1,
            pageCompression=1 if compress else 0,
        )
        self._canvas.setTitle(title)
        self._canvas.setCreator("FreshStart IL")
        self.fonts = fonts
        self.font_size = font_size
        self.line_height = line_height
        self.top = top
        self.bottom_margin = bottom_margin
        self.y = top
        self.page_number = 1

    # -- cursor -----------------------------------------------------------

    def down(self, amount: float) -> None:
        self.y -= amount

    def newline(self, extra: float = 0) -> None:
        """Advance one line plus ``extra`` points."""
        self.y -= self.line_height + extra

    def new_page(self) -> None:
        self._canvas.showPage()
        self.page_number += 1
        self.y = self.top

    def ensure_space(self, minimum: Optional[float] = None) -> bool:
        """Start a new page if the cursor is below ``minimum``.

        Returns True when a page break happened.
        """
        threshold = self.bottom_margin if minimum is None else minimum
        if self.y < threshold:
            self.new_page()
            return True
        return False

    def reserve(self, height: float) -> bool:
        """Start a new page unless a block reaching ``height`` points below
        the cursor stays above the bottom margin.

        ``height`` is measured from the cursor to the baseline of the
        block's last line. Returns True when a page break happened.
        """
        if self.y - height < self.bottom_margin:
            self.new_page()
            return True
        return False

    # -- drawing ----------------------------------------------------------

    def font_name(self, style: str = "regular") -> str:
        return getattr(self.fonts, style)

    def text_width(self, text: str, style: str = "regular", size: Optional[float] = None) -> float:
        return stringWidth(text, self.font_name(style), size or self.font_size)

    def text(
        self,
        text: str,
        x: float = 50,
        *,
        style: str = "regular",
        size: Optional[float] = None,
        color: tuple[float, float, float] = BLACK,
        centered: bool = False,
        y: Optional[float] = None,
    ) -> float:
        """Draw ``text`` on the cursor line without moving the cursor.

        Returns the x coordinate just past the drawn text.
        """
        font = self.font_name(style)
        size = size or self.font_size
        width = stringWidth(text, font, size)
        if centered:
            x = (PAGE_WIDTH - width) / 2
        self._canvas.setFont(font, size)
        self._canvas.setFillColorRGB(*color)
        self._canvas.drawString(x, self.y if y is None else y, text)
        return x + width

    def line(
        self,
        x1: float = 50,
        x2: float = 562,
        *,
        offset: float = 5,
        width: float = 0.5,
        color: tuple[float, float, float] = BLACK,
    ) -> None:
        """Draw a horizontal rule ``offset`` points above the cursor."""
        self._canvas.setStrokeColorRGB(*color)
        self._canvas.setLineWidth(width)
        self._canvas.line(x1, self.y + offset, x2, self.y + offset)

    def wrap(
        self,
        text: str,
        max_width: float,
        *,
        style: str = "regular",
        size: Optional[float] = None,
    ) -> list[str]:
        """Greedy word wrap by rendered width."""
        words = text.split()
        if not words:
            return [""]
        lines: list[str] = []
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if self.text_width(candidate, style, size) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
        return lines

    # -- output -----------------------------------------------------------

    def finish(self) -> bytes:
        """Close the document and return the PDF bytes."""
        self._canvas.save()
        return self._buffer.getvalue()


def wrap_chars(text: str, width: int) -> list[str]:
    """Wrap on word boundaries at a fixed character count."""
    return textwrap.wrap(text, width=width) or [""]


def draw_disclaimer_footer(
    page: PdfPage,
    lines: tuple[str, ...],
    generated: str,
    *,
    at_bottom: bool = False,
) -> None:
    """Draw the compliance footer: disclaimer lines then a timestamp.

    With ``at_bottom`` the footer is pinned to the bottom of the current
    page, breaking to a new page first if content reaches that area.
    """
    if at_bottom:
        page.ensure_space(90)
        page.y = 60
        page.line(offset=15, color=LIGHT_GREY)
    else:
        page.ensure_space(FOOTER_SPACE)
    for text in lines + (f"Generated: {generated}",):
        page.text(text, 50, size=8, color=GREY)
        page.down(10)
