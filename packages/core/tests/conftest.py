"""Shared fixtures for freshstart_core tests."""

import io
from collections import namedtuple
from datetime import datetime

import pdfplumber
import pytest

from freshstart_core.models import DocumentMetadata
from freshstart_core.rendering.layout import PdfPage


def pdf_text(pdf_bytes: bytes) -> str:
    """Extract the text of every page, joined by newlines."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


def pdf_page_count(pdf_bytes: bytes) -> int:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return len(pdf.pages)


@pytest.fixture
def read_pdf_text():
    """Text extractor for rendered PDFs."""
    return pdf_text


@pytest.fixture
def count_pdf_pages():
    """Page counter for rendered PDFs."""
    return pdf_page_count


Drawn = namedtuple("Drawn", "page y text bottom_margin")


@pytest.fixture
def drawn_text(monkeypatch) -> list:
    """Record every string drawn through PdfPage as (page, y, text, bottom_margin)."""
    calls = []
    original = PdfPage.text

    def record(self, text, x=50, **kwargs):
        y = kwargs.get("y")
        calls.append(Drawn(self.page_number, self.y if y is None else y, text, self.bottom_margin))
        return original(self, text, x, **kwargs)

    monkeypatch.setattr(PdfPage, "text", record)
    return calls


@pytest.fixture
def drawn_rules(monkeypatch) -> list:
    """Record the (page, cursor y) of every horizontal rule."""
    calls = []
    original = PdfPage.line

    def record(self, *args, **kwargs):
        calls.append((self.page_number, self.y))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(PdfPage, "line", record)
    return calls


@pytest.fixture
def generated_at() -> datetime:
    return datetime(2015, 6, 5, 15, 45)


@pytest.fixture
def metadata(generated_at: datetime) -> DocumentMetadata:
    """Render metadata with a fixed timestamp."""
    return DocumentMetadata(
        user_name="Jane Doe",
        user_email="jane@example.com",
        generated_at=generated_at,
    )


@pytest.fixture
def financial_responses() -> dict:
    """A mixed kebab/camel financial questionnaire."""
    return {
        "employer-name": "Acme Corp",
        "grossMonthlySalary": "5,000",
        "rental-income": 800,
        "monthly-rent-mortgage": "1500",
        "electricity": "120",
        "waterSewer": "40",
        "internet-cable": "60",
        "groceries": 400,
        "primary-residence-value": "250000",
        "primary-residence-ownership": "individual",
        "vehicle-1-value": "12000",
        "vehicle-1-description": "2018 Honda Civic",
        "retirement-401k": "30000",
        "primary-residence-mortgage": "180000",
        "credit-card-debt": "4500",
        "student-loan-debt": 0,
    }


@pytest.fixture
def petition_responses() -> dict:
    return {
        "petitioner-first-name": "Jane",
        "petitioner-last-name": "Doe",
        "petitioner-address": "123 Main St, Chicago, IL 60601",
        "petitioner-county": "cook",
        "spouse-first-name": "John",
        "spouse-last-name": "Doe",
        "spouse-address": "456 Oak Ave, Evanston, IL 60201",
        "marriage-date": "2010-06-12",
        "separation-date": "2014-01-15",
        "grounds-type": "irreconcilable",
        "irreconcilable-duration": "6",
        "has-children": "no",
        "residency-duration-months": "26",
    }
