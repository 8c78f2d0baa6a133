"""Tests for display formatting and county reference data."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from freshstart_core.counties import county_instructions, get_county, get_filing_fees
from freshstart_core.formatting import (
    DATE_PLACEHOLDER,
    display_county,
    format_currency,
    format_form_date,
    format_full_date,
    format_long_date,
    format_short_date,
    format_timestamp,
    full_name,
    humanize_key,
    parse_date,
)


class TestFormatCurrency:
    """Test suite for format_currency."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("1234.5"), "$1,234.50"),
            (5000, "$5,000.00"),
            (0.125, "$0.13"),
            ("2,500", "$2,500.00"),
            (Decimal("-42.1"), "-$42.10"),
            (None, "$0.00"),
            ("", "$0.00"),
            ("n/a", "$0.00"),
        ],
    )
    def test_format(self, value, expected: str):
        assert format_currency(value) == expected


class TestDates:
    """Test suite for date parsing and display."""

    def test_parse_iso_and_us_formats(self):
        """ISO, ISO datetime and US slash dates are all accepted."""
        assert parse_date("2015-06-05") == date(2015, 6, 5)
        assert parse_date("2015-06-05T10:00:00Z") == date(2015, 6, 5)
        assert parse_date("06/05/2015") == date(2015, 6, 5)
        assert parse_date("June 5, 2015") == date(2015, 6, 5)
        assert parse_date("someday") is None
        assert parse_date("") is None

    def test_long_date(self):
        """Blank shows the placeholder; unreadable text is shown as given."""
        assert format_long_date("2015-06-05") == "June 5, 2015"
        assert format_long_date(None) == DATE_PLACEHOLDER
        assert format_long_date("last spring") == "last spring"

    def test_short_and_form_dates(self):
        assert format_short_date(date(2015, 6, 5)) == "6/5/2015"
        assert format_form_date("2015-06-05") == "06/05/2015"
        assert format_form_date("unknown") == ""

    def test_timestamp(self):
        """Timestamps use a 12-hour clock."""
        moment = datetime(2015, 6, 5, 15, 45)
        assert format_full_date(moment) == "Friday, June 5, 2015"
        assert format_timestamp(moment) == "Friday, June 5, 2015 at 3:45 PM"
        assert format_timestamp(datetime(2015, 6, 5, 0, 5)) == "Friday, June 5, 2015 at 12:05 AM"


class TestText:
    """Test suite for text helpers."""

    def test_humanize_key(self):
        assert humanize_key("employer-name") == "Employer Name"
        assert humanize_key("financial_affidavit") == "Financial Affidavit"

    def test_display_county(self):
        assert display_county("dupage") == "DuPage"
        assert display_county("st-clair") == "St. Clair"
        assert display_county("boone") == "Boone"
        assert display_county(None) == "___________"

    def test_full_name_collapses_blanks(self):
        assert full_name("Jane", "", "Doe") == "Jane Doe"
        assert full_name(None, "  ") == ""


class TestCounties:
    """Test suite for county reference data."""

    def test_lookup_is_forgiving(self):
        """Ids match regardless of case, spaces and punctuation."""
        assert get_county("cook").court_city == "Chicago"
        assert get_county("St. Clair").id == "stclair"
        assert get_county("st-clair").name == "St. Clair County"
        assert get_county("atlantis") is None
        assert get_county(None) is None

    def test_filing_fees_default(self):
        """Unknown counties use the standard $337 fee."""
        assert get_filing_fees("atlantis").petition_filing == 337
        assert get_filing_fees("cook").fee_waiver_available is True

    def test_instructions_for_known_county(self):
        instructions = county_instructions("dupage")
        assert instructions[0].startswith("E-filing is required in DuPage County.")
        assert "Mediation may be required before trial for custody/parenting disputes." in instructions
        assert "Mandatory disclosure required within 60 days" in instructions

    def test_instructions_for_unknown_county(self):
        assert county_instructions("atlantis") == [
            "Contact your local circuit court clerk for specific filing requirements."
        ]
