"""Tests for official court form mapping and filling."""

import io
from datetime import date
from pathlib import Path

import pytest
from PyPDF2 import PdfReader
from reportlab.pdfgen import canvas

from freshstart_core.exceptions import OfficialFormError
from freshstart_core.official_forms import (
    SUPPORTED_FORM_TYPES,
    OfficialFormType,
    apply_field_mappings,
    fill_official_form,
    inspect_form_fields,
    is_form_type_supported,
    required_questionnaire_fields,
    template_path,
    validate_fields_present,
)
from freshstart_core.official_forms.computed import (
    describe_residency,
    financial_affidavit_fields,
    parenting_plan_fields,
    petition_fields,
)

PREPARED_ON = date(2015, 6, 5)


def build_template(text_fields: list[str], checkboxes: tuple[str, ...] = ()) -> bytes:
    """A one-page AcroForm PDF with the named fields."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, invariant=1)
    y = 740
    for name in text_fields:
        c.acroForm.textfield(name=name, x=50, y=y, width=300, height=18)
        y -= 24
    for name in checkboxes:
        c.acroForm.checkbox(name=name, x=50, y=y, size=14)
        y -= 24
    c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def forms_dir(tmp_path: Path) -> Path:
    """Templates for the no-children and with-children petitions."""
    petition_fields_ = [
        "PetitionerFirstName",
        "PetitionerLastName",
        "RespondentFirstName",
        "County",
        "DateOfMarriage",
        "YearsOfMarriage",
        "DateFiled",
    ]
    template_path(OfficialFormType.PETITION_NO_CHILDREN, tmp_path).write_bytes(
        build_template(petition_fields_)
    )
    template_path(OfficialFormType.PETITION_WITH_CHILDREN, tmp_path).write_bytes(
        build_template(petition_fields_, checkboxes=("HasMinorChildren",))
    )
    return tmp_path


class TestFieldMappings:
    """Test suite for questionnaire to PDF field mapping."""

    def test_supported_types(self):
        assert len(SUPPORTED_FORM_TYPES) == 4
        assert is_form_type_supported("petition-no-children") is True
        assert is_form_type_supported("summons") is False
        assert is_form_type_supported("unknown") is False

    def test_petition_values(self, petition_responses: dict):
        """Dates, county and grounds are transformed for the court form."""
        values = apply_field_mappings("petition-no-children", petition_responses)

        assert values["PetitionerFirstName"] == "Jane"
        assert values["RespondentLastName"] == "Doe"
        assert values["DateOfMarriage"] == "06/12/2010"
        assert values["County"] == "Cook County"
        assert values["GroundsForDivorce"] == "Irreconcilable Differences"
        assert "PetitionerMiddleName" not in values

    def test_camel_case_alias(self):
        values = apply_field_mappings("petition-no-children", {"petitionerFirstName": "Jane"})
        assert values == {"PetitionerFirstName": "Jane"}

    def test_zero_counts_as_answered(self):
        """A zero amount is written, not skipped."""
        values = apply_field_mappings("financial-affidavit", {"rental-income": 0, "groceries": "450"})
        assert values == {"RentalIncome": "$0.00", "Groceries": "$450.00"}

    def test_checkbox_transform(self):
        values = apply_field_mappings(
            "petition-with-children", {"has-children": "yes", "number-of-children": 2}
        )
        assert values["HasMinorChildren"] == "Yes"
        assert values["NumberOfChildren"] == "2"

    def test_unknown_form_has_no_mappings(self):
        assert apply_field_mappings("unknown", {"petitioner-first-name": "Jane"}) == {}
        assert required_questionnaire_fields("unknown") == []

    def test_validate_fields_present(self, petition_responses: dict):
        coverage = validate_fields_present("petition-no-children", petition_responses)
        assert coverage.valid is False
        assert coverage.missing_fields == ["petitioner-middle-name"]

        complete = dict(petition_responses, **{"petitioner-middle-name": "Q"})
        assert validate_fields_present("petition-no-children", complete).valid is True


class TestComputedFields:
    """Test suite for derived official form values."""

    @pytest.mark.parametrize(
        "months,expected",
        [(0, ""), (1, "1 month"), (12, "1 year"), (26, "2 years and 2 months")],
    )
    def test_describe_residency(self, months: int, expected: str):
        assert describe_residency(months) == expected

    def test_petition_fields(self, petition_responses: dict):
        """Years of marriage run to the separation date when one is given."""
        values = petition_fields(petition_responses, PREPARED_ON)

        assert values["PetitionerFullName"] == "Jane Doe"
        assert values["RespondentFullName"] == "John Doe"
        assert values["DateFiled"] == "06/05/2015"
        assert values["CountyHeader"] == "Cook County"
        assert values["ResidencyDuration"] == "2 years and 2 months"
        assert values["YearsOfMarriage"] == "3"
        assert "CaseNumber" not in values

    def test_years_of_marriage_without_separation(self, petition_responses: dict):
        responses = {k: v for k, v in petition_responses.items() if k != "separation-date"}
        assert petition_fields(responses, PREPARED_ON)["YearsOfMarriage"] == "4"

    def test_financial_affidavit_totals(self, financial_responses: dict):
        """Totals match the normalized financial data."""
        values = financial_affidavit_fields(financial_responses, PREPARED_ON)

        assert values["TotalMonthlyIncome"] == "$5,800.00"
        assert values["TotalMonthlyExpenses"] == "$2,120.00"
        assert values["NetMonthlyIncome"] == "$3,680.00"
        assert values["NetWorth"] == "$107,500.00"
        assert values["UtilitySubtotal"] == "$220.00"
        assert values["HousingSubtotal"] == "$1,500.00"
        assert values["DatePrepared"] == "06/05/2015"

    def test_parenting_plan_fields(self):
        """Children without a readable birth date are left off the form."""
        values = parenting_plan_fields(
            {
                "children-count": "2",
                "child-1-name": "Sam Doe",
                "child-1-dob": "2012-03-04",
                "child-1-school": "Lincoln Elementary",
                "child-2-name": "Alex Doe",
                "schedule-type": "standard",
                "primary-residence": "parent2",
                "holiday-approach": "split",
            },
            "Jane Doe",
            "John Doe",
            PREPARED_ON,
        )

        assert values["Parent1Name"] == "Jane Doe"
        assert values["RespondentName"] == "John Doe"
        assert values["Child1Name"] == "Sam Doe"
        assert values["Child1DOB"] == "03/04/2012"
        assert values["Child1Age"] == "3"
        assert values["Child1School"] == "Lincoln Elementary"
        assert "Child2Name" not in values
        assert values["ScheduleDescription"].startswith(
            "The children will primarily reside with Respondent (Parent 2)."
        )
        assert values["HolidayScheduleDescription"].startswith("Holidays will be split each year.")
        assert values["TransportationDetails"] == (
            "Exchanges will occur at Parent 1's Residence. Receiving Parent Picks Up. "
            "A grace period of 15 minutes is allowed."
        )


class TestFillOfficialForm:
    """Test suite for fill_official_form."""

    def test_fills_text_fields(self, forms_dir: Path, petition_responses: dict):
        """Mapped and computed values land in the template's fields."""
        pdf = fill_official_form(
            "petition-no-children",
            petition_responses,
            forms_dir=forms_dir,
            prepared_on=PREPARED_ON,
        )
        fields = PdfReader(io.BytesIO(pdf)).get_form_text_fields()

        assert fields["PetitionerFirstName"] == "Jane"
        assert fields["County"] == "Cook County"
        assert fields["DateOfMarriage"] == "06/12/2010"
        assert fields["YearsOfMarriage"] == "3"
        assert fields["DateFiled"] == "06/05/2015"

    def test_flatten_marks_fields_read_only(self, forms_dir: Path, petition_responses: dict):
        pdf = fill_official_form(
            OfficialFormType.PETITION_NO_CHILDREN,
            petition_responses,
            forms_dir=forms_dir,
            prepared_on=PREPARED_ON,
        )
        fields = PdfReader(io.BytesIO(pdf)).get_fields()
        assert int(fields["PetitionerFirstName"].get("/Ff", 0)) & 1

    def test_unflattened_fields_stay_editable(self, forms_dir: Path, petition_responses: dict):
        pdf = fill_official_form(
            "petition-no-children",
            petition_responses,
            forms_dir=forms_dir,
            flatten=False,
            prepared_on=PREPARED_ON,
        )
        fields = PdfReader(io.BytesIO(pdf)).get_fields()
        assert not int(fields["PetitionerFirstName"].get("/Ff", 0)) & 1

    def test_checkbox(self, forms_dir: Path, petition_responses: dict):
        responses = dict(petition_responses, **{"has-children": "yes"})
        pdf = fill_official_form(
            "petition-with-children",
            responses,
            forms_dir=forms_dir,
            prepared_on=PREPARED_ON,
        )
        fields = PdfReader(io.BytesIO(pdf)).get_fields()
        assert fields["HasMinorChildren"].get("/V") == "/Yes"

    def test_missing_template(self, tmp_path: Path, petition_responses: dict):
        """A missing template is a recoverable error naming the path."""
        with pytest.raises(OfficialFormError) as exc_info:
            fill_official_form("petition-no-children", petition_responses, forms_dir=tmp_path)

        assert exc_info.value.recoverable is True
        assert exc_info.value.details["form_type"] == "petition-no-children"
        assert exc_info.value.template_path.endswith("petition-dissolution-no-children.pdf")

    def test_unsupported_form_type(self, forms_dir: Path):
        with pytest.raises(OfficialFormError, match='Form type "summons" is not yet implemented'):
            fill_official_form("summons", {}, forms_dir=forms_dir)

    def test_parenting_plan_requires_parent_names(self, forms_dir: Path):
        with pytest.raises(OfficialFormError, match="Parent names are required"):
            fill_official_form("parenting-plan", {}, forms_dir=forms_dir, parent1_name="Jane Doe")

    def test_corrupt_template(self, tmp_path: Path):
        template_path(OfficialFormType.FINANCIAL_AFFIDAVIT, tmp_path).write_bytes(b"not a pdf")
        with pytest.raises(OfficialFormError):
            fill_official_form("financial-affidavit", {}, forms_dir=tmp_path)

    def test_inspect_form_fields(self, forms_dir: Path):
        template = template_path(OfficialFormType.PETITION_WITH_CHILDREN, forms_dir).read_bytes()
        names = inspect_form_fields(template)
        assert "PetitionerFirstName" in names
        assert "HasMinorChildren" in names
