"""Fill official Illinois court form templates with PyPDF2.

Templates are AcroForm PDFs stored in a forms directory. Mapped and
computed values are written to whichever fields the template defines;
values for fields the template lacks are dropped.
"""

import io
from datetime import date
from pathlib import Path
from typing import Optional, Union

import structlog
from PyPDF2 import PdfReader, PdfWriter
from PyPDF2.errors import PdfReadError
from PyPDF2.generic import NameObject, NumberObject

from ..exceptions import OfficialFormError
from ..responses import QuestionnaireResponses
from .computed import financial_affidavit_fields, parenting_plan_fields, petition_fields
from .field_maps import TEMPLATE_FILES, OfficialFormType, apply_field_mappings, is_form_type_supported

logger = structlog.get_logger()

READ_ONLY_FLAG = 1
CHECKED_VALUES = {"Yes", "true", "1"}


def template_path(form_type: Union[OfficialFormType, str], forms_dir: Union[str, Path]) -> Path:
    """Location of the blank template for ``form_type``."""
    return Path(forms_dir) / TEMPLATE_FILES[OfficialFormType(form_type)]


def load_template(form_type: Union[OfficialFormType, str], forms_dir: Union[str, Path]) -> bytes:
    path = template_path(form_type, forms_dir)
    try:
        return path.read_bytes()
    except OSError as e:
        raise OfficialFormError(
            f"Failed to load {OfficialFormType(form_type).value} template: {e}",
            form_type=OfficialFormType(form_type).value,
            template_path=str(path),
        ) from e


def _widgets(page):
    for ref in page.get("/Annots") or []:
        annotation = ref.get_object()
        if "/T" in annotation:
            yield annotation


def fill_pdf_form(template: bytes, values: dict[str, str], *, flatten: bool = True) -> bytes:
    """Write ``values`` into the AcroForm fields of ``template``.

    Text fields receive the value as-is; checkboxes are set when the value
    is ``Yes``. With ``flatten`` every field is marked read-only.
    """
    reader = PdfReader(io.BytesIO(template))
    writer = PdfWriter(clone_from=reader)

    for page in writer.pages:
        text_values: dict[str, str] = {}
        for annotation in _widgets(page):
            name = str(annotation["/T"])
            if name in values:
                if annotation.get("/FT") == "/Btn":
                    state = NameObject("/Yes" if values[name] in CHECKED_VALUES else "/Off")
                    annotation[NameObject("/V")] = state
                    annotation[NameObject("/AS")] = state
                else:
                    text_values[name] = values[name]
            if flatten:
                flags = int(annotation.get("/Ff", 0))
                annotation[NameObject("/Ff")] = NumberObject(flags | READ_ONLY_FLAG)
        if text_values:
            writer.update_page_form_field_values(page, text_values)

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def form_values(
    form_type: OfficialFormType,
    responses: QuestionnaireResponses,
    *,
    prepared_on: date,
    parent1_name: Optional[str] = None,
    parent2_name: Optional[str] = None,
) -> dict[str, str]:
    """Mapped answers plus computed fields for one form."""
    values = apply_field_mappings(form_type.value, responses)
    if form_type in (OfficialFormType.PETITION_NO_CHILDREN, OfficialFormType.PETITION_WITH_CHILDREN):
        values.update(petition_fields(responses, prepared_on))
    elif form_type is OfficialFormType.FINANCIAL_AFFIDAVIT:
        values.update(financial_affidavit_fields(responses, prepared_on))
    elif form_type is OfficialFormType.PARENTING_PLAN:
        if not parent1_name or not parent2_name:
            raise OfficialFormError(
                "Parent names are required for parenting plan",
                form_type=form_type.value,
            )
        values.update(parenting_plan_fields(responses, parent1_name, parent2_name, prepared_on))
    return values


def fill_official_form(
    form_type: Union[OfficialFormType, str],
    responses: QuestionnaireResponses,
    *,
    forms_dir: Union[str, Path],
    flatten: bool = True,
    parent1_name: Optional[str] = None,
    parent2_name: Optional[str] = None,
    prepared_on: Optional[date] = None,
) -> bytes:
    """Generate a filled official form from questionnaire responses.

    Args:
        form_type: One of the supported :class:`OfficialFormType` values.
        responses: Raw questionnaire answers.
        forms_dir: Directory holding the blank templates.
        flatten: Mark the filled fields read-only.
        parent1_name: Required for the parenting plan.
        parent2_name: Required for the parenting plan.
        prepared_on: Date written to filing/preparation fields. Defaults to today.

    Returns:
        The filled PDF bytes.

    Raises:
        OfficialFormError: If the form type is not supported, the template
            is missing or unreadable, or required parent names are absent.
    """
    form_key = form_type.value if isinstance(form_type, OfficialFormType) else str(form_type)
    if not is_form_type_supported(form_key):
        raise OfficialFormError(
            f'Form type "{form_key}" is not yet implemented',
            form_type=form_key,
        )
    form_type = OfficialFormType(form_type)

    values = form_values(
        form_type,
        responses,
        prepared_on=prepared_on or date.today(),
        parent1_name=parent1_name,
        parent2_name=parent2_name,
    )
    template = load_template(form_type, forms_dir)

    try:
        filled = fill_pdf_form(template, values, flatten=flatten)
    except (PdfReadError, KeyError, ValueError) as e:
        raise OfficialFormError(
            f"Failed to fill {form_type.value} template: {e}",
            form_type=form_type.value,
            template_path=str(template_path(form_type, forms_dir)),
        ) from e

    logger.info(
        "official_form_filled",
        form_type=form_type.value,
        fields_supplied=len(values),
        flatten=flatten,
        size=len(filled),
    )
    return filled


def inspect_form_fields(pdf_bytes: bytes) -> list[str]:
    """Names of all AcroForm fields in ``pdf_bytes``, for building mappings."""
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
    except PdfReadError as e:
        raise OfficialFormError(f"Failed to read PDF: {e}") from e
    return list((reader.get_fields() or {}).keys())
