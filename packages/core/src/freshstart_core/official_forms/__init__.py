"""Official Illinois Supreme Court approved form filling."""

from .field_maps import (
    FIELD_MAPS,
    SUPPORTED_FORM_TYPES,
    TEMPLATE_FILES,
    FieldCoverage,
    FieldMapping,
    OfficialFormType,
    apply_field_mappings,
    field_mapping,
    is_form_type_supported,
    required_questionnaire_fields,
    validate_fields_present,
)
from .filler import fill_official_form, fill_pdf_form, inspect_form_fields, template_path

__all__ = [
    "FIELD_MAPS",
    "SUPPORTED_FORM_TYPES",
    "TEMPLATE_FILES",
    "FieldCoverage",
    "FieldMapping",
    "OfficialFormType",
    "apply_field_mappings",
    "field_mapping",
    "fill_official_form",
    "fill_pdf_form",
    "inspect_form_fields",
    "is_form_type_supported",
    "required_questionnaire_fields",
    "template_path",
    "validate_fields_present",
]
