"""Petition for dissolution facts, read from questionnaire responses."""

from typing import Optional

from pydantic import BaseModel

from ..responses import QuestionnaireResponses, ResponseReader


class PetitionData(BaseModel):
    """Party, marriage and grounds facts for the petition.

    Every field is optional; renderers print placeholders for absent values.
    """

    petitioner_first_name: Optional[str] = None
    petitioner_last_name: Optional[str] = None
    petitioner_address: Optional[str] = None
    petitioner_county: Optional[str] = None
    spouse_first_name: Optional[str] = None
    spouse_last_name: Optional[str] = None
    spouse_address: Optional[str] = None
    marriage_date: Optional[str] = None
    separation_date: Optional[str] = None
    grounds_type: Optional[str] = None
    irreconcilable_duration: Optional[str] = None
    has_children: bool = False
    residency_duration_months: Optional[str] = None

    @classmethod
    def from_responses(cls, responses: QuestionnaireResponses) -> "PetitionData":
        reader = ResponseReader(responses)

        def opt(field: str) -> Optional[str]:
            return reader.text(field) or None

        return cls(
            petitioner_first_name=opt("petitioner-first-name"),
            petitioner_last_name=opt("petitioner-last-name"),
            petitioner_address=opt("petitioner-address"),
            petitioner_county=opt("petitioner-county"),
            spouse_first_name=opt("spouse-first-name"),
            spouse_last_name=opt("spouse-last-name"),
            spouse_address=opt("spouse-address"),
            marriage_date=opt("marriage-date"),
            separation_date=opt("separation-date"),
            grounds_type=opt("grounds-type"),
            irreconcilable_duration=opt("irreconcilable-duration"),
            has_children=reader.is_yes("has-children"),
            residency_duration_months=opt("residency-duration-months"),
        )
