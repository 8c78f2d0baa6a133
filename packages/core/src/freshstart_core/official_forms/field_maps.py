"""Questionnaire field to official PDF field mappings.

PDF field names follow the Illinois Supreme Court approved statewide
forms. Each mapping names the questionnaire field it reads and an
optional transform that turns the raw answer into the text the court
form expects.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..formatting import format_currency, format_form_date
from ..responses import aliases_for


class OfficialFormType(str, Enum):
    """Illinois statewide family-law forms known to the filler."""

    PETITION_NO_CHILDREN = "petition-no-children"
    PETITION_WITH_CHILDREN = "petition-with-children"
    FINANCIAL_AFFIDAVIT = "financial-affidavit"
    PARENTING_PLAN = "parenting-plan"
    SUMMONS = "summons"
    CERTIFICATE_OF_SERVICE = "certificate-of-service"
    JUDGMENT_NO_CHILDREN = "judgment-no-children"
    JUDGMENT_WITH_CHILDREN = "judgment-with-children"
    MARITAL_SETTLEMENT_AGREEMENT = "marital-settlement-agreement"


SUPPORTED_FORM_TYPES = (
    OfficialFormType.PETITION_NO_CHILDREN,
    OfficialFormType.PETITION_WITH_CHILDREN,
    OfficialFormType.FINANCIAL_AFFIDAVIT,
    OfficialFormType.PARENTING_PLAN,
)

TEMPLATE_FILES: dict[OfficialFormType, str] = {
    OfficialFormType.PETITION_NO_CHILDREN: "petition-dissolution-no-children.pdf",
    OfficialFormType.PETITION_WITH_CHILDREN: "petition-dissolution-with-children.pdf",
    OfficialFormType.FINANCIAL_AFFIDAVIT: "financial-affidavit.pdf",
    OfficialFormType.PARENTING_PLAN: "parenting-plan.pdf",
    OfficialFormType.SUMMONS: "summons-dissolution.pdf",
    OfficialFormType.CERTIFICATE_OF_SERVICE: "certificate-of-service.pdf",
    OfficialFormType.JUDGMENT_NO_CHILDREN: "judgment-dissolution-no-children.pdf",
    OfficialFormType.JUDGMENT_WITH_CHILDREN: "judgment-dissolution-with-children.pdf",
    OfficialFormType.MARITAL_SETTLEMENT_AGREEMENT: "marital-settlement-agreement.pdf",
}


def is_form_type_supported(form_type: str) -> bool:
    return form_type in {t.value for t in SUPPORTED_FORM_TYPES}


# =============================================================================
# TRANSFORMS
# =============================================================================

def _lookup(table: dict[str, str]) -> Callable[[Any], str]:
    def transform(value: Any) -> str:
        return table.get(str(value), str(value))

    return transform


COUNTY_NAMES = {
    "cook": "Cook County",
    "dupage": "DuPage County",
    "lake": "Lake County",
    "will": "Will County",
    "kane": "Kane County",
    "mchenry": "McHenry County",
    "winnebago": "Winnebago County",
    "madison": "Madison County",
    "stclair": "St. Clair County",
    "sangamon": "Sangamon County",
    "other": "Other County",
}

GROUNDS = {
    "irreconcilable": "Irreconcilable Differences",
    "impotence": "Impotence",
    "bigamy": "Bigamy",
    "adultery": "Adultery",
    "desertion": "Willful Desertion",
    "substance": "Habitual Drunkenness or Drug Addiction",
    "cruelty": "Extreme and Repeated Mental or Physical Cruelty",
    "attempted_murder": "Attempt on Life of Spouse",
    "felony": "Conviction of a Felony or Other Infamous Crime",
}

EMPLOYMENT_STATUS = {
    "full_time": "Employed Full-Time",
    "part_time": "Employed Part-Time",
    "self_employed": "Self-Employed",
    "unemployed": "Unemployed",
    "retired": "Retired",
    "disabled": "Disabled",
}

DECISION_MAKING = {
    "joint": "Joint (Both Parents)",
    "parent1": "Petitioner (Parent 1)",
    "parent2": "Respondent (Parent 2)",
    "na": "Not Applicable",
}

SCHEDULE_TYPES = {
    "standard": "Standard (Every Other Weekend)",
    "week_on_off": "50/50 - Week On/Week Off",
    "2_2_3": "50/50 - 2-2-3 Rotation",
    "3_4_4_3": "50/50 - 3-4-4-3 Rotation",
    "60_40": "60/40 Split",
    "custom": "Custom Schedule",
}

PARENTS = {
    "parent1": "Petitioner (Parent 1)",
    "parent2": "Respondent (Parent 2)",
    "shared": "Shared (Alternating)",
    "mother": "Mother",
    "father": "Father",
    "split": "Split Between Parents",
}

EXCHANGE_TIMES = {
    "friday_school": "Friday after school",
    "friday_6pm": "Friday at 6:00 PM",
    "saturday_morning": "Saturday morning",
    "sunday_6pm": "Sunday at 6:00 PM",
    "monday_school": "Monday (drop at school)",
}

HOLIDAY_APPROACHES = {
    "alternate": "Alternate Years (Odd/Even)",
    "split": "Split Each Holiday",
    "specific": "Specific Holidays Assigned",
}

SUMMER_APPROACHES = {
    "regular": "Continue Regular Schedule",
    "extended": "Extended Time with Non-Custodial Parent",
    "fifty_fifty": "50/50 Split (2 weeks alternating)",
    "custom": "Custom Arrangement",
}

COMMUNICATION_METHODS = {
    "email": "Email",
    "text": "Text Message",
    "app": "Co-Parenting App",
    "phone": "Phone Calls",
}

RESPONSE_TIMES = {
    "24_hours": "Within 24 hours",
    "48_hours": "Within 48 hours",
    "72_hours": "Within 72 hours",
}

EXCHANGE_LOCATIONS = {
    "parent1_home": "Parent 1's Residence",
    "parent2_home": "Parent 2's Residence",
    "school": "School (Drop Off/Pick Up)",
    "public": "Public Location",
    "midpoint": "Midpoint Between Homes",
}

TRANSPORTATION = {
    "receiving": "Receiving Parent Picks Up",
    "sending": "Sending Parent Drops Off",
    "split": "Split (Each Drives One Way)",
}

format_grounds = _lookup(GROUNDS)
format_employment_status = _lookup(EMPLOYMENT_STATUS)
format_decision_making = _lookup(DECISION_MAKING)
format_schedule_type = _lookup(SCHEDULE_TYPES)
format_parent = _lookup(PARENTS)
format_exchange_time = _lookup(EXCHANGE_TIMES)
format_holiday_approach = _lookup(HOLIDAY_APPROACHES)
format_summer_approach = _lookup(SUMMER_APPROACHES)
format_communication_method = _lookup(COMMUNICATION_METHODS)
format_response_time = _lookup(RESPONSE_TIMES)
format_exchange_location = _lookup(EXCHANGE_LOCATIONS)
format_transportation = _lookup(TRANSPORTATION)


def format_county(value: Any) -> str:
    """``cook`` -> ``Cook County``; unknown counties pass through."""
    text = str(value or "")
    return COUNTY_NAMES.get(text.lower(), text)


def yes_no(value: Any) -> str:
    return "Yes" if value == "yes" else "No"


# =============================================================================
# FIELD MAPS
# =============================================================================

@dataclass(frozen=True)
class FieldMapping:
    questionnaire_field: str
    pdf_field: str
    type: str = "text"
    transform: Optional[Callable[[Any], str]] = None
    section: Optional[str] = None

    def render(self, value: Any) -> str:
        return self.transform(value) if self.transform else str(value)


def _text(field: str, pdf: str, section: str, transform=None) -> FieldMapping:
    return FieldMapping(field, pdf, "text", transform, section)


def _money(field: str, pdf: str, section: str) -> FieldMapping:
    return FieldMapping(field, pdf, "number", format_currency, section)


def _date(field: str, pdf: str, section: str) -> FieldMapping:
    return FieldMapping(field, pdf, "date", format_form_date, section)


def _number(field: str, pdf: str, section: str) -> FieldMapping:
    return FieldMapping(field, pdf, "number", None, section)


def _checkbox(field: str, pdf: str, section: str) -> FieldMapping:
    return FieldMapping(field, pdf, "checkbox", yes_no, section)


PETITION_NO_CHILDREN_FIELDS: tuple[FieldMapping, ...] = (
    _text("petitioner-first-name", "PetitionerFirstName", "personal-info"),
    _text("petitioner-last-name", "PetitionerLastName", "personal-info"),
    _text("petitioner-middle-name", "PetitionerMiddleName", "personal-info"),
    _text("spouse-first-name", "RespondentFirstName", "personal-info"),
    _text("spouse-last-name", "RespondentLastName", "personal-info"),
    _date("marriage-date", "DateOfMarriage", "personal-info"),
    _date("separation-date", "DateOfSeparation", "personal-info"),
    _text("petitioner-county", "County", "residency", format_county),
    _text("petitioner-address", "PetitionerAddress", "residency"),
    _text("spouse-address", "RespondentAddress", "residency"),
    _text("grounds-type", "GroundsForDivorce", "grounds", format_grounds),
)

PETITION_WITH_CHILDREN_FIELDS: tuple[FieldMapping, ...] = PETITION_NO_CHILDREN_FIELDS + (
    _checkbox("has-children", "HasMinorChildren", "children"),
    _number("number-of-children", "NumberOfChildren", "children"),
)

FINANCIAL_AFFIDAVIT_FIELDS: tuple[FieldMapping, ...] = (
    _text("full-name", "FullName", "personal-info"),
    _date("date-of-birth", "DateOfBirth", "personal-info"),
    _text("social-security-last-four", "SSNLast4", "personal-info"),
    _text("current-address", "CurrentAddress", "personal-info"),
    _text("employer-name", "EmployerName", "personal-info"),
    _text("occupation", "Occupation", "personal-info"),
    _text("employment-status", "EmploymentStatus", "employment-income", format_employment_status),
    _money("gross-monthly-salary", "GrossMonthlyIncome", "employment-income"),
    _money("overtime-income", "OvertimeIncome", "employment-income"),
    _money("bonus-income", "BonusIncome", "employment-income"),
    _money("rental-income", "RentalIncome", "other-income"),
    _money("investment-income", "InvestmentIncome", "other-income"),
    _money("social-security-income", "SocialSecurityIncome", "other-income"),
    _money("pension-income", "PensionIncome", "other-income"),
    _money("disability-income", "DisabilityIncome", "other-income"),
    _money("unemployment-income", "UnemploymentIncome", "other-income"),
    _money("child-support-received", "ChildSupportReceived", "other-income"),
    _money("spousal-support-received", "SpousalSupportReceived", "other-income"),
    _money("other-income-amount", "OtherIncome", "other-income"),
    _text("other-income-description", "OtherIncomeDescription", "other-income"),
    _money("monthly-rent-mortgage", "RentMortgage", "housing-expenses"),
    _money("property-taxes", "PropertyTaxes", "housing-expenses"),
    _money("homeowners-insurance", "HomeInsurance", "housing-expenses"),
    _money("hoa-fees", "HOAFees", "housing-expenses"),
    _money("home-maintenance", "HomeMaintenance", "housing-expenses"),
    _money("electricity", "Electricity", "utility-expenses"),
    _money("gas-heating", "GasHeating", "utility-expenses"),
    _money("water-sewer", "WaterSewer", "utility-expenses"),
    _money("phone-cell", "PhoneCell", "utility-expenses"),
    _money("internet-cable", "InternetCable", "utility-expenses"),
    _money("car-payment", "CarPayment", "transportation-expenses"),
    _money("car-insurance", "CarInsurance", "transportation-expenses"),
    _money("gas-fuel", "GasFuel", "transportation-expenses"),
    _money("car-maintenance", "CarMaintenance", "transportation-expenses"),
    _money("parking-tolls", "ParkingTolls", "transportation-expenses"),
    _money("public-transportation", "PublicTransportation", "transportation-expenses"),
    _money("groceries", "Groceries", "food-personal-expenses"),
    _money("dining-out", "DiningOut", "food-personal-expenses"),
    _money("clothing", "Clothing", "food-personal-expenses"),
    _money("personal-care", "PersonalCare", "food-personal-expenses"),
    _money("health-insurance", "HealthInsurance", "healthcare-expenses"),
    _money("dental-insurance", "DentalInsurance", "healthcare-expenses"),
    _money("medical-out-of-pocket", "MedicalOutOfPocket", "healthcare-expenses"),
    _money("childcare-daycare", "ChildcareDaycare", "children-expenses"),
    _money("child-tuition", "ChildTuition", "children-expenses"),
    _money("child-activities", "ChildActivities", "children-expenses"),
    _money("child-support-paid", "ChildSupportPaid", "children-expenses"),
    _money("life-insurance", "LifeInsurance", "other-expenses"),
    _money("entertainment", "Entertainment", "other-expenses"),
    _money("primary-residence-value", "PrimaryResidenceValue", "real-estate-assets"),
    _money("primary-residence-mortgage", "PrimaryResidenceMortgage", "real-estate-assets"),
    _money("other-property-value", "OtherPropertyValue", "real-estate-assets"),
    _money("other-property-mortgage", "OtherPropertyMortgage", "real-estate-assets"),
    _text("vehicle-1-description", "Vehicle1Description", "vehicle-assets"),
    _money("vehicle-1-value", "Vehicle1Value", "vehicle-assets"),
    _money("vehicle-1-loan", "Vehicle1Loan", "vehicle-assets"),
    _text("vehicle-2-description", "Vehicle2Description", "vehicle-assets"),
    _money("vehicle-2-value", "Vehicle2Value", "vehicle-assets"),
    _money("vehicle-2-loan", "Vehicle2Loan", "vehicle-assets"),
    _money("checking-balance", "CheckingBalance", "financial-accounts"),
    _money("savings-balance", "SavingsBalance", "financial-accounts"),
    _money("investment-balance", "InvestmentBalance", "financial-accounts"),
    _money("retirement-401k", "Retirement401k", "financial-accounts"),
    _money("retirement-ira", "RetirementIRA", "financial-accounts"),
    _money("pension-value", "PensionValue", "financial-accounts"),
    _money("cash-on-hand", "CashOnHand", "financial-accounts"),
    _money("credit-card-debt", "CreditCardDebt", "debts"),
    _money("student-loan-debt", "StudentLoanDebt", "debts"),
    _money("personal-loan-debt", "PersonalLoanDebt", "debts"),
    _money("medical-debt", "MedicalDebt", "debts"),
    _money("tax-debt", "TaxDebt", "debts"),
    _money("other-debt", "OtherDebt", "debts"),
    _text("other-debt-description", "OtherDebtDescription", "debts"),
)

PARENTING_PLAN_FIELDS: tuple[FieldMapping, ...] = (
    _number("children-count", "NumberOfChildren", "children-info"),
    _text("child-1-name", "Child1Name", "children-info"),
    _date("child-1-dob", "Child1DOB", "children-info"),
    _text("child-1-school", "Child1School", "children-info"),
    _text("child-1-special-needs", "Child1SpecialNeeds", "children-info"),
    _text("child-2-name", "Child2Name", "children-info"),
    _date("child-2-dob", "Child2DOB", "children-info"),
    _text("child-2-school", "Child2School", "children-info"),
    _text("child-3-name", "Child3Name", "children-info"),
    _date("child-3-dob", "Child3DOB", "children-info"),
    _text("education-authority", "EducationDecisionMaking", "decision-making", format_decision_making),
    _text("healthcare-authority", "HealthcareDecisionMaking", "decision-making", format_decision_making),
    _text("religious-authority", "ReligiousDecisionMaking", "decision-making", format_decision_making),
    _text(
        "extracurricular-authority",
        "ExtracurricularDecisionMaking",
        "decision-making",
        format_decision_making,
    ),
    _text("schedule-type", "ScheduleType", "regular-schedule", format_schedule_type),
    _text("primary-residence", "PrimaryResidence", "regular-schedule", format_parent),
    _text("weekend-exchange-day", "WeekendStart", "regular-schedule", format_exchange_time),
    _text("weekend-return-day", "WeekendEnd", "regular-schedule", format_exchange_time),
    _checkbox("midweek-visit", "MidweekVisit", "regular-schedule"),
    _text("midweek-visit-day", "MidweekVisitDay", "regular-schedule"),
    _text("holiday-approach", "HolidayApproach", "holidays", format_holiday_approach),
    _text("thanksgiving-odd-years", "ThanksgivingOdd", "holidays", format_parent),
    _text("christmas-eve-odd-years", "ChristmasEveOdd", "holidays", format_parent),
    _text("christmas-day-odd-years", "ChristmasDayOdd", "holidays", format_parent),
    _text("spring-break", "SpringBreak", "holidays"),
    _text("summer-approach", "SummerSchedule", "summer-schedule", format_summer_approach),
    _number("summer-vacation-weeks", "VacationWeeks", "summer-schedule"),
    _number("vacation-notice-days", "VacationNotice", "summer-schedule"),
    _text("communication-method", "CommunicationMethod", "communication", format_communication_method),
    _text("response-time", "ResponseTime", "communication", format_response_time),
    _checkbox("child-phone-contact", "ChildPhoneContact", "communication"),
    _text("exchange-location", "ExchangeLocation", "transportation", format_exchange_location),
    _text(
        "transportation-responsibility",
        "TransportationResponsibility",
        "transportation",
        format_transportation,
    ),
    _checkbox("right-of-first-refusal", "RightOfFirstRefusal", "additional-provisions"),
    _number("refusal-hours", "RefusalHours", "additional-provisions"),
    _number("relocation-notice", "RelocationNotice", "additional-provisions"),
    _text("additional-notes", "AdditionalProvisions", "additional-provisions"),
)

SUMMONS_FIELDS: tuple[FieldMapping, ...] = (
    _text("petitioner-first-name", "PetitionerName", "parties"),
    _text("petitioner-last-name", "PetitionerLastName", "parties"),
    _text("spouse-first-name", "RespondentName", "parties"),
    _text("spouse-last-name", "RespondentLastName", "parties"),
    _text("spouse-address", "RespondentAddress", "parties"),
    _text("petitioner-county", "County", "parties", format_county),
)

FIELD_MAPS: dict[OfficialFormType, tuple[FieldMapping, ...]] = {
    OfficialFormType.PETITION_NO_CHILDREN: PETITION_NO_CHILDREN_FIELDS,
    OfficialFormType.PETITION_WITH_CHILDREN: PETITION_WITH_CHILDREN_FIELDS,
    OfficialFormType.FINANCIAL_AFFIDAVIT: FINANCIAL_AFFIDAVIT_FIELDS,
    OfficialFormType.PARENTING_PLAN: PARENTING_PLAN_FIELDS,
    OfficialFormType.SUMMONS: SUMMONS_FIELDS,
}


# =============================================================================
# MAPPING HELPERS
# =============================================================================

def field_mapping(form_type: str) -> tuple[FieldMapping, ...]:
    """Mappings for ``form_type``; empty for forms without a map."""
    try:
        return FIELD_MAPS.get(OfficialFormType(form_type), ())
    except ValueError:
        return ()


def answer_for(responses: Mapping[str, Any], field: str) -> Any:
    """First answered alias of ``field``; zero counts as answered."""
    for key in aliases_for(field):
        value = responses.get(key)
        if value is not None and value != "":
            return value
    return None


def apply_field_mappings(form_type: str, responses: Mapping[str, Any]) -> dict[str, str]:
    """Translate answers into ``{pdf_field: text}`` for one form."""
    values: dict[str, str] = {}
    for mapping in field_mapping(form_type):
        value = answer_for(responses, mapping.questionnaire_field)
        if value is not None:
            values[mapping.pdf_field] = mapping.render(value)
    return values


def required_questionnaire_fields(form_type: str) -> list[str]:
    return [mapping.questionnaire_field for mapping in field_mapping(form_type)]


class FieldCoverage(BaseModel):
    """Which mapped questionnaire fields are missing for a form."""

    valid: bool
    missing_fields: list[str] = Field(default_factory=list)


def validate_fields_present(form_type: str, responses: Mapping[str, Any]) -> FieldCoverage:
    missing = [
        mapping.questionnaire_field
        for mapping in field_mapping(form_type)
        if answer_for(responses, mapping.questionnaire_field) is None
    ]
    return FieldCoverage(valid=not missing, missing_fields=missing)
