"""Derived values for official form fields that no single answer holds.

Totals, combined names and narrative descriptions are computed here from
the raw responses. The preparation date is passed in so a given set of
answers always fills the same values.
"""

from datetime import date
from decimal import Decimal

from ..formatting import format_currency, format_form_date, full_name, parse_date
from ..responses import QuestionnaireResponses, ResponseReader
from ..transform import normalize_financial_responses
from .field_maps import (
    format_county,
    format_exchange_location,
    format_parent,
    format_transportation,
)

MAX_PLAN_CHILDREN = 5

EXPENSE_SUBTOTALS: dict[str, tuple[str, ...]] = {
    "HousingSubtotal": (
        "monthly-rent-mortgage",
        "property-taxes",
        "homeowners-insurance",
        "hoa-fees",
        "home-maintenance",
    ),
    "UtilitySubtotal": (
        "electricity",
        "gas-heating",
        "water-sewer",
        "trash-collection",
        "phone-cell",
        "internet-cable",
    ),
    "TransportationSubtotal": (
        "car-payment",
        "car-insurance",
        "gas-fuel",
        "car-maintenance",
        "parking-tolls",
        "public-transportation",
    ),
    "FoodPersonalSubtotal": (
        "groceries",
        "dining-out",
        "clothing",
        "personal-care",
        "dry-cleaning",
    ),
    "HealthcareSubtotal": (
        "health-insurance",
        "dental-insurance",
        "vision-insurance",
        "medical-out-of-pocket",
        "therapy-counseling",
    ),
}

SCHEDULE_DESCRIPTIONS = {
    "standard": (
        "The children will primarily reside with {residence}. The non-residential parent "
        "will have parenting time every other weekend."
    ),
    "week_on_off": (
        "The parents will share equal parenting time on a week-on/week-off basis, "
        "with exchanges occurring on Sundays."
    ),
    "2_2_3": (
        "The parents will share equal parenting time using a 2-2-3 rotation: Parent 1 has "
        "Monday-Tuesday, Parent 2 has Wednesday-Thursday, weekends alternate starting Friday."
    ),
    "3_4_4_3": (
        "The parents will share equal parenting time using a 3-4-4-3 rotation: Parent 1 has "
        "Thursday-Sunday one week, Parent 2 has Thursday-Sunday the next."
    ),
    "60_40": (
        "The children will primarily reside with {residence} (approximately 60% of the time). "
        "The other parent will have parenting time every other weekend plus one weeknight."
    ),
}

BIRTHDAY_DESCRIPTIONS = {
    "alternate": "Children's birthdays will alternate between parents each year.",
    "split": "Children's birthdays will be split between parents (morning/afternoon).",
    "together": "Children's birthdays will be celebrated with both parents together.",
    "separate": "Each parent will celebrate children's birthdays separately.",
}


def describe_residency(months: int) -> str:
    """``26`` -> ``2 years and 2 months``; zero gives an empty string."""
    years, remainder = divmod(months, 12)
    parts = []
    if years:
        parts.append(f"{years} year{'s' if years > 1 else ''}")
    if remainder:
        parts.append(f"{remainder} month{'s' if remainder > 1 else ''}")
    return " and ".join(parts)


def whole_years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def petition_fields(responses: QuestionnaireResponses, prepared_on: date) -> dict[str, str]:
    reader = ResponseReader(responses)
    values = {
        "PetitionerFullName": full_name(
            reader.text("petitioner-first-name"),
            reader.text("petitioner-middle-name"),
            reader.text("petitioner-last-name"),
        ),
        "RespondentFullName": full_name(
            reader.text("spouse-first-name"), reader.text("spouse-last-name")
        ),
        "DateFiled": format_form_date(prepared_on),
        "CountyHeader": format_county(reader.text("petitioner-county")),
        "ResidencyDuration": describe_residency(reader.integer("residency-duration-months")),
    }
    case_number = reader.text("case-number")
    if case_number:
        values["CaseNumber"] = case_number

    married = parse_date(reader.text("marriage-date"))
    if married:
        ended = parse_date(reader.text("separation-date")) or prepared_on
        values["YearsOfMarriage"] = str(whole_years_between(married, ended))
    return values


def financial_affidavit_fields(
    responses: QuestionnaireResponses,
    prepared_on: date,
) -> dict[str, str]:
    data = normalize_financial_responses(responses, user_id="")
    reader = ResponseReader(responses)
    values = {
        "TotalMonthlyIncome": format_currency(data.total_monthly_income),
        "TotalGrossIncome": format_currency(data.total_monthly_income),
        "TotalMonthlyExpenses": format_currency(data.total_monthly_expenses),
        "NetMonthlyIncome": format_currency(data.net_monthly_income),
        "TotalAssets": format_currency(data.total_assets),
        "TotalLiabilities": format_currency(data.total_debts),
        "TotalDebts": format_currency(data.total_debts),
        "NetWorth": format_currency(data.net_worth),
        "DatePrepared": format_form_date(prepared_on),
    }
    for pdf_field, keys in EXPENSE_SUBTOTALS.items():
        subtotal = sum((reader.amount(key) for key in keys), Decimal("0"))
        values[pdf_field] = format_currency(subtotal)
    return values


def _schedule_description(reader: ResponseReader) -> str:
    schedule = reader.text("schedule-type", "standard")
    residence = format_parent(reader.text("primary-residence", "parent1"))
    if schedule == "custom":
        description = reader.text("custom-schedule-details", "Custom schedule as agreed by the parties.")
    else:
        description = SCHEDULE_DESCRIPTIONS.get(schedule, "").format(residence=residence)
    visit_day = reader.text("midweek-visit-day")
    if reader.is_yes("midweek-visit") and visit_day:
        description += f" The non-custodial parent will also have a midweek visit on {visit_day}s."
    return description


def _holiday_description(reader: ResponseReader) -> str:
    lines = []
    approach = reader.text("holiday-approach", "alternate")
    if approach == "alternate":
        lines.append("Holidays will alternate by year (odd/even):")
        lines.append(f"- Thanksgiving: {format_parent(reader.text('thanksgiving-odd-years', 'parent1'))} in odd years")
        lines.append(f"- Christmas Eve: {format_parent(reader.text('christmas-eve-odd-years', 'parent1'))} in odd years")
        lines.append(f"- Christmas Day: {format_parent(reader.text('christmas-day-odd-years', 'parent2'))} in odd years")
    elif approach == "split":
        lines.append("Holidays will be split each year.")
    if reader.text("mothers-day", "mother") == "mother":
        lines.append("- Mother's Day: Always with Mother")
    if reader.text("fathers-day", "father") == "father":
        lines.append("- Father's Day: Always with Father")
    birthday = BIRTHDAY_DESCRIPTIONS.get(reader.text("child-birthday", "alternate"))
    if birthday:
        lines.append(birthday)
    return "\n".join(lines)


def _transportation_description(reader: ResponseReader) -> str:
    location = format_exchange_location(reader.text("exchange-location", "parent1_home"))
    responsibility = format_transportation(reader.text("transportation-responsibility", "receiving"))
    grace = reader.integer("exchange-time-flexibility", 15)
    return (
        f"Exchanges will occur at {location}. {responsibility}. "
        f"A grace period of {grace} minutes is allowed."
    )


def parenting_plan_fields(
    responses: QuestionnaireResponses,
    parent1_name: str,
    parent2_name: str,
    prepared_on: date,
) -> dict[str, str]:
    reader = ResponseReader(responses)
    values = {
        "DatePrepared": format_form_date(prepared_on),
        "Parent1Name": parent1_name,
        "Parent2Name": parent2_name,
        "PetitionerName": parent1_name,
        "RespondentName": parent2_name,
        "ScheduleDescription": _schedule_description(reader),
        "HolidayScheduleDescription": _holiday_description(reader),
        "TransportationDetails": _transportation_description(reader),
    }
    for key, pdf_field in (
        ("case-number", "CaseNumber"),
        ("parent1-address", "Parent1Address"),
        ("parent2-address", "Parent2Address"),
    ):
        if key in reader:
            values[pdf_field] = reader.text(key)

    count = min(reader.integer("children-count"), MAX_PLAN_CHILDREN)
    number = 0
    for index in range(1, count + 1):
        name = reader.text(f"child-{index}-name")
        born = parse_date(reader.text(f"child-{index}-dob"))
        if not (name and born):
            continue
        number += 1
        values[f"Child{number}Name"] = name
        values[f"Child{number}DOB"] = format_form_date(born)
        values[f"Child{number}Age"] = str(whole_years_between(born, prepared_on))
        for suffix, pdf_suffix in (("school", "School"), ("special-needs", "SpecialNeeds")):
            detail = reader.text(f"child-{index}-{suffix}")
            if detail:
                values[f"Child{number}{pdf_suffix}"] = detail
    return values
