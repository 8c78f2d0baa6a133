"""Illinois circuit court reference data for the major counties.

Fees and procedures change; the values below were last verified in
January 2026.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CountyFees:
    petition_filing: int = 337
    response_filing: int = 337
    fee_waiver_available: bool = True


@dataclass(frozen=True)
class CountyInfo:
    """Filing details for one county's circuit court."""

    id: str
    name: str
    full_name: str
    court_address: str
    court_city: str
    court_zip: str
    judicial_circuit: int
    court_phone: Optional[str] = None
    e_filing_required: bool = True
    e_filing_url: Optional[str] = None
    fees: CountyFees = field(default_factory=CountyFees)
    local_rules: tuple[str, ...] = ()
    special_requirements: tuple[str, ...] = ()
    parenting_class_required: bool = True
    mediation_required: bool = False


DEFAULT_COUNTY_FEES = CountyFees()

_COUNTIES: tuple[CountyInfo, ...] = (
    CountyInfo(
        id="cook",
        name="Cook County",
        full_name="Circuit Court of Cook County",
        court_address="50 W. Washington Street",
        court_city="Chicago",
        court_zip="60602",
        court_phone="312-603-5030",
        judicial_circuit=1,
        e_filing_url="https://odyssey.cookcountyclerkofcourt.org/",
        local_rules=(
            "Domestic Relations Division handles all divorce cases",
            "Mandatory settlement conference required before trial",
            "Parenting education class required for cases with minor children",
        ),
        special_requirements=(
            "Certificate of completion for parenting class must be filed",
            "Financial affidavit must be filed within 60 days of first appearance",
        ),
    ),
    CountyInfo(
        id="dupage",
        name="DuPage County",
        full_name="DuPage County Circuit Court",
        court_address="505 N. County Farm Road",
        court_city="Wheaton",
        court_zip="60187",
        court_phone="630-407-8700",
        judicial_circuit=18,
        e_filing_url="https://www.judici.com/courts/case_management.jsp?court=IL018015J",
        local_rules=(
            "Mandatory disclosure required within 60 days",
            "Settlement conference required before trial setting",
        ),
        mediation_required=True,
    ),
    CountyInfo(
        id="lake",
        name="Lake County",
        full_name="Lake County Circuit Court",
        court_address="18 N. County Street",
        court_city="Waukegan",
        court_zip="60085",
        court_phone="847-377-3600",
        judicial_circuit=19,
        mediation_required=True,
    ),
    CountyInfo(
        id="will",
        name="Will County",
        full_name="Will County Circuit Court",
        court_address="14 W. Jefferson Street",
        court_city="Joliet",
        court_zip="60432",
        court_phone="815-727-8592",
        judicial_circuit=12,
    ),
    CountyInfo(
        id="kane",
        name="Kane County",
        full_name="Kane County Circuit Court",
        court_address="37W777 Route 38",
        court_city="St. Charles",
        court_zip="60175",
        court_phone="630-232-3413",
        judicial_circuit=16,
    ),
    CountyInfo(
        id="mchenry",
        name="McHenry County",
        full_name="McHenry County Circuit Court",
        court_address="2200 N. Seminary Avenue",
        court_city="Woodstock",
        court_zip="60098",
        court_phone="815-334-4190",
        judicial_circuit=22,
    ),
    CountyInfo(
        id="winnebago",
        name="Winnebago County",
        full_name="Winnebago County Circuit Court",
        court_address="400 W. State Street",
        court_city="Rockford",
        court_zip="61101",
        court_phone="815-319-4800",
        judicial_circuit=17,
    ),
    CountyInfo(
        id="madison",
        name="Madison County",
        full_name="Madison County Circuit Court",
        court_address="155 N. Main Street",
        court_city="Edwardsville",
        court_zip="62025",
        court_phone="618-692-6240",
        judicial_circuit=3,
    ),
    CountyInfo(
        id="stclair",
        name="St. Clair County",
        full_name="St. Clair County Circuit Court",
        court_address="10 Public Square",
        court_city="Belleville",
        court_zip="62220",
        court_phone="618-277-6600",
        judicial_circuit=20,
    ),
    CountyInfo(
        id="sangamon",
        name="Sangamon County",
        full_name="Sangamon County Circuit Court",
        court_address="200 S. Ninth Street",
        court_city="Springfield",
        court_zip="62701",
        court_phone="217-753-6674",
        judicial_circuit=7,
    ),
    CountyInfo(
        id="peoria",
        name="Peoria County",
        full_name="Peoria County Circuit Court",
        court_address="324 Main Street",
        court_city="Peoria",
        court_zip="61602",
        court_phone="309-672-6047",
        judicial_circuit=10,
    ),
    CountyInfo(
        id="champaign",
        name="Champaign County",
        full_name="Champaign County Circuit Court",
        court_address="101 E. Main Street",
        court_city="Urbana",
        court_zip="61801",
        court_phone="217-384-3725",
        judicial_circuit=6,
    ),
)

ILLINOIS_COUNTIES: dict[str, CountyInfo] = {county.id: county for county in _COUNTIES}


def get_county(county_id: Optional[str]) -> Optional[CountyInfo]:
    """Look up a county by id (``cook``, ``st-clair``, ``St Clair``)."""
    if not county_id:
        return None
    key = "".join(ch for ch in county_id.lower() if ch.isalnum())
    return ILLINOIS_COUNTIES.get(key)


def get_filing_fees(county_id: Optional[str]) -> CountyFees:
    county = get_county(county_id)
    return county.fees if county else DEFAULT_COUNTY_FEES


def county_instructions(county_id: Optional[str]) -> list[str]:
    """County-specific filing instructions, or generic guidance if unknown."""
    county = get_county(county_id)
    if county is None:
        return ["Contact your local circuit court clerk for specific filing requirements."]

    instructions: list[str] = []
    if county.e_filing_required:
        portal = county.e_filing_url or "the county e-filing portal"
        instructions.append(f"E-filing is required in {county.name}. Visit {portal} to file.")
    if county.parenting_class_required:
        instructions.append(
            "A parenting education class is required for all cases involving minor children."
        )
    if county.mediation_required:
        instructions.append(
            "Mediation may be required before trial for custody/parenting disputes."
        )
    instructions.extend(county.local_rules)
    instructions.extend(county.special_requirements)
    return instructions
