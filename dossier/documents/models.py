from dataclasses import dataclass

PASSPORT = "passport"
DIPLOMA = "diploma"
QUALIFICATION = "qualification"
SNILS = "snils"
RAW = "raw"


@dataclass(frozen=True)
class PassportData:
    """Russian internal passport, optionally with a SNILS number attached."""

    type: str = PASSPORT
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    series_number: str = ""
    issued_by: str = ""
    date_issued: str = ""
    department_code: str = ""
    birth_date: str = ""
    birth_place: str = ""
    registration_city: str | None = None
    registration_street: str | None = None
    registration_house: str | None = None
    registration_flat: str | None = None
    registration_date: str | None = None
    snils: str | None = None
    is_handwritten: bool = False


@dataclass(frozen=True)
class DiplomaData:
    """Higher-education diploma."""

    type: str = DIPLOMA
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    series: str | None = None
    number: str = ""
    reg_number: str = ""
    institution: str = ""
    city: str = ""
    specialty: str = ""
    qualification: str = ""
    date_issued: str = ""
    is_handwritten: bool = False


@dataclass(frozen=True)
class QualificationData:
    """Independent qualification assessment certificate."""

    type: str = QUALIFICATION
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    registration_number: str = ""
    issue_date: str = ""
    expiration_date: str = ""
    assessment_center_name: str = ""
    assessment_center_reg_number: str = ""
    is_handwritten: bool = False


@dataclass(frozen=True)
class SnilsData:
    """Standalone SNILS (individual insurance account number) card."""

    type: str = SNILS
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    snils: str = ""
    date_issued: str | None = None
    is_handwritten: bool = False


@dataclass(frozen=True)
class RawData:
    """Extraction output that could not be parsed into a known document."""

    type: str = RAW
    raw_text: str = ""
    is_handwritten: bool = False


DocumentPayload = PassportData | DiplomaData | QualificationData | SnilsData | RawData
