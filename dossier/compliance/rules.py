"""Registry membership rule battery.

Each rule has a precondition, a weight and an evaluation. Rules run in the
order of ``RULES``; a rule whose precondition fails adds neither a check nor
weight.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from dossier.compliance.models import ComplianceStatus
from dossier.profile.models import UserProfile

EXPIRY_WARNING_DAYS = 30

_DATE_FORMAT = "%d.%m.%Y"

Outcome = tuple[ComplianceStatus, str]


@dataclass(frozen=True)
class ComplianceRule:
    id: str
    label: str
    weight: int
    applies: Callable[[UserProfile], bool]
    evaluate: Callable[[UserProfile, date], Outcome]


def parse_date(value: str | None) -> date | None:
    """Parse a ``DD.MM.YYYY`` string; anything else yields None."""
    if not value:
        return None
    parts = value.strip().split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    if len(parts[2]) != 4:
        return None
    try:
        return datetime.strptime(".".join(parts), _DATE_FORMAT).date()
    except ValueError:
        return None


def normalize_name(value: str | None) -> str:
    return (value or "").strip().casefold()


def _always(profile: UserProfile) -> bool:
    return True


def _has_passport(profile: UserProfile) -> bool:
    return profile.passport.data is not None


def _has_passport_and_diploma(profile: UserProfile) -> bool:
    return profile.passport.data is not None and profile.diploma.data is not None


def _has_qualification(profile: UserProfile) -> bool:
    return profile.qualification.data is not None


def _check_passport(profile: UserProfile, today: date) -> Outcome:
    if profile.passport.data is not None:
        return ComplianceStatus.SUCCESS, "Passport uploaded"
    return ComplianceStatus.ERROR, "Passport is missing"


def _check_snils(profile: UserProfile, today: date) -> Outcome:
    passport = profile.passport.data
    if passport is not None and passport.snils:
        return ComplianceStatus.SUCCESS, f"SNILS: {passport.snils}"
    return ComplianceStatus.WARNING, "SNILS not found in passport data"


def _check_diploma(profile: UserProfile, today: date) -> Outcome:
    if profile.diploma.data is not None:
        return ComplianceStatus.SUCCESS, "Higher education diploma uploaded"
    return ComplianceStatus.ERROR, "Diploma is not uploaded"


def _check_name_match(profile: UserProfile, today: date) -> Outcome:
    passport = profile.passport.data
    diploma = profile.diploma.data
    passport_last = passport.last_name if passport else ""
    diploma_last = diploma.last_name if diploma else ""
    left, right = normalize_name(passport_last), normalize_name(diploma_last)
    if left and right and left != right:
        return (
            ComplianceStatus.ERROR,
            f"Last name in passport ({passport_last}) does not match diploma ({diploma_last})",
        )
    return ComplianceStatus.SUCCESS, "Names in documents match"


def _check_qualification(profile: UserProfile, today: date) -> Outcome:
    if profile.qualification.data is not None:
        return ComplianceStatus.SUCCESS, "Qualification certificate uploaded"
    return ComplianceStatus.ERROR, "Qualification certificate is not uploaded"


def _check_qualification_expiry(profile: UserProfile, today: date) -> Outcome:
    qualification = profile.qualification.data
    raw = qualification.expiration_date if qualification else None
    expires = parse_date(raw)
    if expires is None:
        return ComplianceStatus.WARNING, "Cannot determine expiration date"
    if expires < today:
        return ComplianceStatus.ERROR, f"Certificate expired on {raw}"
    if (expires - today).days < EXPIRY_WARNING_DAYS:
        return ComplianceStatus.WARNING, f"Expires within a month ({raw})"
    return ComplianceStatus.SUCCESS, f"Valid until {raw}"


RULES: tuple[ComplianceRule, ...] = (
    ComplianceRule("passport_exist", "Passport present", 2, _always, _check_passport),
    ComplianceRule("snils_exist", "SNILS present", 1, _has_passport, _check_snils),
    ComplianceRule("diploma_exist", "Diploma present", 2, _always, _check_diploma),
    ComplianceRule(
        "name_match", "Full name match", 2, _has_passport_and_diploma, _check_name_match
    ),
    ComplianceRule(
        "nok_exist", "Qualification certificate", 2, _always, _check_qualification
    ),
    ComplianceRule(
        "nok_valid",
        "Qualification certificate validity",
        3,
        _has_qualification,
        _check_qualification_expiry,
    ),
)
