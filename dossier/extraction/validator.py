"""Validates the raw JSON returned by the vision model and builds a typed payload.

The model answers with camelCase keys. Missing or null text fields are coerced
to the empty string, or to None for the fields that are nullable by nature
(registration details, SNILS in a passport, diploma series).
"""

from collections.abc import Callable
from typing import Any

from dossier.documents.models import (
    DIPLOMA,
    PASSPORT,
    QUALIFICATION,
    RAW,
    SNILS,
    DiplomaData,
    DocumentPayload,
    PassportData,
    QualificationData,
    RawData,
    SnilsData,
)
from dossier.extraction.exceptions import ExtractionValidationError

_NAME_FIELDS = (
    ("last_name", "lastName"),
    ("first_name", "firstName"),
    ("middle_name", "middleName"),
)


def validate_and_build(data: dict[str, Any]) -> DocumentPayload:
    """Validate a parsed model response and build the matching payload.

    Raises:
        ExtractionValidationError: on an unknown type or malformed field.
    """
    doc_type = _document_type(data)
    builder = _BUILDERS.get(doc_type)
    if builder is None:
        raise ExtractionValidationError(
            f"'type' must be one of {sorted(_BUILDERS)}, got {doc_type!r}"
        )
    return builder(data)


def _document_type(data: dict[str, Any]) -> str:
    raw = data.get("type")
    if not isinstance(raw, str):
        raise ExtractionValidationError("'type' must be a string")
    return raw.strip().lower()


def _text(data: dict[str, Any], key: str) -> str:
    value = _optional_text(data, key)
    return value if value is not None else ""


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (bool, list, dict)):
        raise ExtractionValidationError(f"'{key}' must be a string or null")
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise ExtractionValidationError(f"'{key}' must be a string or null")
    return value


def _handwritten(data: dict[str, Any]) -> bool:
    return bool(data.get("isHandwritten"))


def _names(data: dict[str, Any]) -> dict[str, str]:
    return {attr: _text(data, key) for attr, key in _NAME_FIELDS}


def _build_passport(data: dict[str, Any]) -> PassportData:
    registration_city = _optional_text(data, "registrationCity")
    if registration_city is None:
        registration_city = _optional_text(data, "registration")
    return PassportData(
        **_names(data),
        series_number=_text(data, "seriesNumber"),
        issued_by=_text(data, "issuedBy"),
        date_issued=_text(data, "dateIssued"),
        department_code=_text(data, "departmentCode"),
        birth_date=_text(data, "birthDate"),
        birth_place=_text(data, "birthPlace"),
        registration_city=registration_city,
        registration_street=_optional_text(data, "registrationStreet"),
        registration_house=_optional_text(data, "registrationHouse"),
        registration_flat=_optional_text(data, "registrationFlat"),
        registration_date=_optional_text(data, "registrationDate"),
        snils=_optional_text(data, "snils"),
        is_handwritten=_handwritten(data),
    )


def _build_diploma(data: dict[str, Any]) -> DiplomaData:
    return DiplomaData(
        **_names(data),
        series=_optional_text(data, "series"),
        number=_text(data, "number"),
        reg_number=_text(data, "regNumber"),
        institution=_text(data, "institution"),
        city=_text(data, "city"),
        specialty=_text(data, "specialty"),
        qualification=_text(data, "qualification"),
        date_issued=_text(data, "dateIssued"),
        is_handwritten=_handwritten(data),
    )


def _build_qualification(data: dict[str, Any]) -> QualificationData:
    return QualificationData(
        **_names(data),
        registration_number=_text(data, "registrationNumber"),
        issue_date=_text(data, "issueDate"),
        expiration_date=_text(data, "expirationDate"),
        assessment_center_name=_text(data, "assessmentCenterName"),
        assessment_center_reg_number=_text(data, "assessmentCenterRegNumber"),
        is_handwritten=_handwritten(data),
    )


def _build_snils(data: dict[str, Any]) -> SnilsData:
    return SnilsData(
        **_names(data),
        snils=_text(data, "snils"),
        date_issued=_optional_text(data, "dateIssued"),
        is_handwritten=_handwritten(data),
    )


def _build_raw(data: dict[str, Any]) -> RawData:
    raw_text = data.get("rawText")
    if not isinstance(raw_text, str):
        raise ExtractionValidationError("'rawText' must be a string")
    return RawData(raw_text=raw_text, is_handwritten=_handwritten(data))


_BUILDERS: dict[str, Callable[[dict[str, Any]], DocumentPayload]] = {
    PASSPORT: _build_passport,
    DIPLOMA: _build_diploma,
    QUALIFICATION: _build_qualification,
    SNILS: _build_snils,
    RAW: _build_raw,
}
