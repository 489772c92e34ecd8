"""Flattens a UserProfile into the key/value pairs substituted into form templates."""

from dossier.documents.models import DiplomaData, PassportData, QualificationData
from dossier.profile.models import UserProfile


def map_profile_to_template_variables(profile: UserProfile) -> dict[str, str]:
    """Project the profile onto template variables.

    Every variable is always present; missing documents and unknown values
    map to the empty string so generated forms contain no stray placeholders.
    """
    variables: dict[str, str] = {}
    variables.update(_passport_variables(profile.passport.data))
    variables.update(_diploma_variables(profile.diploma.data))
    variables.update(_qualification_variables(profile.qualification.data))
    variables["full_name"] = profile.full_name
    return variables


def _clean(value: str | None) -> str:
    return value or ""


def _join(*parts: str | None, sep: str = ", ") -> str:
    return sep.join(p for p in (_clean(v).strip() for v in parts) if p)


def _passport_variables(p: PassportData | None) -> dict[str, str]:
    if p is None:
        p = PassportData()
    address = _join(p.registration_street, p.registration_house, p.registration_flat)
    return {
        "passport_last_name": p.last_name,
        "passport_first_name": p.first_name,
        "passport_middle_name": p.middle_name,
        "passport_series_number": p.series_number,
        "passport_date_issued": p.date_issued,
        "passport_department_code": p.department_code,
        "passport_issued_by": p.issued_by,
        "passport_birth_date": p.birth_date,
        "passport_birth_place": p.birth_place,
        "passport_registration": _join(p.registration_city, address),
        "passport_reg_city": _clean(p.registration_city),
        "passport_reg_address": address,
        "passport_reg_date": _clean(p.registration_date),
        "snils": _clean(p.snils),
    }


def _diploma_variables(d: DiplomaData | None) -> dict[str, str]:
    if d is None:
        d = DiplomaData()
    return {
        "diploma_last_name": d.last_name,
        "diploma_first_name": d.first_name,
        "diploma_middle_name": d.middle_name,
        "diploma_series": _clean(d.series),
        "diploma_number": d.number,
        "diploma_reg_number": d.reg_number,
        "diploma_institution": d.institution,
        "diploma_city": d.city,
        "diploma_specialty": d.specialty,
        "diploma_qualification": d.qualification,
        "diploma_date_issued": d.date_issued,
    }


def _qualification_variables(q: QualificationData | None) -> dict[str, str]:
    if q is None:
        q = QualificationData()
    return {
        "qualification_last_name": q.last_name,
        "qualification_first_name": q.first_name,
        "qualification_middle_name": q.middle_name,
        "qualification_reg_number": q.registration_number,
        "qualification_issue_date": q.issue_date,
        "qualification_expiration_date": q.expiration_date,
        "qualification_center_name": q.assessment_center_name,
        "qualification_center_reg_number": q.assessment_center_reg_number,
    }
