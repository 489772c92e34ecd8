"""Catalogue of template placeholders, grouped the way template authors see them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateVariable:
    label: str
    variable: str


@dataclass(frozen=True)
class VariableGroup:
    category: str
    fields: tuple[TemplateVariable, ...]


TEMPLATE_VARIABLES: tuple[VariableGroup, ...] = (
    VariableGroup(
        "Passport",
        (
            TemplateVariable("Last name", "passport_last_name"),
            TemplateVariable("First name", "passport_first_name"),
            TemplateVariable("Middle name", "passport_middle_name"),
            TemplateVariable("Series and number", "passport_series_number"),
            TemplateVariable("Date issued", "passport_date_issued"),
            TemplateVariable("Department code", "passport_department_code"),
            TemplateVariable("Issued by", "passport_issued_by"),
            TemplateVariable("Birth date", "passport_birth_date"),
            TemplateVariable("Birth place", "passport_birth_place"),
            TemplateVariable("Registration address (full)", "passport_registration"),
            TemplateVariable("Registration city", "passport_reg_city"),
            TemplateVariable("Street, house, flat", "passport_reg_address"),
            TemplateVariable("Registration date", "passport_reg_date"),
            TemplateVariable("SNILS", "snils"),
        ),
    ),
    VariableGroup(
        "Diploma",
        (
            TemplateVariable("Last name", "diploma_last_name"),
            TemplateVariable("First name", "diploma_first_name"),
            TemplateVariable("Middle name", "diploma_middle_name"),
            TemplateVariable("Series", "diploma_series"),
            TemplateVariable("Number", "diploma_number"),
            TemplateVariable("Registration number", "diploma_reg_number"),
            TemplateVariable("Institution", "diploma_institution"),
            TemplateVariable("City", "diploma_city"),
            TemplateVariable("Specialty", "diploma_specialty"),
            TemplateVariable("Qualification", "diploma_qualification"),
            TemplateVariable("Date issued", "diploma_date_issued"),
        ),
    ),
    VariableGroup(
        "Qualification certificate",
        (
            TemplateVariable("Last name", "qualification_last_name"),
            TemplateVariable("First name", "qualification_first_name"),
            TemplateVariable("Middle name", "qualification_middle_name"),
            TemplateVariable("Registration number", "qualification_reg_number"),
            TemplateVariable("Issue date", "qualification_issue_date"),
            TemplateVariable("Valid until", "qualification_expiration_date"),
            TemplateVariable("Assessment center", "qualification_center_name"),
            TemplateVariable("Assessment center reg. number", "qualification_center_reg_number"),
        ),
    ),
    VariableGroup(
        "General",
        (TemplateVariable("Full name", "full_name"),),
    ),
)


def all_variables() -> list[str]:
    """Flat list of every placeholder name in catalogue order."""
    return [f.variable for group in TEMPLATE_VARIABLES for f in group.fields]
