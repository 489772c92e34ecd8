from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from dossier.compliance.evaluator import evaluate_compliance
from dossier.compliance.models import ComplianceReport
from dossier.processor.models import ExtractionResult
from dossier.profile.merger import merge_profiles
from dossier.profile.models import UserProfile
from dossier.templates.mapper import map_profile_to_template_variables


@dataclass(frozen=True)
class Dossier:
    """Everything derived from the current set of extraction results."""

    profile: UserProfile
    report: ComplianceReport
    variables: dict[str, str] = field(default_factory=dict)


def build_dossier(
    results: Iterable[ExtractionResult],
    today: date | None = None,
) -> Dossier:
    """Recompute profile, compliance report and template variables from scratch."""
    profile = merge_profiles(results)
    return Dossier(
        profile=profile,
        report=evaluate_compliance(profile, today=today),
        variables=map_profile_to_template_variables(profile),
    )
