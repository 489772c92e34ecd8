from collections.abc import Sequence
from datetime import date

from dossier.compliance.models import CheckResult, ComplianceReport, ComplianceStatus
from dossier.compliance.rules import RULES, ComplianceRule
from dossier.profile.models import UserProfile

SUMMARY_EMPTY = "Upload documents to begin verification."
SUMMARY_ERROR = "Critical errors found, registry submission is impossible."
SUMMARY_WARNING = "Document package needs attention but may be accepted."
SUMMARY_READY = "Document package is ready for submission."


def evaluate_compliance(
    profile: UserProfile,
    today: date | None = None,
    rules: Sequence[ComplianceRule] = RULES,
) -> ComplianceReport:
    """Score the profile against the weighted rule battery.

    Total: missing documents and unreadable dates become check statuses,
    never exceptions.
    """
    if today is None:
        today = date.today()

    checks: list[CheckResult] = []
    passed_weight = 0
    total_weight = 0
    for rule in rules:
        if not rule.applies(profile):
            continue
        status, message = rule.evaluate(profile, today)
        checks.append(CheckResult(id=rule.id, label=rule.label, status=status, message=message))
        total_weight += rule.weight
        if status is ComplianceStatus.SUCCESS:
            passed_weight += rule.weight

    score = _percent(passed_weight, total_weight)
    status = _overall_status(checks, score)
    return ComplianceReport(
        score=score,
        status=status,
        checks=checks,
        summary=_summary(score, status),
    )


def _overall_status(checks: list[CheckResult], score: int) -> ComplianceStatus:
    if any(c.status is ComplianceStatus.ERROR for c in checks):
        return ComplianceStatus.ERROR
    if any(c.status is ComplianceStatus.WARNING for c in checks) and score < 100:
        return ComplianceStatus.WARNING
    return ComplianceStatus.SUCCESS


def _summary(score: int, status: ComplianceStatus) -> str:
    if score == 0:
        return SUMMARY_EMPTY
    if status is ComplianceStatus.ERROR:
        return SUMMARY_ERROR
    if status is ComplianceStatus.WARNING:
        return SUMMARY_WARNING
    return SUMMARY_READY


def _percent(passed: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half-up rounding in integer arithmetic.
    return (200 * passed + total) // (2 * total)
