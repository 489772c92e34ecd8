from dataclasses import dataclass, field
from enum import Enum


class ComplianceStatus(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single compliance rule."""

    id: str
    label: str
    status: ComplianceStatus
    message: str


@dataclass(frozen=True)
class ComplianceReport:
    """Scored verdict over the whole applicant profile."""

    score: int
    status: ComplianceStatus
    checks: list[CheckResult] = field(default_factory=list)
    summary: str = ""
