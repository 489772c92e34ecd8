from dossier.compliance.evaluator import evaluate_compliance
from dossier.compliance.models import CheckResult, ComplianceReport, ComplianceStatus

__all__ = ["CheckResult", "ComplianceReport", "ComplianceStatus", "evaluate_compliance"]
