"""Tests for the weighted compliance battery."""

from datetime import date, timedelta

from document_factories import make_diploma, make_passport, make_qualification

from dossier.compliance.evaluator import (
    SUMMARY_EMPTY,
    SUMMARY_ERROR,
    SUMMARY_READY,
    SUMMARY_WARNING,
    evaluate_compliance,
)
from dossier.compliance.models import ComplianceStatus
from dossier.compliance.rules import RULES, ComplianceRule
from dossier.profile.models import Slot, UserProfile

TODAY = date(2026, 3, 15)


def _fmt(d: date) -> str:
    return d.strftime("%d.%m.%Y")


def _profile(
    passport: bool = True,
    diploma: bool = True,
    qualification: bool = True,
    snils: str | None = "111-222-333 44",
    diploma_last_name: str = "Ivanov",
    expiration: str | None = None,
) -> UserProfile:
    if expiration is None:
        expiration = _fmt(TODAY + timedelta(days=365))
    return UserProfile(
        full_name="Ivanov Ivan Ivanovich",
        passport=Slot(make_passport(snils=snils), "p") if passport else Slot(),
        diploma=Slot(make_diploma(last_name=diploma_last_name), "d") if diploma else Slot(),
        qualification=(
            Slot(make_qualification(expiration_date=expiration), "q")
            if qualification
            else Slot()
        ),
    )


def _check(report, check_id):  # type: ignore[no-untyped-def]
    return next(c for c in report.checks if c.id == check_id)


class TestCompletePackage:
    def test_scores_100_and_ready(self) -> None:
        report = evaluate_compliance(_profile(), today=TODAY)
        assert report.score == 100
        assert report.status is ComplianceStatus.SUCCESS
        assert report.summary == SUMMARY_READY

    def test_check_order_is_fixed(self) -> None:
        report = evaluate_compliance(_profile(), today=TODAY)
        assert [c.id for c in report.checks] == [
            "passport_exist",
            "snils_exist",
            "diploma_exist",
            "name_match",
            "nok_exist",
            "nok_valid",
        ]
        assert all(c.status is ComplianceStatus.SUCCESS for c in report.checks)

    def test_snils_value_in_message(self) -> None:
        report = evaluate_compliance(_profile(), today=TODAY)
        assert "111-222-333 44" in _check(report, "snils_exist").message


class TestEmptyProfile:
    def test_scores_zero_with_upload_summary(self) -> None:
        report = evaluate_compliance(UserProfile(), today=TODAY)
        assert report.score == 0
        assert report.status is ComplianceStatus.ERROR
        assert report.summary == SUMMARY_EMPTY

    def test_only_unconditional_checks_run(self) -> None:
        report = evaluate_compliance(UserProfile(), today=TODAY)
        assert [c.id for c in report.checks] == ["passport_exist", "diploma_exist", "nok_exist"]
        assert all(c.status is ComplianceStatus.ERROR for c in report.checks)

    def test_defaults_to_current_date(self) -> None:
        report = evaluate_compliance(UserProfile())
        assert report.score == 0


class TestNameMatch:
    def test_mismatched_last_names_is_error(self) -> None:
        report = evaluate_compliance(_profile(diploma_last_name="Sidorov"), today=TODAY)
        check = _check(report, "name_match")
        assert check.status is ComplianceStatus.ERROR
        assert "Ivanov" in check.message and "Sidorov" in check.message
        assert report.status is ComplianceStatus.ERROR
        assert report.summary == SUMMARY_ERROR

    def test_case_and_whitespace_are_ignored(self) -> None:
        report = evaluate_compliance(_profile(diploma_last_name="  IVANOV "), today=TODAY)
        assert _check(report, "name_match").status is ComplianceStatus.SUCCESS

    def test_cyrillic_case_folding(self) -> None:
        profile = _profile()
        profile = UserProfile(
            passport=Slot(make_passport(last_name="ИВАНОВ"), "p"),
            diploma=Slot(make_diploma(last_name="Иванов"), "d"),
            qualification=profile.qualification,
        )
        report = evaluate_compliance(profile, today=TODAY)
        assert _check(report, "name_match").status is ComplianceStatus.SUCCESS

    def test_empty_last_name_is_not_a_mismatch(self) -> None:
        report = evaluate_compliance(_profile(diploma_last_name=""), today=TODAY)
        assert _check(report, "name_match").status is ComplianceStatus.SUCCESS

    def test_skipped_without_diploma(self) -> None:
        report = evaluate_compliance(_profile(diploma=False), today=TODAY)
        assert "name_match" not in [c.id for c in report.checks]


class TestSnils:
    def test_missing_snils_is_warning(self) -> None:
        report = evaluate_compliance(_profile(snils=None), today=TODAY)
        assert _check(report, "snils_exist").status is ComplianceStatus.WARNING
        # passed 11 of 12
        assert report.score == 92
        assert report.status is ComplianceStatus.WARNING
        assert report.summary == SUMMARY_WARNING

    def test_skipped_without_passport(self) -> None:
        report = evaluate_compliance(_profile(passport=False), today=TODAY)
        ids = [c.id for c in report.checks]
        assert "snils_exist" not in ids
        assert "name_match" not in ids


class TestQualificationExpiry:
    def test_expires_in_ten_days_is_warning(self) -> None:
        profile = _profile(expiration=_fmt(TODAY + timedelta(days=10)))
        report = evaluate_compliance(profile, today=TODAY)
        check = _check(report, "nok_valid")
        assert check.status is ComplianceStatus.WARNING
        assert "within a month" in check.message
        assert report.status is ComplianceStatus.WARNING

    def test_expired_is_error(self) -> None:
        profile = _profile(expiration=_fmt(TODAY - timedelta(days=1)))
        report = evaluate_compliance(profile, today=TODAY)
        check = _check(report, "nok_valid")
        assert check.status is ComplianceStatus.ERROR
        assert "expired on" in check.message
        assert report.status is ComplianceStatus.ERROR

    def test_expiring_today_is_not_expired(self) -> None:
        profile = _profile(expiration=_fmt(TODAY))
        report = evaluate_compliance(profile, today=TODAY)
        assert _check(report, "nok_valid").status is ComplianceStatus.WARNING

    def test_thirty_days_out_is_valid(self) -> None:
        profile = _profile(expiration=_fmt(TODAY + timedelta(days=30)))
        report = evaluate_compliance(profile, today=TODAY)
        assert _check(report, "nok_valid").status is ComplianceStatus.SUCCESS

    def test_unparseable_date_is_warning(self) -> None:
        report = evaluate_compliance(_profile(expiration="N/A"), today=TODAY)
        check = _check(report, "nok_valid")
        assert check.status is ComplianceStatus.WARNING
        assert "Cannot determine" in check.message
        # passed 9 of 12
        assert report.score == 75

    def test_skipped_without_qualification(self) -> None:
        report = evaluate_compliance(_profile(qualification=False), today=TODAY)
        ids = [c.id for c in report.checks]
        assert "nok_valid" not in ids
        assert _check(report, "nok_exist").status is ComplianceStatus.ERROR


class TestScoring:
    def test_score_rounds_half_up(self) -> None:
        # passport(2) + snils warning(1): 2 of 3 passed -> 66.67 -> 67
        profile = UserProfile(passport=Slot(make_passport(snils=None), "p"))
        rule_ids = {"passport_exist", "snils_exist"}
        rules = [r for r in RULES if r.id in rule_ids]
        report = evaluate_compliance(profile, today=TODAY, rules=rules)
        assert report.score == 67

    def test_no_applicable_rules_scores_zero(self) -> None:
        never = ComplianceRule(
            "never",
            "Never applies",
            5,
            lambda profile: False,
            lambda profile, today: (ComplianceStatus.SUCCESS, ""),
        )
        report = evaluate_compliance(UserProfile(), today=TODAY, rules=[never])
        assert report.score == 0
        assert report.checks == []
        assert report.summary == SUMMARY_EMPTY

    def test_warning_with_full_score_is_success(self) -> None:
        warn_free = ComplianceRule(
            "advisory",
            "Advisory",
            0,
            lambda profile: True,
            lambda profile, today: (ComplianceStatus.WARNING, "heads up"),
        )
        ok = ComplianceRule(
            "ok",
            "Ok",
            1,
            lambda profile: True,
            lambda profile, today: (ComplianceStatus.SUCCESS, "fine"),
        )
        report = evaluate_compliance(UserProfile(), today=TODAY, rules=[ok, warn_free])
        assert report.score == 100
        assert report.status is ComplianceStatus.SUCCESS
        assert report.summary == SUMMARY_READY
