from datetime import date

import pytest

from dossier.compliance.rules import EXPIRY_WARNING_DAYS, RULES, normalize_name, parse_date


class TestParseDate:
    def test_parses_dd_mm_yyyy(self) -> None:
        assert parse_date("21.11.2028") == date(2028, 11, 21)

    def test_strips_surrounding_whitespace(self) -> None:
        assert parse_date(" 01.02.2030 ") == date(2030, 2, 1)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "N/A",
            "2028-11-21",
            "21/11/2028",
            "21.11",
            "21.11.2028.1",
            "aa.bb.cccc",
            "31.02.2028",
            "21.11.28",
            "21.13.2028",
        ],
    )
    def test_unparseable_returns_none(self, value: str | None) -> None:
        assert parse_date(value) is None


class TestNormalizeName:
    def test_trims_and_folds_case(self) -> None:
        assert normalize_name("  IVANOV ") == "ivanov"

    def test_none_becomes_empty(self) -> None:
        assert normalize_name(None) == ""


class TestRuleBattery:
    def test_weights(self) -> None:
        assert {r.id: r.weight for r in RULES} == {
            "passport_exist": 2,
            "snils_exist": 1,
            "diploma_exist": 2,
            "name_match": 2,
            "nok_exist": 2,
            "nok_valid": 3,
        }

    def test_rule_ids_are_unique(self) -> None:
        ids = [r.id for r in RULES]
        assert len(ids) == len(set(ids))

    def test_expiry_window_is_thirty_days(self) -> None:
        assert EXPIRY_WARNING_DAYS == 30
