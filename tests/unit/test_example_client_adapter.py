"""Tests for ExampleClientAdapter (offline reference adapter)."""

import json

import pytest

from dossier.extraction.example_client_adapter import ExampleClientAdapter


def _complete(user_prompt: str) -> dict[str, object]:
    adapter = ExampleClientAdapter()
    result = adapter.create_vision_completion(
        model="any",
        temperature=0.0,
        system_prompt="sys",
        user_prompt=user_prompt,
        image_bytes=b"",
        mime_type="image/png",
    )
    assert isinstance(result, str)
    return json.loads(result)  # type: ignore[no-any-return]


class TestExampleClientAdapter:
    @pytest.mark.parametrize(
        ("file_name", "expected_type"),
        [
            ("Diploma_scan.png", "diploma"),
            ("qualification.pdf", "qualification"),
            ("snils.jpg", "snils"),
            ("СНИЛС.jpg", "snils"),
            ("passport.pdf", "passport"),
            ("IMG_0001.jpg", "passport"),
        ],
    )
    def test_picks_document_by_file_name(self, file_name: str, expected_type: str) -> None:
        data = _complete(f"Extract the document fields. File name: {file_name}")
        assert data["type"] == expected_type

    def test_passport_has_no_snils(self) -> None:
        data = _complete("passport.png")
        assert data["snils"] is None
        assert data["lastName"] == "Petrov"

    def test_snils_number(self) -> None:
        data = _complete("snils.png")
        assert data["snils"] == "123-456-789 00"

    def test_ignores_other_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.create_vision_completion(
            model="a",
            temperature=0.0,
            system_prompt="s1",
            user_prompt="diploma.png",
            image_bytes=b"1",
            mime_type="image/png",
        )
        r2 = adapter.create_vision_completion(
            model="b",
            temperature=1.0,
            system_prompt="s2",
            user_prompt="diploma.png",
            image_bytes=b"2",
            mime_type="image/jpeg",
        )
        assert r1 == r2
