"""Tests for JSON skeleton version extraction."""

import pytest

from skelprobe.infrastructure.text import read_json_version


class TestReadJsonVersion:
    def test_reads_nested_version(self) -> None:
        assert read_json_version('{"skeleton":{"spine":"2.1.27"}}') == "2.1.27"

    def test_ignores_surrounding_keys(self, skel_bytes) -> None:
        assert read_json_version(skel_bytes.json("4.1.24")) == "4.1.24"

    def test_leading_bom(self) -> None:
        assert read_json_version('\ufeff{"skeleton":{"spine":"3.8.99"}}') == "3.8.99"

    def test_does_not_validate_grammar(self) -> None:
        assert read_json_version('{"skeleton":{"spine":"beta"}}') == "beta"

    @pytest.mark.parametrize(
        "text",
        [
            '{"skeleton":{}}',
            "{}",
            '{"skeleton":"2.1.27"}',
            '{"skeleton":{"spine":2.1}}',
            '{"skeleton":{"spine":""}}',
            '{"skeleton":{"spine":null}}',
            '{"bones":{"spine":"2.1.27"}}',
            '[{"skeleton":{"spine":"2.1.27"}}]',
            '"2.1.27"',
        ],
    )
    def test_structural_mismatch(self, text: str) -> None:
        assert read_json_version(text) is None

    @pytest.mark.parametrize("text", ["", "{", '{"skeleton":{"spine":"2.1.27"}', "not json", "[" * 100000])
    def test_malformed_document(self, text: str) -> None:
        assert read_json_version(text) is None
