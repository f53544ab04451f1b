"""Tests for the tool catalog and the per-tool input types."""
from __future__ import annotations

import pytest

from conftest import TOKYO_RECORD
from core.catalog import LOOKUP_POSTAL_CODE, SEARCH_ADDRESS, TOOL_DESCRIPTORS
from core.errors import InvalidArgumentsError
from core.models import AddressRecord, LookupPostalCodeInput, SearchAddressInput, ToolResult


class TestCatalog:
    def test_two_tools_in_order(self):
        assert [t.name for t in TOOL_DESCRIPTORS] == ["lookup_postal_code", "search_address"]

    def test_required_fields(self):
        assert LOOKUP_POSTAL_CODE.required == ["postalCode"]
        assert SEARCH_ADDRESS.required == ["query"]

    def test_input_schema_shape(self):
        schema = SEARCH_ADDRESS.input_schema()
        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"query", "prefecture", "city"}
        assert schema["properties"]["city"] == {
            "type": "string",
            "description": "City name to filter results",
        }
        assert schema["required"] == ["query"]

    def test_lookup_schema(self):
        assert LOOKUP_POSTAL_CODE.description == "Look up address information from a Japanese postal code"
        assert LOOKUP_POSTAL_CODE.input_schema() == {
            "type": "object",
            "properties": {
                "postalCode": {
                    "type": "string",
                    "description": "Japanese postal code (e.g., '1000001' or '100-0001')",
                }
            },
            "required": ["postalCode"],
        }


class TestLookupPostalCodeInput:
    def test_hyphens_stripped_only_in_normalized(self):
        args = LookupPostalCodeInput.from_arguments({"postalCode": "100-0001"})
        assert args.postal_code == "100-0001"
        assert args.normalized == "1000001"

    def test_other_characters_pass_through(self):
        args = LookupPostalCodeInput.from_arguments({"postalCode": "〒100 0001"})
        assert args.normalized == "〒100 0001"

    def test_missing_postal_code(self):
        with pytest.raises(InvalidArgumentsError, match="postalCode"):
            LookupPostalCodeInput.from_arguments({})

    def test_non_string_postal_code(self):
        with pytest.raises(InvalidArgumentsError, match="must be a string"):
            LookupPostalCodeInput.from_arguments({"postalCode": 1000001})

    def test_non_mapping_arguments(self):
        with pytest.raises(InvalidArgumentsError, match="expected an object"):
            LookupPostalCodeInput.from_arguments(["100-0001"])


class TestSearchAddressInput:
    def test_query_params_omit_absent_filters(self):
        args = SearchAddressInput.from_arguments({"query": "東京都"})
        assert args.query_params() == {"q": "東京都"}

    def test_query_params_omit_empty_filters(self):
        args = SearchAddressInput.from_arguments({"query": "東京都", "prefecture": "", "city": ""})
        assert args.query_params() == {"q": "東京都"}

    def test_query_params_with_filters(self):
        args = SearchAddressInput.from_arguments(
            {"query": "千代田", "prefecture": "東京都", "city": "千代田区"}
        )
        assert args.query_params() == {"q": "千代田", "prefecture": "東京都", "city": "千代田区"}

    def test_missing_query(self):
        with pytest.raises(InvalidArgumentsError, match="query"):
            SearchAddressInput.from_arguments({"prefecture": "東京都"})

    def test_non_string_filter(self):
        with pytest.raises(InvalidArgumentsError, match="city"):
            SearchAddressInput.from_arguments({"query": "x", "city": 13})


class TestAddressRecord:
    def test_lookup_shape_has_kana(self):
        record = AddressRecord.from_upstream(TOKYO_RECORD)
        assert list(record.to_lookup_dict()) == [
            "postalCode",
            "prefecture",
            "city",
            "town",
            "prefectureKana",
            "cityKana",
            "townKana",
        ]
        assert record.to_lookup_dict()["cityKana"] == "チヨダク"

    def test_search_shape_has_no_kana(self):
        record = AddressRecord.from_upstream(TOKYO_RECORD)
        assert record.to_search_dict() == {
            "postalCode": "1000001",
            "prefecture": "東京都",
            "city": "千代田区",
            "town": "千代田",
        }


def test_tool_result_envelope():
    result = ToolResult.text("hello")
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.first_text == "hello"
