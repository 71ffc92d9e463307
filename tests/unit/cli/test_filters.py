"""Tests for the filter engine."""

import json

import pytest


class TestParseKeyValue:
    def test_splits_on_first_equal(self) -> None:
        from reana_cli.cli.filters import parse_key_value

        assert parse_key_value("a=b=c") == ("a", "b=c")

    def test_lowercases_key_only(self) -> None:
        from reana_cli.cli.filters import parse_key_value

        assert parse_key_value("KEY=Value") == ("key", "Value")

    def test_missing_equal_rejected(self) -> None:
        from reana_cli.cli.filters import WRONG_FILTER_FORMAT_MSG, parse_key_value
        from reana_cli.errors import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            parse_key_value("invalid")
        assert str(exc_info.value) == WRONG_FILTER_FORMAT_MSG

    def test_empty_value_allowed(self) -> None:
        from reana_cli.cli.filters import parse_key_value

        assert parse_key_value("name=") == ("name", "")


class TestFilters:
    """Tests for the Filters set."""

    def test_single_key_last_value_wins(self) -> None:
        from reana_cli.cli.filters import Filters

        filters = Filters(["status"], [], ["status=running", "status=failed"])

        assert filters.get_single("status") == "failed"

    def test_multi_key_accumulates(self) -> None:
        from reana_cli.cli.filters import Filters

        filters = Filters([], ["step"], ["step=gendata", "STEP=fitdata"])

        assert filters.get_multi("step") == ["gendata", "fitdata"]

    def test_unset_keys_read_empty(self) -> None:
        from reana_cli.cli.filters import Filters

        filters = Filters(["status"], ["step"])

        assert filters.get_single("status") == ""
        assert filters.get_multi("step") == []

    def test_unknown_key_lists_available(self) -> None:
        from reana_cli.cli.filters import Filters
        from reana_cli.errors import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            Filters(["status"], ["name"], ["size=1"])

        assert str(exc_info.value) == (
            "filter key 'size' is not valid\nAvailable filters are 'status', 'name'"
        )

    def test_get_single_of_multi_key_rejected(self) -> None:
        from reana_cli.cli.filters import Filters
        from reana_cli.errors import ValidationError

        filters = Filters(["status"], ["name"])

        with pytest.raises(ValidationError, match="not a valid single value filter"):
            filters.get_single("name")
        with pytest.raises(ValidationError, match="not a valid multi value filter"):
            filters.get_multi("status")

    def test_get_json_empty_is_empty_string(self) -> None:
        from reana_cli.cli.filters import Filters

        filters = Filters(["status"], ["name"], ["status=running"])

        assert filters.get_json([]) == ""
        assert filters.get_json(["name"]) == ""

    def test_get_json_only_set_keys(self) -> None:
        from reana_cli.cli.filters import Filters

        filters = Filters(["status"], ["name", "size"], ["name=a", "name=b", "status=x"])

        assert filters.get_json(["size", "name", "status"]) == (
            '{"name":["a","b"],"status":"x"}'
        )

    def test_get_json_round_trip(self) -> None:
        """Parsing the JSON back gives the same filter contents."""
        from reana_cli.cli.filters import Filters

        original = Filters(["status"], ["name"], ["name=a", "name=b", "status=x"])
        decoded = json.loads(original.get_json(["name", "status"]))

        rebuilt = Filters(
            ["status"],
            ["name"],
            [f"name={value}" for value in decoded["name"]] + [f"status={decoded['status']}"],
        )

        assert rebuilt.get_multi("name") == original.get_multi("name")
        assert rebuilt.get_single("status") == original.get_single("status")

    def test_get_json_unknown_key_rejected(self) -> None:
        from reana_cli.cli.filters import Filters
        from reana_cli.errors import ValidationError

        with pytest.raises(ValidationError):
            Filters([], ["name"]).get_json(["other"])

    def test_validate_values(self) -> None:
        from reana_cli.cli.filters import Filters
        from reana_cli.errors import ValidationError

        filters = Filters([], ["status"], ["status=running", "status=bogus"])

        with pytest.raises(ValidationError) as exc_info:
            filters.validate_values("status", ["running", "finished"])
        assert "'bogus' is not a valid value for the filter 'status'" in str(
            exc_info.value
        )

    def test_validate_values_unset_key_passes(self) -> None:
        from reana_cli.cli.filters import Filters

        Filters([], ["status"]).validate_values("status", ["running"])
