"""Tests for CLI output helpers.

Messages, tables and JSON all go to stdout by default; an explicit stream
can be passed instead.
"""

import io
import json
import re

import pytest


class TestDisplayMessage:
    """Tests for display_message prefixes."""

    def test_info_has_no_label(self, capsys: pytest.CaptureFixture) -> None:
        from reana_cli.cli.output import MessageType, display_message

        display_message("Listing files...", MessageType.INFO)

        assert capsys.readouterr().out == "==> Listing files...\n"

    def test_success_label(self, capsys: pytest.CaptureFixture) -> None:
        from reana_cli.cli.output import MessageType, display_message

        display_message("done", MessageType.SUCCESS)

        assert capsys.readouterr().out == "==> SUCCESS: done\n"

    def test_indented_info_gets_label(self, capsys: pytest.CaptureFixture) -> None:
        from reana_cli.cli.output import MessageType, display_message

        display_message("checking", MessageType.INFO, indented=True)

        assert capsys.readouterr().out == "  -> INFO: checking\n"

    def test_warning_on_stderr(self, capsys: pytest.CaptureFixture) -> None:
        import sys

        from reana_cli.cli.output import MessageType, display_message

        display_message("careful", MessageType.WARNING, out=sys.stderr)

        captured = capsys.readouterr()
        assert captured.err == "==> WARNING: careful\n"
        assert captured.out == ""

    def test_explicit_stream(self, capsys: pytest.CaptureFixture) -> None:
        from reana_cli.cli.output import MessageType, display_message

        stream = io.StringIO()
        display_message("boom", MessageType.ERROR, out=stream)

        assert stream.getvalue() == "==> ERROR: boom\n"
        assert capsys.readouterr().out == ""


class TestDisplayTable:
    """Tests for display_table."""

    def test_headers_uppercased_and_aligned(self) -> None:
        from reana_cli.cli.output import display_table

        stream = io.StringIO()
        display_table(["size", "name"], [["2 KiB", "/code/fitdata.C"]], out=stream)

        lines = [line.rstrip() for line in stream.getvalue().splitlines()]
        assert lines[0].split() == ["SIZE", "NAME"]
        assert re.split(r"\s{2,}", lines[1].strip()) == ["2 KiB", "/code/fitdata.C"]
        assert lines[0].index("NAME") == lines[1].index("/code/fitdata.C")

    def test_rows_must_match_header(self) -> None:
        from reana_cli.cli.output import display_table

        with pytest.raises(ValueError):
            display_table(["a", "b"], [["only one"]], out=io.StringIO())

    def test_headers_only(self) -> None:
        from reana_cli.cli.output import display_table

        stream = io.StringIO()
        display_table(["name"], [], out=stream)

        assert stream.getvalue().split() == ["NAME"]


class TestDisplayJsonOutput:
    def test_two_space_indent(self) -> None:
        from reana_cli.cli.output import display_json_output

        stream = io.StringIO()
        display_json_output({"b": 1, "a": [1]}, out=stream)

        assert stream.getvalue() == '{\n  "b": 1,\n  "a": [\n    1\n  ]\n}\n'

    def test_sort_keys(self) -> None:
        from reana_cli.cli.output import display_json_output

        stream = io.StringIO()
        display_json_output([{"b": None, "a": "x"}], out=stream, sort_keys=True)

        assert stream.getvalue().index('"a"') < stream.getvalue().index('"b"')
        assert json.loads(stream.getvalue()) == [{"a": "x", "b": None}]


def test_print_colorable_adds_no_newline(capsys: pytest.CaptureFixture) -> None:
    from reana_cli.cli.output import print_colorable

    print_colorable("10m 50s", "green")
    print_colorable(" used", "")

    assert capsys.readouterr().out == "10m 50s used"
