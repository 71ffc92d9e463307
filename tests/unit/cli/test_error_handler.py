"""Tests for error translation and reporting."""

import io


SERVER = "https://localhost:8080"


class TestTranslateError:
    def test_connection_error_becomes_not_found(self) -> None:
        from reana_cli.cli.client import ConnectionError
        from reana_cli.cli.error_handler import translate_error

        translated = translate_error(ConnectionError("refused"), SERVER)

        assert str(translated) == (
            "'https://localhost:8080' not found, please verify the provided "
            "server URL or check your internet connection"
        )

    def test_timeout_becomes_not_found(self) -> None:
        from reana_cli.cli.client import TimeoutError
        from reana_cli.cli.error_handler import translate_error

        assert "not found" in str(translate_error(TimeoutError("slow"), SERVER))

    def test_structured_body_message(self) -> None:
        from reana_cli.cli.client import APIError
        from reana_cli.cli.error_handler import translate_error

        error = APIError("ignored", status_code=404, payload={"message": "No such workflow"})

        assert str(translate_error(error, SERVER)) == "No such workflow"

    def test_other_errors_unchanged(self) -> None:
        from reana_cli.cli.client import APIError
        from reana_cli.cli.error_handler import translate_error
        from reana_cli.errors import ValidationError

        validation = ValidationError("bad input")
        api_error = APIError("raw", status_code=404, payload=["s1"])

        assert translate_error(validation, SERVER) is validation
        assert translate_error(api_error, SERVER) is api_error


class TestReportError:
    def test_prints_error_line(self) -> None:
        from reana_cli.cli.error_handler import report_error
        from reana_cli.errors import ValidationError

        stream = io.StringIO()
        report_error(ValidationError("bad input"), SERVER, out=stream)

        assert stream.getvalue() == "==> ERROR: bad input\n"

    def test_empty_error_prints_nothing(self) -> None:
        from reana_cli.cli.error_handler import report_error
        from reana_cli.errors import EmptyError

        stream = io.StringIO()
        report_error(EmptyError(), SERVER, out=stream)

        assert stream.getvalue() == ""

    def test_message_less_error_uses_type_name(self) -> None:
        from reana_cli.cli.error_handler import report_error

        stream = io.StringIO()
        report_error(KeyError(), SERVER, out=stream)

        assert stream.getvalue() == "==> ERROR: KeyError\n"


def test_prefixed_error() -> None:
    from reana_cli.cli.client import APIError
    from reana_cli.cli.error_handler import prefixed_error

    error = APIError("x", status_code=500, payload={"message": "boom"})

    assert str(prefixed_error(error, SERVER, "disk usage could not be retrieved:")) == (
        "disk usage could not be retrieved:\nboom"
    )
