"""Tests for the secrets commands."""

import base64

import pytest

TOKEN = "1234"


def _b64(value: bytes) -> str:
    return base64.b64encode(value).decode()


class TestParseSecrets:
    def test_env_and_file(self, tmp_path) -> None:
        from reana_cli.cli.commands.secrets import parse_secrets

        keytab = tmp_path / ".keytab"
        keytab.write_bytes(b"\x00secret")

        secrets, names = parse_secrets(["PASSWORD=pa=ss"], [str(keytab)])

        assert names == ["PASSWORD", ".keytab"]
        assert secrets == {
            "PASSWORD": {"type": "env", "value": _b64(b"pa=ss")},
            ".keytab": {"type": "file", "value": _b64(b"\x00secret")},
        }

    def test_env_without_value(self) -> None:
        from reana_cli.cli.commands.secrets import parse_secrets
        from reana_cli.errors import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            parse_secrets(["PASSWORD"], [])

        assert str(exc_info.value) == (
            'option "PASSWORD" is invalid:\n'
            'for literal strings use "SECRET_NAME=VALUE" format'
        )

    def test_missing_file(self, tmp_path) -> None:
        from reana_cli.cli.commands.secrets import parse_secrets
        from reana_cli.errors import ValidationError

        with pytest.raises(ValidationError, match="invalid value for '--file'"):
            parse_secrets([], [str(tmp_path / "nope")])


class TestSecretsAdd:
    def test_upload(self, invoke, server) -> None:
        server.add("POST", "/api/secrets/", {})

        result = invoke("secrets-add", "-t", TOKEN, "--env", "USER=reana", "--overwrite")

        assert result.exit_code == 0
        assert "==> SUCCESS: Secrets USER were successfully uploaded." in result.output
        request = server.last_request("POST", "/api/secrets/")
        assert request.url.params["overwrite"] == "true"
        assert server.json_body(request) == {
            "USER": {"type": "env", "value": _b64(b"reana")}
        }

    def test_nothing_to_add(self, invoke, server) -> None:
        result = invoke("secrets-add", "-t", TOKEN)

        assert result.exit_code == 1
        assert "at least one of the options: 'env', 'file' is required" in result.output

    def test_already_exists(self, invoke, server) -> None:
        server.add(
            "POST",
            "/api/secrets/",
            {"message": "Operation cancelled. Secret USER already exists."},
            status=409,
        )

        result = invoke("secrets-add", "-t", TOKEN, "--env", "USER=reana")

        assert result.exit_code == 1
        assert "==> ERROR: Operation cancelled. Secret USER already exists." in (
            result.output
        )


def test_secrets_list(invoke, server) -> None:
    server.add(
        "GET",
        "/api/secrets",
        [{"name": "USER", "type": "env"}, {"name": ".keytab", "type": "file"}],
    )

    result = invoke("secrets-list", "-t", TOKEN)

    assert result.exit_code == 0
    rows = [line.split() for line in result.output.splitlines() if line.strip()]
    assert rows == [["NAME", "TYPE"], ["USER", "env"], [".keytab", "file"]]


class TestSecretsDelete:
    def test_deleted(self, invoke, server) -> None:
        server.add("DELETE", "/api/secrets/", ["secret1", "secret2"])

        result = invoke("secrets-delete", "-t", TOKEN, "secret1", "secret2")

        assert result.exit_code == 0
        assert "Secrets secret1, secret2 were successfully deleted." in result.output
        request = server.last_request("DELETE", "/api/secrets/")
        assert server.json_body(request) == ["secret1", "secret2"]

    def test_unknown_secret(self, invoke, server) -> None:
        server.add("DELETE", "/api/secrets/", ["secret1"], status=404)

        result = invoke("secrets-delete", "-t", TOKEN, "secret1", "secret2")

        assert result.exit_code != 0
        assert "secrets ['secret1'] do not exist. Nothing was deleted" in result.output
