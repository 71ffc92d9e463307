"""Shared fixtures for CLI tests."""

import json
import re
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

import httpx
import pytest
from typer.testing import CliRunner

if TYPE_CHECKING:
    from typer.testing import Result

# ANSI escape code pattern for stripping styling from output
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

TEST_TOKEN = "1234"


class CleanResult:
    """Result wrapper that strips ANSI codes from stdout/stderr/output.

    Rich applies bold styling to messages even with NO_COLOR=1, which breaks
    plain string assertions.
    """

    def __init__(self, result: "Result") -> None:
        self._result = result

    @property
    def exit_code(self) -> int:
        return self._result.exit_code

    @property
    def stdout(self) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", self._result.stdout)

    @property
    def output(self) -> str:
        """The terminal output (mixed stdout+stderr) with ANSI codes stripped."""
        return ANSI_ESCAPE_PATTERN.sub("", self._result.output)

    @property
    def exception(self):
        return self._result.exception


class CleanCliRunner(CliRunner):
    """CLI runner that returns results with ANSI codes stripped."""

    def invoke(self, *args, **kwargs) -> CleanResult:
        result = super().invoke(*args, **kwargs)
        return CleanResult(result)


@pytest.fixture
def runner():
    """CLI runner with NO_COLOR=1 and ANSI codes stripped from results."""
    return CleanCliRunner(env={"NO_COLOR": "1"})


@pytest.fixture
def app():
    from reana_cli.cli.app import app as reana_app

    return reana_app


Body = Union[dict, list, str, bytes, None]


class FakeServer:
    """In-memory REANA server answering through httpx.MockTransport.

    Routes map (method, path) to one or more (status, body) responses;
    with several responses each request consumes the next one and the last
    one repeats. A bytes body is sent as is, with the given headers. Requests
    without the test token get 403.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[tuple[int, Body, dict]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        body: Body = None,
        status: int = 200,
        headers: Optional[dict] = None,
    ) -> None:
        self.routes.setdefault((method, path), []).append((status, body, headers or {}))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.params.get("access_token") != TEST_TOKEN:
            return httpx.Response(403, json={"message": "invalid access token"})

        responses = self.routes.get((request.method, request.url.path))
        if not responses:
            return httpx.Response(
                404, json={"message": f"no route for {request.method} {request.url.path}"}
            )
        status, body, headers = responses.pop(0) if len(responses) > 1 else responses[0]
        if body is None:
            return httpx.Response(status, headers=headers)
        if isinstance(body, bytes):
            return httpx.Response(status, content=body, headers=headers)
        return httpx.Response(status, json=body)

    def last_request(self, method: str, path: str) -> httpx.Request:
        matching = [
            r for r in self.requests if r.method == method and r.url.path == path
        ]
        assert matching, f"no {method} request to {path}"
        return matching[-1]

    @staticmethod
    def json_body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    """Fake server wired into every SyncCLIClient created during the test."""
    fake = FakeServer()

    def build_transport(verify: bool = True) -> httpx.BaseTransport:
        return httpx.MockTransport(fake.handler)

    monkeypatch.setattr(
        "reana_cli.cli.client.sync_client.build_transport", build_transport
    )
    return fake


@pytest.fixture
def invoke(runner, app) -> Callable[..., CleanResult]:
    """Invoke the app with the given arguments."""

    def _invoke(*args: str) -> CleanResult:
        return runner.invoke(app, list(args))

    return _invoke
