"""Tests for the list and status commands."""

import json

TOKEN = "1234"

WORKFLOWS = {
    "items": [
        {
            "id": "256b25f4-4cfb-4684-b7a8-73872ef455a1",
            "name": "mytest.1",
            "created": "2018-06-13T09:47:35",
            "status": "finished",
            "user": "00000000-0000-0000-0000-000000000000",
            "size": {"raw": 1024, "human_readable": "1 KiB"},
            "progress": {
                "run_started_at": "2018-06-13T09:47:40",
                "run_finished_at": "2018-06-13T09:49:40",
                "finished": {"total": 2},
                "total": {"total": 2},
            },
        },
        {
            "id": "3d8c5c6a-3d9b-4f3a-9e2c-0a6d1a7f0c11",
            "name": "mytest.2",
            "created": "2018-06-14T09:47:35",
            "status": "failed",
            "user": "00000000-0000-0000-0000-000000000000",
            "size": {"raw": 2048, "human_readable": "2 KiB"},
            "progress": {"run_started_at": "2018-06-14T09:47:40"},
        },
    ]
}

SESSIONS = {
    "items": [
        {
            "name": "mytest.1",
            "created": "2018-06-13T09:47:35",
            "session_type": "jupyter",
            "session_uri": "/b7b5fa1d/jupyter",
            "session_status": "created",
        }
    ]
}


def _rows(output: str) -> list[list[str]]:
    return [line.split() for line in output.splitlines() if line.strip()]


class TestList:
    def test_default_columns_sorted_by_created_desc(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        result = invoke("list", "-t", TOKEN)

        assert result.exit_code == 0
        rows = _rows(result.output)
        assert rows[0] == ["NAME", "RUN_NUMBER", "CREATED", "STARTED", "ENDED", "STATUS"]
        assert rows[1][:2] == ["mytest", "2"]
        assert rows[1][-2:] == ["-", "failed"]
        assert rows[2][:2] == ["mytest", "1"]

    def test_request_parameters(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        invoke("list", "-t", TOKEN, "--filter", "name=mytest", "--size", "5")

        params = server.last_request("GET", "/api/workflows").url.params
        assert params["type"] == "batch"
        assert params["size"] == "5"
        assert json.loads(params["search"]) == {"name": ["mytest"]}
        assert "deleted" not in params.get_list("status")
        assert "include_progress" not in params

    def test_status_filter_replaces_default(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        invoke("list", "-t", TOKEN, "--filter", "status=failed")

        params = server.last_request("GET", "/api/workflows").url.params
        assert params.get_list("status") == ["failed"]
        assert "search" not in params

    def test_invalid_status_filter(self, invoke, server) -> None:
        result = invoke("list", "-t", TOKEN, "--filter", "status=bogus")

        assert result.exit_code == 1
        assert "'bogus' is not a valid value for the filter 'status'" in result.output
        assert server.requests == []

    def test_show_deleted(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        invoke("list", "-t", TOKEN, "--all")

        params = server.last_request("GET", "/api/workflows").url.params
        assert "deleted" in params.get_list("status")

    def test_verbose_json(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        result = invoke("list", "-t", TOKEN, "-v", "--json")

        records = json.loads(result.output)
        finished = [r for r in records if r["run_number"] == "1"][0]
        assert finished["size"] == 1024
        assert finished["progress"] == "2/2"
        assert finished["duration"] == 120
        assert finished["id"] == "256b25f4-4cfb-4684-b7a8-73872ef455a1"

    def test_human_readable_size(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        result = invoke(
            "list", "-t", TOKEN, "--include-workspace-size", "-h", "--json"
        )

        assert sorted(r["size"] for r in json.loads(result.output)) == ["1 KiB", "2 KiB"]
        params = server.last_request("GET", "/api/workflows").url.params
        assert params["include_workspace_size"] == "true"

    def test_format_filters_rows(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        result = invoke("list", "-t", TOKEN, "--format", "run_number,status=failed")

        assert _rows(result.output) == [["RUN_NUMBER", "STATUS"], ["2", "failed"]]

    def test_unknown_sort_column_warns(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", WORKFLOWS)

        result = invoke("list", "-t", TOKEN, "--sort", "bogus")

        assert result.exit_code == 0
        assert (
            "==> WARNING: sort operation was aborted, column 'bogus' does not exist"
            in result.output
        )

    def test_sessions(self, invoke, server) -> None:
        server.add("GET", "/api/workflows", SESSIONS)

        result = invoke("list", "-t", TOKEN, "--sessions", "--json")

        assert json.loads(result.output) == [
            {
                "created": "2018-06-13T09:47:35",
                "name": "mytest",
                "run_number": "1",
                "session_status": "created",
                "session_type": "jupyter",
                "session_uri": "https://localhost:8080/b7b5fa1d/jupyter?token=1234",
            }
        ]
        params = server.last_request("GET", "/api/workflows").url.params
        assert params["type"] == "interactive"


class TestStatus:
    PAYLOAD = {
        "id": "256b25f4-4cfb-4684-b7a8-73872ef455a1",
        "name": "mytest.1",
        "created": "2018-06-13T09:47:35",
        "status": "finished",
        "user": "00000000-0000-0000-0000-000000000000",
        "progress": {
            "run_started_at": "2018-06-13T09:47:40",
            "run_finished_at": "2018-06-13T09:47:50",
            "current_command": 'bash -c "cd /var/reana; python fit.py "',
            "finished": {"total": 1},
            "total": {"total": 2},
        },
    }

    def test_columns(self, invoke, server) -> None:
        server.add("GET", "/api/workflows/mytest.1/status", self.PAYLOAD)

        result = invoke("status", "-t", TOKEN, "-w", "mytest.1")

        assert result.exit_code == 0
        rows = _rows(result.output)
        assert rows[0] == [
            "NAME",
            "RUN_NUMBER",
            "CREATED",
            "STARTED",
            "ENDED",
            "STATUS",
            "PROGRESS",
        ]
        assert rows[1][-2:] == ["finished", "1/2"]

    def test_verbose_json(self, invoke, server) -> None:
        server.add("GET", "/api/workflows/mytest.1/status", self.PAYLOAD)

        result = invoke("status", "-t", TOKEN, "-w", "mytest.1", "-v", "--json")

        record = json.loads(result.output)[0]
        assert record["command"] == "python fit.py"
        assert record["duration"] == 10
        assert record["user"] == "00000000-0000-0000-0000-000000000000"

    def test_created_run_has_no_start(self, invoke, server) -> None:
        server.add(
            "GET",
            "/api/workflows/mytest.1/status",
            {"name": "mytest.1", "created": "2018-06-13T09:47:35", "status": "created"},
        )

        result = invoke("status", "-t", TOKEN, "-w", "mytest.1", "--json")

        assert list(json.loads(result.output)[0]) == [
            "created",
            "name",
            "run_number",
            "status",
        ]

    def test_format_projects_without_filtering(self, invoke, server) -> None:
        server.add("GET", "/api/workflows/mytest.1/status", self.PAYLOAD)

        result = invoke(
            "status", "-t", TOKEN, "-w", "mytest.1", "--format", "status=failed"
        )

        assert _rows(result.output) == [["STATUS"], ["finished"]]

    def test_unknown_workflow(self, invoke, server) -> None:
        server.add(
            "GET",
            "/api/workflows/nope/status",
            {"message": "REANA_WORKON is set to nope, but that workflow does not exist."},
            status=404,
        )

        result = invoke("status", "-t", TOKEN, "-w", "nope")

        assert result.exit_code == 1
        assert "==> ERROR: REANA_WORKON is set to nope" in result.output
