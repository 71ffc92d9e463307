"""Tests for the sharing commands."""

import json

TOKEN = "1234"


class TestShareAdd:
    def test_share_with_users(self, invoke, server) -> None:
        server.add("POST", "/api/workflows/w1/share", {"message": "shared"})

        result = invoke(
            "share-add",
            "-t",
            TOKEN,
            "-w",
            "w1",
            "-u",
            "bob@example.org",
            "--user",
            "cecile@example.org",
            "-m",
            "please review",
        )

        assert result.exit_code == 0
        assert (
            "==> SUCCESS: w1 is now read-only shared with bob@example.org, cecile@example.org"
            in result.output
        )
        shared = [
            r.url.params["user_email_to_share_with"]
            for r in server.requests
            if r.url.path == "/api/workflows/w1/share"
        ]
        assert shared == ["bob@example.org", "cecile@example.org"]
        assert server.requests[0].url.params["message"] == "please review"
        assert "valid_until" not in server.requests[0].url.params

    def test_partial_failure(self, invoke, server) -> None:
        server.add("POST", "/api/workflows/w1/share", {"message": "shared"})
        server.add(
            "POST",
            "/api/workflows/w1/share",
            {"message": "User eve@example.org does not exist."},
            status=404,
        )

        result = invoke(
            "share-add", "-t", TOKEN, "-w", "w1", "-u", "bob@example.org,eve@example.org"
        )

        assert "w1 is now read-only shared with bob@example.org" in result.output
        assert (
            "==> ERROR: Failed to share w1 with eve@example.org: "
            "User eve@example.org does not exist."
        ) in result.output

    def test_user_required(self, invoke, server) -> None:
        result = invoke("share-add", "-t", TOKEN, "-w", "w1")

        assert result.exit_code != 0
        assert server.requests == []


def test_share_remove(invoke, server) -> None:
    server.add("POST", "/api/workflows/w1/unshare", {"message": "unshared"})

    result = invoke("share-remove", "-t", TOKEN, "-w", "w1", "-u", "bob@example.org")

    assert result.exit_code == 0
    assert "w1 is no longer shared with bob@example.org" in result.output
    request = server.last_request("POST", "/api/workflows/w1/unshare")
    assert request.url.params["user_email_to_unshare_with"] == "bob@example.org"


class TestShareStatus:
    def test_not_shared(self, invoke, server) -> None:
        server.add("GET", "/api/workflows/w1/share-status", {"shared_with": []})

        result = invoke("share-status", "-t", TOKEN, "-w", "w1")

        assert result.exit_code == 0
        assert "Workflow w1 is not shared with anyone." in result.output

    def test_json(self, invoke, server) -> None:
        server.add(
            "GET",
            "/api/workflows/w1/share-status",
            {
                "shared_with": [
                    {"user_email": "bob@example.org", "valid_until": None},
                    {"user_email": "cecile@example.org", "valid_until": "2025-12-31"},
                ]
            },
        )

        result = invoke("share-status", "-t", TOKEN, "-w", "w1", "--json")

        assert json.loads(result.output) == [
            {"user_email": "bob@example.org", "valid_until": None},
            {"user_email": "cecile@example.org", "valid_until": "2025-12-31"},
        ]
