"""Typed access to the REANA server endpoints.

Each method maps to one endpoint of the REST API and returns the decoded
JSON body. Errors propagate as client errors from SyncCLIClient.
"""

import json
from email.message import Message
from typing import Any, NamedTuple, Optional

from reana_cli.cli.client.sync_client import SyncCLIClient

DEFAULT_DOWNLOAD_NAME = "downloaded_file"


class DownloadedFile(NamedTuple):
    """A workspace file fetched from the server.

    ``zipped`` is set when several files were requested at once and the
    server answered with a zip archive of them.
    """

    name: str
    content: bytes
    zipped: bool


class ReanaAPI:
    """REANA REST API on top of a SyncCLIClient."""

    def __init__(self, client: SyncCLIClient) -> None:
        self._client = client

    # --- User and server ---

    def get_you(self) -> dict[str, Any]:
        return self._client.get("/api/you")

    def info(self) -> dict[str, Any]:
        return self._client.get("/api/info")

    # --- Workflows ---

    def get_workflows(
        self,
        run_type: str,
        verbose: bool = False,
        page: Optional[int] = None,
        size: Optional[int] = None,
        status: Optional[list[str]] = None,
        search: Optional[str] = None,
        workflow_id_or_name: Optional[str] = None,
        include_progress: Optional[bool] = None,
        include_workspace_size: Optional[bool] = None,
    ) -> dict[str, Any]:
        return self._client.get(
            "/api/workflows",
            params={
                "type": run_type,
                "verbose": verbose,
                "page": page,
                "size": size,
                "status": status or None,
                "search": search or None,
                "workflow_id_or_name": workflow_id_or_name or None,
                "include_progress": include_progress,
                "include_workspace_size": include_workspace_size,
            },
        )

    def get_workflow_status(self, workflow: str) -> dict[str, Any]:
        return self._client.get(f"/api/workflows/{workflow}/status")

    def set_workflow_status(
        self,
        workflow: str,
        status: str,
        all_runs: bool = False,
        workspace: bool = False,
    ) -> dict[str, Any]:
        return self._client.put(
            f"/api/workflows/{workflow}/status",
            params={"status": status},
            json={"all_runs": all_runs, "workspace": workspace},
        )

    def get_workflow_parameters(self, workflow: str) -> dict[str, Any]:
        return self._client.get(f"/api/workflows/{workflow}/parameters")

    def start_workflow(
        self,
        workflow: str,
        input_parameters: Optional[dict[str, str]] = None,
        operational_options: Optional[dict[str, str]] = None,
        restart: bool = False,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "input_parameters": input_parameters or {},
            "operational_options": operational_options or {},
        }
        if restart:
            body["restart"] = True
        return self._client.post(f"/api/workflows/{workflow}/start", json=body)

    def get_workflow_logs(
        self,
        workflow: str,
        steps: Optional[list[str]] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> dict[str, Any]:
        return self._client.get(
            f"/api/workflows/{workflow}/logs",
            params={"steps": steps or None, "page": page, "size": size},
        )

    def get_workflow_diff(
        self,
        workflow_a: str,
        workflow_b: str,
        brief: bool = False,
        context_lines: int = 5,
    ) -> dict[str, Any]:
        return self._client.get(
            f"/api/workflows/{workflow_a}/diff/{workflow_b}",
            params={"brief": brief, "context_lines": str(context_lines)},
        )

    def get_workflow_specification(self, workflow: str) -> dict[str, Any]:
        return self._client.get(f"/api/workflows/{workflow}/specification")

    def get_retention_rules(self, workflow: str) -> dict[str, Any]:
        return self._client.get(f"/api/workflows/{workflow}/retention_rules")

    def prune_workspace(
        self,
        workflow: str,
        include_inputs: bool = False,
        include_outputs: bool = False,
    ) -> dict[str, Any]:
        return self._client.post(
            f"/api/workflows/{workflow}/prune",
            params={
                "include_inputs": include_inputs,
                "include_outputs": include_outputs,
            },
        )

    # --- Workspace ---

    def get_disk_usage(
        self,
        workflow: str,
        summarize: bool = False,
        search: Optional[str] = None,
    ) -> dict[str, Any]:
        return self._client.get(
            f"/api/workflows/{workflow}/disk_usage",
            params={"summarize": summarize, "search": search or None},
        )

    def get_files(
        self,
        workflow: str,
        file_name: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> dict[str, Any]:
        return self._client.get(
            f"/api/workflows/{workflow}/workspace",
            params={
                "file_name": file_name or None,
                "search": search or None,
                "page": page,
                "size": size,
            },
        )

    def upload_file(self, workflow: str, file_name: str, content: bytes) -> dict[str, Any]:
        return self._client.upload(
            f"/api/workflows/{workflow}/workspace",
            content,
            params={"file_name": file_name},
        )

    def download_file(self, workflow: str, file_name: str) -> DownloadedFile:
        response = self._client.download(
            f"/api/workflows/{workflow}/workspace/{file_name}"
        )
        return DownloadedFile(
            name=attachment_name(response.headers.get("Content-Disposition", "")),
            content=response.content,
            zipped=response.headers.get("Content-Type", "").startswith(
                "application/zip"
            ),
        )

    def delete_file(self, workflow: str, file_name: str) -> dict[str, Any]:
        return self._client.delete(f"/api/workflows/{workflow}/workspace/{file_name}")

    def move_files(self, workflow: str, source: str, target: str) -> dict[str, Any]:
        return self._client.put(
            f"/api/workflows/move_files/{workflow}",
            params={"source": source, "target": target},
        )

    # --- Interactive sessions ---

    def open_interactive_session(
        self, workflow: str, session_type: str, image: Optional[str] = None
    ) -> dict[str, Any]:
        body = {"image": image} if image else {}
        return self._client.post(
            f"/api/workflows/{workflow}/open/{session_type}", json=body
        )

    def close_interactive_session(self, workflow: str) -> dict[str, Any]:
        return self._client.post(f"/api/workflows/{workflow}/close/")

    # --- Sharing ---

    def share_workflow(
        self,
        workflow: str,
        user_email: str,
        message: Optional[str] = None,
        valid_until: Optional[str] = None,
    ) -> dict[str, Any]:
        return self._client.post(
            f"/api/workflows/{workflow}/share",
            params={
                "user_email_to_share_with": user_email,
                "message": message or None,
                "valid_until": valid_until or None,
            },
        )

    def unshare_workflow(self, workflow: str, user_email: str) -> dict[str, Any]:
        return self._client.post(
            f"/api/workflows/{workflow}/unshare",
            params={"user_email_to_unshare_with": user_email},
        )

    def get_share_status(self, workflow: str) -> dict[str, Any]:
        return self._client.get(f"/api/workflows/{workflow}/share-status")

    # --- Secrets ---

    def add_secrets(
        self, secrets: dict[str, dict[str, str]], overwrite: bool = False
    ) -> dict[str, Any]:
        return self._client.post(
            "/api/secrets/", json=secrets, params={"overwrite": overwrite}
        )

    def list_secrets(self) -> list[dict[str, Any]]:
        return self._client.get("/api/secrets")

    def delete_secrets(self, names: list[str]) -> list[str]:
        return self._client.delete("/api/secrets/", json=names)


def decode_json_field(value: Any) -> Any:
    """Decode a response field that holds a JSON document encoded as a string."""
    if isinstance(value, str):
        return json.loads(value) if value else None
    return value


def attachment_name(content_disposition: str) -> str:
    """File name announced by a ``Content-Disposition`` header.

    >>> attachment_name('attachment; filename="plot.png"')
    'plot.png'
    """
    message = Message()
    message["Content-Disposition"] = content_disposition
    name = message.get_filename()
    return name or DEFAULT_DOWNLOAD_NAME
