"""CLI state management.

Provides a typed, immutable state object built once by the root command and
passed to every leaf command through the Typer context.
"""

from dataclasses import dataclass, field

from reana_cli.config.constants import DEFAULT_CHECK_INTERVAL, DEFAULT_LOG_LEVEL
from reana_cli.config.settings import ConfigStore


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Populated by the root Typer callback and stored in `ctx.obj`. Tests
    build it directly.

    Attributes:
        config: Configuration snapshot (server URL, token, workflow, log level).
        check_interval: Seconds between status requests of `start --follow`.
        verify_tls: If False, the server's TLS certificate is not verified.
    """

    config: ConfigStore = field(default_factory=ConfigStore)
    check_interval: float = DEFAULT_CHECK_INTERVAL
    verify_tls: bool = True

    @property
    def server_url(self) -> str:
        return self.config.get("server-url").rstrip("/")

    @property
    def log_level(self) -> str:
        return self.config.get("loglevel") or DEFAULT_LOG_LEVEL
