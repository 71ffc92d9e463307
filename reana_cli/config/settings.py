"""
REANA client settings.

Environment variables are read once per invocation into ReanaSettings and
frozen into a ConfigStore snapshot that the commands consult afterwards.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reana_cli.config.constants import DEFAULT_CHECK_INTERVAL, DEFAULT_LOG_LEVEL


class ReanaSettings(BaseSettings):
    """Client settings read from the environment.

    Environment variables:
        REANA_SERVER_URL: URL of the REANA server
        REANA_ACCESS_TOKEN: Access token of the current user
        REANA_WORKON: Default workflow for workflow commands
        REANA_CHECK_INTERVAL: Seconds between polls of `start --follow`. Default: 5
        REANA_SKIP_TLS_VERIFY: Disable TLS certificate verification. Default: false
    """

    server_url: str = Field(
        default="",
        validation_alias="REANA_SERVER_URL",
    )
    access_token: str = Field(
        default="",
        validation_alias="REANA_ACCESS_TOKEN",
    )
    workflow: str = Field(
        default="",
        validation_alias="REANA_WORKON",
    )
    check_interval: float = Field(
        default=DEFAULT_CHECK_INTERVAL,
        ge=0,
        validation_alias="REANA_CHECK_INTERVAL",
        description="Seconds between two status requests while following a workflow",
    )
    skip_tls_verify: bool = Field(
        default=False,
        validation_alias="REANA_SKIP_TLS_VERIFY",
    )

    model_config = SettingsConfigDict(extra="ignore")


@lru_cache
def get_settings() -> ReanaSettings:
    """Get client settings with caching."""
    return ReanaSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the environment is read again."""
    get_settings.cache_clear()


@dataclass(frozen=True)
class ConfigStore:
    """Read-only view of the configuration keys of one invocation.

    Keys are ``server-url``, ``access-token``, ``workflow`` and ``loglevel``.
    Unknown or unset keys read as the empty string.
    """

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def has(self, key: str) -> bool:
        return bool(self.values.get(key))

    @classmethod
    def from_settings(
        cls, settings: ReanaSettings, log_level: str = DEFAULT_LOG_LEVEL
    ) -> "ConfigStore":
        return cls(
            {
                "server-url": settings.server_url,
                "access-token": settings.access_token,
                "workflow": settings.workflow,
                "loglevel": log_level,
            }
        )
