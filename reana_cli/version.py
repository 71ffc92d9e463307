"""
Version management for the REANA client.

The version is read from pyproject.toml, which is the single source of truth.
When the package is installed without its pyproject.toml the fallback below
is used.
"""

from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.9.4"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string, or the fallback version if pyproject.toml is
        missing, invalid or belongs to another project
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
    except (FileNotFoundError, tomli.TOMLDecodeError):
        return _FALLBACK_VERSION

    project = pyproject_data.get("project", {})
    if project.get("name") != "reana-cli":
        return _FALLBACK_VERSION
    return project.get("version", _FALLBACK_VERSION)


__version__ = get_version_from_pyproject()
