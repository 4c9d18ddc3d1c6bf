"""Version of the installed distribution."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "synapse-user-autoerase"

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version from the package metadata, or from pyproject.toml in an uninstalled checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass

    if not PYPROJECT_PATH.exists():
        return "unknown"
    with open(PYPROJECT_PATH, "rb") as f:
        return tomllib.load(f)["project"]["version"]


__version__ = get_version()
