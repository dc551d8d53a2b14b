"""Version management for the Screechr API.

Reads the version from installed package metadata, falling back to the
repository's pyproject.toml when running from a source checkout.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "screechr-api"

# src/api/infrastructure/version.py -> repository root
DEFAULT_PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def read_pyproject_version(pyproject_path: Path) -> str:
    """Read ``project.version`` from a pyproject.toml file.

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the file has no ``project.version``
    """
    with open(pyproject_path, "rb") as f:
        pyproject_data = tomllib.load(f)

    return pyproject_data["project"]["version"]


def get_version(
    distribution: str = DISTRIBUTION_NAME,
    pyproject_path: Path = DEFAULT_PYPROJECT,
) -> str:
    """Get the application version.

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version(distribution)
    except PackageNotFoundError:
        return read_pyproject_version(pyproject_path)


__version__ = get_version()
