"""Installed package version."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "linkmarker"
UNKNOWN_VERSION = "0.0.0"


def package_version() -> str:
    """Return the installed distribution version, or ``0.0.0`` from a bare checkout."""
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
