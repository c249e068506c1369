"""
Version information for the RMS client.

Single source of truth: pyproject.toml
Runtime access via importlib.metadata with fallback.
"""

from __future__ import annotations

# Fallback version if package metadata unavailable (dev mode)
_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Get the package version from metadata or fallback."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("rakuten-rms-client")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


VERSION = get_version()

