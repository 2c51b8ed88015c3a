"""Installed cocoaconv version."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Reported when running from a source tree without an install
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """Version of the installed cocoaconv distribution."""
    try:
        return _metadata_version("cocoaconv")
    except PackageNotFoundError:
        return UNKNOWN_VERSION
