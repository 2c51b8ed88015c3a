"""
Error types for cocoaconv header reading and configuration.

The generator core never raises on malformed header text; these errors
cover the conditions that stop a run before any output is produced.
"""

from pathlib import Path


class CocoaconvError(Exception):
    """Base exception for all cocoaconv errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputUnavailableError(CocoaconvError):
    """
    Raised when the header to convert cannot be opened.

    Examples:
    - No path given and the fallback header does not exist
    - Path given but unreadable
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Failed to read `{path}`")


class ConfigError(CocoaconvError):
    """
    Raised when cocoaconv.toml cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Unknown keys or wrongly typed values
    """

    pass
