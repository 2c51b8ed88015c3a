"""
Conversion configuration models.

Parses the optional [cocoaconv] section of cocoaconv.toml and provides
typed settings for the emitters and the CLI.
"""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from cocoaconv.core.errors import ConfigError
from cocoaconv.core.strings import DROPPED_CASE_PREFIXES

CONFIG_FILENAME = "cocoaconv.toml"

DEFAULT_FALLBACK_HEADER = Path("build-xcode/Debug/include/libMultiMarkdown/libMultiMarkdown.h")


class OutputMode(str, Enum):
    """Supported output shapes."""

    NSENUM = "nsenum"
    SWIFT = "swift"


class ConversionConfig(BaseModel):
    """Complete conversion configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fallback_header: Path = DEFAULT_FALLBACK_HEADER
    type_prefix: str = "MMD6"
    backing_type: str = "NSUInteger"
    dropped_case_prefixes: tuple[str, ...] = DROPPED_CASE_PREFIXES
    type_name_overrides: dict[str, str] = Field(default_factory=dict)

    def get_fallback_path(self, project_root: Path) -> Path:
        """Get absolute fallback header path."""
        if self.fallback_header.is_absolute():
            return self.fallback_header
        return project_root / self.fallback_header


def load_config(toml_path: Path) -> ConversionConfig:
    """
    Load conversion configuration from cocoaconv.toml.

    Args:
        toml_path: Path to the TOML file

    Returns:
        ConversionConfig with parsed values, or defaults when the file is absent

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML,
            or holds invalid settings
    """
    if not toml_path.exists():
        return ConversionConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{toml_path}: {e}") from e

    section = data.get("cocoaconv", {})
    if not section:
        return ConversionConfig()

    try:
        return ConversionConfig.model_validate(section)
    except PydanticValidationError as e:
        raise ConfigError(f"{toml_path}: {e}") from e
