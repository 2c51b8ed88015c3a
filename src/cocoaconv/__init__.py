"""
cocoaconv - Cocoa bridging code generator for C enum headers.

Reads ``enum`` blocks from a C header and emits Objective-C NS_ENUM
wrappers or Swift description extensions.
"""

from __future__ import annotations

from ._version import get_version
from .config import ConversionConfig, OutputMode, load_config
from .core.errors import CocoaconvError, ConfigError, InputUnavailableError
from .core.extractor import EnumRecord, extract_enums
from .emit import render_header

__version__ = get_version()

__all__ = [
    "__version__",
    "ConversionConfig",
    "OutputMode",
    "load_config",
    "CocoaconvError",
    "ConfigError",
    "InputUnavailableError",
    "EnumRecord",
    "extract_enums",
    "render_header",
]
