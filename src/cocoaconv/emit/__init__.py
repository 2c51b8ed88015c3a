"""
Emitters for converted enum declarations.

- nsenum: Objective-C NS_ENUM bridging wrappers
- swift: Swift CustomStringConvertible descriptions
"""

from __future__ import annotations

from collections.abc import Iterable

from cocoaconv.config import ConversionConfig, OutputMode
from cocoaconv.core.extractor import extract_enums

from .base import Emitter, EmitterRegistry
from .nsenum import NSEnumEmitter
from .swift import SwiftDescriptionEmitter


def get_emitter(mode: OutputMode, config: ConversionConfig | None = None) -> Emitter:
    """Instantiate the emitter registered for ``mode``."""
    emitter_cls = EmitterRegistry.get(OutputMode(mode))
    if emitter_cls is None:
        raise ValueError(f"No emitter registered for mode {mode!r}")
    return emitter_cls(config)


def render_header(
    lines: Iterable[str],
    mode: OutputMode,
    config: ConversionConfig | None = None,
) -> str:
    """Extract enums from header lines and render them in the given mode."""
    return get_emitter(mode, config).emit(extract_enums(lines))


__all__ = [
    "Emitter",
    "EmitterRegistry",
    "NSEnumEmitter",
    "SwiftDescriptionEmitter",
    "get_emitter",
    "render_header",
]
