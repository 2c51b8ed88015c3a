"""
Base emitter classes and registry.

An emitter renders every EnumRecord of a header into one output shape.
Records and their cases are rendered in declaration order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from cocoaconv.config import ConversionConfig, OutputMode
from cocoaconv.core.extractor import EnumRecord
from cocoaconv.core.strings import type_name


class Emitter(ABC):
    """
    Base class for all emitters.

    Example:
        class JsonEmitter(Emitter):
            def render(self, record: EnumRecord) -> str:
                return json.dumps(list(record.raw_cases))
    """

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config if config is not None else ConversionConfig()

    @abstractmethod
    def render(self, record: EnumRecord) -> str:
        """
        Render a single enum block.

        Returns:
            Block text, without a trailing newline
        """
        pass

    def emit(self, records: Iterable[EnumRecord]) -> str:
        """Render all records, joined by newlines."""
        return "\n".join(self.render(record) for record in records)

    def type_name(self, record: EnumRecord) -> str:
        """Exported type name for a record, honouring configured overrides."""
        return type_name(record.declared_name, self.config.type_name_overrides)


class EmitterRegistry:
    """Maps output modes to emitter implementations."""

    _emitters: dict[OutputMode, type[Emitter]] = {}

    @classmethod
    def register(cls, mode: OutputMode, emitter: type[Emitter]) -> None:
        """Register an emitter."""
        cls._emitters[mode] = emitter

    @classmethod
    def get(cls, mode: OutputMode) -> type[Emitter] | None:
        """Get emitter by output mode."""
        return cls._emitters.get(mode)

    @classmethod
    def list_modes(cls) -> list[OutputMode]:
        """List registered output modes."""
        return list(cls._emitters.keys())
