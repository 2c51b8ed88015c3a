"""
Swift CustomStringConvertible extensions.

Maps every case of the Swift-imported enum to ``"<TypeName>.<case>"``.
"""

from __future__ import annotations

from cocoaconv.config import OutputMode
from cocoaconv.core.extractor import EnumRecord
from cocoaconv.core.strings import camelize, case_identifier, should_drop_prefix

from .base import Emitter, EmitterRegistry

CASE_INDENT = " " * 12


class SwiftDescriptionEmitter(Emitter):
    """Renders one description extension per enum."""

    def render(self, record: EnumRecord) -> str:
        swift_name = self.type_name(record)
        cases = "\n".join(
            CASE_INDENT + self.describe_case(swift_name, line) for line in record.raw_cases
        )
        return (
            f"\nextension {swift_name}: CustomStringConvertible {{\n"
            "    public var description: String {\n"
            "        switch self {\n"
            f"{cases}\n"
            "        }\n"
            "    }\n"
            "}"
        )

    def describe_case(self, swift_name: str, line: str) -> str:
        """Render ``case .<name>: return "<Type>.<name>"`` for a raw case line."""
        identifier = case_identifier(line)
        # .formatLatex -> .latex, .extCritic -> .critic
        drop = should_drop_prefix(identifier, self.config.dropped_case_prefixes)
        case_name = camelize(identifier, drop_first_segment=drop, lowercase_first_segment=True)
        return f'case .{case_name}: return "{swift_name}.{case_name}"'


EmitterRegistry.register(OutputMode.SWIFT, SwiftDescriptionEmitter)
