"""
Objective-C NS_ENUM wrappers.

Each C enum is redeclared as an ``NS_ENUM`` whose cases are assigned the
original C identifiers, and is exposed to Swift under the bare type name::

    typedef NS_ENUM(NSUInteger, MMD6OutputFormat) {
    	MMD6OutputFormatHtml = FORMAT_HTML,
    } NS_SWIFT_NAME(OutputFormat);
"""

from __future__ import annotations

from cocoaconv.config import OutputMode
from cocoaconv.core.extractor import EnumRecord
from cocoaconv.core.strings import camelize, parse_case_line, should_drop_prefix

from .base import Emitter, EmitterRegistry


class NSEnumEmitter(Emitter):
    """Renders bridging NS_ENUM declarations."""

    def render(self, record: EnumRecord) -> str:
        swift_name = self.type_name(record)
        objc_name = f"{self.config.type_prefix}{swift_name}"
        cases = "\n".join(self.render_case(objc_name, line) for line in record.raw_cases)
        return (
            f"\ntypedef NS_ENUM({self.config.backing_type}, {objc_name}) {{\n"
            f"{cases}\n"
            f"}} NS_SWIFT_NAME({swift_name});"
        )

    def render_case(self, objc_name: str, line: str) -> str:
        """
        Render one case as ``<indent><ObjCType><Case> = <IDENTIFIER>,``.

        The value, comma and comment after the identifier are replaced by the
        identifier itself. Lines without an identifier pass through.
        """
        case = parse_case_line(line)
        if case is None:
            return line

        # MMD6OutputFormatFormatLatex -> MMD6OutputFormatLatex
        drop = should_drop_prefix(case.identifier, self.config.dropped_case_prefixes)
        member = camelize(case.identifier, drop_first_segment=drop)
        return f"{case.indent}{objc_name}{member} = {case.identifier},"


EmitterRegistry.register(OutputMode.NSENUM, NSEnumEmitter)
