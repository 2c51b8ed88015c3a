"""
Identifier transformations for cocoaconv.

Converts C-style UPPER_SNAKE (or lower_snake) identifiers into the
camel-case names used by the Objective-C and Swift output.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

# Case prefixes that repeat the enum's category and are elided:
# FORMAT_LATEX -> latex, EXT_CRITIC -> critic
DROPPED_CASE_PREFIXES = ("EXT_", "FORMAT_")

# Declared enum names whose camel-cased form is plural but should be exported
# as a singular type name. Keys are compared lowercased.
_TYPE_NAME_OVERRIDES = {
    "token_types": "TokenType",
    "parser_extensions": "ParserExtension",
}

_CASE_LINE = re.compile(r"(?P<indent>\s*)(?P<identifier>\w+)(?P<remainder>.*)", re.ASCII)
_WORD = re.compile(r"\w+", re.ASCII)


@dataclass(frozen=True)
class CaseLine:
    """
    A raw enum case line split around its identifier.

    Attributes:
        indent: Whitespace preceding the identifier
        identifier: First run of word characters, e.g. ``FORMAT_HTML``
        remainder: Everything after the identifier (value, comma, comment)
    """

    indent: str
    identifier: str
    remainder: str


def camelize(
    identifier: str,
    drop_first_segment: bool = False,
    lowercase_first_segment: bool = False,
) -> str:
    """
    Convert an underscore-separated identifier to camel case.

    Args:
        identifier: Identifier such as ``FORMAT_LATEX`` or ``token_types``
        drop_first_segment: Remove the first ``_``-delimited segment
        lowercase_first_segment: Lowercase the first remaining segment
            (lower camel case) instead of capitalizing it

    Returns:
        The segments joined without separator

    Examples:
        >>> camelize("FORMAT_LATEX", drop_first_segment=True, lowercase_first_segment=True)
        'latex'
        >>> camelize("EXT_CRITIC", drop_first_segment=True)
        'Critic'
        >>> camelize("token_types")
        'TokenTypes'
    """
    segments = identifier.split("_")
    if drop_first_segment:
        segments = segments[1:]

    parts = []
    for i, segment in enumerate(segments):
        if lowercase_first_segment and i == 0:
            parts.append(segment.lower())
        else:
            parts.append(segment.capitalize())
    return "".join(parts)


def should_drop_prefix(identifier: str, prefixes: Iterable[str] = DROPPED_CASE_PREFIXES) -> bool:
    """Whether the case identifier starts with a redundant category prefix."""
    return identifier.startswith(tuple(prefixes))


def type_name(declared_name: str, overrides: Mapping[str, str] | None = None) -> str:
    """
    Resolve the exported type name for a declared C enum name.

    The override table is an explicit lookup keyed by declared name; there is
    no general singularization rule.

    Args:
        declared_name: Name following ``enum`` in the header
        overrides: Extra overrides merged over the built-in table

    Returns:
        Upper camel case type name

    Examples:
        >>> type_name("output_format")
        'OutputFormat'
        >>> type_name("TOKEN_TYPES")
        'TokenType'
    """
    table = dict(_TYPE_NAME_OVERRIDES)
    if overrides:
        table.update({key.lower(): value for key, value in overrides.items()})

    override = table.get(declared_name.lower())
    if override is not None:
        return override
    return camelize(declared_name)


def parse_case_line(line: str) -> CaseLine | None:
    """
    Split a raw case line around the first identifier it contains.

    Returns None when the line holds no word characters at all.
    """
    match = _CASE_LINE.search(line.rstrip("\r\n"))
    if match is None:
        return None
    return CaseLine(
        indent=match.group("indent"),
        identifier=match.group("identifier"),
        remainder=match.group("remainder"),
    )


def case_identifier(line: str) -> str:
    """
    Return the first word-character run of a case line.

    Lines without one pass through stripped rather than raising.
    """
    match = _WORD.search(line)
    if match is None:
        return line.strip()
    return match.group(0)
