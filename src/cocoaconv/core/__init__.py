"""
Core header parsing and identifier transformation for cocoaconv.
"""

from .errors import CocoaconvError, ConfigError, InputUnavailableError
from .extractor import EnumExtractor, EnumRecord, LineKind, classify_line, extract_enums
from .strings import CaseLine, camelize, case_identifier, parse_case_line, type_name

__all__ = [
    "CocoaconvError",
    "ConfigError",
    "InputUnavailableError",
    "EnumExtractor",
    "EnumRecord",
    "LineKind",
    "classify_line",
    "extract_enums",
    "CaseLine",
    "camelize",
    "case_identifier",
    "parse_case_line",
    "type_name",
]
