"""Shared pytest fixtures for cocoaconv tests."""

from pathlib import Path

import pytest

SAMPLE_HEADER = """\
#ifndef LIBMULTIMARKDOWN_H
#define LIBMULTIMARKDOWN_H

/// Token types
enum token_types {
\tDOC_START_TOKEN = 0,\t//!< DOC_START_TOKEN must be type 0

\tBLOCK_BLOCKQUOTE = 50,
\tBLOCK_CODE_FENCED,
};


enum output_format {
\tFORMAT_HTML,
\tFORMAT_EPUB,
\tFORMAT_LATEX,
};


enum parser_extensions {
\tEXT_COMPATIBILITY       = 1 << 0,    //!< Markdown compatibility mode
\tEXT_CRITIC              = 1 << 2,
};

#endif
"""


@pytest.fixture
def sample_header_text() -> str:
    """Return a header in the shape of libMultiMarkdown.h."""
    return SAMPLE_HEADER


@pytest.fixture
def sample_header(tmp_path: Path) -> Path:
    """Write the sample header to disk and return its path."""
    path = tmp_path / "libMultiMarkdown.h"
    path.write_text(SAMPLE_HEADER)
    return path
