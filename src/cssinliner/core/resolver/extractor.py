from __future__ import annotations

"""
Import Directive Detection and Path Extraction.

Recognizes '@import' directives at the start of a trimmed line and pulls
the quoted target out of them. Single quotes are tried before double
quotes; no escaping is supported, the first matching delimiter closes
the path.
"""

from typing import Optional

IMPORT_KEYWORD = "@import"

_QUOTE_CHARS = ("'", '"')


def is_import_directive(line: str) -> bool:
    """Return True when the trimmed line begins with the import keyword."""
    return line.strip().startswith(IMPORT_KEYWORD)


def extract_import_path(line: str) -> Optional[str]:
    """
    Return the content of the first complete quoted pair in the line.

    Args:
        line: A directive line (trimmed or not).

    Returns:
        Optional[str]: The quoted text, or None if neither quote style
                       delimits a complete pair.
    """
    for quote in _QUOTE_CHARS:
        start = line.find(quote)
        if start == -1:
            continue
        end = line.find(quote, start + 1)
        if end == -1:
            continue
        return line[start + 1:end]
    return None
