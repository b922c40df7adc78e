from __future__ import annotations

"""
Resilient Source Reading Component.

Loads stylesheet sources as text. Line endings are preserved exactly as
stored so that untouched lines are reproduced byte-for-byte, and invalid
byte sequences are replaced rather than aborting the build. A leading
byte-order mark is dropped: it would hide a directive on the first line
and must not end up in the middle of a bundle.
"""

from cssinliner.domain.config import DEFAULT_ENCODING

_BOM = "\ufeff"

# -----------------------------------------------------------------------------
# READING OPERATIONS
# -----------------------------------------------------------------------------

def read_source_text(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the complete content of a source file.

    Args:
        file_path: Path to the target file.
        encoding: Text encoding of the file.

    Returns:
        str: The file content with original line endings and no leading BOM.

    Raises:
        OSError: If the file does not exist or cannot be read.
    """
    with open(file_path, "r", encoding=encoding, errors="replace", newline="") as f:
        content = f.read()
    if content.startswith(_BOM):
        return content[len(_BOM):]
    return content
