from __future__ import annotations

"""
Bundle Output Component.

Handles the physical persistence of the assembled stylesheet.
"""

from cssinliner.domain.config import DEFAULT_ENCODING

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_output_text(
        output_path: str,
        content: str,
        encoding: str = DEFAULT_ENCODING,
) -> None:
    """
    Write the bundle verbatim, replacing any existing file.

    Newline translation is disabled so the written bytes match the
    assembled text on every platform.

    Args:
        output_path: Target bundle file.
        content: Assembled stylesheet text.
        encoding: Output text encoding.

    Raises:
        OSError: If filesystem write permissions are denied.
    """
    with open(output_path, "w", encoding=encoding, newline="") as out:
        out.write(content)
