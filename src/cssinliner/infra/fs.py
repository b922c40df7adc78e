from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and directory creation utilities shared by the
build driver and the logging subsystem.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# DIRECTORY CREATION API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Succeeds silently when the directory already exists.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def ensure_parent_dir(file_path: str) -> Tuple[bool, Optional[str]]:
    """
    Create the parent directory hierarchy of a target file.

    Args:
        file_path: Path to the file about to be written.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    parent = os.path.dirname(os.path.abspath(file_path))
    if not parent:
        return True, None
    return safe_mkdir(parent)
