from __future__ import annotations

"""
Recursive Stylesheet Inliner.

Expands a stylesheet by replacing every resolvable '@import' directive with
the fully expanded content of its target, at the exact position of the
directive. Resolution is best-effort: a target that cannot be read, or that
would close an import cycle, leaves the original directive line in place and
the walk continues.
"""

import logging
import os
from typing import List, Optional, Set

from cssinliner.core.pipeline.components.reader import read_source_text
from cssinliner.core.resolver.extractor import extract_import_path, is_import_directive
from cssinliner.domain.build_models import (
    REASON_CYCLE,
    REASON_INVALID,
    REASON_MISSING,
    ResolutionStats,
    UnresolvedImport,
)
from cssinliner.domain.config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

MARKER_TEMPLATE = "/* Inlined from {path} */"


# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class ImportResolutionError(Exception):
    """Raised when an import target cannot be expanded."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class ImportCycleError(ImportResolutionError):
    """Raised when a file is imported while it is still being expanded."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Import cycle detected at '{path}'")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_import_path(importer_path: str, import_path: str) -> str:
    """
    Locate an import target relative to the file that imports it.

    Args:
        importer_path: Path of the file containing the directive.
        import_path: Quoted argument of the directive, as written.

    Returns:
        str: Normalized path of the target ('..' segments collapsed).
    """
    base_dir = os.path.dirname(importer_path)
    return os.path.normpath(os.path.join(base_dir, import_path))


def inline_imports(
        file_path: str,
        *,
        encoding: str = DEFAULT_ENCODING,
        stats: Optional[ResolutionStats] = None,
) -> str:
    """
    Return the content of a stylesheet with all resolvable imports inlined.

    Each resolved directive line is replaced by a marker comment naming the
    import path as written, followed by the expanded content of the target.
    Lines that are not directives are emitted untouched, so a file without
    imports comes back byte-identical.

    Args:
        file_path: Stylesheet to expand.
        encoding: Text encoding of the source tree.
        stats: Optional accumulator for inlined files and unresolved imports.

    Returns:
        str: The expanded stylesheet text.

    Raises:
        OSError: If 'file_path' itself cannot be read.
    """
    return _expand_file(file_path, encoding, stats, set())


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _expand_file(
        file_path: str,
        encoding: str,
        stats: Optional[ResolutionStats],
        in_progress: Set[str],
) -> str:
    """Expand one file while tracking the chain of files being expanded."""
    key = os.path.realpath(file_path)
    if key in in_progress:
        raise ImportCycleError(file_path)

    content = read_source_text(file_path, encoding=encoding)

    # Root file is not an inlined file
    if stats is not None and in_progress:
        stats.record_inlined(file_path)

    in_progress.add(key)
    try:
        fragments: List[str] = [
            _expand_line(line, file_path, encoding, stats, in_progress)
            for line in content.split("\n")
        ]
    finally:
        in_progress.discard(key)

    return "\n".join(fragments)


def _expand_line(
        line: str,
        file_path: str,
        encoding: str,
        stats: Optional[ResolutionStats],
        in_progress: Set[str],
) -> str:
    """Return the fragment that replaces a single source line."""
    if not is_import_directive(line):
        return line

    trimmed = line.strip()
    import_path = extract_import_path(trimmed)
    if not import_path:
        logger.debug(f"Malformed import kept as-is in {file_path}: {trimmed}")
        return line

    target = resolve_import_path(file_path, import_path)

    try:
        expanded = _expand_file(target, encoding, stats, in_progress)
    except ImportCycleError as e:
        logger.warning(f"{e}; keeping directive in {file_path}: {trimmed}")
        _record_unresolved(stats, line, file_path, target, REASON_CYCLE)
        return line
    except OSError as e:
        logger.warning(f"Unresolved import in {file_path}: {trimmed} ({e})")
        _record_unresolved(stats, line, file_path, target, REASON_MISSING)
        return line
    except ValueError as e:
        # Paths the OS cannot represent, e.g. an embedded NUL byte
        logger.warning(f"Invalid import path in {file_path}: {trimmed} ({e})")
        _record_unresolved(stats, line, file_path, target, REASON_INVALID)
        return line

    logger.debug(f"Inlined {target} into {file_path}")
    return MARKER_TEMPLATE.format(path=import_path) + "\n" + expanded


def _record_unresolved(
        stats: Optional[ResolutionStats],
        directive: str,
        source_path: str,
        resolved_path: str,
        reason: str,
) -> None:
    if stats is None:
        return
    stats.record_unresolved(UnresolvedImport(
        directive=directive,
        source_path=source_path,
        resolved_path=resolved_path,
        reason=reason,
    ))
