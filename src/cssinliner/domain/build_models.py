from __future__ import annotations

"""
Build Domain Data Models.

Defines the data structures used to communicate resolution statistics and
build results between the driver and the interface layer.
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# UNRESOLVED IMPORT REASONS
# -----------------------------------------------------------------------------

REASON_MISSING = "missing"
REASON_CYCLE = "cycle"
REASON_INVALID = "invalid"


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class UnresolvedImport:
    """
    An import directive that was kept verbatim in the output.

    Attributes:
        directive: The original directive line.
        source_path: File containing the directive.
        resolved_path: Location the directive pointed to.
        reason: One of REASON_MISSING, REASON_CYCLE or REASON_INVALID.
    """
    directive: str
    source_path: str
    resolved_path: str
    reason: str


@dataclass
class ResolutionStats:
    """Accumulator filled by the inliner while it walks the import graph."""
    inlined_files: List[str] = field(default_factory=list)
    unresolved_imports: List[UnresolvedImport] = field(default_factory=list)

    def record_inlined(self, path: str) -> None:
        self.inlined_files.append(path)

    def record_unresolved(self, entry: UnresolvedImport) -> None:
        self.unresolved_imports.append(entry)


@dataclass(frozen=True)
class BuildResult:
    """
    Result of a complete build invocation.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Absolute path of the root stylesheet.
        output_path: Absolute path of the bundle.
        size: Character length of the written content.
        dry_run: Whether writing was skipped.
        inlined_files: Files whose content was spliced in, in visit order.
        unresolved_imports: Directives left untouched.
    """
    ok: bool
    error: str

    root_path: str
    output_path: str

    size: int = 0
    dry_run: bool = False

    inlined_files: List[str] = field(default_factory=list)
    unresolved_imports: List[UnresolvedImport] = field(default_factory=list)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        output_path: str,
        dry_run: bool = False,
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        root_path: The root stylesheet that was targeted.
        output_path: The bundle destination that was targeted.
        dry_run: Whether the failed run was a simulation.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        root_path=root_path,
        output_path=output_path,
        dry_run=dry_run,
    )


def create_success_result(
        root_path: str,
        output_path: str,
        content: str,
        stats: ResolutionStats,
        dry_run: bool = False,
) -> BuildResult:
    """
    Create a successful build result instance.

    Args:
        root_path: Normalized root stylesheet path.
        output_path: Normalized bundle path.
        content: The assembled bundle text.
        stats: Statistics gathered during resolution.
        dry_run: Whether writing was skipped.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        root_path=root_path,
        output_path=output_path,
        size=len(content),
        dry_run=dry_run,
        inlined_files=list(stats.inlined_files),
        unresolved_imports=list(stats.unresolved_imports),
    )
