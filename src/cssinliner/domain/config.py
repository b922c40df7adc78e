from __future__ import annotations

"""
Build Configuration Domain.

Defines the immutable configuration injected into the build driver. The
defaults reproduce the historical fixed layout of the stylesheet project
(root stylesheet under 'web/src', bundle under 'src/compiled').
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ROOT_PATH = "./web/src/style.css"
DEFAULT_OUTPUT_PATH = "./src/compiled/stylus.css"
DEFAULT_ENCODING = "utf-8"


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BuildConfig:
    """
    Immutable description of a single stylesheet build.

    Attributes:
        root_path: Stylesheet whose imports are resolved.
        output_path: Destination of the self-contained bundle.
        encoding: Text encoding used for reading sources and writing output.
    """
    root_path: str = DEFAULT_ROOT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    encoding: str = DEFAULT_ENCODING

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> BuildConfig:
    """Return the configuration used when nothing is overridden."""
    return BuildConfig()


def merge_overrides(
        base: BuildConfig,
        overrides: Optional[Dict[str, Any]],
) -> BuildConfig:
    """
    Apply override values onto a base configuration.

    Only keys known to BuildConfig are merged and None values are ignored,
    so an unset CLI flag never clobbers a default.

    Args:
        base: Configuration to start from.
        overrides: Candidate replacement values.

    Returns:
        BuildConfig: A new configuration instance.
    """
    if not overrides:
        return base

    known = {f.name for f in fields(BuildConfig)}
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key in known and value is not None:
            changes[key] = value
    return replace(base, **changes)
