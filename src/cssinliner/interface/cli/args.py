from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed argparse namespaces
into configuration overrides.
"""

import argparse
from typing import Any, Dict

from cssinliner.domain.config import DEFAULT_OUTPUT_PATH, DEFAULT_ROOT_PATH

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the cssinliner CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="cssinliner",
        description="Inline @import directives into a single self-contained stylesheet.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="root_path",
        default=None,
        help=f"Root stylesheet to resolve (default: {DEFAULT_ROOT_PATH}).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=f"Bundle destination, overwritten if present (default: {DEFAULT_OUTPUT_PATH}).",
    )
    p.add_argument(
        "--encoding",
        dest="encoding",
        default=None,
        help="Text encoding of sources and bundle (default: utf-8).",
    )

    # --- Runtime Behaviour ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve imports and report, without writing the bundle.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the build result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None means unset).
    """
    return {
        "root_path": args.root_path,
        "output_path": args.output_path,
        "encoding": args.encoding,
    }
