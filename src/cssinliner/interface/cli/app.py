from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of command-line
overrides into the default build configuration, build execution, and
result rendering.
"""

import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from cssinliner.core.pipeline.engine import run_build
from cssinliner.domain.build_models import BuildResult
from cssinliner.domain.config import get_default_config, merge_overrides
from cssinliner.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from cssinliner.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI build workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # Drain queued records before the process reports and exits
    try:
        return _execute(args)
    finally:
        shutdown_logging()


def _execute(args: argparse.Namespace) -> int:
    """Resolve the configuration, run the build and render the result."""
    # 3. Configuration resolution
    cfg = merge_overrides(get_default_config(), cli_args.args_to_overrides(args))
    logger.debug(f"Effective configuration: {cfg}")

    if args.dump_config:
        print(json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2))
        return 0

    # 4. Build execution phase
    if not args.json_output:
        print("Building CSS...")

    try:
        result = run_build(cfg, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Build interrupted by user.")
        print("Build interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Build crashed: {e}", exc_info=True)
        print(f"Error building CSS: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Print the build result on the standard streams.

    Failures go to stderr; the success report (output path, size, and any
    directive left unresolved) goes to stdout.

    Args:
        result: The build result to render.
    """
    if not result.ok:
        print(f"Error building CSS: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("Dry run complete, bundle not written.")
    else:
        print("CSS built successfully!")

    print(f"Output: {result.output_path}")
    print(f"Size: {result.size} characters")

    if result.inlined_files:
        print(f"Inlined files: {len(result.inlined_files)}")

    if result.unresolved_imports:
        print(f"Unresolved imports: {len(result.unresolved_imports)}")
        for entry in result.unresolved_imports:
            print(f"  - {entry.source_path}: {entry.directive.strip()} ({entry.reason})")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
