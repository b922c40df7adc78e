from __future__ import annotations

"""
Build orchestration.

This module coordinates one end-to-end stylesheet build:
1. Normalizes the configured root and output paths.
2. Ensures the output directory exists.
3. Resolves the import tree of the root stylesheet.
4. Writes the bundle, replacing any previous one.

Per-import problems are absorbed by the inliner. Anything that fails here
(unreadable root, directory creation, final write) ends the build with an
error result.
"""

import logging
import os
from typing import Optional

from cssinliner.core.pipeline.components.writer import write_output_text
from cssinliner.core.resolver.inliner import inline_imports
from cssinliner.domain.build_models import (
    BuildResult,
    ResolutionStats,
    create_error_result,
    create_success_result,
)
from cssinliner.domain.config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_ROOT_PATH,
    BuildConfig,
    get_default_config,
)
from cssinliner.infra.fs import ensure_parent_dir, normalize_path

logger = logging.getLogger(__name__)


def run_build(
        config: Optional[BuildConfig] = None,
        *,
        dry_run: bool = False,
) -> BuildResult:
    """
    Execute a full stylesheet build.

    Args:
        config: Build configuration. Defaults to get_default_config().
        dry_run: If True, resolve imports without touching the output location.

    Returns:
        BuildResult: Object containing status, sizes, and resolution details.
    """
    cfg = config or get_default_config()
    logger.info("Build started.")

    # -------------------------------------------------------------------------
    # 1) Path Normalization
    # -------------------------------------------------------------------------
    root_path = normalize_path(cfg.root_path, DEFAULT_ROOT_PATH)
    output_path = normalize_path(cfg.output_path, DEFAULT_OUTPUT_PATH)
    logger.debug(f"Root stylesheet: {root_path}")
    logger.debug(f"Bundle destination: {output_path}")

    # -------------------------------------------------------------------------
    # 2) Output Directory
    # -------------------------------------------------------------------------
    if not dry_run:
        ok, err = ensure_parent_dir(output_path)
        if not ok:
            msg = f"Cannot create output directory {os.path.dirname(output_path)}: {err}"
            logger.error(msg)
            return create_error_result(msg, root_path, output_path)

    # -------------------------------------------------------------------------
    # 3) Import Resolution
    # -------------------------------------------------------------------------
    stats = ResolutionStats()
    try:
        content = inline_imports(root_path, encoding=cfg.encoding, stats=stats)
    except OSError as e:
        msg = f"Cannot read root stylesheet {root_path}: {e}"
        logger.error(msg)
        return create_error_result(msg, root_path, output_path, dry_run=dry_run)

    logger.info(
        f"Resolved {len(stats.inlined_files)} import(s), "
        f"{len(stats.unresolved_imports)} left unresolved."
    )

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: bundle not written.")
        return create_success_result(root_path, output_path, content, stats, dry_run=True)

    try:
        write_output_text(output_path, content, encoding=cfg.encoding)
    except OSError as e:
        msg = f"Cannot write bundle {output_path}: {e}"
        logger.error(msg)
        return create_error_result(msg, root_path, output_path)

    logger.info(f"Bundle written to {output_path} ({len(content)} characters).")
    return create_success_result(root_path, output_path, content, stats)
