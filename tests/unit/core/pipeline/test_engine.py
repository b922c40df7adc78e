from __future__ import annotations

"""
Unit tests for the build driver.

Verifies:
1. End-to-end build into a fresh nested output directory.
2. Overwrite of an existing bundle.
3. Error results for top-level failures.
4. Dry-run leaves the filesystem untouched.
"""

from pathlib import Path
from unittest.mock import patch

from cssinliner.core.pipeline.engine import run_build
from cssinliner.domain.build_models import REASON_MISSING
from cssinliner.domain.config import BuildConfig

EXPECTED_BUNDLE = (
    "a {color: red}\n"
    "/* Inlined from b.css */\n"
    "b {color: green}\n"
    "\n"
    "c {color: blue}\n"
)


def _sample_tree(css_tree) -> Path:
    return css_tree({
        "web/src/style.css": "a {color: red}\n@import 'b.css';\nc {color: blue}\n",
        "web/src/b.css": "b {color: green}\n",
    })


def test_build_creates_output_directories(css_tree, tmp_path):
    root = _sample_tree(css_tree)
    out = tmp_path / "src" / "compiled" / "stylus.css"
    cfg = BuildConfig(root_path=str(root / "web" / "src" / "style.css"), output_path=str(out))

    result = run_build(cfg)

    assert result.ok, result.error
    assert out.read_text(encoding="utf-8") == EXPECTED_BUNDLE
    assert result.size == len(EXPECTED_BUNDLE)
    assert result.output_path == str(out)
    assert result.inlined_files == [str(root / "web" / "src" / "b.css")]
    assert result.unresolved_imports == []


def test_build_overwrites_existing_bundle(css_tree, tmp_path):
    root = _sample_tree(css_tree)
    out = tmp_path / "bundle.css"
    out.write_text("stale" * 100, encoding="utf-8")
    cfg = BuildConfig(root_path=str(root / "web" / "src" / "style.css"), output_path=str(out))

    result = run_build(cfg)

    assert result.ok
    assert out.read_text(encoding="utf-8") == EXPECTED_BUNDLE


def test_build_reports_unresolved_imports(css_tree, tmp_path):
    root = css_tree({"style.css": '@import "missing.css";\n'})
    out = tmp_path / "out" / "bundle.css"

    result = run_build(BuildConfig(root_path=str(root / "style.css"), output_path=str(out)))

    assert result.ok
    assert out.read_text(encoding="utf-8") == '@import "missing.css";\n'
    assert [u.reason for u in result.unresolved_imports] == [REASON_MISSING]


def test_build_fails_on_missing_root(tmp_path):
    cfg = BuildConfig(
        root_path=str(tmp_path / "nope.css"),
        output_path=str(tmp_path / "out" / "bundle.css"),
    )

    result = run_build(cfg)

    assert not result.ok
    assert "nope.css" in result.error
    assert not (tmp_path / "out" / "bundle.css").exists()


def test_build_fails_when_directory_cannot_be_created(css_tree, tmp_path):
    root = _sample_tree(css_tree)
    cfg = BuildConfig(
        root_path=str(root / "web" / "src" / "style.css"),
        output_path=str(tmp_path / "out" / "bundle.css"),
    )

    with patch("cssinliner.core.pipeline.engine.ensure_parent_dir",
               return_value=(False, "Permission denied")):
        result = run_build(cfg)

    assert not result.ok
    assert "Permission denied" in result.error


def test_build_fails_when_write_fails(css_tree, tmp_path):
    root = _sample_tree(css_tree)
    cfg = BuildConfig(
        root_path=str(root / "web" / "src" / "style.css"),
        output_path=str(tmp_path / "bundle.css"),
    )

    with patch("cssinliner.core.pipeline.engine.write_output_text",
               side_effect=OSError("disk full")):
        result = run_build(cfg)

    assert not result.ok
    assert "disk full" in result.error


def test_dry_run_does_not_touch_output(css_tree, tmp_path):
    root = _sample_tree(css_tree)
    out = tmp_path / "dry" / "bundle.css"
    cfg = BuildConfig(root_path=str(root / "web" / "src" / "style.css"), output_path=str(out))

    result = run_build(cfg, dry_run=True)

    assert result.ok
    assert result.dry_run
    assert result.size == len(EXPECTED_BUNDLE)
    assert not (tmp_path / "dry").exists()


def test_default_config_uses_relative_layout(css_tree, tmp_path, monkeypatch):
    _sample_tree(css_tree)
    monkeypatch.chdir(tmp_path)

    result = run_build()

    assert result.ok, result.error
    bundle = tmp_path / "src" / "compiled" / "stylus.css"
    assert bundle.read_text(encoding="utf-8") == EXPECTED_BUNDLE
