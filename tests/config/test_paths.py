"""Tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

from kpopneon.config import paths


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=tmp_path / "a.toml",
        env={"KPOPNEON_CONFIG_FILE": str(tmp_path / "b.toml")},
        env_var="KPOPNEON_CONFIG_FILE",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "a.toml").resolve()


def test_env_var_beats_default(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=None,
        env={"KPOPNEON_CONFIG_FILE": f"  {tmp_path / 'b.toml'}  "},
        env_var="KPOPNEON_CONFIG_FILE",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "b.toml").resolve()


def test_blank_env_var_falls_back_to_default(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=None,
        env={"KPOPNEON_CONFIG_FILE": "   "},
        env_var="KPOPNEON_CONFIG_FILE",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "c.toml").resolve()


def test_default_locations_follow_repo_root(portable_repo_root: Path) -> None:
    root = portable_repo_root.resolve()
    assert paths.default_config_path(env={}) == root / "config" / "config.toml"
    assert paths.default_log_file() == root / "logs" / "kpopneon.log"


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert paths._detect_repo_root(nested / "module.py") == tmp_path  # pyright: ignore[reportPrivateUsage]
