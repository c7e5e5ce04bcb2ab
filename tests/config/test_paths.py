"""Tests for configuration path resolution helpers."""

from pathlib import Path

from music163.config.paths import (
    ENV_CONFIG_PATH,
    _detect_repo_root,  # pyright: ignore[reportPrivateUsage]
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root.resolve() / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "music163.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root.resolve() / "config" / "config.toml"


def test_explicit_path_wins_over_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    got = resolve_overridable_path(
        explicit_path=explicit,
        env={ENV_CONFIG_PATH: str(tmp_path / "env.toml")},
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert got == explicit.resolve()


def test_environment_wins_over_default(tmp_path: Path) -> None:
    got = resolve_overridable_path(
        explicit_path=None,
        env={ENV_CONFIG_PATH: str(tmp_path / "env.toml")},
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert got == (tmp_path / "env.toml").resolve()


def test_blank_environment_value_falls_back_to_default(tmp_path: Path) -> None:
    got = resolve_overridable_path(
        explicit_path=None,
        env={ENV_CONFIG_PATH: "   "},
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert got == (tmp_path / "default.toml").resolve()


def test_repo_root_detection_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "module.py") == tmp_path
