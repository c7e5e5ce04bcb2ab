"""Configuration management for music163."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar
from urllib.parse import urlsplit

from music163.config.paths import (
    ENV_CONFIG_PATH,
    default_config_path,
    resolve_overridable_path,
)
from music163.config.settings import (
    CONFIG_SECTION,
    DEFAULT_BASE_URL,
    DEFAULT_REFERER,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from music163.errors import ConfigError
from music163.platform.logging import logger


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings shared by every call a ``Client`` makes.

    ``base_url`` is normalised to end with ``/`` so relative paths are joined
    beneath it rather than replacing its last segment.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    referer: str = DEFAULT_REFERER
    timeout: float | None = DEFAULT_TIMEOUT

    _STRING_KEYS: ClassVar[tuple[str, ...]] = ("base_url", "user_agent", "referer")

    def __post_init__(self) -> None:
        try:
            parts = urlsplit(self.base_url)
        except ValueError as exc:
            raise ConfigError(f"invalid base_url {self.base_url!r}: {exc}") from exc
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ConfigError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", f"{self.base_url}/")

        if not self.user_agent.strip():
            raise ConfigError("user_agent cannot be empty")

        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout!r}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from a parsed ``[client]`` table.

        Unknown keys are ignored with a warning so newer config files keep
        working with older releases.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s'", key)
                continue
            if key in cls._STRING_KEYS and not isinstance(value, str):
                raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
            if key == "timeout":
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError(f"timeout must be a number, got {type(value).__name__}")
                value = float(value)
            kwargs[key] = value
        return cls(**kwargs)

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "ClientConfig":
        """Load configuration from a TOML file.

        Args:
            path: Explicit config file. Overrides ``MUSIC163_CONFIG``.
            env: Environment mapping used instead of ``os.environ``.

        Returns:
            ClientConfig: Loaded configuration, or defaults when no file exists
            at the default location.

        Raises:
            ConfigError: If an explicitly requested file is missing, the TOML is
            malformed, or a value fails validation.
        """
        config_file = resolve_overridable_path(
            explicit_path=path,
            env=env,
            env_var=ENV_CONFIG_PATH,
            default_factory=default_config_path,
        )

        if not config_file.exists():
            if path is not None or _env_override(env):
                raise ConfigError(f"configuration file not found: {config_file}")
            logger.debug("No configuration at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"cannot read {config_file}: {e}") from e

        section = data.get(CONFIG_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{CONFIG_SECTION}] in {config_file} must be a table")

        config = cls.from_mapping(section)
        logger.debug("Configuration loaded from %s", config_file)
        return config


def _env_override(env: Mapping[str, str] | None) -> bool:
    mapping = env if env is not None else os.environ
    return bool((mapping.get(ENV_CONFIG_PATH) or "").strip())


__all__ = ["ClientConfig"]
