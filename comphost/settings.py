from __future__ import annotations

import os
from pathlib import Path

from .errors import ConfigError


GIT_BIN = os.environ.get("COMPHOST_GIT", "git")
DOCKER_BIN = os.environ.get("COMPHOST_DOCKER", "docker")
NETWORK_NAME = os.environ.get("COMPHOST_NETWORK", "comphost")

CONFIG_FILENAME = "config.toml"


def config_dir() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("Failed to get user's home directory (HOME is not set)")
    return Path(home) / ".config" / "comphost"


def config_path(override: Path | None = None) -> Path:
    if override is not None:
        return override
    env = os.environ.get("COMPHOST_CONFIG")
    if env:
        return Path(env)
    return config_dir() / CONFIG_FILENAME


def cmd_timeout() -> float | None:
    """seconds to wait for each child process; unset means wait forever."""
    raw = os.environ.get("COMPHOST_CMD_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"COMPHOST_CMD_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"COMPHOST_CMD_TIMEOUT must be positive, got {raw!r}")
    return value
