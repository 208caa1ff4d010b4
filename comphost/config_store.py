"""
config_store.py

load/save the configuration mapping (config.toml).
the file is read once when a command starts and rewritten once when it ends;
concurrent invocations are not locked against each other, last writer wins.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterator
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from .errors import ConfigError
from .models import Configuration

logger = logging.getLogger(__name__)


def load_config(path: Path) -> dict[str, Configuration]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if not text.strip():
        return {}

    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse TOML in {path}: {e}") from e

    configs: dict[str, Configuration] = {}
    for name, table in raw.items():
        if not isinstance(table, dict):
            raise ConfigError(f"Could not parse TOML in {path}: '{name}' is not a table")
        try:
            configs[name] = Configuration.model_validate(table)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration '{name}' in {path}:\n{e}") from e

    logger.debug("loaded %d configurations from %s", len(configs), path)
    return configs


def save_config(path: Path, configs: dict[str, Configuration]) -> None:
    doc = {name: configs[name].to_table() for name in sorted(configs)}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomli_w.dumps(doc), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not write {path}: {e}") from e
    logger.debug("saved %d configurations to %s", len(configs), path)


class ConfigStore:
    """In-memory view of the config file, handed to every command."""

    def __init__(self, path: Path, configs: dict[str, Configuration] | None = None):
        self.path = path
        self.configs: dict[str, Configuration] = dict(configs or {})

    @classmethod
    def open(cls, path: Path) -> ConfigStore:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory: {e}") from e
        return cls(path, load_config(path))

    def save(self) -> None:
        save_config(self.path, self.configs)

    def get(self, name: str) -> Configuration | None:
        return self.configs.get(name)

    def put(self, name: str, cfg: Configuration) -> None:
        self.configs[name] = cfg

    def names(self) -> list[str]:
        return sorted(self.configs)

    def items(self) -> Iterator[tuple[str, Configuration]]:
        for name in self.names():
            yield name, self.configs[name]

    def active(self) -> Iterator[tuple[str, Configuration]]:
        for name, cfg in self.items():
            if cfg.active:
                yield name, cfg

    def __contains__(self, name: object) -> bool:
        return name in self.configs

    def __len__(self) -> int:
        return len(self.configs)
