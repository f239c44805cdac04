from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_BIN = "git"
DEFAULT_PATH = "."


@dataclass(frozen=True)
class Config:
    bin: str = DEFAULT_BIN  # executable name or path
    path: str = DEFAULT_PATH  # repository directory
    timeout: float | None = None  # seconds, per git invocation

    def __post_init__(self) -> None:
        # Empty strings mean "use the default"
        if not self.bin:
            object.__setattr__(self, "bin", DEFAULT_BIN)
        if not self.path:
            object.__setattr__(self, "path", DEFAULT_PATH)


class ConfigError(ValueError):
    pass


def _expect_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Config '{key}' must be a non-empty string.")
    return value.strip()


def _expect_timeout(data: dict[str, Any]) -> float | None:
    value = data.get("timeout")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError("Config 'timeout' must be a positive number of seconds.")
    return float(value)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load git-log configuration from file, environment or defaults.

    Priority:
    1. Explicit path argument
    2. GITLOG_CONFIG environment variable
    3. Defaults (also used when the file does not exist)

    GITLOG_BIN and GITLOG_PATH override whatever the file says.
    """
    if path is None:
        path = os.environ.get("GITLOG_CONFIG")

    data: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError("Config must be a JSON object.")
        data = raw

    bin = os.environ.get("GITLOG_BIN") or _expect_str(data, "bin") or DEFAULT_BIN
    repo_path = os.environ.get("GITLOG_PATH") or _expect_str(data, "path") or DEFAULT_PATH

    return Config(bin=bin, path=repo_path, timeout=_expect_timeout(data))
