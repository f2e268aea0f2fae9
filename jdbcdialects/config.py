"""Configuration loading helpers."""

from __future__ import annotations

from pathlib import Path

import tomllib

from pydantic import BaseModel

from .custom import load_custom_dialects
from .registry import DialectRegistry, default_registry

CONFIG_FILE = Path.home() / ".config" / "jdbcdialects" / "config.toml"


class DialectConfig(BaseModel):
    """Shape of the configuration file."""

    custom_dialects_dir: Path | None = None

    def with_custom_dialects_dir(self, directory: Path | None) -> DialectConfig:
        """Return a copy pointing at another custom dialect directory."""

        return self.model_copy(update={"custom_dialects_dir": directory})

    def registry(self) -> DialectRegistry:
        """Snapshot of the built-ins plus the dialects in the configured directory."""

        base = default_registry()
        if self.custom_dialects_dir is None:
            return base
        return base.with_custom(load_custom_dialects(self.custom_dialects_dir))


def load_config() -> DialectConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return DialectConfig()
    except (tomllib.TOMLDecodeError, OSError):
        return DialectConfig()
    return DialectConfig(**data)


def save_config(config: DialectConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    if config.custom_dialects_dir is not None:
        path = config.custom_dialects_dir.as_posix().replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'custom_dialects_dir = "{path}"')
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    custom_dir = raw.get("custom_dialects_dir")
    if isinstance(custom_dir, str) and custom_dir:
        data["custom_dialects_dir"] = Path(custom_dir).expanduser()
    return data


__all__ = ["CONFIG_FILE", "DialectConfig", "load_config", "save_config"]
