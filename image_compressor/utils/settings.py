from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from image_compressor.models.errors import InvalidArgument

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ENV_VAR = "IMAGE_COMPRESSOR_CONFIG"

_INT_FIELDS = ("target_size_kb", "max_width", "max_height")


@dataclass(frozen=True)
class CompressorSettings:
    """Значения по умолчанию для фронтендов (поля GUI, аргументы CLI)."""
    output_dir: Optional[Path] = None
    target_size_kb: int = 0
    max_width: int = 0
    max_height: int = 0
    log_level: str = "INFO"


def get_project_root() -> Path:
    return _PROJECT_ROOT


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV_VAR)
    return Path(env) if env else get_project_root() / "config.yaml"


def _parse(raw: Dict[str, Any]) -> CompressorSettings:
    section = raw.get("compressor", raw)
    if not isinstance(section, dict):
        raise InvalidArgument("Секция 'compressor' в конфиге должна быть словарём")
    known = {f.name for f in fields(CompressorSettings)}
    values: Dict[str, Any] = {k: v for k, v in section.items() if k in known and v is not None}

    for key in _INT_FIELDS:
        if key in values:
            try:
                values[key] = int(values[key])
            except (TypeError, ValueError) as exc:
                raise InvalidArgument(f"{key}: ожидалось целое, получено {values[key]!r}") from exc
            if values[key] < 0:
                raise InvalidArgument(f"{key} не может быть отрицательным: {values[key]}")
    if "output_dir" in values:
        values["output_dir"] = Path(values["output_dir"]).expanduser()
    if "log_level" in values:
        values["log_level"] = str(values["log_level"]).upper()
    return CompressorSettings(**values)


def load_config(config_path: str | Path | None = None) -> CompressorSettings:
    """Читает YAML-конфиг; отсутствующий файл даёт значения по умолчанию."""
    path = Path(config_path) if config_path is not None else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        return CompressorSettings()
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise InvalidArgument(f"Некорректный YAML в {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidArgument(f"Конфиг {path} должен содержать словарь")
    return _parse(raw)
