# === FILE: robots_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации RobotsScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RobotsConfig(BaseModel):
    """Настройки проверки доступа по robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field("RobotsScoutBot", min_length=1, description="Идентификатор краулера.")
    min_confidence: float = Field(
        0.25,
        gt=0,
        le=1,
        description="Минимальная уверенность определения кодировки для не-UTF-8 входа.",
    )
    log_level: LogLevel = Field("WARNING", description="Уровень логирования по умолчанию.")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("log_level", mode="before")
    def _upper_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> RobotsConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект RobotsConfig.
    Без пути использует configs/default.yaml, а если его нет, значения по умолчанию.
    Явно указанный, но отсутствующий файл приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return RobotsConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return RobotsConfig(**data)


__all__ = ["RobotsConfig", "load_config"]
