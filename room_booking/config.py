"""
Настройки приложения.

Значения берутся из переменных окружения с префиксом ROOM_BOOKING_,
при их отсутствии используются значения по умолчанию.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "ROOM_BOOKING_"


class BookingSettings(BaseModel):
    """Настройки контекста бронирования."""

    storage_path: Optional[Path] = Field(
        default=None,
        description="JSON-файл с комнатами (None - хранение в памяти)",
    )
    log_level: str = Field(default="INFO", description="Минимальный уровень логов")
    notifications_enabled: bool = Field(
        default=True, description="Отправлять ли подтверждения"
    )
    sender_address: str = Field(
        default="bookings@example.com", description="Адрес отправителя уведомлений"
    )

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BookingSettings":
        """Создает настройки из переменных окружения."""
        env = os.environ if environ is None else environ
        values = {}

        storage_path = env.get(f"{ENV_PREFIX}STORAGE_PATH")
        if storage_path:
            values["storage_path"] = Path(storage_path)
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}NOTIFICATIONS" in env:
            # Строку разбирает pydantic: неизвестное значение - ошибка валидации
            values["notifications_enabled"] = env[f"{ENV_PREFIX}NOTIFICATIONS"].strip()
        if f"{ENV_PREFIX}SENDER" in env:
            values["sender_address"] = env[f"{ENV_PREFIX}SENDER"]

        return cls(**values)
