"""
Инфраструктурный слой контекста бронирования.

Содержит реализации портов прикладного слоя: часы, хранилища комнат,
сервисы уведомлений и логгер.
"""

from .logger import ConsoleLogger
from .clock import FixedClock, SystemClock
from .notifications import ConsoleNotificationService, NullNotificationService
from .repositories import InMemoryRoomRepository, JsonFileRoomRepository, RoomRecord

__all__ = [
    "ConsoleLogger",
    "SystemClock",
    "FixedClock",
    "ConsoleNotificationService",
    "NullNotificationService",
    "InMemoryRoomRepository",
    "JsonFileRoomRepository",
    "RoomRecord",
]
