"""
Интерфейсы (порты) прикладного слоя.

Координатор бронирований зависит только от этих контрактов; реализации
живут в инфраструктурном слое.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Protocol

from room_booking.domain import Booking, EntityId, Room


class StoreError(Exception):
    """Ошибка хранилища. Всегда пробрасывается вызывающему коду."""

    pass


class ConcurrencyException(StoreError):
    """Комната изменилась с момента загрузки: условная запись отклонена."""

    def __init__(self, room_id: EntityId, expected: int, actual: int):
        super().__init__(
            f"Room {room_id} was modified concurrently "
            f"(loaded version {expected}, stored version {actual})"
        )
        self.room_id = room_id
        self.expected = expected
        self.actual = actual


class NotificationError(Exception):
    """Ошибка доставки уведомления. Никогда не выходит за пределы координатора."""

    pass


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class Clock(Protocol):
    """Источник текущего времени."""

    def now(self) -> datetime: ...


class NotificationService(Protocol):
    """Интерфейс для отправки подтверждений."""

    def send_booking_confirmation(self, booking: Booking) -> None: ...
    def send_cancellation_confirmation(self, booking: Booking) -> None: ...


class RoomRepository(ABC):
    """Абстрактный репозиторий для агрегата Room."""

    @abstractmethod
    def find_by_id(self, room_id: EntityId) -> Optional[Room]:
        """Находит комнату по идентификатору."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[Room]:
        """Возвращает все комнаты."""
        raise NotImplementedError

    @abstractmethod
    def save(self, room: Room) -> None:
        """Сохраняет состояние агрегата.

        Запись условная: если сохраненная версия отличается от room.version,
        выбрасывается ConcurrencyException. После успешной записи
        room.version увеличивается на единицу.
        """
        raise NotImplementedError
