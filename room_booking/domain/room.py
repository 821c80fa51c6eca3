from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, PrivateAttr

from room_booking.domain.booking import Booking
from room_booking.domain.exceptions import BusinessRuleValidationException
from room_booking.domain.value_objects import EntityId


class Room(BaseModel):
    """Агрегат 'Комната'.

    Единственный источник истины о своих бронированиях: только комната
    решает, свободна ли она на интервал, и только она меняет набор броней.
    """

    id: EntityId
    name: str = ""
    # Версия сохраненного состояния, из которого загружен агрегат
    version: int = 0
    _bookings: List[Booking] = PrivateAttr(default_factory=list)

    @classmethod
    def restore(
        cls,
        id: EntityId,
        name: str = "",
        bookings: Iterable[Booking] = (),
        version: int = 0,
    ) -> Room:
        """Восстанавливает комнату из сохраненного состояния."""
        room = cls(id=id, name=name, version=version)
        for booking in bookings:
            room.add_booking(booking)
        return room

    @property
    def bookings(self) -> Tuple[Booking, ...]:
        return tuple(self._bookings)

    def is_available(self, start: datetime, end: datetime) -> bool:
        """Проверяет, что ни одно бронирование не пересекается с [start, end).

        Порядок start и end не проверяется: за корректность интервала
        отвечает вызывающий код.
        """
        return not any(
            booking.start_time < end and start < booking.end_time
            for booking in self._bookings
        )

    def add_booking(self, booking: Booking) -> None:
        """Добавляет бронирование.

        Доступность не перепроверяется: вызывающий код обязан
        предварительно вызвать is_available.
        """
        if booking.room_id != self.id:
            raise BusinessRuleValidationException(
                f"Booking {booking.id} belongs to room {booking.room_id}, not {self.id}"
            )
        self._bookings.append(booking)

    def has_booking(self, booking_id: EntityId) -> bool:
        return self.get_booking(booking_id) is not None

    def get_booking(self, booking_id: EntityId) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        return None

    def remove_booking(self, booking_id: EntityId) -> None:
        """Удаляет бронирование. Отсутствующий идентификатор игнорируется."""
        self._bookings = [b for b in self._bookings if b.id != booking_id]

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.id == other.id
