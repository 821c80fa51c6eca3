"""
Прикладной слой контекста бронирования.

BookingCoordinator координирует проверку запроса, работу с хранилищем
комнат и отправку подтверждений. Собственного состояния у него нет.
"""

from datetime import datetime
from typing import List, Optional

from room_booking.application.interfaces import (
    Clock,
    ILogger,
    NotificationService,
    RoomRepository,
)
from room_booking.domain import (
    Booking,
    BookingAlreadyStarted,
    EntityId,
    InvalidBookingRequest,
    InvalidTimeWindow,
    PastBookingError,
    Room,
    RoomNotFound,
)
from room_booking.infrastructure.logger import ConsoleLogger


class BookingCoordinator:
    """Сервис приложения для бронирования и отмены бронирований комнат."""

    def __init__(
        self,
        clock: Clock,
        rooms: RoomRepository,
        notifier: NotificationService,
        logger: Optional[ILogger] = None,
    ):
        self._clock = clock
        self._rooms = rooms
        self._notifier = notifier
        self._logger = logger or ConsoleLogger()

    def book_room(
        self,
        room_id: Optional[EntityId],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> bool:
        """Бронирует комнату.

        Returns:
            True, если бронирование создано; False, если комната занята.

        Raises:
            InvalidBookingRequest, PastBookingError, InvalidTimeWindow,
            RoomNotFound: некорректный запрос.
            StoreError: ошибка сохранения.
        """
        if room_id is None or start is None or end is None:
            raise InvalidBookingRequest("valid start/end times and room id required")

        now = self._clock.now()
        if start < now:
            raise PastBookingError()
        if end <= start:
            raise InvalidTimeWindow()

        room = self._rooms.find_by_id(room_id)
        if room is None:
            raise RoomNotFound(room_id)

        if not room.is_available(start, end):
            self._logger.debug(
                "Booking refused: room is not available",
                room_id=room_id,
                start=start,
                end=end,
            )
            return False

        booking = Booking.create(room_id=room_id, start=start, end=end)
        room.add_booking(booking)
        self._rooms.save(room)
        self._logger.info(
            "Room booked",
            booking_id=booking.id,
            room_id=room_id,
            start=start,
            end=end,
        )

        self._notify_best_effort(self._notifier.send_booking_confirmation, booking)
        return True

    def cancel_booking(self, booking_id: Optional[EntityId]) -> bool:
        """Отменяет бронирование.

        Returns:
            True, если бронирование отменено; False, если оно не найдено.

        Raises:
            InvalidBookingRequest: не передан идентификатор.
            BookingAlreadyStarted: бронирование уже началось или закончилось.
            StoreError: ошибка сохранения.
        """
        if booking_id is None:
            raise InvalidBookingRequest("booking id cannot be null")

        room = self._find_room_holding(booking_id)
        if room is None:
            self._logger.debug("Booking to cancel not found", booking_id=booking_id)
            return False

        booking = room.get_booking(booking_id)
        now = self._clock.now()
        if booking.has_started(now):
            raise BookingAlreadyStarted(booking_id)

        room.remove_booking(booking_id)
        self._rooms.save(room)
        self._logger.info("Booking cancelled", booking_id=booking_id, room_id=room.id)

        self._notify_best_effort(
            self._notifier.send_cancellation_confirmation, booking
        )
        return True

    def get_available_rooms(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> List[Room]:
        """Возвращает комнаты, свободные на интервал [start, end).

        Прошлые интервалы допустимы: текущее время не проверяется.
        """
        if start is None or end is None:
            raise InvalidBookingRequest("both start and end time must be given")
        if end <= start:
            raise InvalidTimeWindow()

        return [room for room in self._rooms.find_all() if room.is_available(start, end)]

    def _find_room_holding(self, booking_id: EntityId) -> Optional[Room]:
        for room in self._rooms.find_all():
            if room.has_booking(booking_id):
                return room
        return None

    def _notify_best_effort(self, send, booking: Booking) -> None:
        """Отправляет подтверждение; ошибка доставки логируется и отбрасывается."""
        try:
            send(booking)
        except Exception as e:
            self._logger.warning(
                "Notification failed, booking state is unaffected",
                booking_id=booking.id,
                error=str(e),
            )
