"""
Доменные исключения контекста бронирования переговорных комнат.

Тексты сообщений фиксированы: на них опираются вызывающий код и тесты.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BookingRequestError(DomainException):
    """Некорректный запрос от вызывающей стороны."""

    pass


class InvalidBookingRequest(BookingRequestError):
    """Не переданы обязательные параметры запроса."""

    pass


class InvalidTimeWindow(BookingRequestError):
    """Время окончания не позже времени начала."""

    def __init__(self, message: str = "end time must be after start time"):
        super().__init__(message)


class PastBookingError(BookingRequestError):
    """Попытка забронировать время в прошлом."""

    def __init__(self, message: str = "cannot book a time in the past"):
        super().__init__(message)


class RoomNotFound(BookingRequestError):
    """Комната с указанным идентификатором не существует."""

    def __init__(self, room_id: str):
        super().__init__("room does not exist")
        self.room_id = room_id


class BookingStateError(DomainException):
    """Операция недопустима для текущего состояния бронирования."""

    pass


class BookingAlreadyStarted(BookingStateError):
    """Бронирование уже началось или закончилось."""

    def __init__(self, booking_id: str):
        super().__init__("cannot cancel a booking that has started or ended")
        self.booking_id = booking_id


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении инвариантов агрегата."""

    pass
