"""
Доменная модель контекста бронирования переговорных комнат.
"""

from .booking import Booking
from .exceptions import (
    BookingAlreadyStarted,
    BookingRequestError,
    BookingStateError,
    BusinessRuleValidationException,
    DomainException,
    InvalidBookingRequest,
    InvalidTimeWindow,
    PastBookingError,
    RoomNotFound,
)
from .room import Room
from .value_objects import EntityId, TimeSlot, generate_id

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "TimeSlot",
    # Сущности и агрегаты
    "Booking",
    "Room",
    # Исключения
    "DomainException",
    "BookingRequestError",
    "BookingStateError",
    "InvalidBookingRequest",
    "InvalidTimeWindow",
    "PastBookingError",
    "RoomNotFound",
    "BookingAlreadyStarted",
    "BusinessRuleValidationException",
]
