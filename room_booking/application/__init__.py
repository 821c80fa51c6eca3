"""
Прикладной слой: порты и сервис координации бронирований.
"""

from .interfaces import (
    Clock,
    ConcurrencyException,
    ILogger,
    NotificationError,
    NotificationService,
    RoomRepository,
    StoreError,
)
from .services import BookingCoordinator

__all__ = [
    "BookingCoordinator",
    "Clock",
    "ILogger",
    "NotificationService",
    "RoomRepository",
    "StoreError",
    "ConcurrencyException",
    "NotificationError",
]
