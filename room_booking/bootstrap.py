from typing import Any, Dict, Iterable, Optional

from room_booking.application import BookingCoordinator, Clock, RoomRepository
from room_booking.config import BookingSettings
from room_booking.domain import Room
from room_booking.infrastructure import (
    ConsoleLogger,
    ConsoleNotificationService,
    InMemoryRoomRepository,
    JsonFileRoomRepository,
    NullNotificationService,
    SystemClock,
)


def bootstrap_app(
    settings: Optional[BookingSettings] = None,
    clock: Optional[Clock] = None,
    rooms: Iterable[Room] = (),
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or BookingSettings.from_env()

    # 1. Логгер и хранилище комнат
    logger = ConsoleLogger(min_level=settings.log_level)
    repository: RoomRepository
    if settings.storage_path is not None:
        repository = JsonFileRoomRepository(settings.storage_path)
        for room in rooms:
            # Комнаты, уже лежащие в файле, не перезаписываем
            if repository.find_by_id(room.id) is None:
                repository.save(room)
    else:
        repository = InMemoryRoomRepository(rooms)

    # 2. Уведомления и часы
    if settings.notifications_enabled:
        notifier = ConsoleNotificationService(sender_address=settings.sender_address)
    else:
        notifier = NullNotificationService()
    clock = clock or SystemClock()

    # 3. Координатор бронирований
    coordinator = BookingCoordinator(
        clock=clock, rooms=repository, notifier=notifier, logger=logger
    )

    logger.debug(
        "Application bootstrapped",
        storage=str(settings.storage_path or "memory"),
        notifications=settings.notifications_enabled,
    )
    return {
        "settings": settings,
        "logger": logger,
        "rooms": repository,
        "notifier": notifier,
        "clock": clock,
        "coordinator": coordinator,
    }
