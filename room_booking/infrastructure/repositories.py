"""
Реализации репозитория комнат.

Оба репозитория выдают независимые копии агрегатов и выполняют
условную запись по версии (оптимистичная блокировка).
"""

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from filelock import FileLock, Timeout
from pydantic import BaseModel

from room_booking.application.interfaces import (
    ConcurrencyException,
    RoomRepository,
    StoreError,
)
from room_booking.domain import Booking, DomainException, EntityId, Room


def _check_version(room: Room, stored: Optional[Room]) -> None:
    """Отклоняет запись, если сохраненная версия не совпадает с загруженной."""
    stored_version = stored.version if stored is not None else 0
    if room.version != stored_version:
        raise ConcurrencyException(room.id, room.version, stored_version)


class InMemoryRoomRepository(RoomRepository):
    """Реализация репозитория комнат в памяти."""

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: Dict[EntityId, Room] = {}
        self._lock = threading.Lock()
        for room in rooms:
            self.save(room)

    def find_by_id(self, room_id: EntityId) -> Optional[Room]:
        with self._lock:
            room = self._rooms.get(room_id)
            return room.model_copy(deep=True) if room is not None else None

    def find_all(self) -> List[Room]:
        with self._lock:
            return [room.model_copy(deep=True) for room in self._rooms.values()]

    def save(self, room: Room) -> None:
        with self._lock:
            _check_version(room, self._rooms.get(room.id))
            room.version += 1
            self._rooms[room.id] = room.model_copy(deep=True)


class RoomRecord(BaseModel):
    """Представление комнаты в JSON-файле."""

    id: EntityId
    name: str = ""
    version: int = 0
    bookings: List[Booking] = []

    @classmethod
    def from_domain(cls, room: Room) -> "RoomRecord":
        return cls(
            id=room.id,
            name=room.name,
            version=room.version,
            bookings=list(room.bookings),
        )

    def to_domain(self) -> Room:
        return Room.restore(
            id=self.id,
            name=self.name,
            bookings=self.bookings,
            version=self.version,
        )


class JsonFileRoomRepository(RoomRepository):
    """Репозиторий комнат, хранящий данные в JSON-файле.

    Чтение, проверка версии и запись выполняются под файловой блокировкой
    ОС, поэтому условная запись работает и между несколькими экземплярами
    репозитория и процессами, использующими один файл. Файл заменяется
    атомарно: прерванная запись не повреждает сохраненные данные.
    """

    def __init__(self, file_path: Union[str, Path], lock_timeout: float = 10.0):
        self._file_path = Path(file_path)
        self._file_lock = FileLock(f"{self._file_path}.lock")
        self._lock_timeout = lock_timeout

    def find_by_id(self, room_id: EntityId) -> Optional[Room]:
        with self._locked():
            return self._load_rooms().get(room_id)

    def find_all(self) -> List[Room]:
        with self._locked():
            return list(self._load_rooms().values())

    def save(self, room: Room) -> None:
        with self._locked():
            rooms = self._load_rooms()
            _check_version(room, rooms.get(room.id))

            record = RoomRecord.from_domain(room)
            record.version += 1
            records = {r.id: RoomRecord.from_domain(r) for r in rooms.values()}
            records[room.id] = record
            self._save_records(records)
            room.version = record.version

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Захватывает межпроцессную блокировку файла хранилища."""
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_lock.acquire(timeout=self._lock_timeout)
        except (Timeout, OSError) as e:
            raise StoreError(f"Cannot lock {self._file_path}: {e}") from e
        try:
            yield
        finally:
            self._file_lock.release()

    def _load_rooms(self) -> Dict[EntityId, Room]:
        """Загружает комнаты из JSON-файла."""
        if not self._file_path.exists():
            return {}

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                raw_data = f.read()
        except OSError as e:
            raise StoreError(f"Cannot read {self._file_path}: {e}") from e

        if not raw_data.strip():
            return {}

        try:
            items = json.loads(raw_data)
            if not isinstance(items, list):
                raise TypeError(f"expected a list of rooms, got {type(items).__name__}")
            rooms = [RoomRecord.model_validate(item).to_domain() for item in items]
        except (ValueError, TypeError, DomainException) as e:
            # ValidationError и JSONDecodeError - подклассы ValueError
            raise StoreError(f"Corrupted room store {self._file_path}: {e}") from e
        return {room.id: room for room in rooms}

    def _save_records(self, records: Dict[EntityId, RoomRecord]) -> None:
        """Атомарно сохраняет записи в JSON-файл через временный файл."""
        data = [record.model_dump(mode="json") for record in records.values()]
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._file_path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreError(f"Cannot write {self._file_path}: {e}") from e
