import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict


class _KeyEntry:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = asyncio.Lock()
        # Количество задач, которые держат или ждут блокировку
        self.users = 0


class KeyedLock:
    """Таблица блокировок по ключу документа.

    Писатели одного ключа выполняются строго по очереди, разные ключи
    не конкурируют друг с другом. Запись удаляется из таблицы, как только
    её никто не держит и не ждёт.
    """

    def __init__(self):
        self._entries: Dict[str, _KeyEntry] = {}

    def _checkout(self, key: str) -> _KeyEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = _KeyEntry()
        entry.users += 1
        return entry

    def _checkin(self, key: str, entry: _KeyEntry) -> None:
        entry.users -= 1
        if entry.users == 0 and self._entries.get(key) is entry:
            del self._entries[key]

    @asynccontextmanager
    async def writer(self, key: str) -> AsyncIterator[None]:
        """Эксклюзивная блокировка ключа на время изменения"""
        entry = self._checkout(key)
        try:
            async with entry.lock:
                yield
        finally:
            self._checkin(key, entry)

    async def wait_unlocked(self, key: str) -> None:
        """Дождаться, пока ключ освободит писатель (для чтения)"""
        entry = self._entries.get(key)
        if entry is None or not entry.lock.locked():
            return
        entry = self._checkout(key)
        try:
            async with entry.lock:
                pass
        finally:
            self._checkin(key, entry)

    def is_locked(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.lock.locked()

    def __len__(self) -> int:
        return len(self._entries)
