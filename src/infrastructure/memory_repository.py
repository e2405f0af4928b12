import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type

from src.domain.models import Device
from src.domain.repository import Repository, T

# Fields the repository owns; callers cannot set them through create/update.
_ASSIGNED_FIELDS = ("id", "last_update")


class InMemoryRepository(Repository[T]):
    """
    Volatile keyed store backed by a dict.

    Current implementation keeps everything in process memory: data does not
    survive a restart and growth is unbounded. No coroutine here awaits, so a
    read-modify-write never interleaves with another one on the same loop.
    """

    def __init__(
            self,
            entity_type: Type[T],
            id_prefix: str,
            logger: Optional[logging.Logger] = None,
    ):
        self.entity_type = entity_type
        self.id_prefix = id_prefix
        self.logger = logger or logging.getLogger(__name__)
        self._entities: Dict[str, T] = {}
        self._sequence = itertools.count(1)

    async def find_by_id(self, id: str) -> Optional[T]:
        self.logger.debug("Finding entity by id", extra={"context": {"id": id}})
        return self._entities.get(id)

    async def find_all(self) -> List[T]:
        self.logger.debug("Finding all entities", extra={"context": {"count": len(self._entities)}})
        return list(self._entities.values())

    async def create(self, fields: Dict[str, Any]) -> T:
        id = self._generate_id()
        values = {key: value for key, value in fields.items() if key not in _ASSIGNED_FIELDS}
        entity = self.entity_type.model_validate(
            {**values, "id": id, "last_update": datetime.now(timezone.utc)}
        )

        self._entities[id] = entity
        self.logger.info(
            f"{self.entity_type.__name__} created",
            extra={"context": {"id": id, "name": getattr(entity, "name", None)}},
        )
        return entity

    async def update(self, id: str, fields: Dict[str, Any]) -> Optional[T]:
        existing = self._entities.get(id)
        if existing is None:
            return None

        changes = {key: value for key, value in fields.items() if key not in _ASSIGNED_FIELDS}
        # Never step backwards, even if the wall clock does.
        stamp = max(datetime.now(timezone.utc), existing.last_update)
        updated = self.entity_type.model_validate(
            {**existing.model_dump(), **changes, "id": id, "last_update": stamp}
        )

        self._entities[id] = updated
        self.logger.info(
            f"{self.entity_type.__name__} updated",
            extra={"context": {"id": id, "fields": sorted(changes)}},
        )
        return updated

    async def delete(self, id: str) -> bool:
        if id not in self._entities:
            return False

        del self._entities[id]
        self.logger.info(f"{self.entity_type.__name__} deleted", extra={"context": {"id": id}})
        return True

    async def count(self) -> int:
        return len(self._entities)

    def _generate_id(self) -> str:
        # The counter never rewinds, so ids stay unique after deletes.
        return f"{self.id_prefix}_{next(self._sequence):03d}"


class InMemoryDeviceRepository(InMemoryRepository[Device]):
    """In-memory repository for devices. Ids look like ``device_001``."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        super().__init__(Device, id_prefix="device", logger=logger)
