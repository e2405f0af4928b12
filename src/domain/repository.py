from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from src.domain.models import Entity

T = TypeVar("T", bound=Entity)


class Repository(ABC, Generic[T]):
    """
    Data access contract for one entity kind.

    Methods are coroutines so that a network-backed store can replace the
    in-memory one without touching the service layer.
    """

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[T]:
        """Return the entity, or None when the id is unknown."""

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Return every stored entity. Callers must not rely on the order."""

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> T:
        """Store a new entity. The repository assigns ``id`` and ``last_update``."""

    @abstractmethod
    async def update(self, id: str, fields: Dict[str, Any]) -> Optional[T]:
        """Shallow-merge ``fields`` into the entity. None when the id is unknown."""

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Remove the entity. True iff it existed."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities."""
