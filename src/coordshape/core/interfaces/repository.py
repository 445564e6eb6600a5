"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List, Optional

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Generic read-only repository interface."""

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID, or None when it does not exist."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
        pass
