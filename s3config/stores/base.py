from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class ObjectStore(ABC):
    """Interface for reading objects out of blob storage."""

    @abstractmethod
    def fetch(self, bucket: str, key: str) -> BinaryIO:
        """Return a readable stream over the object's contents.

        The caller owns the stream and must close it.
        """
