from __future__ import annotations

import io
from typing import BinaryIO, Dict, Tuple

from .base import ObjectStore


class InMemoryObjectStore(ObjectStore):
    """Serves objects from a dictionary; useful for tests and local runs."""

    def __init__(self) -> None:
        self._objects: Dict[Tuple[str, str], bytes] = {}

    def put(self, bucket: str, key: str, data: bytes) -> None:
        self._objects[(bucket, key)] = bytes(data)

    def fetch(self, bucket: str, key: str) -> BinaryIO:
        try:
            data = self._objects[(bucket, key)]
        except KeyError:
            raise KeyError(f"No object '{key}' in bucket '{bucket}'.") from None
        return io.BytesIO(data)
