from .base import ObjectStore
from .memory import InMemoryObjectStore
from .s3 import S3ObjectStore

__all__ = [
    "ObjectStore",
    "InMemoryObjectStore",
    "S3ObjectStore",
]
