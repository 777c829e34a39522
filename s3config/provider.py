from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Iterable, Mapping, Optional

from .exceptions import FetchFailedError
from .location import parse_location
from .settings import ClientConfig
from .stores import ObjectStore, S3ObjectStore

LOGGER = logging.getLogger(__name__)

StoreFactory = Callable[[ClientConfig], ObjectStore]


class ConfigurationSourceProvider(ABC):
    """Extension point a host application uses to open its configuration file."""

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Return a readable stream over the configuration found at ``path``."""


class S3ConfigurationProvider(ConfigurationSourceProvider):
    """Reads a configuration file from an ``s3://bucket/key`` location.

    Credentials are discovered by boto3 from its usual environment sources.
    ``AWS_S3_ENDPOINT`` points the client at an alternate endpoint (such as a
    local fake S3) using path-style addressing; otherwise ``AWS_REGION``
    selects the region instead of the one boto3 would discover.

    The environment is read and a new client is built on every call, so a
    single provider may be shared between threads.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        store_factory: Optional[StoreFactory] = None,
        regions: Optional[Iterable[str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._environ = environ
        self._store_factory: StoreFactory = store_factory or S3ObjectStore.from_config
        self._regions = frozenset(regions) if regions is not None else None
        self._logger = logger or LOGGER

    def open(self, path: str) -> BinaryIO:
        return self.resolve_and_fetch(path)

    def resolve_and_fetch(self, path: Optional[str]) -> BinaryIO:
        location = parse_location(path)
        config = ClientConfig.from_environ(self._environ, regions=self._regions)
        store = self._store_factory(config)

        self._logger.info(
            "Retrieving configuration from bucket '%s' key '%s'", location.bucket, location.key
        )
        try:
            return store.fetch(location.bucket, location.key)
        except Exception as exc:
            self._logger.warning("Failed to retrieve configuration from '%s': %s", location.uri, exc)
            raise FetchFailedError("Error retrieving configuration from storage") from exc


def open_configuration(path: str, **kwargs) -> BinaryIO:
    """Open ``path`` with a default :class:`S3ConfigurationProvider`."""

    return S3ConfigurationProvider(**kwargs).open(path)
