"""Read application configuration files from S3."""

from .exceptions import (
    ConfigurationSourceError,
    FetchFailedError,
    InvalidLocationError,
    UnknownRegionError,
    UnsupportedSchemeError,
)
from .location import LocationIdentifier, parse_location
from .provider import ConfigurationSourceProvider, S3ConfigurationProvider, open_configuration
from .settings import ClientConfig, known_regions
from .stores import InMemoryObjectStore, ObjectStore, S3ObjectStore

__all__ = [
    "ClientConfig",
    "ConfigurationSourceError",
    "ConfigurationSourceProvider",
    "FetchFailedError",
    "InMemoryObjectStore",
    "InvalidLocationError",
    "LocationIdentifier",
    "ObjectStore",
    "S3ConfigurationProvider",
    "S3ObjectStore",
    "UnknownRegionError",
    "UnsupportedSchemeError",
    "known_regions",
    "open_configuration",
    "parse_location",
]
