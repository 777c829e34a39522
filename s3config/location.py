from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from .exceptions import InvalidLocationError, UnsupportedSchemeError
from .settings import S3_URI_SCHEME

LOGGER = logging.getLogger(__name__)

# Characters that may never appear unescaped in a URI.
_ILLEGAL_URI_CHARS = re.compile(r'[\s\x00-\x1f\x7f<>"{}|\\^`]')
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class LocationIdentifier:
    """Bucket and key parsed from an ``s3://`` configuration location."""

    scheme: str
    bucket: str
    key: str

    @property
    def uri(self) -> str:
        if self.key in ("", "/"):
            return f"{self.scheme}://{self.bucket}{self.key}"
        return f"{self.scheme}://{self.bucket}/{self.key}"


def _derive_key(path: str) -> str:
    # Only a path longer than the bare separator loses its first character.
    if len(path) > 1:
        return path[1:]
    return path


def parse_location(path: Optional[str]) -> LocationIdentifier:
    """Parse ``path`` into a :class:`LocationIdentifier`.

    ``s3://bucket`` yields an empty key and ``s3://bucket/`` yields ``"/"``;
    otherwise exactly one leading ``/`` is removed from the path component.
    """

    if path is None or not path.strip():
        raise InvalidLocationError("S3 URI to configuration file was unspecified or empty")

    try:
        match = _ILLEGAL_URI_CHARS.search(path)
        if match:
            raise ValueError(
                f"Illegal character {match.group()!r} at index {match.start()} in '{path}'"
            )
        escape = _MALFORMED_ESCAPE.search(path)
        if escape:
            raise ValueError(f"Malformed escape pair at index {escape.start()} in '{path}'")
        parsed = urlsplit(path)
    except ValueError as exc:
        raise InvalidLocationError("Unable to parse S3 URI for configuration file") from exc

    if parsed.scheme.lower() != S3_URI_SCHEME:
        raise UnsupportedSchemeError(
            f"Configuration file S3 URI uses unsupported scheme: {parsed.scheme or None}"
        )

    # Opaque forms such as ``s3:bucket/key`` carry no authority.
    if not parsed.netloc:
        raise InvalidLocationError(f"S3 URI '{path}' does not name a bucket")
    # Bucket names never contain userinfo or a port.
    if "@" in parsed.netloc or ":" in parsed.netloc:
        raise InvalidLocationError(
            f"S3 URI '{path}' has an authority '{parsed.netloc}' that is not a bucket name"
        )

    location = LocationIdentifier(
        scheme=parsed.scheme,
        bucket=parsed.netloc,
        key=_derive_key(parsed.path),
    )
    LOGGER.debug("Resolved '%s' to bucket '%s' and key '%s'", path, location.bucket, location.key)
    return location
