from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

import boto3
from botocore.config import Config

from .exceptions import UnknownRegionError

LOGGER = logging.getLogger(__name__)

S3_URI_SCHEME = "s3"
S3_SERVICE_NAME = "s3"
AWS_S3_ENDPOINT_ENV_VAR = "AWS_S3_ENDPOINT"
AWS_REGION_ENV_VAR = "AWS_REGION"


def known_regions(session: Optional[boto3.session.Session] = None) -> FrozenSet[str]:
    """Return every S3 region listed in botocore's endpoint data, across all partitions."""

    if session is None:
        return _default_regions()
    return _collect_regions(session)


@functools.lru_cache(maxsize=1)
def _default_regions() -> FrozenSet[str]:
    return _collect_regions(boto3.session.Session())


def _collect_regions(session: boto3.session.Session) -> FrozenSet[str]:
    regions = set()
    for partition in session.get_available_partitions():
        regions.update(session.get_available_regions(S3_SERVICE_NAME, partition_name=partition))
    return frozenset(regions)


@dataclass(frozen=True)
class ClientConfig:
    """Overrides applied to the S3 client built for a single fetch."""

    endpoint_override: Optional[str] = None
    region_override: Optional[str] = None

    @property
    def path_style_access(self) -> bool:
        return self.endpoint_override is not None

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        regions: Optional[Iterable[str]] = None,
    ) -> "ClientConfig":
        """Build the overrides from ``environ`` (``os.environ`` when omitted).

        An endpoint override wins over a region override. A region override
        that is not a known S3 region raises :class:`UnknownRegionError`.
        """

        if environ is None:
            environ = os.environ

        endpoint = environ.get(AWS_S3_ENDPOINT_ENV_VAR)
        if endpoint is not None:
            if environ.get(AWS_REGION_ENV_VAR) is not None:
                LOGGER.debug(
                    "%s is set; ignoring %s=%s",
                    AWS_S3_ENDPOINT_ENV_VAR,
                    AWS_REGION_ENV_VAR,
                    environ.get(AWS_REGION_ENV_VAR),
                )
            return cls(endpoint_override=endpoint)

        region = environ.get(AWS_REGION_ENV_VAR)
        if region is not None:
            valid_regions = frozenset(regions) if regions is not None else known_regions()
            if region not in valid_regions:
                raise UnknownRegionError(
                    f"{AWS_REGION_ENV_VAR} names unknown S3 region '{region}'."
                )
            return cls(region_override=region)

        return cls()

    def botocore_config(self) -> Optional[Config]:
        if self.path_style_access:
            return Config(s3={"addressing_style": "path"})
        return None

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``boto3.client("s3", ...)``; absent overrides are omitted."""

        kwargs: Dict[str, Any] = {}
        if self.endpoint_override is not None:
            kwargs["endpoint_url"] = self.endpoint_override
            kwargs["config"] = self.botocore_config()
        if self.region_override is not None:
            kwargs["region_name"] = self.region_override
        return kwargs
