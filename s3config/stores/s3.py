from __future__ import annotations

import logging
from typing import BinaryIO, Optional

import boto3

from ..settings import S3_SERVICE_NAME, ClientConfig
from .base import ObjectStore

LOGGER = logging.getLogger(__name__)


class S3ObjectStore(ObjectStore):
    """Fetches objects stored in S3 buckets."""

    def __init__(self, client=None) -> None:
        self._client = client or boto3.client(S3_SERVICE_NAME)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: Optional[boto3.session.Session] = None,
    ) -> "S3ObjectStore":
        kwargs = config.client_kwargs()
        LOGGER.debug(
            "Creating S3 client (endpoint=%s, region=%s, path_style=%s)",
            config.endpoint_override,
            config.region_override,
            config.path_style_access,
        )
        if session is None:
            return cls(boto3.client(S3_SERVICE_NAME, **kwargs))
        return cls(session.client(S3_SERVICE_NAME, **kwargs))

    @property
    def client(self):
        return self._client

    def fetch(self, bucket: str, key: str) -> BinaryIO:
        response = self._client.get_object(Bucket=bucket, Key=key)
        return response["Body"]
