"""Key/value blob stores backing the persisted event table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


class BlobNotFound(KeyError):
    """The requested key does not exist in the store."""


class BlobStore(Protocol):
    def get(self, key: str) -> bytes: ...

    def put(self, key: str, payload: bytes) -> None: ...


class InMemoryBlobStore:
    """Dict-backed store for tests and demos."""

    def __init__(self, blobs: Optional[dict[str, bytes]] = None):
        self.blobs: dict[str, bytes] = dict(blobs or {})

    def get(self, key: str) -> bytes:
        try:
            return self.blobs[key]
        except KeyError:
            raise BlobNotFound(key) from None

    def put(self, key: str, payload: bytes) -> None:
        self.blobs[key] = bytes(payload)


class LocalBlobStore:
    """Stores each key as a file below ``root``."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / key

    def get(self, key: str) -> bytes:
        path = self._path(key)
        if not path.is_file():
            raise BlobNotFound(key)
        return path.read_bytes()

    def put(self, key: str, payload: bytes) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)


class S3BlobStore:
    """S3 bucket accessed through boto3; every put overwrites the object."""

    def __init__(self, bucket: str, client: Any = None):
        if not bucket:
            raise ValueError("S3 bucket name is required")
        self.bucket = bucket
        if client is None:
            import boto3

            client = boto3.client("s3")
        self.client = client

    def get(self, key: str) -> bytes:
        from botocore.exceptions import ClientError

        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                raise BlobNotFound(key) from exc
            raise
        return response["Body"].read()

    def put(self, key: str, payload: bytes) -> None:
        self.client.put_object(Bucket=self.bucket, Key=key, Body=payload, ContentType="text/csv")
        logger.debug("Wrote %d bytes to s3://%s/%s", len(payload), self.bucket, key)


def build_blob_store(settings) -> BlobStore:
    """Pick the backend named by ``settings.backend``."""

    if settings.backend == "s3":
        return S3BlobStore(settings.bucket)
    if settings.backend == "local":
        return LocalBlobStore(settings.local_dir)
    if settings.backend == "memory":
        return InMemoryBlobStore()
    raise ValueError(f"Unsupported storage backend '{settings.backend}'")
