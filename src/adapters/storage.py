from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Optional


class StorageAdapter(ABC):
    """
    Abstraction over where dashboard artefacts (CSV exports, PNG charts)
    end up: local filesystem or S3.

    Keys are logical, slash-separated paths such as
    "exports/India-GDP (Current USD)-2024.csv".
    """

    @abstractmethod
    def write_raw(self, key: str, content: bytes, *, content_type: Optional[str] = None) -> str:
        """
        Persist bytes at the given key.

        ``content_type`` is stored as object metadata where the backend
        supports it (S3); the local filesystem ignores it.

        Returns the fully-qualified location string, for example:
        - Local: "exports/India-Population-2024.csv"
        - S3:    "s3://my-bucket/exports/India-Population-2024.csv"
        """

    @abstractmethod
    def read_raw(self, key: str) -> bytes:
        """Read bytes previously stored at the given key."""

    @abstractmethod
    def list_keys(self, prefix: str) -> List[str]:
        """List logical keys under the given prefix."""


class LocalStorageAdapter(StorageAdapter):
    """
    Filesystem-backed adapter; keys are relative paths under ``root_dir``.

        root_dir = Path("out")
        key      = "exports/India-GDP-2024.csv"
        -> out/exports/India-GDP-2024.csv
    """

    def __init__(self, root_dir: Path | str = ".") -> None:
        self.root_dir = Path(root_dir)

    def _resolve(self, key: str) -> Path:
        path = self.root_dir / key
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def write_raw(self, key: str, content: bytes, *, content_type: Optional[str] = None) -> str:
        path = self._resolve(key)
        with path.open("wb") as f:
            f.write(content)
        return str(path)

    def read_raw(self, key: str) -> bytes:
        path = self.root_dir / key
        with path.open("rb") as f:
            return f.read()

    def list_keys(self, prefix: str) -> List[str]:
        base = self.root_dir / prefix
        if not base.exists():
            return []

        keys: List[str] = []
        for path in base.rglob("*"):
            if path.is_file():
                rel = path.relative_to(self.root_dir)
                keys.append(str(rel).replace(os.sep, "/"))
        return sorted(keys)


class S3StorageAdapter(StorageAdapter):
    """
    S3-backed adapter using boto3.

    Keys map to object keys under ``bucket``/``base_prefix``.
    """

    def __init__(
        self,
        bucket: str,
        *,
        base_prefix: Optional[str] = None,
        boto3_client: Optional[Any] = None,
    ) -> None:
        if boto3_client is None:
            import boto3  # lazy import, local runs never need it

            boto3_client = boto3.client("s3")

        self.bucket = bucket
        self.base_prefix = (base_prefix or "").strip("/")
        self._s3 = boto3_client

    def _full_key(self, key: str) -> str:
        key = key.lstrip("/")
        if self.base_prefix:
            return f"{self.base_prefix}/{key}"
        return key

    def write_raw(self, key: str, content: bytes, *, content_type: Optional[str] = None) -> str:
        full_key = self._full_key(key)
        extra = {"ContentType": content_type} if content_type else {}
        self._s3.put_object(Bucket=self.bucket, Key=full_key, Body=content, **extra)
        return f"s3://{self.bucket}/{full_key}"

    def read_raw(self, key: str) -> bytes:
        full_key = self._full_key(key)
        resp = self._s3.get_object(Bucket=self.bucket, Key=full_key)
        return resp["Body"].read()

    def list_keys(self, prefix: str) -> List[str]:
        full_prefix = self._full_key(prefix).rstrip("/") + "/"
        paginator = self._s3.get_paginator("list_objects_v2")
        keys: List[str] = []
        for page in paginator.paginate(Bucket=self.bucket, Prefix=full_prefix):
            contents: Iterable[dict] = page.get("Contents") or []
            for obj in contents:
                key = obj["Key"]
                # strip base_prefix so callers always get logical keys
                if self.base_prefix and key.startswith(self.base_prefix + "/"):
                    key = key[len(self.base_prefix) + 1 :]
                keys.append(key)
        return keys
