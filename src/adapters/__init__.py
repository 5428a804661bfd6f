"""
Adapters package
----------------

Storage abstraction so that exports and charts can be written either
to the local filesystem or to S3 with the same calling code.
"""

from .storage import (  # noqa: F401
    LocalStorageAdapter,
    S3StorageAdapter,
    StorageAdapter,
)

__all__ = [
    "StorageAdapter",
    "LocalStorageAdapter",
    "S3StorageAdapter",
]
