"""Remote store access: client contract, HTTP client, error taxonomy."""

from store.errors import AlreadyExists, NotFound, RemoteUnavailable, StoreError
from store.base import StoreClient
from store.http_client import HttpStoreClient, build_base_url, label_path

__all__ = [
    "AlreadyExists",
    "HttpStoreClient",
    "NotFound",
    "RemoteUnavailable",
    "StoreClient",
    "StoreError",
    "build_base_url",
    "label_path",
]
