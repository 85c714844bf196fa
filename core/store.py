"""
Document store seam.

Paths are slash separated Firestore style paths: ``projects/{id}`` for a
document, ``projects/{id}/messages`` for a collection. Documents are plain
dicts. ``SERVER_TIMESTAMP`` may appear as a field value in writes and is
resolved by the store to its own clock.
"""

import functools
from typing import Any, Protocol

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from core.errors import IndexRequiredError, StoreError


class _ServerTimestamp:
    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


class DocumentStore(Protocol):
    def get(self, path: str) -> dict[str, Any] | None: ...

    def set(self, path: str, data: dict[str, Any]) -> None: ...

    def update(self, path: str, data: dict[str, Any]) -> None: ...

    def add(self, collection: str, data: dict[str, Any]) -> str: ...

    def delete(self, path: str) -> None: ...

    def ordered_scan(self, collection: str, field: str, descending: bool = False) -> list[tuple[str, dict[str, Any]]]: ...

    def array_union(self, path: str, field: str, values: list[Any]) -> None: ...


def _translate_errors(fn):
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except google_exceptions.FailedPrecondition as e:
            # gRPC code 9: the query needs a composite index
            raise IndexRequiredError(str(e)) from e
        except (google_exceptions.GoogleAPICallError, google_exceptions.RetryError) as e:
            raise StoreError(getattr(e, "message", None) or str(e)) from e
    return wrapper


def _encode(data: dict[str, Any]) -> dict[str, Any]:
    return {k: firestore.SERVER_TIMESTAMP if v is SERVER_TIMESTAMP else v for k, v in data.items()}


class FirestoreStore:
    name = "firestore"

    def __init__(self, client):
        self._client = client

    @_translate_errors
    def get(self, path: str) -> dict[str, Any] | None:
        snap = self._client.document(path).get()
        if not snap.exists:
            return None
        return snap.to_dict() or {}

    @_translate_errors
    def set(self, path: str, data: dict[str, Any]) -> None:
        self._client.document(path).set(_encode(data))

    @_translate_errors
    def update(self, path: str, data: dict[str, Any]) -> None:
        self._client.document(path).update(_encode(data))

    @_translate_errors
    def add(self, collection: str, data: dict[str, Any]) -> str:
        _, ref = self._client.collection(collection).add(_encode(data))
        return ref.id

    @_translate_errors
    def delete(self, path: str) -> None:
        self._client.document(path).delete()

    @_translate_errors
    def ordered_scan(self, collection: str, field: str, descending: bool = False) -> list[tuple[str, dict[str, Any]]]:
        direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
        query = self._client.collection(collection).order_by(field, direction=direction)
        return [(snap.id, snap.to_dict() or {}) for snap in query.stream()]

    @_translate_errors
    def array_union(self, path: str, field: str, values: list[Any]) -> None:
        self._client.document(path).update({field: firestore.ArrayUnion(list(values))})
