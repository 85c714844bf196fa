from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from core.errors import IndexRequiredError, StoreError
from core.store import SERVER_TIMESTAMP, FirestoreStore


@pytest.fixture
def fs_client():
    return MagicMock()


def test_get_missing_document(fs_client):
    fs_client.document.return_value.get.return_value.exists = False
    assert FirestoreStore(fs_client).get("projects/p1") is None
    fs_client.document.assert_called_with("projects/p1")


def test_server_timestamp_is_translated(fs_client):
    FirestoreStore(fs_client).set("projects/p1", {"participants": ["a"], "createdAt": SERVER_TIMESTAMP})
    fs_client.document.return_value.set.assert_called_once_with(
        {"participants": ["a"], "createdAt": firestore.SERVER_TIMESTAMP}
    )


def test_add_returns_generated_id(fs_client):
    ref = MagicMock()
    ref.id = "abc"
    fs_client.collection.return_value.add.return_value = (None, ref)
    assert FirestoreStore(fs_client).add("projects/p1/messages", {"content": "hi"}) == "abc"


def test_array_union(fs_client):
    FirestoreStore(fs_client).array_union("projects/p1", "participants", ["bob"])
    sent = fs_client.document.return_value.update.call_args.args[0]
    assert isinstance(sent["participants"], firestore.ArrayUnion)
    assert sent["participants"].values == ["bob"]


def test_failed_precondition_means_index_required(fs_client):
    fs_client.collection.return_value.order_by.return_value.stream.side_effect = (
        google_exceptions.FailedPrecondition("The query requires an index")
    )
    with pytest.raises(IndexRequiredError):
        FirestoreStore(fs_client).ordered_scan("projects/p1/messages", "timestamp")


def test_other_api_errors_become_store_errors(fs_client):
    fs_client.document.return_value.get.side_effect = google_exceptions.ServiceUnavailable("down")
    with pytest.raises(StoreError) as exc_info:
        FirestoreStore(fs_client).get("projects/p1")
    assert not isinstance(exc_info.value, IndexRequiredError)
    assert exc_info.value.message == "Server error: down"
