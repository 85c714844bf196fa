import pytest

from core.errors import ValidationError
from crud.message_crud import send_message
from crud.project_crud import ensure_project_for_sender, get_participants, init_project


def test_first_send_creates_project(store):
    ensure_project_for_sender(store, "p1", "alice")
    doc = store.docs["projects/p1"]
    assert doc["participants"] == ["alice"]
    assert doc["createdAt"] is not None


def test_new_sender_appended_once(store):
    ensure_project_for_sender(store, "p1", "alice")
    ensure_project_for_sender(store, "p1", "bob")
    ensure_project_for_sender(store, "p1", "bob")
    ensure_project_for_sender(store, "p1", "alice")
    assert get_participants(store, "p1") == ["alice", "bob"]


def test_known_sender_does_not_write(store):
    ensure_project_for_sender(store, "p1", "alice")
    store.calls.clear()
    ensure_project_for_sender(store, "p1", "alice")
    assert store.writes == []


def test_roster_uses_trimmed_sender(store):
    send_message(store, "p1", "  alice ", "hi")
    send_message(store, "p1", "alice", "again")
    assert get_participants(store, "p1") == ["alice"]


def test_participants_of_unknown_project_is_empty(store):
    assert get_participants(store, "nope") == []


def test_init_with_roster_replaces_previous(store):
    send_message(store, "p1", "carol", "hello")
    result = init_project(store, "p1", ["a", "b"])
    assert result == {"message": "Project initialized successfully", "projectId": "p1", "participants": ["a", "b"]}
    assert get_participants(store, "p1") == ["a", "b"]
    assert store.docs["projects/p1"]["description"] == "Test project created via API"


def test_init_defaults_roster(store):
    assert init_project(store, "p1")["participants"] == ["user1", "user2", "admin"]
    assert init_project(store, "p2", [])["participants"] == ["user1", "user2", "admin"]


def test_init_cleans_roster(store):
    result = init_project(store, "p1", [" a ", "b", "a", "  "])
    assert result["participants"] == ["a", "b"]


def test_init_is_repeatable(store):
    init_project(store, "p1", ["a"])
    init_project(store, "p1", ["a"])
    assert get_participants(store, "p1") == ["a"]


def test_send_after_init_extends_roster(store):
    init_project(store, "p1", ["a", "b"])
    send_message(store, "p1", "c", "hello")
    assert get_participants(store, "p1") == ["a", "b", "c"]


@pytest.mark.parametrize("project_id", ["", "   ", None])
def test_blank_project_id_rejected_without_io(store, project_id):
    with pytest.raises(ValidationError):
        get_participants(store, project_id)
    with pytest.raises(ValidationError):
        init_project(store, project_id, ["a"])
    with pytest.raises(ValidationError):
        ensure_project_for_sender(store, project_id, "alice")
    assert store.calls == []


def test_create_returns_written_project(store):
    created = ensure_project_for_sender(store, "p1", "alice")
    assert created["participants"] == ["alice"]
    assert "createdAt" in created
    appended = ensure_project_for_sender(store, "p1", "bob")
    assert set(created) <= set(appended)


def test_project_id_is_kept_verbatim(store):
    ensure_project_for_sender(store, " p1 ", "alice")
    assert list(store.docs) == ["projects/ p1 "]
    assert get_participants(store, "p1") == []
