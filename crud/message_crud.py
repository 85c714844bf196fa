from core.errors import ForbiddenError, NotFoundError
from core.log import get_logger
from core.store import DocumentStore
from core.timestamps import normalize_timestamp
from crud.project_crud import ensure_project_for_sender, get_project, require, require_id, require_project_id
from models.message import ORDER_FIELD, edit_fields, message_path, messages_path, new_message


logger = get_logger(__name__)


def render_message(message_id: str, data: dict) -> dict:
    """Message as returned to callers, with both timestamps normalized."""
    msg = {"id": message_id, **data}
    msg["timestamp"] = normalize_timestamp(data.get("timestamp"))
    msg["edited"] = bool(data.get("edited", False))
    msg["editedAt"] = normalize_timestamp(data.get("editedAt"))
    return msg


def _require_message_id(message_id) -> str:
    return require_id(message_id, "Message ID is required")


def _get_owned_message(store: DocumentStore, project_id: str, message_id: str, sender_id: str) -> tuple[str, dict]:
    path = message_path(project_id, message_id)
    data = store.get(path)
    if data is None:
        raise NotFoundError("Message not found")
    if data.get("senderId") != sender_id:
        raise ForbiddenError("You can only modify your own messages")
    return path, data


def list_messages(store: DocumentStore, project_id: str) -> list[dict]:
    project_id = require_project_id(project_id)
    logger.info("Loading messages for project: %s", project_id)

    if get_project(store, project_id) is None:
        logger.info("Project not found: %s", project_id)
        return []

    docs = store.ordered_scan(messages_path(project_id), ORDER_FIELD)
    messages = [render_message(doc_id, data) for doc_id, data in docs]
    logger.info("Found %d messages", len(messages))
    return messages


def send_message(store: DocumentStore, project_id: str, sender_id, content) -> dict:
    project_id = require_project_id(project_id)
    sender_id = require(sender_id, "Sender ID is required")
    content = require(content, "Message content is required")

    logger.info("Adding message to project: %s from: %s", project_id, sender_id)
    ensure_project_for_sender(store, project_id, sender_id)

    message_id = store.add(messages_path(project_id), new_message(sender_id, content))
    logger.info("Message added with ID: %s", message_id)

    # the write call never sees the store-assigned timestamp, read it back
    data = store.get(message_path(project_id, message_id))
    if data is None:
        raise NotFoundError("Message not found")
    return render_message(message_id, data)


def edit_message(store: DocumentStore, project_id: str, message_id, sender_id, content) -> dict:
    project_id = require_project_id(project_id)
    message_id = _require_message_id(message_id)
    sender_id = require(sender_id, "Sender ID is required")
    content = require(content, "Message content is required")

    logger.info("Editing message %s in project: %s by: %s", message_id, project_id, sender_id)
    path, _ = _get_owned_message(store, project_id, message_id, sender_id)
    store.update(path, edit_fields(content))

    data = store.get(path)
    if data is None:
        raise NotFoundError("Message not found")
    return render_message(message_id, data)


def delete_message(store: DocumentStore, project_id: str, message_id, sender_id) -> dict:
    project_id = require_project_id(project_id)
    message_id = _require_message_id(message_id)
    sender_id = require(sender_id, "Sender ID is required")

    logger.info("Deleting message %s in project: %s by: %s", message_id, project_id, sender_id)
    path, _ = _get_owned_message(store, project_id, message_id, sender_id)
    store.delete(path)
    logger.info("Message deleted: %s", message_id)
    return {"message": "Message deleted successfully", "messageId": message_id}
