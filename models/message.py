from core.store import SERVER_TIMESTAMP
from models.project import project_path

COLLECTION = "messages"
ORDER_FIELD = "timestamp"


def messages_path(project_id: str) -> str:
    return f"{project_path(project_id)}/{COLLECTION}"


def message_path(project_id: str, message_id: str) -> str:
    return f"{messages_path(project_id)}/{message_id}"


def new_message(sender_id: str, content: str) -> dict:
    return {
        "senderId": sender_id,
        "content": content,
        "timestamp": SERVER_TIMESTAMP,
    }


def edit_fields(content: str) -> dict:
    return {
        "content": content,
        "edited": True,
        "editedAt": SERVER_TIMESTAMP,
    }
