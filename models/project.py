from core.store import SERVER_TIMESTAMP

COLLECTION = "projects"


def project_path(project_id: str) -> str:
    return f"{COLLECTION}/{project_id}"


def new_project(participants: list[str], description: str | None = None) -> dict:
    doc = {
        "participants": list(participants),
        "createdAt": SERVER_TIMESTAMP,
    }
    if description is not None:
        doc["description"] = description
    return doc
