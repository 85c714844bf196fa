from core.config import settings
from core.errors import ValidationError
from core.log import get_logger
from core.store import DocumentStore
from models.project import new_project, project_path


logger = get_logger(__name__)


def require_id(value, message: str) -> str:
    """``value`` unchanged, or ValidationError when it is missing or blank.

    Ids are opaque store keys, so " p1" and "p1" stay distinct.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value


def require(value, message: str) -> str:
    """Trimmed ``value``, or ValidationError when it is missing or blank."""
    return require_id(value, message).strip()


def require_project_id(project_id) -> str:
    return require_id(project_id, "Project ID is required")


def get_project(store: DocumentStore, project_id: str):
    return store.get(project_path(project_id))


def ensure_project_for_sender(store: DocumentStore, project_id: str, sender_id: str) -> dict:
    project_id = require_project_id(project_id)
    sender_id = require(sender_id, "Sender ID is required")
    path = project_path(project_id)

    project = store.get(path)
    if project is None:
        # two first sends racing here both overwrite; the later one wins
        logger.info("Creating new project: %s", project_id)
        project = new_project([sender_id])
        store.set(path, project)
        return project

    participants = list(project.get("participants") or [])
    if sender_id not in participants:
        store.array_union(path, "participants", [sender_id])
        participants.append(sender_id)
        project["participants"] = participants
    return project


def get_participants(store: DocumentStore, project_id: str) -> list[str]:
    project_id = require_project_id(project_id)
    logger.info("Loading participants for project: %s", project_id)
    project = get_project(store, project_id)
    if project is None:
        logger.info("Project not found: %s", project_id)
        return []
    participants = list(project.get("participants") or [])
    logger.info("Found %d participants", len(participants))
    return participants


def _clean_roster(participants: list[str] | None) -> list[str]:
    roster: list[str] = []
    for p in participants or []:
        if not isinstance(p, str) or not p.strip():
            continue
        p = p.strip()
        if p not in roster:
            roster.append(p)
    return roster


def init_project(store: DocumentStore, project_id: str, participants: list[str] | None = None) -> dict:
    project_id = require_project_id(project_id)
    roster = _clean_roster(participants) or list(settings.DEFAULT_PARTICIPANTS)

    logger.info("Initializing test project: %s", project_id)
    store.set(project_path(project_id), new_project(roster, description=settings.INIT_DESCRIPTION))
    logger.info("Test project created: %s", project_id)
    return {
        "message": "Project initialized successfully",
        "projectId": project_id,
        "participants": roster,
    }
