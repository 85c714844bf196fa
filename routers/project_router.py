from fastapi import APIRouter, Depends
from core.database import get_store
from core.store import DocumentStore
from crud.project_crud import get_participants, init_project
from schemas.project_schema import ParticipantsResponse, ProjectInit, ProjectInitResponse


router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("/{project_id}/participants", response_model=ParticipantsResponse)
def list_participants(project_id: str, store: DocumentStore = Depends(get_store)):
    return {"participants": get_participants(store, project_id)}


@router.post("/{project_id}/init", response_model=ProjectInitResponse)
def init(project_id: str, payload: ProjectInit | None = None, store: DocumentStore = Depends(get_store)):
    participants = payload.participants if payload is not None else None
    return init_project(store, project_id, participants)
