from fastapi import APIRouter, Depends, Query
from core.database import get_store
from core.store import DocumentStore
from crud.message_crud import list_messages, send_message, edit_message, delete_message
from schemas.message_schema import MessageCreate, MessageDeleted, MessageResponse, MessageUpdate


router = APIRouter(prefix="/projects", tags=["Messages"])


@router.get("/{project_id}/messages", response_model=list[MessageResponse])
def list_all(project_id: str, store: DocumentStore = Depends(get_store)):
    return list_messages(store, project_id)


@router.post("/{project_id}/messages", response_model=MessageResponse)
def create(project_id: str, payload: MessageCreate | None = None, store: DocumentStore = Depends(get_store)):
    payload = payload or MessageCreate()
    return send_message(store, project_id, payload.sender_id, payload.content)


@router.put("/{project_id}/messages/{message_id}", response_model=MessageResponse)
def update(project_id: str, message_id: str, payload: MessageUpdate | None = None, store: DocumentStore = Depends(get_store)):
    payload = payload or MessageUpdate()
    return edit_message(store, project_id, message_id, payload.sender_id, payload.content)


@router.delete("/{project_id}/messages/{message_id}", response_model=MessageDeleted)
def delete(
    project_id: str,
    message_id: str,
    sender_id: str | None = Query(default=None, alias="senderId"),
    store: DocumentStore = Depends(get_store),
):
    return delete_message(store, project_id, message_id, sender_id)
