from pydantic import BaseModel


class ProjectInit(BaseModel):
    """Body of POST /projects/{id}/init. An omitted or empty roster means the default one."""
    participants: list[str] | None = None


class ParticipantsResponse(BaseModel):
    participants: list[str]


class ProjectInitResponse(BaseModel):
    message: str
    projectId: str
    participants: list[str]
