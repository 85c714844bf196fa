from pydantic import BaseModel, Field


class Timestamp(BaseModel):
    seconds: int = Field(alias="_seconds")
    nanoseconds: int = Field(alias="_nanoseconds")

    model_config = {"populate_by_name": True}


class MessageCreate(BaseModel):
    # blank or missing values are rejected by the crud layer with a 400
    sender_id: str | None = Field(default=None, alias="senderId")
    content: str | None = None

    model_config = {"populate_by_name": True}


class MessageUpdate(MessageCreate):
    pass


class MessageResponse(BaseModel):
    id: str
    # stored documents are rendered as found, a missing field comes back empty
    sender_id: str = Field(default="", alias="senderId")
    content: str = ""
    timestamp: Timestamp | None = None
    edited: bool = False
    edited_at: Timestamp | None = Field(default=None, alias="editedAt")

    model_config = {
        "populate_by_name": True,
    }


class MessageDeleted(BaseModel):
    message: str
    messageId: str
