from datetime import datetime, timezone
from uuid import UUID, uuid4
from sqlmodel import Field, SQLModel

class Note(SQLModel, table=True):
    __tablename__ = "notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=120)
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: UUID = Field(foreign_key="users.id", index=True)

class NoteCreate(SQLModel):
    title: str = Field(min_length=1, max_length=120)
    content: str = Field(min_length=1)

class NoteUpdate(SQLModel):
    title: str = Field(min_length=1, max_length=120)
    content: str = Field(min_length=1)

class NoteResponse(SQLModel):
    id: UUID
    title: str
    content: str
    created_at: datetime
    user_id: UUID

class NoteUpdateResponse(SQLModel):
    message: str
    note: NoteResponse
