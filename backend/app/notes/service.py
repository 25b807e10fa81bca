from uuid import UUID
from fastapi import HTTPException, status
from sqlmodel import Session
from ..models.JWTAuthToken import SessionClaims
from ..models.Note import Note, NoteCreate, NoteUpdate
from ..models.Role import Role

def can_access_note(claims: SessionClaims, note: Note) -> bool:
    # Readers and Editors only see their own notes
    return claims.role == Role.ADMIN or str(note.user_id) == claims.sub

def create_note(session: Session, owner_id: UUID, note: NoteCreate) -> Note:
    db_note = Note(title=note.title, content=note.content, user_id=owner_id)
    session.add(db_note)
    session.commit()
    session.refresh(db_note)
    return db_note

def get_note_for(session: Session, claims: SessionClaims, note_id: UUID) -> Note:
    note = session.get(Note, note_id)
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    if not can_access_note(claims, note):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to access this note")
    return note

def update_note(session: Session, note: Note, update_data: NoteUpdate) -> Note:
    note.title = update_data.title
    note.content = update_data.content
    session.add(note)
    session.commit()
    session.refresh(note)
    return note

def delete_note(session: Session, note_id: UUID):
    note = session.get(Note, note_id)
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    session.delete(note)
    session.commit()
