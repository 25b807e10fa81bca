from typing import Annotated
from uuid import UUID
from fastapi import APIRouter, Depends, status
import http
from sqlmodel import Session
from ..core.database import get_session
from ..audit.service import log_event
from ..auth.dependencies import get_current_claims, require_roles
from ..models.JWTAuthToken import SessionClaims
from ..models.Note import NoteCreate, NoteUpdate, NoteResponse, NoteUpdateResponse
from ..models.Role import Role
from .service import create_note, get_note_for, update_note, delete_note

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])

@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_new_note(
    note: NoteCreate,
    claims: Annotated[SessionClaims, Depends(require_roles(Role.EDITOR, Role.ADMIN))],
    session: Session = Depends(get_session)
):
    """
    Create a note owned by the caller (Editor or Admin).
    """
    db_note = create_note(session, UUID(claims.sub), note)
    # build the response before log_event commits and expires db_note
    response = NoteResponse(**db_note.model_dump())
    action = f"POST /notes {status.HTTP_201_CREATED} {http.HTTPStatus(status.HTTP_201_CREATED).phrase}"
    log_event(session, claims.sub, action, f"Note {response.id} created")
    return response

@router.get("/{note_id}", response_model=NoteResponse)
async def read_note(
    note_id: UUID,
    claims: Annotated[SessionClaims, Depends(get_current_claims)],
    session: Session = Depends(get_session)
):
    """
    Get a note. Admins see every note, everybody else only their own.
    """
    return get_note_for(session, claims, note_id)

@router.put("/{note_id}", response_model=NoteUpdateResponse)
async def update_existing_note(
    note_id: UUID,
    update_data: NoteUpdate,
    claims: Annotated[SessionClaims, Depends(require_roles(Role.EDITOR, Role.ADMIN))],
    session: Session = Depends(get_session)
):
    """
    Update a note (Editor on own notes, Admin on any).
    """
    note = get_note_for(session, claims, note_id)
    note = update_note(session, note, update_data)
    response = NoteUpdateResponse(message="Note updated successfully.", note=NoteResponse(**note.model_dump()))
    action = f"PUT /notes/{note_id} {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, claims.sub, action, "Note updated successfully")
    return response

@router.delete("/{note_id}")
async def remove_note(
    note_id: UUID,
    claims: Annotated[SessionClaims, Depends(require_roles(Role.ADMIN))],
    session: Session = Depends(get_session)
):
    """
    Delete a note (Admin only).
    """
    delete_note(session, note_id)
    action = f"DELETE /notes/{note_id} {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, claims.sub, action, "Note deleted successfully")
    return {"message": "Note deleted successfully."}
