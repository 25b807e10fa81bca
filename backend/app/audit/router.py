from typing import Annotated, List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from ..core.database import get_session
from ..auth.dependencies import require_roles
from ..models.Audit import AuditLog, AuditChainStatus
from ..models.JWTAuthToken import SessionClaims
from ..models.Role import Role
from .service import get_audit_logs, validate_chain

router = APIRouter(
    prefix="/api/v1/audit",
    tags=["audit"],
)

@router.get("/log", response_model=List[AuditLog])
def read_audit_logs(
    current_admin: Annotated[SessionClaims, Depends(require_roles(Role.ADMIN))],
    session: Session = Depends(get_session)
):
    return get_audit_logs(session)

@router.get("/verify", response_model=AuditChainStatus)
def verify_audit_chain(
    current_admin: Annotated[SessionClaims, Depends(require_roles(Role.ADMIN))],
    session: Session = Depends(get_session)
):
    is_valid, broken_id = validate_chain(session)
    return AuditChainStatus(valid=is_valid, broken_id=broken_id, entries=len(get_audit_logs(session)))
