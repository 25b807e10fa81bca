import logging
from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Session, select
from ..models.Audit import AuditLog, GENESIS_HASH

logger = logging.getLogger(__name__)

def log_event(db: Session, actor_id: Optional[str], action: str, details: Optional[str] = None) -> AuditLog:
    """
    Appends a new event to the AuditLog chain.
    """
    last_entry = db.exec(select(AuditLog).order_by(AuditLog.id.desc())).first()
    previous_hash = last_entry.current_hash if last_entry else GENESIS_HASH

    new_log = AuditLog(
        actor_id=actor_id or "anonymous",
        action=action,
        details=details or "",
        previous_hash=previous_hash,
        current_hash="", # Placeholder, will be calculated
        timestamp=datetime.now(timezone.utc).replace(microsecond=0)
    )
    new_log.current_hash = new_log.calculate_hash()

    db.add(new_log)
    db.commit()
    db.refresh(new_log)
    return new_log

def get_audit_logs(db: Session) -> list[AuditLog]:
    return db.exec(select(AuditLog).order_by(AuditLog.id.asc())).all()

def validate_chain(db: Session) -> tuple[bool, Optional[int]]:
    """
    Walks the chain in insertion order and recomputes every hash.

    Returns (True, None) for an intact chain, otherwise (False, id) of the
    first entry whose stored hash or back-link does not match.
    """
    previous_hash = GENESIS_HASH
    for entry in get_audit_logs(db):
        if entry.previous_hash != previous_hash or entry.calculate_hash() != entry.current_hash:
            logger.warning("Audit chain broken at entry %s", entry.id)
            return False, entry.id
        previous_hash = entry.current_hash
    return True, None
