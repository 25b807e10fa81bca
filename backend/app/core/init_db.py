import logging
from sqlmodel import Session
from .database import engine
from .settings import settings
from ..auth.errors import DuplicateIdentity
from ..auth.service import register_user
from ..models.Role import Role
from ..models.User import UserRegister

logger = logging.getLogger(__name__)

def init_db():
    if not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_PASSWORD not set, skipping admin seeding")
        return

    # same limits as POST /register; a bad admin account aborts startup
    admin = UserRegister(username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD, role=Role.ADMIN)

    with Session(engine) as session:
        result = register_user(session, admin.username, admin.password, admin.role)
        if isinstance(result, DuplicateIdentity):
            logger.info("Admin user already exists.")
        else:
            logger.info("Created initial admin user: %s", result.username)
