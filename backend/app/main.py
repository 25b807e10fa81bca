import logging
from contextlib import asynccontextmanager
from typing import Annotated
from fastapi import Depends, FastAPI
from .core.database import create_db_and_tables
from .core.settings import settings
from .models.User import User # Import models to register them with SQLModel
from .models.Note import Note
from .models.Audit import AuditLog
from .models.JWTAuthToken import SessionClaims
from .core.init_db import init_db
from .auth.dependencies import get_optional_claims
from .auth.revocation import InMemoryRevocationRegistry
from .auth.tokens import TokenService

from .auth.router import router as auth_router
from .notes.router import router as notes_router
from .blacklist.router import router as blacklist_router
from .audit.router import router as audit_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    init_db()
    # Lives for the whole process; every request shares these two instances
    app.state.token_service = TokenService.from_settings(settings)
    app.state.revocation_registry = InMemoryRevocationRegistry()
    logger.info("%s started, tokens expire after %s minutes", settings.PROJECT_NAME, settings.JWT_EXPIRES_MINUTES)
    yield



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.include_router(auth_router)
app.include_router(notes_router)
app.include_router(blacklist_router)
app.include_router(audit_router)

@app.get("/")
def read_root(claims: Annotated[SessionClaims | None, Depends(get_optional_claims)]):
    if claims is None:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}
    return {"message": f"Welcome to {settings.PROJECT_NAME}, {claims.username}"}
