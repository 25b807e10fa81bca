import logging
from datetime import datetime, timezone

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core.settings import settings
from ..models.JWTAuthToken import SessionClaims, Token
from ..models.Role import Role
from ..models.User import User, UserResponse, username_key
from .errors import DuplicateIdentity, InvalidCredentials, MissingTokenId
from .revocation import RevocationRegistry
from .tokens import TokenService

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=settings.ARGON2_TIME_COST,
    argon2__memory_cost=settings.ARGON2_MEMORY_COST,
    argon2__parallelism=settings.ARGON2_PARALLELISM
)

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password + settings.PASSWORD_PEPPER, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password + settings.PASSWORD_PEPPER)

def to_identity(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username, role=user.role)

def find_user_by_username(session: Session, username: str) -> User | None:
    statement = select(User).where(User.username_key == username_key(username))
    return session.exec(statement).first()

def register_user(session: Session, username: str, password: str, role: Role) -> UserResponse | DuplicateIdentity:
    """
    Stores a new identity. Usernames are unique regardless of case.
    """
    if not username_key(username):
        raise ValueError("username must not be blank")
    if find_user_by_username(session, username):
        return DuplicateIdentity(username)

    db_user = User(
        username=username.strip(),
        username_key=username_key(username),
        hashed_password=get_password_hash(password),
        role=Role(role)
    )
    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        # a concurrent registration won the unique index
        session.rollback()
        return DuplicateIdentity(username)
    session.refresh(db_user)
    logger.info("Registered user %s with role %s", db_user.username, db_user.role.value)
    return to_identity(db_user)

def authenticate_user(session: Session, username: str, password: str) -> User | None:
    user = find_user_by_username(session, username)
    if not user:
        # same hashing cost as a wrong password, so timing does not reveal the username
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user

def login(session: Session, token_service: TokenService, username: str, password: str) -> Token | InvalidCredentials:
    user = authenticate_user(session, username, password)
    if not user:
        logger.info("Failed login attempt for %s", username)
        return InvalidCredentials()

    identity = to_identity(user)
    token, expires_at = token_service.mint_token(identity)
    logger.info("Issued session for %s, expires at %s", identity.username, expires_at.isoformat())
    return Token(
        token=token,
        expires_at_utc=expires_at,
        username=identity.username,
        role=identity.role
    )

def logout(registry: RevocationRegistry, claims: SessionClaims) -> str | MissingTokenId:
    """
    Revokes the token the claims came from until its own expiry.
    Returns the revoked token id.
    """
    if not claims.jti:
        return MissingTokenId()
    registry.add(claims.jti, datetime.fromtimestamp(claims.exp, tz=timezone.utc))
    logger.info("Revoked token %s for %s", claims.jti, claims.username)
    return claims.jti
