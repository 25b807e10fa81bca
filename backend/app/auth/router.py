import http
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from ..core.database import get_session
from ..models.User import UserRegister, LoginRequest, RegisterResponse
from ..models.JWTAuthToken import SessionClaims, Token
from ..audit.service import log_event
from .dependencies import get_current_claims, get_revocation_registry, get_token_service
from .errors import DuplicateIdentity, InvalidCredentials, MissingTokenId
from .revocation import RevocationRegistry
from .service import register_user, login as login_user, logout as logout_session
from .tokens import TokenService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(register_data: UserRegister, session: Session = Depends(get_session)):
    """
    Register a new user with a role (Reader, Editor or Admin).
    """
    result = register_user(session, register_data.username, register_data.password, register_data.role)

    if isinstance(result, DuplicateIdentity):
        action = f"POST /register {status.HTTP_400_BAD_REQUEST} - Username already registered"
        log_event(session, None, action, result.username)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already registered")

    action = f"POST /register {status.HTTP_201_CREATED} {http.HTTPStatus(status.HTTP_201_CREATED).phrase}"
    log_event(session, str(result.id), action, "User registered successfully")
    return RegisterResponse(message="User registered successfully.", user=result)

@router.post("/login", response_model=Token)
def login(
    login_data: LoginRequest,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    session: Session = Depends(get_session)
):
    """
    Login with username and password to get an access token.
    """
    result = login_user(session, token_service, login_data.username, login_data.password)

    if isinstance(result, InvalidCredentials):
        action = f"POST /login {status.HTTP_401_UNAUTHORIZED} - {http.HTTPStatus(status.HTTP_401_UNAUTHORIZED).phrase}"
        log_event(session, None, action, "Incorrect username or password")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    action = f"POST /login {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, None, action, f"Login successful for {result.username}")
    return result


@router.post("/logout")
async def logout(
    claims: Annotated[SessionClaims, Depends(get_current_claims)],
    registry: Annotated[RevocationRegistry, Depends(get_revocation_registry)],
    session: Session = Depends(get_session)
):
    """
    Logout the current session. The bearer token is revoked until it expires.
    """
    result = logout_session(registry, claims)

    if isinstance(result, MissingTokenId):
        action = f"POST /logout {status.HTTP_400_BAD_REQUEST} - Token has no jti"
        log_event(session, claims.sub, action)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid token.")

    action = f"POST /logout {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, claims.sub, action, "Logged out successfully")
    return {"message": "Logged out successfully. Token revoked."}
