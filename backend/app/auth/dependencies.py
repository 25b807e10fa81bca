import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from ..audit.service import log_event
from ..core.database import get_session
from ..models.JWTAuthToken import SessionClaims
from ..models.Role import Role
from .errors import TokenRevoked, VerificationFailure
from .revocation import RevocationRegistry
from .tokens import TokenService

logger = logging.getLogger(__name__)

# auto_error=False so anonymous requests reach optional endpoints
bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHENTICATED_DETAIL = "Invalid token. Please log in again."


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_revocation_registry(request: Request) -> RevocationRegistry:
    return request.app.state.revocation_registry


def authenticate_token(
    raw_token: str,
    token_service: TokenService,
    registry: RevocationRegistry,
) -> SessionClaims | VerificationFailure | TokenRevoked:
    """
    Stateless verification first; the registry is consulted only for a token
    that is authentic and still alive.
    """
    result = token_service.verify(raw_token)
    if isinstance(result, VerificationFailure):
        return result
    if result.jti and registry.is_revoked(result.jti):
        return TokenRevoked(result.jti)
    return result


def unauthenticated_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_optional_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
    registry: Annotated[RevocationRegistry, Depends(get_revocation_registry)],
    session: Session = Depends(get_session),
) -> SessionClaims | None:
    """
    Request gate. No bearer token means an anonymous caller; a token that is
    present must be valid and not revoked.
    """
    if credentials is None:
        return None

    outcome = authenticate_token(credentials.credentials, token_service, registry)
    if isinstance(outcome, SessionClaims):
        request.state.claims = outcome
        return outcome

    logger.info("Rejected bearer token on %s %s: %s", request.method, request.url.path, outcome.reason.value)
    log_event(session, None, f"{request.method} {request.url.path} {status.HTTP_401_UNAUTHORIZED} - token rejected", outcome.reason.value)
    raise unauthenticated_exception()


async def get_current_claims(
    claims: Annotated[SessionClaims | None, Depends(get_optional_claims)],
) -> SessionClaims:
    if claims is None:
        raise unauthenticated_exception()
    return claims


def require_roles(*roles: Role):
    """
    Dependency factory: lets through authenticated callers holding one of roles.
    """
    allowed = frozenset(roles)

    async def check_role(claims: Annotated[SessionClaims, Depends(get_current_claims)]) -> SessionClaims:
        if claims.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Not enough privileges"
            )
        return claims

    return check_role
