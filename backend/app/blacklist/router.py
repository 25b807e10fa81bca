from typing import Annotated
from fastapi import APIRouter, Depends
from ..auth.dependencies import get_revocation_registry, require_roles
from ..auth.revocation import RevocationRegistry
from ..models.JWTAuthToken import SessionClaims
from ..models.JWTRevocationToken import RevokedTokensResponse
from ..models.Role import Role

router = APIRouter(prefix="/api/v1/blacklist", tags=["blacklist"])

@router.get("", response_model=RevokedTokensResponse)
async def list_revoked_tokens(
    registry: Annotated[RevocationRegistry, Depends(get_revocation_registry)],
    current_admin: Annotated[SessionClaims, Depends(require_roles(Role.ADMIN))]
):
    """
    List the ids (jti) of tokens revoked by logout that have not expired yet (Admin only).
    """
    tokens = registry.list_active()
    return RevokedTokensResponse(
        message="Tokens currently revoked.",
        count=len(tokens),
        tokens=tokens
    )
