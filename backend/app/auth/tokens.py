import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import JWTError, jwt

from ..core.settings import Settings
from ..models.JWTAuthToken import SessionClaims
from ..models.Role import Role
from ..models.User import UserResponse
from .errors import VerificationFailure, VerificationReason

logger = logging.getLogger(__name__)

# Signature only; issuer, audience and lifetime are checked below in a fixed order
_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_aud": False,
    "verify_iss": False,
    "verify_iat": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Mints and verifies session tokens.

    Holds only immutable configuration and a clock, so one instance is shared
    by every request.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        expires_minutes: int = 60,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self.expires_minutes = expires_minutes
        self.algorithm = algorithm
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = utc_now) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            expires_minutes=settings.JWT_EXPIRES_MINUTES,
            algorithm=settings.JWT_ALGORITHM,
            clock=clock,
        )

    def mint_token(self, identity: UserResponse) -> tuple[str, datetime]:
        """
        Builds and signs the claims for identity. Returns the compact token and
        its absolute expiry (UTC).
        """
        issued_at = int(self.clock().timestamp())
        expires_at = datetime.fromtimestamp(issued_at, tz=timezone.utc) + timedelta(minutes=self.expires_minutes)
        claims = {
            "sub": str(identity.id),
            "unique_name": identity.username,
            "role": Role(identity.role).value,
            "jti": str(uuid.uuid4()),
            "iss": self.issuer,
            "aud": self.audience,
            "iat": issued_at,
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self.secret, algorithm=self.algorithm)
        return token, expires_at

    def verify(self, raw_token: str) -> SessionClaims | VerificationFailure:
        try:
            jwt.get_unverified_claims(raw_token)
        except JWTError:
            return VerificationFailure(VerificationReason.MALFORMED)

        try:
            claims = jwt.decode(raw_token, self.secret, algorithms=[self.algorithm], options=_DECODE_OPTIONS)
        except JWTError:
            return VerificationFailure(VerificationReason.BAD_SIGNATURE)

        if claims.get("iss") != self.issuer:
            return VerificationFailure(VerificationReason.WRONG_ISSUER)

        audience = claims.get("aud")
        audiences = audience if isinstance(audience, list) else [audience]
        if self.audience not in audiences:
            return VerificationFailure(VerificationReason.WRONG_AUDIENCE)

        issued_at, expires_at = claims.get("iat"), claims.get("exp")
        if not _is_timestamp(issued_at) or not _is_timestamp(expires_at):
            return VerificationFailure(VerificationReason.MALFORMED)

        # zero clock skew: a token is dead the instant it reaches exp
        now = self.clock().timestamp()
        if now < issued_at:
            return VerificationFailure(VerificationReason.NOT_YET_VALID)
        if now >= expires_at:
            return VerificationFailure(VerificationReason.EXPIRED)

        subject, username = claims.get("sub"), claims.get("unique_name")
        if not isinstance(subject, str) or not subject or not isinstance(username, str) or not username:
            return VerificationFailure(VerificationReason.MALFORMED)

        try:
            role = Role(claims.get("role"))
        except ValueError:
            logger.debug("Rejecting token with unknown role claim")
            return VerificationFailure(VerificationReason.MALFORMED)

        token_id = claims.get("jti")
        return SessionClaims(
            sub=subject,
            username=username,
            role=role,
            jti=str(token_id) if token_id else None,
            iss=self.issuer,
            aud=self.audience,
            iat=int(issued_at),
            exp=int(expires_at),
        )


def _is_timestamp(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
