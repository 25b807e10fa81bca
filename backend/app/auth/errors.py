"""
Outcome values for the expected failure paths of authentication.

Services return these instead of raising; routers and dependencies map them
onto HTTP responses. Reason codes stay internal and are only logged.
"""
from dataclasses import dataclass
from enum import Enum


class VerificationReason(str, Enum):
    BAD_SIGNATURE = "BadSignature"
    WRONG_ISSUER = "WrongIssuer"
    WRONG_AUDIENCE = "WrongAudience"
    EXPIRED = "Expired"
    NOT_YET_VALID = "NotYetValid"
    MALFORMED = "Malformed"
    REVOKED = "Revoked"


@dataclass(frozen=True)
class DuplicateIdentity:
    username: str


@dataclass(frozen=True)
class InvalidCredentials:
    pass


@dataclass(frozen=True)
class VerificationFailure:
    reason: VerificationReason


@dataclass(frozen=True)
class TokenRevoked:
    token_id: str

    @property
    def reason(self) -> VerificationReason:
        return VerificationReason.REVOKED


@dataclass(frozen=True)
class MissingTokenId:
    pass
