from datetime import datetime
from sqlmodel import SQLModel
from .Role import Role

class Token(SQLModel):
    token: str # JWT Token
    token_type: str = "bearer"
    expires_at_utc: datetime
    username: str
    role: Role

class SessionClaims(SQLModel):
    sub: str # User ID
    username: str
    role: Role
    jti: str | None = None # Token ID, used for revocation
    iss: str
    aud: str
    iat: int # Issued at time
    exp: int # Expiration time
