from uuid import UUID, uuid4
from pydantic import field_validator
from sqlmodel import Field, SQLModel
from .Role import Role

# ==========================================
# SQLModel (Database Entity + Base Pydantic)
# ==========================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(nullable=False)
    # casefolded username; the unique index makes registration check-and-insert atomic
    username_key: str = Field(unique=True, index=True, nullable=False)
    hashed_password: str = Field(nullable=False)
    role: Role = Field(nullable=False)

def username_key(username: str) -> str:
    return username.strip().casefold()

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on registration
class UserRegister(SQLModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=6)
    role: Role

    # length limits apply to the stored (stripped) form
    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return value.strip() if isinstance(value, str) else value

# Properties to receive via API on login
class LoginRequest(SQLModel):
    username: str
    password: str

# Properties to return via API (never the password hash)
class UserResponse(SQLModel):
    id: UUID
    username: str
    role: Role

class RegisterResponse(SQLModel):
    message: str
    user: UserResponse
