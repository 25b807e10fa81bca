from sqlmodel import SQLModel

class RevokedTokensResponse(SQLModel):
    message: str
    count: int
    tokens: list[str]
