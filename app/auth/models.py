"""Validated bearer token claim models."""

from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """Claims recovered from a verified bearer token.

    Unknown claims are dropped so callers only ever see this fixed shape.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    sub: str = Field(min_length=1)
    iat: int
    exp: int
    email: str | None = None
    role: str | None = None
