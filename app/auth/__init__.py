"""Token utility package for bearer token signing and verification."""

from .models import TokenClaims
from .tokens import JwtTokenService

__all__ = ["JwtTokenService", "TokenClaims"]
