"""Bearer token signing and verification with a shared secret."""

import logging
from datetime import datetime, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from .models import TokenClaims

logger = logging.getLogger(__name__)

MIN_SECRET_LENGTH = 10
DEFAULT_EXPIRES_IN_SECONDS = 3600


class JwtTokenService:
    """Sign and verify HMAC bearer tokens.

    Verification failures are reported as `None`, never as exceptions.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        default_expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS,
    ):
        """Initialize token service.

        Args:
            secret: Shared signing secret.
            algorithm: HMAC signing algorithm name.
            default_expires_in_seconds: Lifetime applied when a caller gives none.

        Raises:
            ValueError: Raised when the secret is too short or the lifetime is not positive.
        """

        if secret is None or len(secret) < MIN_SECRET_LENGTH:
            raise ValueError(f"secret must be at least {MIN_SECRET_LENGTH} characters long")
        if default_expires_in_seconds <= 0:
            raise ValueError("default_expires_in_seconds must be positive")
        self._secret = secret
        self._algorithm = algorithm
        self._default_expires_in_seconds = default_expires_in_seconds

    def auth_generate_token(
        self,
        subject: str,
        email: str | None = None,
        role: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> str:
        """Sign a token for one subject.

        Args:
            subject: Token subject, stored in the `sub` claim.
            email: Optional email claim.
            role: Optional role claim.
            expires_in_seconds: Optional lifetime override.

        Returns:
            str: Compact JWS string.

        Raises:
            ValueError: Raised when subject is blank or the lifetime is not positive.
        """

        if not subject or not subject.strip():
            raise ValueError("subject must not be blank")
        lifetime_seconds = self._default_expires_in_seconds if expires_in_seconds is None else expires_in_seconds
        if lifetime_seconds <= 0:
            raise ValueError("expires_in_seconds must be positive")

        issued_at = int(datetime.now(timezone.utc).timestamp())
        claims: dict[str, Any] = {
            "sub": subject.strip(),
            "iat": issued_at,
            "exp": issued_at + lifetime_seconds,
        }
        if email is not None:
            claims["email"] = email
        if role is not None:
            claims["role"] = role
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def auth_verify_token(self, token: str) -> TokenClaims | None:
        """Verify signature and expiry, then validate claim shape.

        Args:
            token: Compact JWS string.

        Returns:
            TokenClaims | None: Validated claims, or None when the token is not acceptable.
        """

        if not token:
            return None

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.debug("Token rejected: expired")
            return None
        except JWTError as error:
            logger.debug("Token rejected: %s", error)
            return None

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as error:
            logger.debug("Token rejected: unexpected claim shape (%s)", error.error_count())
            return None
