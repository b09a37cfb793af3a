"""JWT verification service."""

from __future__ import annotations

from authlib.jose import JoseError, JsonWebToken
from loguru import logger

from src.bookservice.core.security import Principal
from src.bookservice.core.services.jwt.jwt_utils import extract_claim_set
from src.bookservice.runtime.config.config_data import JWTConfig

MAX_JWT_CHARS = 4096


class InvalidTokenError(Exception):
    """Raised when a bearer token fails verification."""


class JwtVerificationService:
    """Verifies symmetric-key bearer tokens and maps them to principals.

    Signature, issuer, audience and expiry are checked; ``exp`` is required.
    """

    def __init__(self, config: JWTConfig) -> None:
        self._config = config
        self._jwt = JsonWebToken(config.allowed_algorithms)

    def verify_jwt(self, token: str) -> Principal:
        if not token or len(token) > MAX_JWT_CHARS:
            raise InvalidTokenError("Invalid JWT size")

        claims_options = {
            "iss": {"essential": True, "value": self._config.issuer},
            "aud": {"essential": True, "value": self._config.audience},
            "exp": {"essential": True},
        }
        try:
            claims = self._jwt.decode(
                token, self._config.secret, claims_options=claims_options
            )
            claims.validate(leeway=self._config.clock_skew)
        except (JoseError, ValueError) as exc:
            raise InvalidTokenError(f"JWT error: {exc}") from exc

        subject = claims.get("sub")
        logger.debug("Verified token for subject {}", subject)
        return Principal(
            subject=str(subject) if subject is not None else None,
            claims=extract_claim_set(dict(claims)),
        )
