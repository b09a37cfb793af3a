import time
from typing import Any

from authlib.jose import jwt

from src.bookservice.runtime.config.config_data import JWTConfig


def make_token(
    jwt_config: JWTConfig,
    claims: dict[str, Any] | None = None,
    *,
    subject: str = "user-123",
    expires_in: int = 3600,
    secret: str | None = None,
    issuer: str | None = None,
    audience: str | None = None,
    algorithm: str = "HS256",
) -> str:
    """Sign a test token the way the identity provider would."""
    now = int(time.time())
    payload = {
        "iss": issuer or jwt_config.issuer,
        "aud": audience or jwt_config.audience,
        "sub": subject,
        "iat": now,
        "exp": now + expires_in,
    }
    payload.update(claims or {})
    token = jwt.encode({"alg": algorithm}, payload, secret or jwt_config.secret)
    return token.decode("utf-8")
