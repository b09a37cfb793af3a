"""Helpers for turning verified JWT payloads into claim sets."""

from typing import Any, Final

from src.bookservice.core.security import ClaimSet

# Claims that describe the token itself rather than the caller.
REGISTERED_CLAIMS: Final = frozenset({"iss", "aud", "exp", "nbf", "iat", "jti"})


def _claim_values(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set)):
        return tuple(str(item) for item in value if item is not None)
    if isinstance(value, dict):
        return ()
    return (str(value),)


def extract_claim_set(claims: dict[str, Any]) -> ClaimSet:
    """Build a claim-type -> values mapping from a decoded payload.

    Scalar claims become single-element tuples and list claims keep every
    element. Space-separated ``scope`` strings are split, and Keycloak-style
    ``realm_access.roles`` are merged into ``roles``.
    """
    claim_set: dict[str, tuple[str, ...]] = {}
    for name, value in claims.items():
        if name in REGISTERED_CLAIMS:
            continue
        if name == "scope" and isinstance(value, str):
            values = tuple(value.split())
        else:
            values = _claim_values(value)
        if values:
            claim_set[name] = values

    realm_access = claims.get("realm_access")
    if isinstance(realm_access, dict) and isinstance(realm_access.get("roles"), list):
        merged = claim_set.get("roles", ()) + _claim_values(realm_access["roles"])
        claim_set["roles"] = tuple(dict.fromkeys(merged))

    return claim_set
