"""Claims-based authorization for catalog operations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.bookservice.core.errors import ForbiddenError

ClaimSet = Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class RequiredClaim:
    """A claim type/value pair a caller must hold."""

    type: str
    value: str

    def __str__(self) -> str:
        return f"{self.type}={self.value}"


@dataclass(frozen=True)
class Principal:
    """The caller of a request.

    ``claims`` maps each claim type to the values it carries. Anonymous
    callers have no subject and an empty claim set.
    """

    subject: str | None = None
    claims: ClaimSet = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "claims", MappingProxyType(dict(self.claims)))

    @classmethod
    def anonymous(cls) -> Principal:
        return cls()

    @property
    def is_anonymous(self) -> bool:
        return self.subject is None and not self.claims


def is_authorized(claims: ClaimSet, required: RequiredClaim) -> bool:
    """Return True when ``claims`` holds ``required``.

    Claim types and values are compared exactly.
    """
    return required.value in claims.get(required.type, ())


def ensure_authorized(principal: Principal, required: RequiredClaim) -> None:
    """Raise ForbiddenError unless the principal holds the required claim."""
    if not is_authorized(principal.claims, required):
        raise ForbiddenError()
