"""Unit tests for bearer token verification."""

import pytest

from src.bookservice.core.services import InvalidTokenError, JwtVerificationService
from src.bookservice.core.services.jwt import extract_claim_set
from tests.utils import make_token


@pytest.fixture
def verifier(test_config) -> JwtVerificationService:
    return JwtVerificationService(test_config.jwt)


class TestVerifyJwt:
    def test_valid_token_yields_principal(self, verifier, test_config):
        token = make_token(test_config.jwt, {"name": "admin"}, subject="admin-1")

        principal = verifier.verify_jwt(token)

        assert principal.subject == "admin-1"
        assert principal.claims["name"] == ("admin",)

    def test_wrong_secret(self, verifier, test_config):
        token = make_token(test_config.jwt, secret="another-secret")
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)

    def test_wrong_issuer(self, verifier, test_config):
        token = make_token(test_config.jwt, issuer="https://evil.test")
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)

    def test_wrong_audience(self, verifier, test_config):
        token = make_token(test_config.jwt, audience="api://other")
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)

    def test_expired(self, verifier, test_config):
        token = make_token(test_config.jwt, expires_in=-60)
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)

    def test_clock_skew_tolerates_recent_expiry(self, test_config):
        jwt_config = test_config.jwt.model_copy(update={"clock_skew": 120})
        token = make_token(jwt_config, expires_in=-60)
        assert JwtVerificationService(jwt_config).verify_jwt(token).subject == "user-123"

    def test_disallowed_algorithm(self, verifier, test_config):
        token = make_token(test_config.jwt, algorithm="HS512")
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c", "x" * 5000])
    def test_malformed(self, verifier, token):
        with pytest.raises(InvalidTokenError):
            verifier.verify_jwt(token)


class TestExtractClaimSet:
    def test_scalars_and_lists(self):
        claim_set = extract_claim_set(
            {"sub": "u1", "name": "admin", "roles": ["a", "b"], "age": 3}
        )
        assert claim_set == {
            "sub": ("u1",),
            "name": ("admin",),
            "roles": ("a", "b"),
            "age": ("3",),
        }

    def test_registered_claims_are_dropped(self):
        claim_set = extract_claim_set({"iss": "x", "aud": "y", "exp": 1, "iat": 1})
        assert claim_set == {}

    def test_scope_is_split(self):
        assert extract_claim_set({"scope": "read write"}) == {"scope": ("read", "write")}

    def test_realm_roles_are_merged(self):
        claim_set = extract_claim_set(
            {"roles": ["reader"], "realm_access": {"roles": ["admin", "reader"]}}
        )
        assert claim_set["roles"] == ("reader", "admin")
        assert "realm_access" not in claim_set
