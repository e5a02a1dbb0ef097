"""
Unit tests for JWTVerifier.
"""

from types import SimpleNamespace

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from notaire.infrastructure.auth import JWTVerifier
from tests.helpers.sign_message import TEST_JWT_SECRET, make_token


class FakeJWKSClient:
    """Stands in for PyJWKClient without network access."""

    def __init__(self, public_key=None, error: Exception | None = None):
        self.public_key = public_key
        self.error = error
        self.calls = 0

    def get_signing_key_from_jwt(self, token):
        self.calls += 1
        if self.error:
            raise self.error
        return SimpleNamespace(key=self.public_key)


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


class TestSharedSecret:
    def test_valid_token(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET)
        token = make_token({"sub": "user-1", "email": "alice@example.com"})

        payload = verifier.verify_token(token)

        assert payload.email == "alice@example.com"
        assert payload.identity == "alice@example.com"
        assert verifier.algorithms == ["HS256"]

    def test_expired_token(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET)
        token = make_token({"sub": "user-1"}, expires_in=-60)

        with pytest.raises(ValueError, match="Token expired"):
            verifier.verify_token(token)

    def test_wrong_secret(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET)
        token = make_token({"sub": "user-1"}, secret="another-secret-0123456789abcdef!!")

        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token(token)

    def test_garbage_token(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET)

        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token("not-a-jwt")

    def test_missing_exp_claim(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET)
        token = jwt.encode({"sub": "user-1"}, TEST_JWT_SECRET, algorithm="HS256")

        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token(token)

    def test_audience_checked_when_configured(self):
        verifier = JWTVerifier(secret=TEST_JWT_SECRET, audience="notaire")

        good = make_token({"sub": "u", "aud": "notaire"})
        bad = make_token({"sub": "u", "aud": "someone-else"})

        assert verifier.verify_token(good).sub == "u"
        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token(bad)


class TestJWKS:
    def test_valid_rs256_token(self, rsa_key):
        jwks = FakeJWKSClient(public_key=rsa_key.public_key())
        verifier = JWTVerifier(jwks_client=jwks)
        token = make_token(
            {"email": "bob@example.com", "scopes": ["read"]},
            secret=rsa_key,
            algorithm="RS256",
            headers={"kid": "key-1"},
        )

        payload = verifier.verify_token(token)

        assert payload.identity == "bob@example.com"
        assert payload.scopes == ["read"]
        assert jwks.calls == 1
        assert verifier.algorithms == ["RS256"]

    def test_rejects_hs256_token_when_rs256_expected(self, rsa_key):
        jwks = FakeJWKSClient(public_key=rsa_key.public_key())
        verifier = JWTVerifier(jwks_client=jwks)

        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token(make_token({"sub": "u"}))

    def test_unknown_key_is_invalid(self):
        jwks = FakeJWKSClient(error=jwt.PyJWKClientError("Unable to find a signing key"))
        verifier = JWTVerifier(jwks_client=jwks)

        with pytest.raises(ValueError, match="Invalid token"):
            verifier.verify_token(make_token({"sub": "u"}))

    def test_builds_cached_jwks_client_from_url(self):
        verifier = JWTVerifier(
            jwks_url="https://issuer.example.com/.well-known/jwks.json",
            cache_max_entries=3,
            cache_max_age=120,
        )

        assert isinstance(verifier._jwks_client, jwt.PyJWKClient)
        assert verifier.algorithms == ["RS256"]


def test_requires_a_key_source():
    with pytest.raises(ValueError):
        JWTVerifier()
