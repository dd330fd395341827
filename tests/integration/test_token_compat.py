"""
Interoperability tests against an independent JWT implementation (PyJWT).
"""

from datetime import timedelta

import jwt
import pytest

from claimtoken import issue, read
from claimtoken.errors import ExpiredTokenError
from claimtoken.test_helpers import DEFAULT_TEST_SECRET, TestTokenFactory, create_mock_claims


class TestTokenCompatibility:
    """Tokens must be readable by, and read tokens from, other compliant libraries."""

    @pytest.fixture
    def factory(self):
        """Create PyJWT-backed token factory."""
        return TestTokenFactory()

    @pytest.fixture
    def mock_claims(self):
        """Mock custom claims."""
        return create_mock_claims(user_id="test-user-1", roles=["user", "admin"])

    def test_pyjwt_verifies_issued_token(self, factory, mock_claims):
        """PyJWT verifies signature, expiry and body layout."""
        issued = issue(DEFAULT_TEST_SECRET, mock_claims, timedelta(hours=1))

        body = factory.decode(issued.token)

        assert body == {
            "custom_claims": mock_claims,
            "exp": issued.standard_claims.expires_at,
        }

    def test_pyjwt_rejects_expired_issued_token(self, factory, mock_claims):
        """PyJWT agrees an already expired token is expired."""
        issued = issue(DEFAULT_TEST_SECRET, mock_claims, timedelta(seconds=-1))

        with pytest.raises(jwt.ExpiredSignatureError):
            factory.decode(issued.token)

    def test_pyjwt_rejects_wrong_key(self, factory, mock_claims):
        """PyJWT rejects the token under a different key."""
        issued = issue(DEFAULT_TEST_SECRET, mock_claims)

        with pytest.raises(jwt.InvalidSignatureError):
            factory.decode(issued.token, secret="another-secret-key-with-32-bytes-plus")

    def test_read_pyjwt_token(self, factory, mock_claims):
        """Tokens signed by PyJWT in the same layout are readable."""
        token = factory.custom_claims_token(mock_claims, expires_in=3600)

        assert read(DEFAULT_TEST_SECRET, token) == mock_claims

    def test_read_expired_pyjwt_token(self, factory, mock_claims):
        """Expiry set by PyJWT is enforced."""
        token = factory.custom_claims_token(mock_claims, expires_in=-10)

        with pytest.raises(ExpiredTokenError):
            read(DEFAULT_TEST_SECRET, token)

    def test_read_pyjwt_token_with_extra_registered_claims(self, factory, mock_claims):
        """Unrelated registered claims do not interfere."""
        token = factory.signed({
            "custom_claims": mock_claims,
            "iss": "http://localhost:8080/realms/test",
            "sub": "test-user-1",
            "iat": 1700000000,
        })

        assert read(DEFAULT_TEST_SECRET, token) == mock_claims
