"""
Token service binding a signing key and lifetime defaults from configuration.
"""

from datetime import timedelta
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel

from .config import TokenSettings, get_settings
from .errors import TokenError
from .logging import get_logger
from .models import IssuedToken, TokenVerificationResponse
from . import tokens


class TokenService:
    """Issue and validate claim tokens for an application."""

    def __init__(self, signing_key: Optional[str] = None, settings: Optional[TokenSettings] = None):
        self.settings = settings if settings is not None else get_settings()
        if signing_key is None and self.settings.signing_key is not None:
            signing_key = self.settings.signing_key.get_secret_value()
        if not signing_key:
            raise ValueError("TokenService requires a signing key")

        self._signing_key = signing_key
        self.logger = get_logger("claimtoken.service")

    def issue(self, custom_claims: Any, ttl: Optional[timedelta] = None) -> IssuedToken:
        """Issue a token, applying the configured default lifetime when ``ttl`` is omitted."""
        if ttl is None and self.settings.default_ttl_seconds is not None:
            ttl = timedelta(seconds=self.settings.default_ttl_seconds)

        issued = tokens.issue(self._signing_key, custom_claims, ttl)

        self.logger.info(
            "Token issued",
            expires_at=issued.standard_claims.expires_at
        )
        return issued

    def extract_claims(
        self,
        token: str,
        model: Optional[Type[BaseModel]] = None,
    ) -> Union[Dict[str, Any], BaseModel]:
        """Extract custom claims from a valid token."""
        try:
            return tokens.read(
                self._signing_key,
                token,
                leeway=self.settings.leeway_seconds,
                model=model,
            )
        except TokenError as e:
            self.logger.warning(
                "Token verification failed",
                error=e.message,
                error_code=e.code
            )
            raise

    def verify(self, token: str) -> TokenVerificationResponse:
        """Verify a token without raising on validation failures."""
        try:
            claims = self.extract_claims(token)
        except TokenError as e:
            return TokenVerificationResponse(
                valid=False,
                error=e.message,
                error_code=e.code
            )

        return TokenVerificationResponse(
            valid=True,
            claims=claims
        )
