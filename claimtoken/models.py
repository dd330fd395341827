"""
Claim token data models.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class StandardClaims(BaseModel):
    """Standard JWT claims embedded alongside the custom payload."""

    model_config = ConfigDict(frozen=True)

    expires_at: Optional[int] = None

    @property
    def expires_at_datetime(self) -> Optional[datetime]:
        if self.expires_at is None:
            return None
        return datetime.fromtimestamp(self.expires_at, tz=timezone.utc)

    def to_claims(self) -> Dict[str, Any]:
        """Return the registered claim names carried in the token body."""
        claims: Dict[str, Any] = {}
        if self.expires_at is not None:
            claims["exp"] = self.expires_at
        return claims


class IssuedToken(BaseModel):
    """Signed token plus the standard claims that were embedded in it."""

    model_config = ConfigDict(frozen=True)

    token: str
    standard_claims: StandardClaims


class TokenVerificationResponse(BaseModel):
    """Response model for token verification."""

    valid: bool
    claims: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
