"""
Error types for claim token issuance and validation.
"""

from enum import Enum
from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class TokenErrorKind(str, Enum):
    """Closed set of failure categories callers can branch on."""

    ENCODING_ERROR = "ENCODING_ERROR"
    UNEXPECTED_ALGORITHM = "UNEXPECTED_ALGORITHM"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
    INVALID_CLAIMS = "INVALID_CLAIMS"


class TokenError(Exception):
    """Base exception for claim token failures."""

    kind: TokenErrorKind

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.value

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class EncodingError(TokenError):
    """Claims could not be serialized or signed."""

    kind = TokenErrorKind.ENCODING_ERROR

    def __init__(self, message: str = "could not encode token", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnexpectedAlgorithmError(TokenError):
    """Token header declares a signing method outside the HMAC family."""

    kind = TokenErrorKind.UNEXPECTED_ALGORITHM

    def __init__(self, algorithm: Any, details: Optional[Dict[str, Any]] = None):
        self.algorithm = algorithm
        super().__init__(
            f"unexpected signing method: {algorithm}",
            {"alg": algorithm, **(details or {})}
        )


class VerificationError(TokenError):
    """Token is malformed, unverifiable or semantically invalid."""

    kind = TokenErrorKind.VERIFICATION_FAILED

    def __init__(self, message: str = "invalid token: verification failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ExpiredTokenError(VerificationError):
    """Token expiration claim lies in the past."""

    def __init__(self, message: str = "invalid token: token has expired", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidClaimsError(TokenError):
    """Token verified but its custom claims are absent or malformed."""

    kind = TokenErrorKind.INVALID_CLAIMS

    def __init__(self, message: str = "invalid token: could not read claims", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
