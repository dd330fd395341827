"""
Signed claim tokens.

Issue and read HS256 JSON Web Tokens that carry an application-defined
payload under ``custom_claims`` plus the standard ``exp`` claim.

- tokens: the ``issue`` and ``read`` operations
- models: ``StandardClaims``, ``IssuedToken`` and response models
- errors: classified failures (``TokenErrorKind``) and error responses
- service: ``TokenService`` binding a key and defaults from configuration
- config: settings via pydantic-settings
- logging: structured logging setup
"""

from .errors import (
    EncodingError,
    ExpiredTokenError,
    InvalidClaimsError,
    TokenError,
    TokenErrorKind,
    UnexpectedAlgorithmError,
    VerificationError,
)
from .models import IssuedToken, StandardClaims, TokenVerificationResponse
from .service import TokenService
from .tokens import SIGNING_ALGORITHM, issue, read

__all__ = [
    "SIGNING_ALGORITHM",
    "issue",
    "read",
    "IssuedToken",
    "StandardClaims",
    "TokenVerificationResponse",
    "TokenService",
    "TokenError",
    "TokenErrorKind",
    "EncodingError",
    "UnexpectedAlgorithmError",
    "VerificationError",
    "ExpiredTokenError",
    "InvalidClaimsError",
]
