"""
Issue and read HS256-signed tokens carrying a custom claims payload.

The token body is a JSON object holding the caller's payload under
``custom_claims`` next to the registered ``exp`` claim. Signing and
verification are delegated to python-jose; this module only shapes the
claims and classifies failures into ``claimtoken.errors`` types.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Type, TypeVar, Union

from jose import jwt
from jose.constants import ALGORITHMS
from jose.exceptions import ExpiredSignatureError, JOSEError, JWTClaimsError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import (
    EncodingError,
    ExpiredTokenError,
    InvalidClaimsError,
    UnexpectedAlgorithmError,
    VerificationError,
)
from .models import IssuedToken, StandardClaims

SIGNING_ALGORITHM = ALGORITHMS.HS256
ACCEPTED_ALGORITHMS = frozenset(ALGORITHMS.HMAC)
CUSTOM_CLAIMS_KEY = "custom_claims"
BEARER_PREFIX = "Bearer "

Key = Union[str, bytes]
ModelT = TypeVar("ModelT", bound=BaseModel)


def issue(secret_key: Key, custom_claims: Any, ttl: Optional[timedelta] = None) -> IssuedToken:
    """Sign ``custom_claims`` into a token, expiring after ``ttl`` when given.

    A token issued without ``ttl`` carries no ``exp`` claim and never expires.

    Raises
    ------
    EncodingError
        If the key is empty or the claims cannot be serialized and signed.
    """
    if not secret_key:
        raise EncodingError("signing key must not be empty")

    standard_claims = StandardClaims()
    if ttl is not None:
        expires = datetime.now(timezone.utc) + ttl
        standard_claims = StandardClaims(expires_at=int(expires.timestamp()))

    if isinstance(custom_claims, BaseModel):
        custom_claims = custom_claims.model_dump(mode="json")

    contents = {CUSTOM_CLAIMS_KEY: custom_claims, **standard_claims.to_claims()}
    try:
        token = jwt.encode(contents, secret_key, algorithm=SIGNING_ALGORITHM)
    except (JOSEError, TypeError, ValueError) as exc:
        raise EncodingError(f"could not encode token: {exc}") from exc

    return IssuedToken(token=token, standard_claims=standard_claims)


def read(
    secret_key: Key,
    token: str,
    *,
    leeway: int = 0,
    model: Optional[Type[ModelT]] = None,
) -> Union[Dict[str, Any], ModelT]:
    """Verify ``token`` and return its custom claims.

    The token must be HMAC-signed with ``secret_key`` and unexpired (allowing
    ``leeway`` seconds of clock skew). When ``model`` is given the claims are
    validated into an instance of it.

    Raises
    ------
    UnexpectedAlgorithmError
        If the header declares a non-HMAC signing method.
    VerificationError
        If the token is malformed, the signature does not match, or a standard
        claim fails validation. Expiry raises the ``ExpiredTokenError`` subclass.
    InvalidClaimsError
        If the verified token lacks a ``custom_claims`` mapping.
    """
    if not secret_key:
        raise VerificationError("signing key must not be empty")
    if not isinstance(token, str) or not token:
        raise VerificationError("invalid token: token must be a non-empty string")
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()

    try:
        header = jwt.get_unverified_header(token)
    except JOSEError as exc:
        raise VerificationError(f"invalid token: {exc}") from exc

    algorithm = header.get("alg")
    if not isinstance(algorithm, str) or algorithm not in ACCEPTED_ALGORITHMS:
        raise UnexpectedAlgorithmError(algorithm)

    try:
        claims = jwt.decode(
            token,
            secret_key,
            algorithms=sorted(ACCEPTED_ALGORITHMS),
            options={"verify_aud": False, "leeway": leeway},
        )
    except ExpiredSignatureError as exc:
        raise ExpiredTokenError(details={"error": str(exc)}) from exc
    except JWTClaimsError as exc:
        raise VerificationError(
            "invalid token: claim validation failed",
            details={"error": str(exc)}
        ) from exc
    except Exception as exc:
        # JWTError covers signature and structure failures
        raise VerificationError(f"invalid token: {exc}") from exc

    custom = claims.get(CUSTOM_CLAIMS_KEY)
    if not isinstance(custom, Mapping) or not all(isinstance(key, str) for key in custom):
        raise InvalidClaimsError()

    if model is None:
        return dict(custom)

    try:
        return model.model_validate(custom)
    except PydanticValidationError as exc:
        raise InvalidClaimsError(details={"errors": exc.errors(include_url=False, include_context=False)}) from exc
