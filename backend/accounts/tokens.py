# accounts/tokens.py
"""
Identity token service.

Tokens are simplejwt access tokens whose subject claim (``sub``) is the
username and which carry the caller's ``role``. Signing key, algorithm
and default lifetime come from ``settings.SIMPLE_JWT``.

Tokens are stateless: there is no refresh and no revocation. Rotating
the signing key invalidates every outstanding token.

Validation is done with PyJWT directly so the three failure modes stay
distinguishable:

- TokenBadSignature: signature does not verify (checked first)
- TokenExpired: signature valid, ``exp`` in the past
- TokenMalformed: anything else (bad encoding, missing claims,
  wrong token type, unknown role)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

import jwt
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import User

ROLE_CLAIM = "role"

REQUIRED_CLAIMS = ("exp", "iat", "sub")


class TokenValidationError(Exception):
    """Base class for every token rejection."""

    reason = "invalid"


class TokenMalformed(TokenValidationError):
    reason = "malformed"


class TokenExpired(TokenValidationError):
    reason = "expired"


class TokenBadSignature(TokenValidationError):
    reason = "bad_signature"


@dataclass(frozen=True)
class TokenClaims:
    """What a valid token says about its bearer."""

    subject: str
    role: str
    issued_at: datetime
    expires_at: datetime


def issue(subject: str, role: str, lifetime: Optional[timedelta] = None) -> str:
    """
    Issue a signed access token for ``subject`` with ``role``.

    Args:
        subject: Username of the bearer
        role: One of User.Role
        lifetime: Override for SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]

    Returns:
        The encoded token string
    """
    if not subject:
        raise ValueError("Token subject must be set")
    if role not in User.Role.values:
        raise ValueError(f"Unknown role: {role}")

    token = AccessToken()
    if lifetime is not None:
        token.set_exp(lifetime=lifetime)
    token[api_settings.USER_ID_CLAIM] = subject
    token[ROLE_CLAIM] = role
    return str(token)


def validate(raw: Union[str, bytes]) -> TokenClaims:
    """
    Verify signature and expiry of ``raw`` and return its claims.

    Raises:
        TokenMalformed, TokenExpired, TokenBadSignature
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TokenMalformed("Token is not valid UTF-8") from exc

    try:
        payload = jwt.decode(
            raw,
            api_settings.SIGNING_KEY,
            algorithms=[api_settings.ALGORITHM],
            options={"require": list(REQUIRED_CLAIMS)},
            leeway=api_settings.LEEWAY,
        )
    except jwt.InvalidSignatureError as exc:
        raise TokenBadSignature("Token signature does not verify") from exc
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenMalformed(str(exc)) from exc

    if payload.get(api_settings.TOKEN_TYPE_CLAIM) != AccessToken.token_type:
        raise TokenMalformed("Not an access token")

    subject = payload.get(api_settings.USER_ID_CLAIM)
    role = payload.get(ROLE_CLAIM)
    if not isinstance(subject, str) or not subject:
        raise TokenMalformed("Token has no subject")
    if role not in User.Role.values:
        raise TokenMalformed("Token has no valid role")

    return TokenClaims(
        subject=subject,
        role=role,
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
