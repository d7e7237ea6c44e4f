# tests/test_tokens.py
"""
Tests for the identity token service.
"""

from datetime import timedelta

import jwt
import pytest
from django.utils import timezone
from rest_framework_simplejwt.settings import api_settings

from accounts import tokens
from accounts.models import User


def _encode(payload, key=None):
    return jwt.encode(payload, key or api_settings.SIGNING_KEY, algorithm=api_settings.ALGORITHM)


def _payload(**overrides):
    now = timezone.now()
    payload = {
        "token_type": "access",
        "sub": "alice",
        "role": User.Role.USER.value,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=5)).timestamp()),
        "jti": "abc123",
    }
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not None}


class TestIssue:

    def test_round_trip(self):
        raw = tokens.issue("alice", User.Role.USER)

        claims = tokens.validate(raw)

        assert claims.subject == "alice"
        assert claims.role == "USER"
        assert claims.expires_at > claims.issued_at

    def test_admin_role_carried(self):
        claims = tokens.validate(tokens.issue("root", User.Role.ADMIN))

        assert claims.role == "ADMIN"

    def test_default_lifetime_from_settings(self):
        claims = tokens.validate(tokens.issue("alice", User.Role.USER))

        assert claims.expires_at - claims.issued_at == api_settings.ACCESS_TOKEN_LIFETIME

    def test_custom_lifetime(self):
        claims = tokens.validate(tokens.issue("alice", User.Role.USER, lifetime=timedelta(minutes=2)))

        assert claims.expires_at - claims.issued_at == timedelta(minutes=2)

    def test_bytes_accepted(self):
        raw = tokens.issue("alice", User.Role.USER).encode("utf-8")

        assert tokens.validate(raw).subject == "alice"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            tokens.issue("alice", "SUPERUSER")

    def test_empty_subject_rejected(self):
        with pytest.raises(ValueError):
            tokens.issue("", User.Role.USER)


class TestValidate:

    def test_expired(self):
        raw = tokens.issue("alice", User.Role.USER, lifetime=timedelta(seconds=-5))

        with pytest.raises(tokens.TokenExpired) as excinfo:
            tokens.validate(raw)

        assert excinfo.value.reason == "expired"

    def test_bad_signature(self):
        raw = _encode(_payload(), key="some-other-signing-key-of-reasonable-length")

        with pytest.raises(tokens.TokenBadSignature):
            tokens.validate(raw)

    def test_bad_signature_checked_before_expiry(self):
        now = timezone.now()
        raw = _encode(
            _payload(exp=int((now - timedelta(minutes=5)).timestamp())),
            key="some-other-signing-key-of-reasonable-length",
        )

        with pytest.raises(tokens.TokenBadSignature):
            tokens.validate(raw)

    def test_tampered_payload(self):
        header, _, signature = tokens.issue("alice", User.Role.USER).split(".")
        forged_body = _encode(_payload(role="ADMIN")).split(".")[1]

        with pytest.raises(tokens.TokenBadSignature):
            tokens.validate(f"{header}.{forged_body}.{signature}")

    @pytest.mark.parametrize("raw", ["", "garbage", "a.b.c", b"\xff\xfe"])
    def test_malformed(self, raw):
        with pytest.raises(tokens.TokenMalformed):
            tokens.validate(raw)

    def test_missing_subject(self):
        with pytest.raises(tokens.TokenMalformed):
            tokens.validate(_encode(_payload(sub=None)))

    def test_missing_role(self):
        with pytest.raises(tokens.TokenMalformed):
            tokens.validate(_encode(_payload(role=None)))

    def test_unknown_role(self):
        with pytest.raises(tokens.TokenMalformed):
            tokens.validate(_encode(_payload(role="ROOT")))

    def test_refresh_token_type_rejected(self):
        with pytest.raises(tokens.TokenMalformed):
            tokens.validate(_encode(_payload(token_type="refresh")))

    def test_all_failures_share_a_base_class(self):
        for exc_class in (tokens.TokenMalformed, tokens.TokenExpired, tokens.TokenBadSignature):
            assert issubclass(exc_class, tokens.TokenValidationError)
