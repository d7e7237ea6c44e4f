# accounts/authentication.py
"""
DRF authentication backed by accounts.tokens.

Reads ``Authorization: Bearer <token>`` the way simplejwt does, but
validates through the token service and resolves the bearer by
username. Every token failure (malformed, expired, bad signature,
unknown or inactive user) collapses into one 401 response so the
caller cannot tell them apart.
"""

import logging

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from accounts import tokens
from accounts.models import User

logger = logging.getLogger(__name__)

AUTHENTICATION_FAILED = "Authentication failed."


class RoleJWTAuthentication(JWTAuthentication):
    """Bearer-token authentication returning ``(user, TokenClaims)``."""

    def get_raw_token(self, header):
        try:
            return super().get_raw_token(header)
        except AuthenticationFailed:
            raise AuthenticationFailed(AUTHENTICATION_FAILED, code="authentication_failed")

    def get_validated_token(self, raw_token):
        try:
            return tokens.validate(raw_token)
        except tokens.TokenValidationError as exc:
            logger.info("Token rejected", extra={"reason": exc.reason})
            raise AuthenticationFailed(AUTHENTICATION_FAILED, code="authentication_failed")

    def get_user(self, validated_token):
        try:
            return User.objects.get(username=validated_token.subject, is_active=True)
        except User.DoesNotExist:
            logger.info("Token subject not found or inactive")
            raise AuthenticationFailed(AUTHENTICATION_FAILED, code="authentication_failed")
