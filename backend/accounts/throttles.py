# accounts/throttles.py
"""
Rate limiting for the unauthenticated auth endpoints.

- RegistrationThrottle: tenant signups per client IP
- LoginThrottle: login attempts per client IP
- LoginUsernameThrottle: login attempts against one username from any IP

Rates live in settings.REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'].
"""

from rest_framework.throttling import AnonRateThrottle, SimpleRateThrottle


class RegistrationThrottle(AnonRateThrottle):
    scope = 'registration'


class LoginThrottle(AnonRateThrottle):
    scope = 'login'


class LoginUsernameThrottle(SimpleRateThrottle):
    """
    Caps attempts against a single username, so spreading guesses over
    many addresses does not get around LoginThrottle.
    """
    scope = 'login_username'

    def get_cache_key(self, request, view):
        data = request.data if hasattr(request.data, "get") else {}
        username = (data.get("username") or "").strip().lower()
        if not username:
            return None
        return self.cache_format % {"scope": self.scope, "ident": username}
