# accounts/exceptions.py
"""
Request-terminal errors raised by the command layer.

All of these are DRF ``APIException`` subclasses, so DRF's default
exception handler renders them with the right status code. Business
validation failures are not raised; commands return
``CommandResult.fail()`` for those.
"""

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, PermissionDenied


class AccessDenied(PermissionDenied):
    """Authenticated, but the target belongs to another tenant."""

    default_detail = "You do not have access to this resource."
    default_code = "access_denied"


class NoCompanyLinked(AccessDenied):
    """Non-admin caller without a company tried a tenant-scoped operation."""

    default_detail = "No company is associated with this account."
    default_code = "no_company"


class ResourceNotFound(NotFound):
    default_detail = "Not found."
    default_code = "not_found"


class DuplicateUsername(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Username is already taken."
    default_code = "duplicate_username"
