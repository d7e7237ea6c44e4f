# accounts/commands.py
"""
Command layer for accounts and company operations.

ALL tenant-scoped reads and mutations go through commands that take the
caller's ActorContext explicitly:
- Tenant registration (User + Company atomic creation)
- Login (credential check + token issue)
- Company read/update/delete/list

This ensures:
1. Consistent validation
2. One place where the access decision is applied
3. Structured logging of security-relevant outcomes

Authorization and not-found errors are raised (see accounts.exceptions);
business validation failures come back as CommandResult.fail().
"""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from rest_framework.exceptions import AuthenticationFailed

from accounts import tokens
from accounts.authz import ActorContext, Operation, require, require_admin
from accounts.exceptions import DuplicateUsername, ResourceNotFound
from accounts.models import Company, User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."

COMPANY_UPDATABLE_FIELDS = ("name", "capacity", "location")


class CommandResult:
    def __init__(self, success: bool, data=None, error: str = None):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data=None):
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str):
        return cls(success=False, error=error)


# =============================================================================
# Registration (User + Company atomic creation)
# =============================================================================

def register_tenant(
    username: str,
    password: str,
    company_name: str,
    capacity: str = "",
    location: str = "",
) -> CommandResult:
    """
    Register a new USER together with the company it owns.

    This is the ONLY way to create a company. It atomically:
    1. Creates the user with a hashed password and role USER
    2. Creates the company owned by that user

    Either both rows exist afterwards or neither does.

    Args:
        username: Login name (must be unique)
        password: Raw password (hashed before storage)
        company_name: Name of the company to create
        capacity: Free-form capacity description
        location: Free-form location

    Returns:
        CommandResult with the created Company

    Raises:
        DuplicateUsername: If the username is taken
    """
    username = (username or "").strip()
    company_name = (company_name or "").strip()

    if not username:
        return CommandResult.fail("Username is required.")
    if not company_name:
        return CommandResult.fail("Company name is required.")

    try:
        validate_password(password, user=User(username=username))
    except DjangoValidationError as exc:
        return CommandResult.fail(" ".join(exc.messages))

    if User.objects.filter(username=username).exists():
        raise DuplicateUsername()

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                password=password,
                role=User.Role.USER,
            )
            company = Company.objects.create(
                owner=user,
                name=company_name,
                capacity=capacity or "",
                location=location or "",
            )
    except IntegrityError as exc:
        # Lost a race with a concurrent registration of the same username.
        raise DuplicateUsername() from exc

    logger.info(
        "Tenant registered",
        extra={"username": user.username, "company_id": company.pk},
    )
    return CommandResult.ok(data=company)


def login(username: str, password: str, request=None) -> CommandResult:
    """
    Verify credentials and issue an access token.

    Unknown username and wrong password fail identically.

    Returns:
        CommandResult with {"token": str, "role": str}

    Raises:
        AuthenticationFailed: On any credential failure
    """
    user = authenticate(request=request, username=username, password=password)
    if user is None:
        logger.info("Login failed")
        raise AuthenticationFailed(INVALID_CREDENTIALS)

    token = tokens.issue(user.username, user.role)
    logger.info("Login succeeded", extra={"username": user.username, "role": user.role})
    return CommandResult.ok(data={"token": token, "role": user.role})


# =============================================================================
# Company commands
# =============================================================================

def get_own_company_id(actor: ActorContext) -> int:
    """Return the caller's company id, or raise ResourceNotFound."""
    if actor.company_id is None:
        raise ResourceNotFound("Company not associated with user.")
    return actor.company_id


def _get_company(company_id: int) -> Company:
    company = Company.objects.filter(pk=company_id).first()
    if company is None:
        raise ResourceNotFound("Company not found.")
    return company


def get_company(actor: ActorContext, company_id: int) -> CommandResult:
    """Company details; authorization happens before the lookup."""
    require(actor, company_id, Operation.COMPANY_VIEW)
    return CommandResult.ok(data=_get_company(company_id))


@transaction.atomic
def update_company(actor: ActorContext, company_id: int, **changes) -> CommandResult:
    """
    Partially update a company.

    Only keys present in ``changes`` are applied; name, when present,
    must not be blank.
    """
    require(actor, company_id, Operation.COMPANY_UPDATE)
    company = Company.objects.select_for_update().filter(pk=company_id).first()
    if company is None:
        raise ResourceNotFound("Company not found.")

    unknown = set(changes) - set(COMPANY_UPDATABLE_FIELDS)
    if unknown:
        return CommandResult.fail(f"Unknown company fields: {', '.join(sorted(unknown))}.")

    if "name" in changes:
        name = (changes["name"] or "").strip()
        if not name:
            return CommandResult.fail("Company name cannot be blank.")
        changes["name"] = name

    for field, value in changes.items():
        setattr(company, field, value)
    if changes:
        company.save(update_fields=list(changes))

    return CommandResult.ok(data=company)


def list_companies(actor: ActorContext) -> CommandResult:
    """All companies. ADMIN only, even for a caller's own listing."""
    require_admin(actor, Operation.COMPANY_LIST_ALL)
    return CommandResult.ok(data=list(Company.objects.select_related("owner").all()))


@transaction.atomic
def delete_company(actor: ActorContext, company_id: int) -> CommandResult:
    """
    Delete a company and everything it owns. ADMIN only.

    Employees and inventory items are deleted explicitly, then the
    company, then its owning identity (they share a lifetime).
    """
    require(actor, company_id, Operation.COMPANY_DELETE)
    company = _get_company(company_id)
    owner = company.owner

    employees_deleted, _ = company.employees.all().delete()
    items_deleted, _ = company.inventory_items.all().delete()
    company.delete()
    if owner.pk != actor.user_id:
        owner.delete()

    logger.info(
        "Company deleted",
        extra={
            "company_id": company_id,
            "deleted_by": actor.username,
            "employees_deleted": employees_deleted,
            "inventory_items_deleted": items_deleted,
        },
    )
    return CommandResult.ok()
