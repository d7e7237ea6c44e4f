# accounts/authz.py
"""
Authorization utilities for Stockroom.

Provides:
- ActorContext: Immutable context for the current caller
- resolve_actor: Build the actor context from an authenticated request
- decide: The tenant access decision (pure, no database access)
- require / require_admin: Raise if the decision is DENY
- load_for: Load a company-owned entity and authorize against its owner

Policy, in order:
1. ADMIN: allow everything, on every company
2. ADMIN-only operations (company.list_all, company.delete): deny
3. No linked company: deny (NoCompanyLinked)
4. Target company is the caller's own company: allow
5. Otherwise: deny (AccessDenied)

The actor is always an explicit argument; nothing here reads
request-global state.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework.exceptions import NotAuthenticated

from accounts.exceptions import AccessDenied, NoCompanyLinked, ResourceNotFound
from accounts.models import User

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    COMPANY_VIEW = "company.view"
    COMPANY_UPDATE = "company.update"
    COMPANY_DELETE = "company.delete"
    COMPANY_LIST_ALL = "company.list_all"

    EMPLOYEE_VIEW = "employee.view"
    EMPLOYEE_CREATE = "employee.create"
    EMPLOYEE_UPDATE = "employee.update"
    EMPLOYEE_DELETE = "employee.delete"

    INVENTORY_VIEW = "inventory.view"
    INVENTORY_CREATE = "inventory.create"
    INVENTORY_UPDATE = "inventory.update"
    INVENTORY_DELETE = "inventory.delete"


ADMIN_ONLY_OPERATIONS = frozenset({
    Operation.COMPANY_DELETE,
    Operation.COMPANY_LIST_ALL,
})


class Decision(enum.Enum):
    ALLOW = "ALLOW"
    DENY = "DENY"


@dataclass(frozen=True)
class ActorContext:
    """
    Immutable context for the current actor.

    This is passed to every command so that tenant scoping never depends
    on ambient state.

    Attributes:
        user_id: Primary key of the authenticated user
        username: The user's login name
        role: User.Role value
        company_id: The company the user owns, or None
    """
    user_id: int
    username: str
    role: str
    company_id: Optional[int]

    @property
    def is_admin(self) -> bool:
        return self.role == User.Role.ADMIN

    @classmethod
    def for_user(cls, user) -> "ActorContext":
        """Build a context from a stored User (role and company read fresh)."""
        return cls(
            user_id=user.pk,
            username=user.username,
            role=user.role,
            company_id=user.owned_company_id,
        )


def resolve_actor(request) -> ActorContext:
    """
    Extract ActorContext from the current request.

    Called at the start of every view that needs authorization. The
    role and company are read from the stored user, so a role change
    takes effect on the next request even if the token still carries
    the old role.

    Raises:
        NotAuthenticated: If the request has no authenticated user
    """
    user = getattr(request, "user", None)

    if not user or not user.is_authenticated:
        raise NotAuthenticated("Authentication required.")

    return ActorContext.for_user(user)


def decide(actor: ActorContext, target_company_id: Optional[int], operation: Operation) -> Decision:
    """Return ALLOW or DENY for ``operation`` on ``target_company_id``."""
    if actor.is_admin:
        return Decision.ALLOW
    if operation in ADMIN_ONLY_OPERATIONS:
        return Decision.DENY
    if actor.company_id is None or target_company_id is None:
        return Decision.DENY
    if actor.company_id == target_company_id:
        return Decision.ALLOW
    return Decision.DENY


def require(actor: ActorContext, target_company_id: Optional[int], operation: Operation) -> None:
    """
    Require that ``actor`` may perform ``operation`` on the company.

    Raises:
        NoCompanyLinked: Non-admin caller without a company
        AccessDenied: Any other DENY
    """
    if decide(actor, target_company_id, operation) is Decision.ALLOW:
        return

    logger.warning(
        "Access denied",
        extra={
            "username": actor.username,
            "operation": operation.value,
            "target_company_id": target_company_id,
        },
    )
    if operation not in ADMIN_ONLY_OPERATIONS and actor.company_id is None:
        raise NoCompanyLinked()
    raise AccessDenied()


def require_admin(actor: ActorContext, operation: Operation) -> None:
    """Require an ADMIN-only operation that has no target company."""
    require(actor, None, operation)


def check_permission(actor: ActorContext, target_company_id: Optional[int], operation: Operation) -> bool:
    """Check without raising."""
    return decide(actor, target_company_id, operation) is Decision.ALLOW


def load_for(actor: ActorContext, queryset, pk, operation: Operation):
    """
    Load a company-owned entity by ``pk`` and authorize ``operation`` on it.

    The target company is the entity's ``company_id``. A non-admin caller
    gets AccessDenied both when the entity belongs to another tenant and
    when it does not exist, so existence is never revealed across
    tenants. Admins get ResourceNotFound for a missing id.
    """
    obj = queryset.filter(pk=pk).first()
    if obj is None and actor.is_admin:
        raise ResourceNotFound()
    # A missing entity has no owner, which never matches the caller.
    require(actor, obj.company_id if obj is not None else None, operation)
    return obj
