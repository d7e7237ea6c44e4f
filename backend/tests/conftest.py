# tests/conftest.py
"""
Pytest fixtures for Stockroom tests.

Two tenants (acme, globex) each owned by a USER, plus one ADMIN without
a company. ActorContext fixtures are built from the stored users, the
same way resolve_actor() builds them for requests.
"""

from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from accounts import tokens
from accounts.authz import ActorContext
from accounts.models import Company, User
from employees.models import Employee
from inventory import valuation


PASSWORD = "Correct-Horse-42"


@pytest.fixture(autouse=True)
def _clear_throttle_cache():
    """DRF throttles count in the default cache; start every test at zero."""
    cache.clear()
    yield
    cache.clear()


# =============================================================================
# Identity & Company Fixtures
# =============================================================================

@pytest.fixture
def owner(db):
    """USER who owns the acme company."""
    return User.objects.create_user(username="alice", password=PASSWORD)


@pytest.fixture
def company(db, owner):
    return Company.objects.create(owner=owner, name="Acme", capacity="50", location="Leeds")


@pytest.fixture
def other_owner(db):
    """USER who owns the globex company."""
    return User.objects.create_user(username="bob", password=PASSWORD)


@pytest.fixture
def other_company(db, other_owner):
    return Company.objects.create(owner=other_owner, name="Globex", capacity="200", location="Oslo")


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(username="root", password=PASSWORD, role=User.Role.ADMIN)


@pytest.fixture
def companyless_user(db):
    """USER without a company (should not exist after registration, but must be handled)."""
    return User.objects.create_user(username="drifter", password=PASSWORD)


# =============================================================================
# Actor Context Fixtures
# =============================================================================

@pytest.fixture
def owner_actor(owner, company):
    return ActorContext.for_user(owner)


@pytest.fixture
def other_actor(other_owner, other_company):
    return ActorContext.for_user(other_owner)


@pytest.fixture
def admin_actor(admin_user):
    return ActorContext.for_user(admin_user)


@pytest.fixture
def companyless_actor(companyless_user):
    return ActorContext.for_user(companyless_user)


# =============================================================================
# Tenant Data Fixtures
# =============================================================================

@pytest.fixture
def employee(company):
    return Employee.objects.create(
        company=company,
        name="Carol",
        grade="B2",
        dept="Warehouse",
        salary=Decimal("32000.00"),
    )


@pytest.fixture
def other_employee(other_company):
    return Employee.objects.create(
        company=other_company,
        name="Dave",
        grade="A1",
        dept="Sales",
        salary=Decimal("41000.00"),
    )


@pytest.fixture
def item(company):
    """Blank item: minimum 5, buffer 3, price 2.00."""
    item = valuation.create_blank(
        valuation.ItemSpec(
            product_name="Widget",
            description="Standard widget",
            price=Decimal("2.00"),
            minimum_stock=5,
            buffer_stock=3,
        ),
        company_id=company.pk,
    )
    item.save()
    return item


@pytest.fixture
def other_item(other_company):
    item = valuation.create_blank(
        valuation.ItemSpec(product_name="Gadget", price=Decimal("9.50"), minimum_stock=2, buffer_stock=2),
        company_id=other_company.pk,
    )
    item.save()
    return item


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    """Build an APIClient that presents a real bearer token for ``user``."""
    def _client_for(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens.issue(user.username, user.role)}")
        return client
    return _client_for


@pytest.fixture
def password():
    return PASSWORD
