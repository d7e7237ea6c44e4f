# tests/test_employees.py
"""
Tests for employee commands, scoped by the employee's company.
"""

from decimal import Decimal

import pytest

from accounts.exceptions import AccessDenied, NoCompanyLinked, ResourceNotFound
from employees.commands import add_employee, delete_employee, list_employees, update_employee
from employees.models import Employee


@pytest.mark.django_db
class TestListEmployees:

    def test_lists_only_own_company(self, owner_actor, company, employee, other_employee):
        result = list_employees(owner_actor, company.pk)

        assert [e.pk for e in result.data] == [employee.pk]

    def test_other_company_denied(self, owner_actor, other_company, other_employee):
        with pytest.raises(AccessDenied):
            list_employees(owner_actor, other_company.pk)

    def test_companyless_user_rejected(self, companyless_actor, company):
        with pytest.raises(NoCompanyLinked):
            list_employees(companyless_actor, company.pk)

    def test_admin_missing_company_not_found(self, admin_actor):
        with pytest.raises(ResourceNotFound):
            list_employees(admin_actor, 999999)


@pytest.mark.django_db
class TestAddEmployee:

    def test_adds_to_own_company(self, owner_actor, company):
        result = add_employee(owner_actor, company.pk, "Erin", grade="C1", dept="Ops", salary=Decimal("28000"))

        assert result.success
        assert result.data.company_id == company.pk
        assert Employee.objects.filter(company=company, name="Erin").exists()

    def test_blank_name_rejected(self, owner_actor, company):
        result = add_employee(owner_actor, company.pk, "   ")

        assert not result.success
        assert not Employee.objects.exists()

    def test_negative_salary_rejected(self, owner_actor, company):
        result = add_employee(owner_actor, company.pk, "Erin", salary=Decimal("-1"))

        assert not result.success

    def test_other_company_denied(self, owner_actor, other_company):
        with pytest.raises(AccessDenied):
            add_employee(owner_actor, other_company.pk, "Mallory")

        assert not Employee.objects.filter(name="Mallory").exists()


@pytest.mark.django_db
class TestUpdateEmployee:

    def test_partial_update(self, owner_actor, employee):
        result = update_employee(owner_actor, employee.pk, dept="Logistics")

        assert result.success
        employee.refresh_from_db()
        assert employee.dept == "Logistics"
        assert employee.name == "Carol"
        assert employee.salary == Decimal("32000.00")

    def test_explicit_zero_salary_applied(self, owner_actor, employee):
        update_employee(owner_actor, employee.pk, salary=Decimal("0"))

        employee.refresh_from_db()
        assert employee.salary == Decimal("0.00")

    def test_unknown_field_rejected(self, owner_actor, employee, other_company):
        result = update_employee(owner_actor, employee.pk, company_id=other_company.pk)

        assert not result.success
        employee.refresh_from_db()
        assert employee.company_id != other_company.pk

    def test_other_company_employee_denied(self, owner_actor, other_employee):
        with pytest.raises(AccessDenied):
            update_employee(owner_actor, other_employee.pk, name="Renamed")

        other_employee.refresh_from_db()
        assert other_employee.name == "Dave"

    def test_missing_employee_denied_for_user(self, owner_actor):
        with pytest.raises(AccessDenied):
            update_employee(owner_actor, 999999, name="Ghost")

    def test_admin_updates_any_employee(self, admin_actor, other_employee):
        assert update_employee(admin_actor, other_employee.pk, grade="A2").success


@pytest.mark.django_db
class TestDeleteEmployee:

    def test_deletes_own_employee(self, owner_actor, employee):
        assert delete_employee(owner_actor, employee.pk).success
        assert not Employee.objects.filter(pk=employee.pk).exists()

    def test_other_company_employee_denied(self, owner_actor, other_employee):
        with pytest.raises(AccessDenied):
            delete_employee(owner_actor, other_employee.pk)

        assert Employee.objects.filter(pk=other_employee.pk).exists()

    def test_admin_missing_employee_not_found(self, admin_actor):
        with pytest.raises(ResourceNotFound):
            delete_employee(admin_actor, 999999)
