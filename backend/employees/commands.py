# employees/commands.py
"""
Command layer for employee operations.

Every command takes the caller's ActorContext and authorizes against
the employee's company before touching data:
- list/add: the company id from the request
- update/delete: the stored employee's company (load_for)
"""

import logging
from decimal import Decimal

from django.db import transaction

from accounts.authz import ActorContext, Operation, load_for, require
from accounts.commands import CommandResult
from accounts.exceptions import ResourceNotFound
from accounts.models import Company
from employees.models import Employee

logger = logging.getLogger(__name__)

EMPLOYEE_UPDATABLE_FIELDS = ("name", "grade", "dept", "salary")


def _validate(changes: dict):
    """Return an error message for invalid field values, else None."""
    if "name" in changes and not (changes["name"] or "").strip():
        return "Employee name cannot be blank."
    if "salary" in changes and changes["salary"] is not None and Decimal(changes["salary"]) < 0:
        return "Salary cannot be negative."
    return None


def list_employees(actor: ActorContext, company_id: int) -> CommandResult:
    require(actor, company_id, Operation.EMPLOYEE_VIEW)
    if not Company.objects.filter(pk=company_id).exists():
        raise ResourceNotFound("Company not found.")
    return CommandResult.ok(data=list(Employee.objects.for_company(company_id)))


@transaction.atomic
def add_employee(
    actor: ActorContext,
    company_id: int,
    name: str,
    grade: str = "",
    dept: str = "",
    salary: Decimal = Decimal("0.00"),
) -> CommandResult:
    """
    Add an employee to a company.

    Returns:
        CommandResult with the created Employee
    """
    require(actor, company_id, Operation.EMPLOYEE_CREATE)
    if not Company.objects.filter(pk=company_id).exists():
        raise ResourceNotFound("Company not found.")

    error = _validate({"name": name, "salary": salary})
    if error:
        return CommandResult.fail(error)

    employee = Employee.objects.create(
        company_id=company_id,
        name=name.strip(),
        grade=grade or "",
        dept=dept or "",
        salary=salary,
    )
    logger.info(
        "Employee added",
        extra={"employee_id": employee.pk, "company_id": company_id, "by": actor.username},
    )
    return CommandResult.ok(data=employee)


@transaction.atomic
def update_employee(actor: ActorContext, employee_id: int, **changes) -> CommandResult:
    """
    Partially update an employee.

    Only keys present in ``changes`` are applied, so an explicit zero
    salary is a real change.
    """
    employee = load_for(
        actor,
        Employee.objects.select_for_update(),
        employee_id,
        Operation.EMPLOYEE_UPDATE,
    )

    unknown = set(changes) - set(EMPLOYEE_UPDATABLE_FIELDS)
    if unknown:
        return CommandResult.fail(f"Unknown employee fields: {', '.join(sorted(unknown))}.")

    error = _validate(changes)
    if error:
        return CommandResult.fail(error)

    if "name" in changes:
        changes["name"] = changes["name"].strip()

    for field, value in changes.items():
        setattr(employee, field, value)
    if changes:
        employee.save(update_fields=[*changes, "updated_at"])

    return CommandResult.ok(data=employee)


@transaction.atomic
def delete_employee(actor: ActorContext, employee_id: int) -> CommandResult:
    employee = load_for(actor, Employee.objects.all(), employee_id, Operation.EMPLOYEE_DELETE)
    employee.delete()
    logger.info(
        "Employee deleted",
        extra={"employee_id": employee_id, "by": actor.username},
    )
    return CommandResult.ok()
