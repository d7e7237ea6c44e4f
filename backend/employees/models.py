# employees/models.py
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class EmployeeQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(company_id=company_id)


class Employee(models.Model):
    """A member of staff. Belongs to exactly one company."""

    company = models.ForeignKey(
        "accounts.Company",
        on_delete=models.CASCADE,
        related_name="employees",
    )
    name = models.CharField(max_length=255)
    grade = models.CharField(max_length=50, blank=True)
    dept = models.CharField(max_length=100, blank=True)
    salary = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EmployeeQuerySet.as_manager()

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["company", "name"], name="employee_company_name_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.dept})" if self.dept else self.name
