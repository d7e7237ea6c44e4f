# employees/serializers.py
"""
Serializers for the employees API.

Input serializers only validate shape; the commands decide what is
allowed. Update fields are all optional: an absent key means
"leave unchanged", an explicit value (including 0) is applied.
"""

from decimal import Decimal

from rest_framework import serializers

from .models import Employee


class EmployeeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ("id", "company", "name", "grade", "dept", "salary", "created_at", "updated_at")
        read_only_fields = fields


class EmployeeCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    grade = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    dept = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    salary = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        default=Decimal("0.00"),
    )


class EmployeeUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    grade = serializers.CharField(max_length=50, required=False, allow_blank=True)
    dept = serializers.CharField(max_length=100, required=False, allow_blank=True)
    salary = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
    )
