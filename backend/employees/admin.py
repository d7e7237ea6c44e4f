from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("name", "grade", "dept", "salary", "company")
    list_filter = ("dept",)
    search_fields = ("name", "company__name")
