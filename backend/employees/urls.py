# employees/urls.py
from django.urls import path

from .views import CompanyEmployeeListCreateView, EmployeeDetailView

app_name = "employees"

urlpatterns = [
    path(
        "companies/<int:company_id>/employees/",
        CompanyEmployeeListCreateView.as_view(),
        name="company-employee-list",
    ),
    path(
        "employees/<int:pk>/",
        EmployeeDetailView.as_view(),
        name="employee-detail",
    ),
]
