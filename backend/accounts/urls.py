# accounts/urls.py
"""
URL configuration for accounts/auth API.

Endpoints:
- /auth/ - Registration, login, current identity
- /companies/ - Company list (ADMIN), own company id, company detail
"""

from django.urls import path

from .views import (
    # Auth
    RegisterView,
    LoginView,
    MeView,
    # Companies
    CompanyListView,
    OwnCompanyView,
    CompanyDetailView,
)

app_name = "accounts"

urlpatterns = [
    # ==========================================================================
    # Authentication
    # ==========================================================================
    path("auth/register/", RegisterView.as_view(), name="register"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/me/", MeView.as_view(), name="me"),

    # ==========================================================================
    # Companies
    # ==========================================================================
    path("companies/", CompanyListView.as_view(), name="company-list"),
    path("companies/mine/", OwnCompanyView.as_view(), name="company-mine"),
    path("companies/<int:pk>/", CompanyDetailView.as_view(), name="company-detail"),
]
