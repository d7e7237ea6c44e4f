"""
Thin views that delegate to the commands layer.

Views handle: HTTP parsing, authentication, response formatting.
Commands handle: authorization, validation, persistence.
"""

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import RoleJWTAuthentication
from .authz import resolve_actor
from .commands import (
    delete_company,
    get_company,
    get_own_company_id,
    list_companies,
    login,
    register_tenant,
    update_company,
)
from .serializers import (
    CompanySerializer,
    CompanyUpdateSerializer,
    LoginSerializer,
    RegistrationSerializer,
    UserSerializer,
)
from .throttles import LoginThrottle, LoginUsernameThrottle, RegistrationThrottle


# =============================================================================
# Auth Views
# =============================================================================

class RegisterView(APIView):
    """POST /api/auth/register/ -> create a USER and the company it owns."""
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_classes = [RegistrationThrottle]

    def post(self, request):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = register_tenant(**serializer.validated_data)

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {"message": "Registration successful", "company_id": result.data.pk},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """POST /api/auth/login/ -> {"token": ..., "role": ...}"""
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_classes = [LoginThrottle, LoginUsernameThrottle]

    def get_authenticate_header(self, request):
        # Without a WWW-Authenticate value DRF renders AuthenticationFailed as 403.
        return RoleJWTAuthentication().authenticate_header(request)

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = login(request=request, **serializer.validated_data)
        return Response(result.data, status=status.HTTP_200_OK)


class MeView(APIView):
    """GET /api/auth/me/ -> the authenticated identity."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


# =============================================================================
# Company Views
# =============================================================================

class CompanyListView(APIView):
    """GET /api/companies/ -> every company (ADMIN only)."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        actor = resolve_actor(request)
        result = list_companies(actor)
        return Response(CompanySerializer(result.data, many=True).data)


class OwnCompanyView(APIView):
    """GET /api/companies/mine/ -> {"company_id": ...} for the caller."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        actor = resolve_actor(request)
        return Response({"company_id": get_own_company_id(actor)})


class CompanyDetailView(APIView):
    """
    GET /api/companies/<pk>/ -> company details
    PATCH /api/companies/<pk>/ -> partial update (name, capacity, location)
    DELETE /api/companies/<pk>/ -> delete with everything it owns (ADMIN only)
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, pk):
        actor = resolve_actor(request)
        result = get_company(actor, pk)
        return Response(CompanySerializer(result.data).data)

    def patch(self, request, pk):
        actor = resolve_actor(request)

        input_serializer = CompanyUpdateSerializer(data=request.data, partial=True)
        input_serializer.is_valid(raise_exception=True)

        result = update_company(actor, pk, **input_serializer.validated_data)

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CompanySerializer(result.data).data)

    def delete(self, request, pk):
        actor = resolve_actor(request)
        delete_company(actor, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
