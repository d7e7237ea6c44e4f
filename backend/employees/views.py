"""
Thin views that delegate to the employees command layer.
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authz import resolve_actor
from .commands import add_employee, delete_employee, list_employees, update_employee
from .serializers import EmployeeCreateSerializer, EmployeeSerializer, EmployeeUpdateSerializer


class CompanyEmployeeListCreateView(APIView):
    """
    GET /api/companies/<company_id>/employees/ -> list the company's employees
    POST /api/companies/<company_id>/employees/ -> add an employee
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, company_id):
        actor = resolve_actor(request)
        result = list_employees(actor, company_id)
        return Response(EmployeeSerializer(result.data, many=True).data)

    def post(self, request, company_id):
        actor = resolve_actor(request)

        input_serializer = EmployeeCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        result = add_employee(actor, company_id, **input_serializer.validated_data)

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(EmployeeSerializer(result.data).data, status=status.HTTP_201_CREATED)


class EmployeeDetailView(APIView):
    """
    PATCH /api/employees/<pk>/ -> partial update
    DELETE /api/employees/<pk>/ -> delete
    """
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        actor = resolve_actor(request)

        input_serializer = EmployeeUpdateSerializer(data=request.data, partial=True)
        input_serializer.is_valid(raise_exception=True)

        result = update_employee(actor, pk, **input_serializer.validated_data)

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(EmployeeSerializer(result.data).data)

    def delete(self, request, pk):
        actor = resolve_actor(request)
        delete_employee(actor, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
