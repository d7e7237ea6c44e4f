"""
Thin views that delegate to the inventory command layer.

All stock arithmetic happens in inventory.valuation via the commands;
views never set derived fields.
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authz import resolve_actor
from .commands import (
    add_inventory_item,
    delete_inventory_item,
    list_inventory,
    list_out_of_stock,
    list_reorder,
    update_inventory_item,
)
from .serializers import (
    InventoryItemCreateSerializer,
    InventoryItemSerializer,
    InventoryItemUpdateSerializer,
)


class CompanyInventoryListCreateView(APIView):
    """
    GET /api/companies/<company_id>/inventory/ -> list items (?product_name= to search)
    POST /api/companies/<company_id>/inventory/ -> create a blank item
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, company_id):
        actor = resolve_actor(request)
        result = list_inventory(
            actor,
            company_id,
            product_name=request.query_params.get("product_name"),
        )
        return Response(InventoryItemSerializer(result.data, many=True).data)

    def post(self, request, company_id):
        actor = resolve_actor(request)

        input_serializer = InventoryItemCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        result = add_inventory_item(actor, company_id, input_serializer.to_spec())

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(InventoryItemSerializer(result.data).data, status=status.HTTP_201_CREATED)


class OutOfStockView(APIView):
    """GET /api/companies/<company_id>/inventory/out-of-stock/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, company_id):
        actor = resolve_actor(request)
        result = list_out_of_stock(actor, company_id)
        return Response(InventoryItemSerializer(result.data, many=True).data)


class ReorderView(APIView):
    """GET /api/companies/<company_id>/inventory/reorder/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, company_id):
        actor = resolve_actor(request)
        result = list_reorder(actor, company_id)
        return Response(InventoryItemSerializer(result.data, many=True).data)


class InventoryItemDetailView(APIView):
    """
    PATCH /api/inventory/<pk>/ -> partial update + recompute
    DELETE /api/inventory/<pk>/ -> delete
    """
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        actor = resolve_actor(request)

        input_serializer = InventoryItemUpdateSerializer(data=request.data, partial=True)
        input_serializer.is_valid(raise_exception=True)

        result = update_inventory_item(actor, pk, input_serializer.validated_data)

        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(InventoryItemSerializer(result.data).data)

    def delete(self, request, pk):
        actor = resolve_actor(request)
        delete_inventory_item(actor, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
