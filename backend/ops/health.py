"""
Health probes for the Stockroom backend.

Endpoints (no authentication, see ops/urls.py):
- /_health/live  - process is up; touches nothing
- /_health/ready - default database answers queries
- /_health/full  - every registered check, for dashboards and debugging

Checks return plain dicts with a "status" of healthy, unhealthy or error
so the full report can be serialized as-is.
"""
import logging
import time
from typing import Any, Callable, Dict

from django.conf import settings
from django.db import DatabaseError, connections
from django.db.models import F
from django.http import JsonResponse
from django.views import View

logger = logging.getLogger(__name__)

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"
ERROR = "error"


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 2)


class HealthCheck:
    """Named checks; add new ones to CHECKS at the bottom of the module."""

    @staticmethod
    def check_database(alias: str = "default") -> Dict[str, Any]:
        start = time.monotonic()
        try:
            with connections[alias].cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as e:
            logger.warning("Database health check failed", extra={"alias": alias, "error": str(e)})
            return {"status": UNHEALTHY, "alias": alias, "error": str(e), "duration_ms": _elapsed_ms(start)}
        return {"status": HEALTHY, "alias": alias, "duration_ms": _elapsed_ms(start)}

    @staticmethod
    def check_all_databases() -> Dict[str, Any]:
        results = {alias: HealthCheck.check_database(alias) for alias in settings.DATABASES}
        ok = all(r["status"] == HEALTHY for r in results.values())
        return {"status": HEALTHY if ok else UNHEALTHY, "databases": results}

    @staticmethod
    def check_tenant_ownership() -> Dict[str, Any]:
        """Every USER identity must own a company; ADMINs own none."""
        from accounts.models import Company, User

        try:
            orphans = User.objects.filter(role=User.Role.USER, company__isnull=True).count()
            companies = Company.objects.count()
        except DatabaseError as e:
            return {"status": ERROR, "error": str(e)}

        report = {"status": HEALTHY if orphans == 0 else UNHEALTHY, "companies": companies}
        if orphans:
            report["users_without_company"] = orphans
            report["error"] = "USER identities without a company"
        return report

    @staticmethod
    def check_stock_contract() -> Dict[str, Any]:
        """Stored closing stock must equal opening + receipts - issues."""
        from inventory.models import InventoryItem

        try:
            drifted = InventoryItem.objects.exclude(
                closing_stock=F("opening_stock") + F("receipts") - F("issues"),
            ).count()
        except DatabaseError as e:
            return {"status": ERROR, "error": str(e)}

        report = {"status": HEALTHY if drifted == 0 else UNHEALTHY}
        if drifted:
            report["items_out_of_contract"] = drifted
            report["error"] = "Inventory items whose closing stock does not match their movements"
        return report

    @classmethod
    def get_full_health(cls) -> Dict[str, Any]:
        checks = {name: check() for name, check in CHECKS.items()}
        statuses = {c["status"] for c in checks.values()}
        if statuses == {HEALTHY}:
            overall = HEALTHY
        elif UNHEALTHY in statuses:
            overall = UNHEALTHY
        else:
            overall = "degraded"

        return {
            "status": overall,
            "checks": checks,
            "version": getattr(settings, "VERSION", "unknown"),
            "environment": "development" if settings.DEBUG else "production",
        }


CHECKS: Dict[str, Callable[[], Dict[str, Any]]] = {
    "databases": HealthCheck.check_all_databases,
    "tenant_ownership": HealthCheck.check_tenant_ownership,
    "stock_contract": HealthCheck.check_stock_contract,
}


class LivenessView(View):
    """Liveness probe: answers without touching the database."""

    def get(self, request):
        return JsonResponse({"status": "alive"})


class ReadinessView(View):
    """Readiness probe: 503 until the default database answers."""

    def get(self, request):
        db = HealthCheck.check_database("default")
        ready = db["status"] == HEALTHY
        return JsonResponse(
            {"status": "ready" if ready else "not_ready", "database": db},
            status=200 if ready else 503,
        )


class FullHealthView(View):
    def get(self, request):
        health = HealthCheck.get_full_health()
        return JsonResponse(health, status=200 if health["status"] == HEALTHY else 503)
