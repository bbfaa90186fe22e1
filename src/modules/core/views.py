"""Liveness endpoint for load balancers and container orchestrators."""

import time
from typing import Any, Callable, Dict, List

import structlog
from django.db import connections
from django.db.backends.base.base import BaseDatabaseWrapper
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()

# Tables the API cannot serve without; missing means migrations were not run.
REQUIRED_TABLES = ("products",)


def _existing_tables(conn: BaseDatabaseWrapper) -> List[str]:
    return conn.introspection.table_names()


def _ping(conn: BaseDatabaseWrapper) -> None:
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


def _check_tables(conn: BaseDatabaseWrapper) -> None:
    missing = sorted(set(REQUIRED_TABLES) - set(_existing_tables(conn)))
    if missing:
        raise LookupError(f"missing tables: {', '.join(missing)}")


def _probe(name: str, check: Callable[[], None]) -> Dict[str, Any]:
    start = time.monotonic()
    try:
        check()
    except Exception:
        logger.error("health_check_failure", service=name, exc_info=True)
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """GET /health

    ``database`` pings the default connection; ``products_table`` confirms
    the schema is migrated.  The table check is skipped while the database
    is down.
    """
    conn = connections["default"]
    services = {"database": _probe("database", lambda: _ping(conn))}
    if services["database"]["status"] == "up":
        services["products_table"] = _probe(
            "products_table", lambda: _check_tables(conn)
        )
    else:
        services["products_table"] = {"status": "unknown"}

    healthy = all(service["status"] == "up" for service in services.values())
    label = "healthy" if healthy else "unhealthy"
    logger.info("health_check_completed", status=label)

    return JsonResponse(
        {
            "status": label,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
