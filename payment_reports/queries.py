import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from .codes import cdma_status_code, revenue_status_code
from .config import settings
from .models import ReportFilters
from .timestamps import as_utc

logger = logging.getLogger(__name__)

Query = Dict[str, Any]

# Time windows are not checked for end > start or a two-day maximum span.


def _time_window(filters: ReportFilters) -> Optional[Dict[str, datetime]]:
    if filters.start_time is None and filters.end_time is None:
        return None
    window: Dict[str, datetime] = {}
    if filters.start_time is not None:
        window["$gte"] = as_utc(filters.start_time)
    if filters.end_time is not None:
        window["$lte"] = as_utc(filters.end_time)
    return window


def build_revenue_query(
    filters: ReportFilters,
    correlation_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Query:
    """Query for revenue payments.

    Without any time bound, only payments created in the last
    ``default_lookback_hours`` are selected.
    """
    query: Query = {}
    if filters.service_name:
        query["servicename"] = filters.service_name

    window = _time_window(filters)
    if window is None:
        now = now or datetime.now(timezone.utc)
        window = {"$gte": as_utc(now) - timedelta(hours=settings.default_lookback_hours)}
    query["createdate"] = window

    if filters.status:
        query["payment_status"] = revenue_status_code(filters.status)

    logger.info(
        "Revenue report query built",
        extra={"correlation_id": correlation_id, "query": query},
    )
    return query


def build_cdma_query(filters: ReportFilters, correlation_id: Optional[str] = None) -> Query:
    """Query for CDMA payments; no time bound means no time constraint."""
    query: Query = {}
    if filters.service_name:
        query["heading_msg"] = filters.service_name

    window = _time_window(filters)
    if window is not None:
        query["created_date"] = window

    if filters.status:
        query["trans_status"] = cdma_status_code(filters.status)

    logger.info(
        "CDMA report query built",
        extra={"correlation_id": correlation_id, "query": query},
    )
    return query
