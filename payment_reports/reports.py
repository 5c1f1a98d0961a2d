import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from .errors import MalformedRecord, StoreFailure, UnknownDepartment
from .mappers import map_cdma_record, map_revenue_record
from .models import Department, PaymentReport, ReportFilters
from .queries import build_cdma_query, build_revenue_query
from .store import RecordStore

logger = logging.getLogger(__name__)


class PaymentReportsService:
    """Builds canonical payment reports out of each department's store."""

    def __init__(self, stores: Dict[Department, RecordStore]):
        self.stores = stores

    async def get_reports(
        self,
        department: Optional[str],
        filters: ReportFilters,
        correlation_id: Optional[str] = None,
    ) -> List[PaymentReport]:
        try:
            selected = Department((department or "").lower())
        except ValueError:
            raise UnknownDepartment(
                detail=f"Invalid Department Name. {department} doesn't exists"
            ) from None

        if selected is Department.REVENUE:
            return await self._revenue_reports(filters, correlation_id)
        if selected is Department.CDMA:
            return await self._cdma_reports(filters, correlation_id)
        raise UnknownDepartment(detail=f"No report pipeline for {selected.value}")

    async def _revenue_reports(
        self, filters: ReportFilters, correlation_id: Optional[str]
    ) -> List[PaymentReport]:
        query = build_revenue_query(filters, correlation_id)
        try:
            documents = await self.stores[Department.REVENUE].find(query)
            return [map_revenue_record(doc) for doc in documents]
        except StoreFailure as exc:
            _log_failure("Revenue", "_revenue_reports", correlation_id, exc)
            raise
        except ValidationError as exc:
            _log_failure("Revenue", "_revenue_reports", correlation_id, exc)
            raise MalformedRecord(detail=str(exc)) from exc

    async def _cdma_reports(
        self, filters: ReportFilters, correlation_id: Optional[str]
    ) -> List[PaymentReport]:
        query = build_cdma_query(filters, correlation_id)
        try:
            documents = await self.stores[Department.CDMA].find(query)
            return [map_cdma_record(doc) for doc in documents]
        except StoreFailure as exc:
            _log_failure("CDMA", "_cdma_reports", correlation_id, exc)
            raise
        except ValidationError as exc:
            _log_failure("CDMA", "_cdma_reports", correlation_id, exc)
            raise MalformedRecord(detail=str(exc)) from exc


def _log_failure(
    department: str, function: str, correlation_id: Optional[str], exc: Exception
) -> None:
    logger.error(
        f"Error in getting reports for the {department} Services",
        extra={"correlation_id": correlation_id, "function": function, "error": str(exc)},
    )
