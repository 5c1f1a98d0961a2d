import logging
import time
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import settings
from .errors import ReportError
from .logging_config import configure_logging
from .models import ReportRequest, ReportsResponse
from .reports import PaymentReportsService
from .simulated_sources import seed_store
from .store import InMemoryRecordStore, create_stores

REQUEST_ID_HEADER = "x-request-id"

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Payment Reports",
    version="0.1.0",
    description="Read-only UPI payment reports across Revenue and CDMA departments.",
)

stores = create_stores(settings)
for department, store in stores.items():
    if isinstance(store, InMemoryRecordStore) and settings.seed_demo_records:
        seed_store(store, department, settings.seed_demo_records)
service = PaymentReportsService(stores)


def get_service() -> PaymentReportsService:
    return service


def _correlation_id(started_ms: int) -> str:
    return f"{started_ms:x}T{started_ms}"


@app.exception_handler(ReportError)
async def report_error_handler(request: Request, exc: ReportError) -> JSONResponse:
    correlation_id: Optional[str] = getattr(request.state, "correlation_id", None)
    logger.warning(
        exc.message,
        extra={"correlation_id": correlation_id, "detail": exc.detail},
    )
    headers = {REQUEST_ID_HEADER: correlation_id} if correlation_id else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "FAILED", "message": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def filter_error_handler(request: Request, exc: RequestValidationError) -> Response:
    response = await request_validation_exception_handler(request, exc)
    correlation_id: Optional[str] = getattr(request.state, "correlation_id", None)
    if correlation_id:
        response.headers[REQUEST_ID_HEADER] = correlation_id
    return response


async def _resolve(
    payload: Dict[str, Any],
    method: str,
    request: Request,
    response: Response,
    reports: PaymentReportsService,
) -> ReportsResponse:
    started_ms = int(time.time() * 1000)
    correlation_id = _correlation_id(started_ms)
    request.state.correlation_id = correlation_id

    try:
        report_request = ReportRequest.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc

    logger.info(
        "Incoming report request",
        extra={"correlation_id": correlation_id, "method": method, "query": payload},
    )

    records = await reports.get_reports(
        report_request.department, report_request.filters(), correlation_id
    )

    logger.info(
        "Report request resolved",
        extra={
            "correlation_id": correlation_id,
            "documents": len(records),
            "elapsed_ms": int(time.time() * 1000) - started_ms,
        },
    )
    response.headers[REQUEST_ID_HEADER] = correlation_id
    return ReportsResponse(records=records, count=len(records))


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/reports", response_model=ReportsResponse, response_model_exclude_none=True)
async def get_reports(
    request: Request,
    response: Response,
    reports: PaymentReportsService = Depends(get_service),
) -> ReportsResponse:
    return await _resolve(dict(request.query_params), "GET", request, response, reports)


@app.post("/reports", response_model=ReportsResponse, response_model_exclude_none=True)
async def post_reports(
    request: Request,
    response: Response,
    reports: PaymentReportsService = Depends(get_service),
) -> ReportsResponse:
    try:
        body = await request.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    return await _resolve(body, "POST", request, response, reports)
