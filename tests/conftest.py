from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from payment_reports.main import app, get_service
from payment_reports.models import Department
from payment_reports.reports import PaymentReportsService
from payment_reports.store import InMemoryRecordStore
from tests.factories import cdma_document, revenue_document


@pytest.fixture
def recent():
    return datetime.now(timezone.utc) - timedelta(minutes=10)


@pytest.fixture
def stores(recent):
    return {
        Department.REVENUE: InMemoryRecordStore(
            "revenue",
            [
                revenue_document(),
                revenue_document(
                    servicename="Stamps",
                    payment_status="0002",
                    createdate=recent,
                    updated_date=recent + timedelta(minutes=1),
                ),
            ],
        ),
        Department.CDMA: InMemoryRecordStore(
            "cdma",
            [
                cdma_document(),
                cdma_document(service_code="PT", trans_status="F", created_date=recent),
            ],
        ),
    }


@pytest.fixture
def service(stores):
    return PaymentReportsService(stores)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
