from datetime import datetime, timezone

import pytest
from pymongo.errors import PyMongoError

from payment_reports.config import Settings
from payment_reports.errors import StoreFailure
from payment_reports.models import Department, ReportFilters
from payment_reports.simulated_sources import seed_store
from payment_reports.store import InMemoryRecordStore, MongoRecordStore, create_stores
from tests.factories import revenue_document


class FakeCollection:
    name = "revenue_payment_reports"

    def __init__(self, documents=None, error=None):
        self.documents = documents or []
        self.error = error
        self.queries = []

    def find(self, query):
        self.queries.append(query)
        if self.error:
            raise self.error
        return iter(self.documents)


@pytest.mark.asyncio
async def test_in_memory_store_filters_by_equality_and_range():
    store = InMemoryRecordStore(
        "revenue",
        [
            revenue_document(servicename="Electricity", createdate="2024-01-01T00:00:00Z"),
            revenue_document(servicename="Stamps", createdate="2024-01-01T00:00:00Z"),
            revenue_document(servicename="Electricity", createdate=datetime(2024, 2, 1)),
        ],
    )
    query = {
        "servicename": "Electricity",
        "createdate": {"$lte": datetime(2024, 1, 15, tzinfo=timezone.utc)},
    }

    found = await store.find(query)

    assert len(found) == 1
    assert found[0]["createdate"] == "2024-01-01T00:00:00Z"


@pytest.mark.asyncio
async def test_in_memory_store_skips_documents_without_range_field():
    store = InMemoryRecordStore("cdma", [{"trans_status": "S"}])
    assert await store.find({"created_date": {"$gte": datetime(2024, 1, 1, tzinfo=timezone.utc)}}) == []


@pytest.mark.asyncio
async def test_mongo_store_returns_documents():
    collection = FakeCollection(documents=[{"servicename": "Electricity"}])
    store = MongoRecordStore(collection)

    assert await store.find({"servicename": "Electricity"}) == [{"servicename": "Electricity"}]
    assert collection.queries == [{"servicename": "Electricity"}]


@pytest.mark.asyncio
async def test_mongo_errors_become_store_failures():
    store = MongoRecordStore(FakeCollection(error=PyMongoError("connection refused")))
    with pytest.raises(StoreFailure) as exc_info:
        await store.find({})
    assert exc_info.value.status_code == 500
    assert "connection refused" in exc_info.value.detail


def test_memory_backend_by_default():
    stores = create_stores(Settings())
    assert set(stores) == {Department.REVENUE, Department.CDMA}
    assert all(isinstance(s, InMemoryRecordStore) for s in stores.values())


def test_mongo_backend_uses_configured_collections():
    stores = create_stores(Settings(store_backend="mongo", cdma_collection="cdma_docs"))
    assert isinstance(stores[Department.CDMA], MongoRecordStore)
    assert stores[Department.CDMA].collection.name == "cdma_docs"


@pytest.mark.asyncio
async def test_seeded_records_map_cleanly(service):
    store = InMemoryRecordStore("cdma")
    seed_store(store, Department.CDMA, 20)
    service.stores[Department.CDMA] = store

    reports = await service.get_reports("cdma", ReportFilters())

    assert len(store) == 20
    assert len(reports) == 20
    assert all(r.status is None or r.status.value in ("Success", "Failed") for r in reports)
