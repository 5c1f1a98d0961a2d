import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Protocol

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings
from .errors import StoreFailure
from .models import Department
from .timestamps import as_utc

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    async def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        ...


def _compare(stored: Any, bound: Any) -> tuple:
    if isinstance(stored, (datetime, str)) and isinstance(bound, datetime):
        return as_utc(stored), as_utc(bound)
    return stored, bound


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for field, condition in query.items():
        value = document.get(field)
        if isinstance(condition, dict):
            if value is None:
                return False
            for operator, bound in condition.items():
                stored, limit = _compare(value, bound)
                if operator == "$gte" and not stored >= limit:
                    return False
                if operator == "$lte" and not stored <= limit:
                    return False
                if operator not in ("$gte", "$lte"):
                    raise StoreFailure(detail=f"Unsupported operator '{operator}'")
        elif value != condition:
            return False
    return True


class InMemoryRecordStore:
    """In-memory stand-in for a department's payment collection."""

    def __init__(self, name: str, documents: Optional[Iterable[Dict[str, Any]]] = None):
        self.name = name
        self._documents: List[Dict[str, Any]] = list(documents or [])

    def add(self, document: Dict[str, Any]) -> Dict[str, Any]:
        self._documents.append(document)
        return document

    async def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [dict(doc) for doc in self._documents if _matches(doc, query)]

    def __len__(self) -> int:
        return len(self._documents)


class MongoRecordStore:
    """Read-only access to a MongoDB payment collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    async def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(lambda: list(self.collection.find(query)))
        except PyMongoError as exc:
            logger.error(
                "Error reading payment reports from MongoDB",
                extra={"collection": self.collection.name, "error": str(exc)},
            )
            raise StoreFailure(detail=str(exc)) from exc


def create_stores(settings: Settings) -> Dict[Department, RecordStore]:
    backend = settings.store_backend.lower()
    if backend == "mongo":
        client: MongoClient = MongoClient(settings.mongo_uri, tz_aware=True)
        db = client[settings.mongo_database]
        return {
            Department.REVENUE: MongoRecordStore(db[settings.revenue_collection]),
            Department.CDMA: MongoRecordStore(db[settings.cdma_collection]),
        }
    return {
        Department.REVENUE: InMemoryRecordStore(Department.REVENUE.value),
        Department.CDMA: InMemoryRecordStore(Department.CDMA.value),
    }
