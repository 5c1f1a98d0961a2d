import random
import string
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from .models import Department
from .store import InMemoryRecordStore

REVENUE_SERVICES = ["Electricity", "Land Records", "Stamps", "Registration"]
REVENUE_CODES = ["0300", "0399", "0002", "0000"]
CDMA_SERVICE_CODES = ["WT", "pt", "vlt", "stax", "tl", "mr"]
CDMA_CODES = ["S", "F", "P"]


def _digits(length: int) -> str:
    return "".join(random.choices(string.digits, k=length))


def _mobile() -> str:
    return random.choice("6789") + _digits(9)


def _created_at() -> datetime:
    return datetime.now(timezone.utc) - timedelta(seconds=random.randint(0, 3600))


def random_revenue_record() -> Dict[str, Any]:
    created = _created_at()
    completed = random.random() < 0.8
    return {
        "servicename": random.choice(REVENUE_SERVICES),
        "amount": random.randint(10, 5000),
        "mobileno": _mobile(),
        "payment_status": random.choice(REVENUE_CODES),
        "orderid": f"ORD{_digits(10)}",
        "reference_id": str(uuid.uuid4()),
        "transactionid": f"TXN{_digits(12)}",
        "transactionid_payment": f"DEP{_digits(12)}",
        "createdate": created,
        "updated_date": created + timedelta(seconds=random.randint(5, 120)) if completed else None,
    }


def random_cdma_record() -> Dict[str, Any]:
    created = _created_at()
    return {
        "service_code": random.choice(CDMA_SERVICE_CODES),
        "heading_msg": "Know Your Dues",
        "trans_status": random.choice(CDMA_CODES),
        "amount": round(random.uniform(100, 20000), 2),
        "consumerid": int(_digits(8)),
        "tr_create_response": {"CFMS_TRID": int(_digits(10))},
        "dept_transaction_id": f"CDMA{_digits(10)}",
        "mobileno": _mobile(),
        "created_date": created,
        "updated_date": created + timedelta(seconds=random.randint(5, 120)),
    }


def seed_store(store: InMemoryRecordStore, department: Department, count: int) -> None:
    """Fill an in-memory store with documents in the department's native schema."""
    factory = random_revenue_record if department is Department.REVENUE else random_cdma_record
    for _ in range(count):
        store.add(factory())
