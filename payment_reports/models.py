from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Department(str, Enum):
    REVENUE = "revenue"
    CDMA = "cdma"


class ReportStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    PENDING = "Pending"


class ReportFilters(BaseModel):
    """Optional filters narrowing a department's payment reports."""

    model_config = ConfigDict(populate_by_name=True)

    service_name: Optional[str] = Field(default=None, alias="service")
    status: Optional[str] = None
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    end_time: Optional[datetime] = Field(default=None, alias="endTime")

    @field_validator("service_name", "status", "start_time", "end_time", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("status")
    @classmethod
    def _lower_status(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value is not None else None

    @field_validator("start_time", "end_time")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ReportRequest(ReportFilters):
    """Body accepted by ``POST /reports``."""

    department: Optional[str] = None

    def filters(self) -> ReportFilters:
        return ReportFilters.model_validate(self.model_dump(exclude={"department"}))


class PaymentReport(BaseModel):
    """Canonical report record shared by every department."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    department: Department
    service: str
    sub_service: Optional[str] = None
    status: Optional[ReportStatus] = None
    amount: str
    mobile: Optional[str] = None
    consumer_id: Optional[str] = None
    order_id: Optional[str] = None
    reference_id: Optional[str] = None
    transaction_id: Optional[str] = None
    department_transaction_id: Optional[str] = None
    type: str = "UPI"
    initiated_on: str
    completed_on: Optional[str] = None


class RevenuePaymentRecord(BaseModel):
    """Raw payment document as stored by the Revenue department."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    servicename: Optional[str] = None
    amount: Any
    mobileno: Optional[str] = None
    payment_status: Optional[str] = None
    orderid: Optional[str] = None
    reference_id: Optional[str] = None
    transactionid: Optional[str] = None
    transactionid_payment: Optional[str] = None
    createdate: datetime
    updated_date: Optional[datetime] = None


class TransactionCreateResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    CFMS_TRID: Any = None


class CDMAPaymentRecord(BaseModel):
    """Raw payment document as stored by the CDMA department."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    service_code: Optional[str] = None
    heading_msg: Optional[str] = None
    trans_status: Optional[str] = None
    amount: Any
    consumerid: Any = None
    tr_create_response: TransactionCreateResponse
    dept_transaction_id: Optional[str] = None
    mobileno: Optional[str] = None
    created_date: datetime
    updated_date: Optional[datetime] = None


class ReportsResponse(BaseModel):
    records: List[PaymentReport]
    count: int
    status: str = "SUCCESS"
