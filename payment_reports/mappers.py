from typing import Any, Dict, Optional

from .codes import cdma_status_from_code, cdma_sub_service, revenue_status_from_code
from .models import CDMAPaymentRecord, Department, PaymentReport, RevenuePaymentRecord
from .timestamps import to_display_time

CDMA_SERVICE_NAME = "Know Your Dues"


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    # 100.0 is shown as "100", matching how the amounts were always displayed
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def map_revenue_record(raw: Dict[str, Any]) -> PaymentReport:
    record = RevenuePaymentRecord.model_validate(raw)
    return PaymentReport(
        department=Department.REVENUE,
        service=record.servicename or "",
        amount=_as_text(record.amount),
        mobile=record.mobileno,
        status=revenue_status_from_code(record.payment_status),
        order_id=record.orderid,
        reference_id=record.reference_id,
        transaction_id=record.transactionid,
        department_transaction_id=record.transactionid_payment,
        initiated_on=to_display_time(record.createdate),
        completed_on=to_display_time(record.updated_date),
    )


def map_cdma_record(raw: Dict[str, Any]) -> PaymentReport:
    """Map a CDMA document; the stored heading message is not used as service."""
    record = CDMAPaymentRecord.model_validate(raw)
    return PaymentReport(
        department=Department.CDMA,
        service=CDMA_SERVICE_NAME,
        sub_service=cdma_sub_service(record.service_code),
        status=cdma_status_from_code(record.trans_status),
        amount=_as_text(record.amount),
        consumer_id=_as_text(record.consumerid),
        transaction_id=_as_text(record.tr_create_response.CFMS_TRID),
        department_transaction_id=record.dept_transaction_id,
        mobile=record.mobileno,
        initiated_on=to_display_time(record.created_date),
        completed_on=to_display_time(record.updated_date),
    )
