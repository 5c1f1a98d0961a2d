from types import MappingProxyType
from typing import Mapping, Optional

from .errors import InvalidStatus
from .models import ReportStatus

REVENUE_STATUS_CODES: Mapping[str, str] = MappingProxyType(
    {"success": "0300", "failed": "0399", "pending": "0002"}
)
CDMA_STATUS_CODES: Mapping[str, str] = MappingProxyType({"success": "S", "failed": "F"})

CDMA_SUB_SERVICES: Mapping[str, str] = MappingProxyType(
    {
        "wt": "Water Tax Dues",
        "pt": "Property Tax Dues",
        "vlt": "Vacant Land Dues",
        "stax": "Sewerage Dues",
        "tl": "Trade License Dues",
    }
)

_REVENUE_STATUSES = {code: ReportStatus(status.title()) for status, code in REVENUE_STATUS_CODES.items()}
_CDMA_STATUSES = {code: ReportStatus(status.title()) for status, code in CDMA_STATUS_CODES.items()}


def revenue_status_code(status: str) -> str:
    try:
        return REVENUE_STATUS_CODES[status]
    except KeyError:
        raise InvalidStatus(detail=f"Invalid payment status '{status}'") from None


def revenue_status_from_code(code: Optional[str]) -> ReportStatus:
    """Revenue codes outside the table are reported as failed payments."""
    return _REVENUE_STATUSES.get(code, ReportStatus.FAILED)


def cdma_status_code(status: str) -> str:
    try:
        return CDMA_STATUS_CODES[status]
    except KeyError:
        raise InvalidStatus(
            detail=f"Invalid payment status '{status}' for CDMA Services"
        ) from None


def cdma_status_from_code(code: Optional[str]) -> Optional[ReportStatus]:
    """Unlike revenue, an unknown CDMA code leaves the status unset."""
    return _CDMA_STATUSES.get(code)


def cdma_sub_service(code: Optional[str]) -> str:
    if code is None:
        return ""
    return CDMA_SUB_SERVICES.get(str(code).lower(), "")
