class ReportError(Exception):
    """Base failure carrying the HTTP status the boundary should answer with."""

    status_code: int = 500
    message: str = "Unable to fetch payment reports"

    def __init__(self, message: str = "", detail: str = ""):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)


class InvalidStatus(ReportError):
    """Status filter outside the set a department understands."""

    status_code = 403
    message = "Invalid Status!. Please send the valid status."


class UnknownDepartment(ReportError):
    status_code = 402
    message = "Invalid department!. Please send the valid department"


class StoreFailure(ReportError):
    """The backing store could not be read."""

    status_code = 500
    message = "Error in reading payment reports"


class MalformedRecord(ReportError):
    """A stored payment document is missing fields the report needs."""

    status_code = 500
    message = "Malformed payment record in store"
