"""Error taxonomy shared by the tools, the web layer and the CLI.

Every error carries a short ``code`` (shown to API callers as ``error``), a
human-readable message and the HTTP status it maps to.
"""


class SpendbookError(Exception):
    """Base class for all expected failures."""

    code = "Error"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class UserNotFound(SpendbookError):
    code = "User Not Found"
    status = 404


class InternalFailure(SpendbookError):
    """Unexpected store or computation failure."""

    code = "Internal Failure"
    status = 500


class ValidationError(SpendbookError):
    """A request field is malformed or out of its domain."""

    code = "Validation Error"
    status = 400


class InvalidCategory(ValidationError):
    code = "Invalid Category"


class InvalidDescription(ValidationError):
    code = "Invalid Description"


class InvalidUserId(ValidationError):
    code = "Invalid User ID"


class MissingUserId(InvalidUserId):
    """The report request has no user id.

    Shares the invalid-id error code. The status is decided per request by
    the web layer (see the ``missing_report_id`` setting), so it is not
    fixed here.
    """


class InvalidYearFormat(ValidationError):
    code = "Invalid Year Format"


class InvalidYearRange(ValidationError):
    code = "Invalid Year Range"


class InvalidMonthFormat(ValidationError):
    code = "Invalid Month Format"


class InvalidMonth(ValidationError):
    code = "Invalid Month"


class AddCostFailed(ValidationError):
    """Generic failure to add a cost item."""

    code = "Failed To Add Cost Item"


class InvalidSum(AddCostFailed):
    pass


class InvalidDate(AddCostFailed):
    pass
