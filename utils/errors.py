# utils/errors.py
"""
Domain errors raised by the employee store and controller.

Routes convert every one of these into a response; none should reach Flask's
default error handling.
"""


class EmployeeError(Exception):
    """Base error for employee operations."""

    status_code = 500
    message = "Employee operation failed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmployeeNotFound(EmployeeError):
    status_code = 404
    message = "Employee not found"


class EmployeeAlreadyDeleted(EmployeeError):
    """Soft-delete requested for a row that is already deleted."""

    status_code = 404
    message = "Employee not found"


class DuplicateEmail(EmployeeError):
    """The email is already used by another row (active or deleted)."""

    status_code = 409
    message = "Email already registered"


class StoreUnavailable(EmployeeError):
    status_code = 503
    message = "Employee store unavailable"
