"""
Customer Portal - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into JSON
       responses; context is logged, never returned to the client.

Exception Hierarchy:
    CustomerPortalError (base)
    └── NotFoundError               → 404 Not Found
        └── CustomerNotFoundError   → 404 {"success": false, "message": "Customer not found"}

There is no "bad request" class: an identifier that cannot be
parsed is reported exactly like one that does not exist.
"""

from typing import Any, Dict, Optional


class CustomerPortalError(Exception):
    """
    Base exception for all Customer Portal application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(CustomerPortalError):
    """
    Raised when a requested resource does not exist.

    HTTP: 404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(
            message=message or f"The requested {resource} was not found",
            context=ctx,
        )


class CustomerNotFoundError(NotFoundError):
    """
    Raised by the customer lookup when no record matches.

    What:  Covers both unknown ids (`/api/customers/999`) and ids that do not
           parse as an integer (`/api/customers/abc`).
    HTTP:  404 with body {"success": false, "message": "Customer not found"}
    """

    def __init__(self, raw_id: Optional[str] = None):
        super().__init__(
            resource="customer",
            resource_id=raw_id,
            message="Customer not found",
        )
        self.raw_id = raw_id
