"""
Roster API: Exception Hierarchy
=================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Services raise these; global handlers registered in roster.main turn
       them into JSON responses.

Exception Hierarchy:
    RosterError (base)
    ├── NotFoundError      → 404 {"message": "Not found"}
    └── PersistenceError   → 500 {"error": <underlying message>}

    Request bodies that fail schema validation never reach a service;
    FastAPI answers them with its standard 422.
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base exception for all Roster application errors.

    Attributes:
        message:  Text returned in the API response
        context:  Extra debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(RosterError):
    """
    Raised when a requested record does not exist.

    SQLAlchemy returns None for missing rows; the service layer converts
    that None into this exception so routes never check for it.
    The response message is fixed; the resource and id only go to the logs.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class PersistenceError(RosterError):
    """
    Raised when the database rejects or fails an operation.

    What:    Constraint violation, connection loss, bad SQL, etc.
    HTTP:    500, with the driver's message passed through unchanged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
