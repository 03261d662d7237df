"""
Error Taxonomy.

Exceptions raised at the boundaries of the roster pipeline (registry
lookups, record set construction, view state validation, detail lookups).
The pipeline stages themselves are total over well-typed input and never
raise.

Every error can render itself as a problem document (RFC 7807 shape) so a
web layer can return it as ``application/problem+json`` unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RosterError(Exception):
    """Base class for all roster pipeline errors."""

    status: int = 500
    title: str = "Internal Error"

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail if detail is not None else message

    def to_problem(self, instance: Optional[str] = None) -> Dict[str, Any]:
        """
        Render as a problem document.

        Args:
            instance: Optional URI identifying the failing request

        Returns:
            Dict with type, title, status, detail (and instance if given)
        """
        problem: Dict[str, Any] = {
            "type": "about:blank",
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
        }
        if instance:
            problem["instance"] = instance
        return problem


class ValidationError(RosterError):
    """Raised when a view state or input fails validation."""

    status = 400
    title = "Validation Failed"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class RecordNotFound(RosterError):
    """Raised when a record cannot be found in any source."""

    status = 404
    title = "Not Found"

    def __init__(self, entity: str, record_id: str) -> None:
        super().__init__(f"{entity} '{record_id}' not found")
        self.entity = entity
        self.record_id = record_id


class ViewNotFound(RosterError):
    """Raised when a list view is not registered."""

    status = 404
    title = "Not Found"

    def __init__(self, view_name: str) -> None:
        super().__init__(f"List view '{view_name}' is not registered")
        self.view_name = view_name


class ConflictError(RosterError):
    """Raised when an identifier is not unique."""

    status = 409
    title = "Conflict"


class TransientError(RosterError):
    """Raised by a data source that is temporarily unavailable."""

    status = 503
    title = "Service Unavailable"
