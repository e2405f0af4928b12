from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """The three failure kinds. Values double as envelope error codes."""
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    INTERNAL = "InternalError"

    @property
    def status_code(self) -> int:
        """Status hint for transport adapters."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class DomainError(Exception):
    """
    Single error type for the device layer.
    The ``kind`` tag selects the variant; the optional fields carry its payload.
    """

    def __init__(
            self,
            kind: ErrorKind,
            message: str,
            field: Optional[str] = None,
            resource: Optional[str] = None,
            resource_id: Optional[str] = None,
    ):
        self.kind = kind
        self.message = message
        self.field = field
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message)

    @classmethod
    def validation(cls, message: str, field: Optional[str] = None) -> "DomainError":
        return cls(ErrorKind.VALIDATION, message, field=field)

    @classmethod
    def not_found(cls, resource: str, resource_id: str) -> "DomainError":
        return cls(
            ErrorKind.NOT_FOUND,
            f"{resource} with id '{resource_id}' not found",
            resource=resource,
            resource_id=resource_id,
        )

    @classmethod
    def internal(cls, message: str) -> "DomainError":
        return cls(ErrorKind.INTERNAL, message)

    def details(self) -> Dict[str, Any]:
        """Structured payload, without the fields this variant does not use."""
        payload = {
            "field": self.field,
            "resource": self.resource,
            "resource_id": self.resource_id,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def __repr__(self) -> str:
        return f"DomainError(kind={self.kind.value!r}, message={self.message!r})"
