from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.domain.exceptions import DomainError
from src.domain.models import DeviceCreateRequest, DeviceUpdateRequest

M = TypeVar("M", bound=BaseModel)

# Matches the length of a canonical UUID string.
MAX_ID_LENGTH = 36


def validate_device_update(data: Any) -> DeviceUpdateRequest:
    """
    Turns an untyped request body into a DeviceUpdateRequest.

    Raises:
        DomainError: kind VALIDATION, naming the first offending field.
    """
    return _parse(DeviceUpdateRequest, data)


def validate_device_create(data: Any) -> DeviceCreateRequest:
    """Same as validate_device_update, for a full create body."""
    return _parse(DeviceCreateRequest, data)


def is_valid_id(id: Any) -> bool:
    return isinstance(id, str) and 0 < len(id) <= MAX_ID_LENGTH


def _parse(schema: Type[M], data: Any) -> M:
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        issue = e.errors()[0]
        field: Optional[str] = ".".join(str(part) for part in issue["loc"]) or None
        raise DomainError.validation(
            f"Invalid {field or 'input'}: {issue['msg']}",
            field=field,
        ) from e
