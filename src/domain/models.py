from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class DeviceType(str, Enum):
    AXIAL_FAN = "AXIAL_FAN"
    DELUGE_VALVE = "DELUGE_VALVE"
    FIRE_PANEL = "FIRE_PANEL"
    PUMP = "PUMP"


class DeviceStatus(str, Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    MAINTENANCE = "MAINTENANCE"
    ERROR = "ERROR"


class Entity(BaseModel):
    """
    Base for every record kept by a repository.
    Both fields are owned by the repository: callers never choose them.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Repository-assigned identifier")
    last_update: datetime = Field(..., description="Stamped by the repository on every mutation")


class DeviceMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    version: Optional[str] = None


class Device(Entity):
    """
    Immutable domain model representing a field device.
    Updates produce a new instance through the repository.
    """
    name: str = Field(..., min_length=1, max_length=100)
    type: DeviceType
    status: DeviceStatus
    metadata: DeviceMetadata = Field(default_factory=DeviceMetadata)


class DeviceUpdateRequest(BaseModel):
    """
    Partial projection of a Device. Only built by the validation layer.
    Unknown keys are dropped; declared keys are type-checked.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[DeviceStatus] = None
    metadata: Optional[DeviceMetadata] = None

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied, ready for a shallow merge."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class DeviceCreateRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100)
    type: DeviceType
    status: DeviceStatus = DeviceStatus.OFFLINE
    metadata: DeviceMetadata = Field(default_factory=DeviceMetadata)


class ApiError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ApiResponse(BaseModel, Generic[T]):
    """
    Uniform envelope returned by every controller operation.
    Exactly one of ``data`` / ``error`` is set, according to ``success``.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    error: Optional[ApiError] = None
    timestamp: datetime

    @model_validator(mode="after")
    def _check_variant(self) -> "ApiResponse":
        if self.success and self.error is not None:
            raise ValueError("A successful response cannot carry an error.")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("A failed response must carry an error and no data.")
        return self
