import logging
from typing import Any, List, Optional

from src.application import validation
from src.domain.exceptions import DomainError
from src.domain.models import Device
from src.domain.repository import Repository

RESOURCE = "Device"


class DeviceService:
    """
    Business rules around the device repository.

    Responsibilities:
    - Reject malformed ids and bodies before touching storage
    - Turn absence into NotFoundError
    - Never create a device implicitly through update

    Errors propagate to the caller untouched; containment happens at the
    controller.
    """

    def __init__(
            self,
            repository: Repository[Device],
            logger: Optional[logging.Logger] = None,
    ):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    async def get_device(self, id: Any) -> Device:
        self._validate_id(id)

        device = await self.repository.find_by_id(id)
        if device is None:
            raise DomainError.not_found(RESOURCE, id)

        self.logger.info("Device retrieved", extra={"context": {"id": id}})
        return device

    async def update_device(self, id: Any, data: Any) -> Device:
        self._validate_id(id)
        changes = validation.validate_device_update(data).changes()

        # Checked up front so update can never resurrect a missing device.
        if await self.repository.find_by_id(id) is None:
            raise DomainError.not_found(RESOURCE, id)

        updated = await self.repository.update(id, changes)
        if updated is None:
            # The device existed a moment ago; this is a storage fault, not a 404.
            raise DomainError.internal("Failed to update device")

        self.logger.info(
            "Device updated successfully",
            extra={"context": {"id": id, "changes": sorted(changes)}},
        )
        return updated

    async def list_devices(self) -> List[Device]:
        devices = await self.repository.find_all()
        self.logger.info("Devices listed", extra={"context": {"count": len(devices)}})
        return devices

    async def create_device(self, data: Any) -> Device:
        request = validation.validate_device_create(data)
        device = await self.repository.create(request.model_dump())

        self.logger.info("Device registered", extra={"context": {"id": device.id}})
        return device

    async def delete_device(self, id: Any) -> None:
        self._validate_id(id)

        if not await self.repository.delete(id):
            raise DomainError.not_found(RESOURCE, id)

        self.logger.info("Device removed", extra={"context": {"id": id}})

    @staticmethod
    def _validate_id(id: Any) -> None:
        if not validation.is_valid_id(id):
            raise DomainError.validation("Invalid device ID format", field="id")
