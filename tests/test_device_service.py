import unittest
from unittest.mock import AsyncMock, MagicMock

from src.application.device_service import DeviceService
from src.domain.exceptions import DomainError, ErrorKind
from src.domain.models import DeviceStatus
from src.infrastructure.memory_repository import InMemoryDeviceRepository

FAN = {"name": "Test Device", "type": "AXIAL_FAN", "status": "ONLINE"}


class TestDeviceService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.logger = MagicMock()
        self.repository = InMemoryDeviceRepository(logger=MagicMock())
        self.service = DeviceService(repository=self.repository, logger=self.logger)
        self.device = await self.repository.create(FAN)

    async def test_get_device_returns_device(self) -> None:
        result = await self.service.get_device(self.device.id)

        self.assertEqual(result, self.device)
        self.logger.info.assert_called_with(
            "Device retrieved", extra={"context": {"id": self.device.id}}
        )

    async def test_get_device_missing_raises_not_found(self) -> None:
        with self.assertRaises(DomainError) as ctx:
            await self.service.get_device("non-existent-id")

        self.assertIs(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(ctx.exception.message, "Device with id 'non-existent-id' not found")
        self.assertEqual(ctx.exception.resource_id, "non-existent-id")

    async def test_get_device_invalid_id_raises_validation_before_lookup(self) -> None:
        repository = MagicMock()
        repository.find_by_id = AsyncMock()
        service = DeviceService(repository=repository, logger=self.logger)

        for bad_id in ("", None, "x" * 37):
            with self.subTest(id=bad_id):
                with self.assertRaises(DomainError) as ctx:
                    await service.get_device(bad_id)
                self.assertIs(ctx.exception.kind, ErrorKind.VALIDATION)
                self.assertEqual(ctx.exception.field, "id")

        repository.find_by_id.assert_not_awaited()

    async def test_update_device_changes_only_given_fields(self) -> None:
        result = await self.service.update_device(self.device.id, {"status": "MAINTENANCE"})

        self.assertEqual(result.status, DeviceStatus.MAINTENANCE)
        self.assertEqual(result.id, self.device.id)
        self.assertEqual(result.name, self.device.name)
        self.assertGreaterEqual(result.last_update, self.device.last_update)
        self.logger.info.assert_called_with(
            "Device updated successfully",
            extra={"context": {"id": self.device.id, "changes": ["status"]}},
        )

    async def test_update_device_missing_raises_not_found(self) -> None:
        with self.assertRaises(DomainError) as ctx:
            await self.service.update_device("non-existent-id", {"status": "MAINTENANCE"})

        self.assertIs(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(await self.repository.count(), 1)

    async def test_update_device_invalid_body_leaves_state_untouched(self) -> None:
        with self.assertRaises(DomainError) as ctx:
            await self.service.update_device(self.device.id, {"status": "NOT_A_REAL_STATUS"})

        self.assertIs(ctx.exception.kind, ErrorKind.VALIDATION)
        self.assertEqual(await self.service.get_device(self.device.id), self.device)

    async def test_update_device_vanishing_mid_update_is_internal(self) -> None:
        repository = MagicMock()
        repository.find_by_id = AsyncMock(return_value=self.device)
        repository.update = AsyncMock(return_value=None)
        service = DeviceService(repository=repository, logger=self.logger)

        with self.assertRaises(DomainError) as ctx:
            await service.update_device(self.device.id, {"name": "New"})

        self.assertIs(ctx.exception.kind, ErrorKind.INTERNAL)

    async def test_list_devices(self) -> None:
        second = await self.repository.create({**FAN, "name": "Device 2", "type": "FIRE_PANEL"})

        result = await self.service.list_devices()

        self.assertEqual({d.id for d in result}, {self.device.id, second.id})
        self.logger.info.assert_called_with("Devices listed", extra={"context": {"count": 2}})

    async def test_create_device_validates_body(self) -> None:
        created = await self.service.create_device({"name": "Deluge 1", "type": "DELUGE_VALVE"})

        self.assertEqual(created.status, DeviceStatus.OFFLINE)
        self.assertEqual(await self.repository.find_by_id(created.id), created)

        with self.assertRaises(DomainError):
            await self.service.create_device({"name": "No type"})

    async def test_delete_device(self) -> None:
        await self.service.delete_device(self.device.id)

        with self.assertRaises(DomainError) as ctx:
            await self.service.get_device(self.device.id)
        self.assertIs(ctx.exception.kind, ErrorKind.NOT_FOUND)

        with self.assertRaises(DomainError) as ctx:
            await self.service.delete_device(self.device.id)
        self.assertIs(ctx.exception.kind, ErrorKind.NOT_FOUND)
