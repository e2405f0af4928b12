import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from src.application.device_service import DeviceService
from src.domain.exceptions import DomainError, ErrorKind
from src.domain.models import ApiResponse
from src.presentation.response import ResponseBuilder

# A plain request record: {"id": ..., "body": ...}, both optional.
Request = Mapping[str, Any]


class DeviceController:
    """
    Adapts DeviceService calls to the response envelope.

    Every public coroutine returns an ApiResponse; no exception crosses this
    boundary. Callers inspect ``success`` instead of catching.
    """

    def __init__(self, device_service: DeviceService, logger: Optional[logging.Logger] = None):
        self.device_service = device_service
        self.logger = logger or logging.getLogger(__name__)

    async def get_device(self, request: Request) -> ApiResponse:
        return await self._handle(
            "get_device", request,
            lambda: self.device_service.get_device(request.get("id")),
        )

    async def update_device(self, request: Request) -> ApiResponse:
        return await self._handle(
            "update_device", request,
            lambda: self.device_service.update_device(request.get("id"), request.get("body")),
        )

    async def list_devices(self, request: Optional[Request] = None) -> ApiResponse:
        return await self._handle("list_devices", request, self.device_service.list_devices)

    async def create_device(self, request: Request) -> ApiResponse:
        return await self._handle(
            "create_device", request,
            lambda: self.device_service.create_device(request.get("body")),
        )

    async def delete_device(self, request: Request) -> ApiResponse:
        async def _delete() -> Dict[str, Any]:
            id = request.get("id")
            await self.device_service.delete_device(id)
            return {"id": id, "deleted": True}

        return await self._handle("delete_device", request, _delete)

    async def _handle(
            self,
            operation: str,
            request: Any,
            call: Callable[[], Awaitable[Any]],
    ) -> ApiResponse:
        try:
            result = await call()
        except Exception as e:
            self._log_failure(operation, request, e)
            return ResponseBuilder.from_error(e)
        return ResponseBuilder.success(result)

    def _log_failure(self, operation: str, request: Any, error: Exception) -> None:
        id = request.get("id") if isinstance(request, Mapping) else None
        context = {"operation": operation, "id": id}
        kind = error.kind if isinstance(error, DomainError) else ErrorKind.INTERNAL

        if kind is ErrorKind.VALIDATION or kind is ErrorKind.NOT_FOUND:
            self.logger.warning(
                f"Failed to {operation.replace('_', ' ')}: {error}",
                extra={"context": context},
            )
        else:
            self.logger.error(
                f"Failed to {operation.replace('_', ' ')}",
                exc_info=error,
                extra={"context": context},
            )
