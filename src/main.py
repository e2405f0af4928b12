import asyncio
import sys
import logging
from dotenv import load_dotenv

from src.infrastructure.config import ConfigurationError, load_config
from src.infrastructure.logging_config import configure_logging
from src.infrastructure.memory_repository import InMemoryDeviceRepository
from src.infrastructure.seed import seed_sample_devices
from src.application.device_service import DeviceService
from src.presentation.device_controller import DeviceController

logger = logging.getLogger(__name__)


async def run_demo(controller: DeviceController) -> None:
    """Exercises each controller path once and logs the envelopes."""
    logger.info("Running demo...")

    responses = [
        ("List devices response", await controller.list_devices()),
        ("Get device response", await controller.get_device({"id": "device_001"})),
        ("Update device response", await controller.update_device(
            {"id": "device_001", "body": {"status": "MAINTENANCE"}}
        )),
        ("Error response demo", await controller.get_device({"id": "non_existent"})),
    ]

    for label, response in responses:
        logger.info(label, extra={"context": {"response": response.model_dump(mode="json")}})


async def main():
    # Load environment variables from .env file
    load_dotenv()

    try:
        config = load_config()
    except ConfigurationError as e:
        configure_logging()
        logger.error(str(e))
        sys.exit(1)

    configure_logging(config.log_level)
    logger.info("Starting application", extra={"context": {"log_level": config.log_level}})

    # Wire the object graph once, here
    repository = InMemoryDeviceRepository()
    service = DeviceService(repository=repository)
    controller = DeviceController(device_service=service)

    if config.seed_sample_data:
        await seed_sample_devices(repository)

    try:
        await run_demo(controller)
    except KeyboardInterrupt:
        logger.info("Demo interrupted by user. Exiting gracefully.")
    except Exception as e:
        logger.exception(f"An unexpected error occurred: {e}")
        sys.exit(1)

    logger.info("Application finished successfully")


if __name__ == "__main__":
    asyncio.run(main())
