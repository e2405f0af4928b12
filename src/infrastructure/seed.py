import logging
from typing import Any, Dict, List

from src.domain.models import DeviceStatus, DeviceType
from src.domain.repository import Repository

logger = logging.getLogger(__name__)

SAMPLE_DEVICES: List[Dict[str, Any]] = [
    {
        "name": "Axial Fan A1",
        "type": DeviceType.AXIAL_FAN,
        "status": DeviceStatus.ONLINE,
        "metadata": {
            "location": "Building A",
            "manufacturer": "TechCorp",
            "model": "AF-100",
            "version": "1.2.3",
        },
    },
    {
        "name": "Fire Panel Main",
        "type": DeviceType.FIRE_PANEL,
        "status": DeviceStatus.ONLINE,
        "metadata": {
            "location": "Control Room",
            "manufacturer": "SafeCorp",
            "model": "FP-200",
            "version": "2.1.0",
        },
    },
]


async def seed_sample_devices(repository: Repository) -> None:
    """Load the demo devices. On an empty repository the first one becomes ``device_001``."""
    for fields in SAMPLE_DEVICES:
        await repository.create(fields)

    logger.info("Sample data seeded", extra={"context": {"count": await repository.count()}})
