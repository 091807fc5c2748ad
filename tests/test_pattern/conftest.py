"""Pattern service test fixtures."""

import random
import pytest
import pytest_asyncio

from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.api.pattern.formats.thr_format import export_theta_rho
from sand_patterns.api.pattern.generators.pipeline import generate_pattern
from sand_patterns.api.pattern.services.custom_pattern_service import CustomPatternService
from sand_patterns.api.pattern.services.preset_service import PresetService


@pytest_asyncio.fixture
async def preset_service(service_config):
    """Running preset service."""
    service = PresetService(service_config, random.Random(7))
    await service.initialize()
    await service.start()
    yield service
    if service.is_running:
        await service.stop()


@pytest_asyncio.fixture
async def custom_service(service_config):
    """Running custom pattern service."""
    service = CustomPatternService(service_config)
    await service.initialize()
    await service.start()
    yield service
    if service.is_running:
        await service.stop()


@pytest_asyncio.fixture
async def pattern_service(service_config):
    """Running pattern service."""
    service = PatternService(service_config, random.Random(7))
    await service.initialize()
    await service.start()
    yield service
    await service.stop()


@pytest.fixture
def thr_data(circle_config) -> str:
    """Valid theta-rho text."""
    return export_theta_rho(generate_pattern(circle_config).points, "Circles")
