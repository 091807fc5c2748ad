"""Pattern service for generating and managing sand table patterns."""

import random
from typing import Dict, Any, Optional
from datetime import datetime
from fastapi import status
from loguru import logger

from sand_patterns.utils.errors import create_error
from sand_patterns.utils.health import ServiceHealth, ComponentHealth, get_uptime, overall_status
from sand_patterns.api.pattern.constants import TABLE_DIAMETER_MM, BALL_SPEED_MM_PER_SECOND, PREVIEW_SIZE
from sand_patterns.api.pattern.exceptions import ConfigValidationError
from sand_patterns.api.pattern.formats.thr_format import export_theta_rho, inspect_theta_rho_data
from sand_patterns.api.pattern.formats.svg_preview import generate_preview_svg
from sand_patterns.api.pattern.generators.pipeline import generate_pattern
from sand_patterns.api.pattern.models import GeneratedPattern, PatternConfig, ThetaRhoValidation
from sand_patterns.api.pattern.services.preset_service import PresetService
from sand_patterns.api.pattern.services.custom_pattern_service import CustomPatternService
from sand_patterns.api.pattern.validators.config_validator import validate_config


class PatternService:
    """Pattern service composing generation, presets and custom storage."""

    def __init__(self, config: Dict[str, Any], rng: Optional[random.Random] = None):
        """Initialize pattern service.
        
        Args:
            config: Service configuration
            rng: Random source for random presets
        """
        self._config = config
        self._service_name = "pattern"
        self._version = config.get("version", "1.0.0")
        self._initialized = False
        self._running = False
        self._start_time: Optional[datetime] = None

        table = config.get("table", {})
        self._table_diameter_mm = float(table.get("diameter_mm", TABLE_DIAMETER_MM))
        self._ball_speed = float(table.get("ball_speed_mm_per_second", BALL_SPEED_MM_PER_SECOND))
        self._preview_size = int(config.get("preview", {}).get("size", PREVIEW_SIZE))

        self._preset = PresetService(config, rng)
        self._custom = CustomPatternService(config)

    @property
    def preset_service(self) -> PresetService:
        """Get preset service instance."""
        return self._preset

    @property
    def custom_service(self) -> CustomPatternService:
        """Get custom pattern service instance."""
        return self._custom

    @property
    def version(self) -> str:
        """Get service version."""
        return self._version

    @property
    def service_name(self) -> str:
        """Get service name."""
        return self._service_name

    @property
    def is_running(self) -> bool:
        """Get service running state."""
        return self._running

    @property
    def uptime(self) -> float:
        """Get service uptime in seconds."""
        return get_uptime(self._start_time)

    @property
    def preview_size(self) -> int:
        """Default preview size in pixels."""
        return self._preview_size

    async def get_health(self) -> ServiceHealth:
        """Get service health status."""
        components = {}
        for name, service in [("preset", self._preset), ("custom_pattern", self._custom)]:
            try:
                health = await service.health()
                components[name] = ComponentHealth(status=health.status, error=health.error)
            except Exception as e:
                components[name] = ComponentHealth(status="error", error=str(e))

        status_value = overall_status(self._running, components)
        return ServiceHealth(
            status=status_value,
            service=self._service_name,
            version=self._version,
            is_running=self._running,
            uptime=self.uptime,
            error=None if status_value == "ok" else "One or more components in error state",
            components=components
        )

    async def initialize(self) -> None:
        """Initialize pattern service."""
        try:
            if self._initialized:
                return

            logger.info("Initializing pattern service...")
            await self._preset.initialize()
            await self._custom.initialize()

            self._initialized = True
            logger.info("Pattern service initialized")

        except Exception as e:
            logger.error(f"Failed to initialize pattern service: {e}")
            raise create_error(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                message=f"Failed to initialize service: {str(e)}"
            )

    async def start(self) -> None:
        """Start pattern service."""
        if not self._initialized:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message="Service not initialized"
            )

        try:
            logger.info("Starting pattern service...")
            await self._preset.start()
            await self._custom.start()

            self._running = True
            self._start_time = datetime.now()
            logger.info("Pattern service started")

        except Exception as e:
            logger.error(f"Failed to start pattern service: {e}")
            raise create_error(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                message=f"Failed to start service: {str(e)}"
            )

    async def stop(self) -> None:
        """Stop pattern service."""
        try:
            if not self._running:
                return

            logger.info("Stopping pattern service...")
            await self._custom.stop()
            await self._preset.stop()

            self._running = False
            self._initialized = False
            self._start_time = None
            logger.info("Pattern service stopped")

        except Exception as e:
            logger.error(f"Failed to stop pattern service: {e}")
            raise create_error(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                message=f"Failed to stop service: {str(e)}"
            )

    def require_running(self) -> None:
        """Raise 503 unless the service is running."""
        if not self._running:
            raise create_error(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                message="Service not running"
            )

    def _check_config(self, config: PatternConfig, strict: bool) -> None:
        if not strict:
            return
        is_valid, errors = validate_config(config)
        if not is_valid:
            raise ConfigValidationError(errors)

    async def generate(self, config: PatternConfig, strict: bool = True) -> GeneratedPattern:
        """Generate a pattern.

        Raises:
            ConfigValidationError: If strict and the config is out of range
        """
        self.require_running()
        self._check_config(config, strict)
        return generate_pattern(
            config,
            table_diameter_mm=self._table_diameter_mm,
            ball_speed_mm_per_second=self._ball_speed
        )

    async def export(
        self,
        config: PatternConfig,
        name: Optional[str] = None,
        strict: bool = True,
        generated_at: Optional[datetime] = None
    ) -> str:
        """Generate a pattern and render it as .thr text."""
        pattern = await self.generate(config, strict)
        return export_theta_rho(pattern.points, name, generated_at)

    async def preview(
        self,
        config: PatternConfig,
        size: Optional[int] = None,
        max_points: Optional[int] = None,
        strict: bool = True
    ) -> str:
        """Generate a pattern and render it as an SVG thumbnail."""
        pattern = await self.generate(config, strict)
        return generate_preview_svg(pattern.points, size or self._preview_size, max_points)

    async def validate_data(self, data: str) -> ThetaRhoValidation:
        """Check externally authored theta-rho text."""
        self.require_running()
        result = inspect_theta_rho_data(data)
        if not result.valid:
            logger.info(f"Rejected theta-rho data: {result.error}")
        return result
