"""Preset service implementation."""

import random
import yaml
from typing import Dict, Any, List, Optional
from datetime import datetime
from pathlib import Path
from fastapi import status
from loguru import logger

from sand_patterns.utils.errors import create_error
from sand_patterns.utils.health import ServiceHealth, ComponentHealth, get_uptime
from sand_patterns.api.pattern.exceptions import PatternNotFoundError
from sand_patterns.api.pattern.models import PatternPreset, PatternConfig
from sand_patterns.api.pattern.presets import (
    get_all_presets,
    get_main_presets,
    generate_random_config,
    preset_to_config,
)


class PresetService:
    """Service for built-in and file based pattern presets."""

    def __init__(self, config: Dict[str, Any], rng: Optional[random.Random] = None):
        """Initialize preset service.

        Args:
            config: Service configuration
            rng: Random source for random presets
        """
        self._service_name = "preset"
        self._version = config.get("version", "1.0.0")
        self._presets_dir = Path(config.get("storage", {}).get("presets_dir", "data/presets"))
        self._rng = rng or random.Random()
        self._is_running = False
        self._start_time: Optional[datetime] = None

        self._presets: Optional[Dict[str, PatternPreset]] = None
        self._main_ids: List[str] = []
        self._failed_presets: Dict[str, str] = {}

        logger.info(f"{self.service_name} service initialized")

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
        return self._is_running

    @property
    def uptime(self) -> float:
        """Get service uptime in seconds."""
        return get_uptime(self._start_time)

    async def initialize(self) -> None:
        """Load built-in presets and presets from the presets directory."""
        if self.is_running:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message=f"{self.service_name} service already running"
            )

        self._presets = {preset.id: preset for preset in get_all_presets()}
        self._main_ids = [preset.id for preset in get_main_presets()]
        self._failed_presets = {}
        self._load_presets()
        logger.info(f"Loaded {len(self._presets)} presets")

    def _load_presets(self) -> None:
        """Load presets from YAML files."""
        if not self._presets_dir.exists():
            return

        for preset_file in sorted(self._presets_dir.glob("*.yaml")):
            try:
                with open(preset_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)

                if not isinstance(data, dict) or "preset" not in data:
                    raise ValueError("Missing 'preset' root key")

                preset = PatternPreset.model_validate(data["preset"])
                self._presets[preset.id] = preset
                logger.info(f"Loaded preset: {preset.id}")

            except Exception as e:
                logger.error(f"Failed to load preset {preset_file}: {e}")
                self._failed_presets[preset_file.name] = str(e)

    async def start(self) -> None:
        """Start service."""
        if self.is_running:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message=f"{self.service_name} service already running"
            )
        if self._presets is None:
            raise create_error(
                status_code=status.HTTP_400_BAD_REQUEST,
                message=f"{self.service_name} service not initialized"
            )

        self._is_running = True
        self._start_time = datetime.now()
        logger.info(f"{self.service_name} service started")

    async def stop(self) -> None:
        """Stop service."""
        if not self.is_running:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message=f"{self.service_name} service not running"
            )

        self._presets = None
        self._is_running = False
        self._start_time = None
        logger.info(f"{self.service_name} service stopped")

    async def health(self) -> ServiceHealth:
        """Get service health status."""
        components = {
            "presets": ComponentHealth(
                status="ok" if self._presets else "error",
                error=None if self._presets else "No presets loaded"
            )
        }
        if self._failed_presets:
            components["failed_presets"] = ComponentHealth(
                status="error",
                error=f"Failed to load presets: {', '.join(self._failed_presets)}"
            )

        # Broken preset files do not take the service down
        overall = "ok" if self.is_running and self._presets else "error"
        return ServiceHealth(
            status=overall,
            service=self.service_name,
            version=self.version,
            is_running=self.is_running,
            uptime=self.uptime,
            error=None if overall == "ok" else "Preset service not ready",
            components=components
        )

    def list_presets(self, main_only: bool = False) -> List[PatternPreset]:
        """List presets, built-in main presets first."""
        presets = self._presets or {}
        if main_only:
            return [presets[preset_id] for preset_id in self._main_ids if preset_id in presets]
        return list(presets.values())

    def get_preset(self, preset_id: str) -> PatternPreset:
        """Get preset by ID."""
        preset = (self._presets or {}).get(preset_id)
        if preset is None:
            raise PatternNotFoundError(f"Preset {preset_id} not found", {"preset_id": preset_id})
        return preset

    def get_config(self, preset_id: str) -> PatternConfig:
        """Pattern config for a preset."""
        return preset_to_config(self.get_preset(preset_id), self._rng)

    def random_config(self) -> PatternConfig:
        """Random pattern config within the mobile limits."""
        return generate_random_config(self._rng)
