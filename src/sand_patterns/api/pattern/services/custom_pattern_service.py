"""Custom pattern storage service."""

import uuid
import yaml
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from pathlib import Path
from fastapi import status
from loguru import logger

from sand_patterns.utils.errors import create_error
from sand_patterns.utils.health import ServiceHealth, ComponentHealth, get_uptime
from sand_patterns.api.base.exceptions import ValidationError
from sand_patterns.api.pattern.constants import MAX_PATTERN_NAME_LENGTH
from sand_patterns.api.pattern.exceptions import CustomPatternError, PatternNotFoundError
from sand_patterns.api.pattern.formats.thr_format import inspect_theta_rho_data
from sand_patterns.api.pattern.models import CustomPattern, SaveCustomPatternRequest


class CustomPatternService:
    """Service for storing user-created patterns.

    Every pattern is kept as three files in the custom directory:
    ``<id>.thr`` with the track, ``<id>.svg`` with an optional preview and
    ``<id>.yaml`` with the metadata record.
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize custom pattern service.

        Args:
            config: Service configuration
        """
        self._service_name = "custom_pattern"
        self._version = config.get("version", "1.0.0")
        self._custom_dir = Path(config.get("storage", {}).get("custom_dir", "data/patterns/custom"))
        self._is_running = False
        self._start_time: Optional[datetime] = None

        self._patterns: Optional[Dict[str, CustomPattern]] = None
        self._failed_patterns: Dict[str, str] = {}

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

    @property
    def custom_dir(self) -> Path:
        """Directory holding custom pattern files."""
        return self._custom_dir

    async def initialize(self) -> None:
        """Create the storage directory and load existing records."""
        if self.is_running:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message=f"{self.service_name} service already running"
            )

        try:
            self._custom_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CustomPatternError(
                f"Failed to create custom pattern directory: {e}",
                {"path": str(self._custom_dir)}
            ) from e

        self._patterns = {}
        self._failed_patterns = {}
        self._load_patterns()
        logger.info(f"Loaded {len(self._patterns)} custom patterns")

    def _load_patterns(self) -> None:
        """Load pattern records from YAML files."""
        for record_file in sorted(self._custom_dir.glob("*.yaml")):
            try:
                with open(record_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)

                if not isinstance(data, dict) or "pattern" not in data:
                    raise ValueError("Missing 'pattern' root key")

                pattern = CustomPattern.model_validate(data["pattern"])
                if not self._thr_path(pattern.id).exists():
                    raise ValueError(f"Missing track file {pattern.id}.thr")

                self._patterns[pattern.id] = pattern

            except Exception as e:
                logger.error(f"Failed to load custom pattern {record_file}: {e}")
                self._failed_patterns[record_file.name] = str(e)

    async def start(self) -> None:
        """Start service."""
        if self.is_running:
            raise create_error(
                status_code=status.HTTP_409_CONFLICT,
                message=f"{self.service_name} service already running"
            )
        if self._patterns is None:
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

        self._patterns = None
        self._is_running = False
        self._start_time = None
        logger.info(f"{self.service_name} service stopped")

    async def health(self) -> ServiceHealth:
        """Get service health status."""
        storage_ok = self._custom_dir.is_dir()
        components = {
            "storage": ComponentHealth(
                status="ok" if storage_ok else "error",
                error=None if storage_ok else f"Directory {self._custom_dir} missing"
            )
        }
        if self._failed_patterns:
            components["failed_patterns"] = ComponentHealth(
                status="error",
                error=f"Failed to load patterns: {', '.join(self._failed_patterns)}"
            )

        overall = "ok" if self.is_running and storage_ok else "error"
        return ServiceHealth(
            status=overall,
            service=self.service_name,
            version=self.version,
            is_running=self.is_running,
            uptime=self.uptime,
            error=None if overall == "ok" else "Custom pattern storage not ready",
            components=components
        )

    def _thr_path(self, pattern_id: str) -> Path:
        return self._custom_dir / f"{pattern_id}.thr"

    def _svg_path(self, pattern_id: str) -> Path:
        return self._custom_dir / f"{pattern_id}.svg"

    def _record_path(self, pattern_id: str) -> Path:
        return self._custom_dir / f"{pattern_id}.yaml"

    def _require(self, pattern_id: str) -> CustomPattern:
        # Only ids loaded from disk or created here ever reach the filesystem
        pattern = (self._patterns or {}).get(pattern_id)
        if pattern is None:
            raise PatternNotFoundError(f"Pattern {pattern_id} not found", {"pattern_id": pattern_id})
        return pattern

    async def save_pattern(self, request: SaveCustomPatternRequest) -> CustomPattern:
        """Validate and store a custom pattern.

        Raises:
            ValidationError: If the name or the theta-rho data is invalid
            CustomPatternError: If the files cannot be written
        """
        validation = inspect_theta_rho_data(request.theta_rho_data)
        if not validation.valid:
            raise ValidationError(f"Invalid pattern: {validation.error}", {"error": validation.error})

        name = (request.name or "").strip()
        if not name:
            raise ValidationError("Pattern name is required")
        name = name[:MAX_PATTERN_NAME_LENGTH]

        pattern = CustomPattern(
            id=str(uuid.uuid4()),
            name=name,
            point_count=validation.point_count,
            flavor=validation.flavor,
            created_at=datetime.now(timezone.utc),
            created_by=request.created_by,
            has_preview=bool(request.preview_svg),
            config=request.config
        )

        try:
            self._thr_path(pattern.id).write_text(request.theta_rho_data, encoding="utf-8")
            if request.preview_svg:
                self._svg_path(pattern.id).write_text(request.preview_svg, encoding="utf-8")
            with open(self._record_path(pattern.id), "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    {"pattern": pattern.model_dump(mode="json")},
                    f,
                    sort_keys=False,
                    default_flow_style=False,
                    width=1000,
                    allow_unicode=True
                )
        except OSError as e:
            self._remove_files(pattern.id)
            raise CustomPatternError(f"Failed to save pattern {name}: {e}", {"pattern_id": pattern.id}) from e

        self._patterns[pattern.id] = pattern
        logger.info(f"Saved custom pattern {pattern.id} ({pattern.name}, {pattern.point_count} points)")
        return pattern

    async def list_patterns(self) -> List[CustomPattern]:
        """List custom patterns, newest first."""
        patterns = list((self._patterns or {}).values())
        return sorted(patterns, key=lambda p: p.created_at, reverse=True)

    async def get_pattern(self, pattern_id: str) -> CustomPattern:
        """Get custom pattern record by ID."""
        return self._require(pattern_id)

    async def get_pattern_data(self, pattern_id: str) -> str:
        """Theta-rho text of a custom pattern."""
        self._require(pattern_id)
        try:
            return self._thr_path(pattern_id).read_text(encoding="utf-8")
        except OSError as e:
            raise CustomPatternError(f"Failed to read pattern {pattern_id}: {e}", {"pattern_id": pattern_id}) from e

    async def get_preview(self, pattern_id: str) -> Optional[str]:
        """SVG preview of a custom pattern, None when none was stored."""
        pattern = self._require(pattern_id)
        if not pattern.has_preview:
            return None
        svg_path = self._svg_path(pattern_id)
        return svg_path.read_text(encoding="utf-8") if svg_path.exists() else None

    async def delete_pattern(self, pattern_id: str) -> None:
        """Delete a custom pattern and its files."""
        self._require(pattern_id)
        self._remove_files(pattern_id)
        del self._patterns[pattern_id]
        logger.info(f"Deleted custom pattern {pattern_id}")

    def _remove_files(self, pattern_id: str) -> None:
        for path in (self._thr_path(pattern_id), self._svg_path(pattern_id), self._record_path(pattern_id)):
            path.unlink(missing_ok=True)
