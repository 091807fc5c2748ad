"""Pattern API application."""

import sys
import copy
import random
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from sand_patterns.api.base.exceptions import ConfigurationError
from sand_patterns.api.pattern.pattern_service import PatternService
from sand_patterns.api.pattern.endpoints import router
from sand_patterns.utils.health import ServiceHealth


DEFAULT_CONFIG_PATH = Path("config/pattern.yaml")

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "host": "0.0.0.0",
    "port": 8010,
    "log_level": "INFO",
    "log_dir": "logs",
    "table": {
        "diameter_mm": 380.0,
        "ball_speed_mm_per_second": 2.5
    },
    "storage": {
        "custom_dir": "data/patterns/custom",
        "presets_dir": "data/presets"
    },
    "preview": {
        "size": 200
    }
}


def setup_logging(log_level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
    """Setup logging configuration.
    
    Args:
        log_level: Log level to use
        log_dir: Directory for the rotating log file, None for console only
    """
    # Remove default handler
    logger.remove()
    
    # Add console handler with color
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    logger.add(sys.stderr, format=log_format, level=log_level)

    if log_dir is None:
        return

    # Add file handler with rotation
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} - "
        "{message}"
    )
    logger.add(
        str(log_path / "pattern.log"),
        rotation="1 day",
        retention="30 days",
        format=file_format,
        level="DEBUG"
    )


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file, merged over the defaults.

    Raises:
        ConfigurationError: If the file exists but cannot be parsed
    """
    config_path = Path(config_path or DEFAULT_CONFIG_PATH)
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config: {e}")
        raise ConfigurationError(f"Failed to load configuration: {str(e)}", {"path": str(config_path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration root must be a mapping", {"path": str(config_path)})

    return _merge(DEFAULT_CONFIG, data)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage service lifecycle."""
    try:
        await app.state.service.initialize()
        await app.state.service.start()
        yield
    finally:
        if app.state.service.is_running:
            await app.state.service.stop()


def create_pattern_service(
    config: Optional[Dict[str, Any]] = None,
    rng: Optional[random.Random] = None
) -> FastAPI:
    """Create pattern service application.

    Args:
        config: Service configuration, loaded from config/pattern.yaml when omitted
        rng: Random source for random presets
    """
    if config is None:
        config = load_config()
    else:
        config = _merge(DEFAULT_CONFIG, config)

    service = PatternService(config, rng)

    app = FastAPI(
        title="Pattern API",
        description="Sand table pattern generation API",
        version=config.get("version", "1.0.0"),
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store service in app state
    app.state.service = service

    @app.get("/health", response_model=ServiceHealth)
    async def health() -> ServiceHealth:
        """Get service health status."""
        return await service.get_health()

    app.include_router(router)
    
    return app
