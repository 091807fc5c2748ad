"""Health check utilities."""

from typing import Dict, Optional
from datetime import datetime
from pydantic import BaseModel


def get_uptime(start_time: Optional[datetime]) -> float:
    """Seconds elapsed since start_time, 0.0 when the service never started."""
    if start_time is None:
        return 0.0
    return (datetime.now() - start_time).total_seconds()


class ComponentHealth(BaseModel):
    """Component health status."""
    
    status: str  # ok or error
    error: Optional[str] = None


class ServiceHealth(BaseModel):
    """Service health status."""
    
    status: str  # ok or error
    service: str
    version: str
    is_running: bool
    uptime: float
    error: Optional[str] = None
    components: Dict[str, ComponentHealth]


def overall_status(is_running: bool, components: Dict[str, ComponentHealth]) -> str:
    """Collapse component states into a single ok/error flag."""
    if not is_running:
        return "error"
    if any(component.status != "ok" for component in components.values()):
        return "error"
    return "ok"
