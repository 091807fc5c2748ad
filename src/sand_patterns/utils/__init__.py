"""Shared utilities."""

from sand_patterns.utils.errors import create_error, error_from_service_error
from sand_patterns.utils.health import (
    get_uptime,
    overall_status,
    ServiceHealth,
    ComponentHealth
)


__all__ = [
    'create_error',
    'error_from_service_error',
    'get_uptime',
    'overall_status',
    'ServiceHealth',
    'ComponentHealth'
]
