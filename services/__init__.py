"""
Services Package

This package contains service modules that implement business logic
separately from data access and presentation.

Each service module follows these principles:
1. Single Responsibility - one concern per service
2. Dependency Injection - inputs passed in, not created
3. Dataclasses - structured domain models in and plain dicts out

Available Services:
- RegionStatsService: Grouped statistics over the huts of a region
"""

from services.region_stats_service import (
    HUTS_FRAME_COLUMNS,
    RegionStatsService,
    get_region_stats_service,
)

__all__ = [
    "HUTS_FRAME_COLUMNS",
    "RegionStatsService",
    "get_region_stats_service",
]
