"""
Facade Layer

Provides the high-level interface of the mountain huts system, hiding the
orchestration of the file repository and the stats service.

Patterns Applied:
1. Facade Pattern - Single entry point to the registry and the queries
2. Dependency Injection - Services injected or created by factories

Main Components:
- Region: Registry of municipalities and huts, altitude ranges, queries
- get_region(): Factory loading a region from settings.toml
"""

from facades.region_facade import Region, get_region

__all__ = [
    'Region',
    'get_region',
]
