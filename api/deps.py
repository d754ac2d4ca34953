"""
api.deps
========

FastAPI dependency providers.

`get_registry` returns the process‑wide in‑memory registry, seeded with
the sample entities unless ``ENTITYVIEW_API_SEED`` is false.
"""

from functools import lru_cache

from entityview.registry import EntityRegistry, seed
from entityview.settings import Settings, settings


@lru_cache
def get_settings() -> Settings:
    """Return application settings."""
    return settings


@lru_cache
def get_registry() -> EntityRegistry:
    """Singleton registry (persists across requests)."""
    registry = EntityRegistry()
    if get_settings().api_seed:
        seed(registry)
    return registry
