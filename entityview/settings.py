"""
entityview.settings
===================

Configuration settings for the EntityView application.

This module provides centralized configuration options that can be used
across the listing core, the command line front end and the reference
read endpoint.  Every value has a default that can be overridden via
environment variables (prefix ``ENTITYVIEW_``) or a ``.env`` file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("ENTITYVIEW_LOG_LEVEL", "INFO").upper()

# Navigation targets
# ---------------------------------------------------------------------------
DETAIL_ROUTE = "/admin/entities/{id}"
CREATE_ROUTE = "/admin/entities/new"


# ---------------------------------------------------------------------------
# Pydantic settings model
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Pydantic model for application settings, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ENTITYVIEW_",
        env_file=".env",          # load from .env file if present
        case_sensitive=False,
        extra="ignore",
    )

    # Read endpoint
    entities_endpoint: str = Field(
        "http://127.0.0.1:8000/api/entities",
        description="URL of the entities read endpoint",
    )
    fetch_timeout: float = Field(10.0, description="HTTP timeout for one fetch, in seconds")

    # Query cache
    freshness_seconds: float = Field(
        30.0, description="Age after which a cached listing is refetched on next access"
    )

    # Capabilities granted to the local operator (JSON list in the environment)
    granted_permissions: List[str] = Field(default_factory=list)

    # Reference API
    api_host: str = Field("127.0.0.1", description="Bind address for the reference API")
    api_port: int = Field(8000, description="Port for the reference API")
    api_seed: bool = Field(True, description="Load sample entities on startup")


# Initialize settings
settings = Settings()
