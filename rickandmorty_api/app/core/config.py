"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
application talks to the public Rick and Morty API out of the box.
Only ``rickandmorty_api_url`` changes what the application returns;
the remaining fields control presentation, logging and transport
limits.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Rick and Morty Character API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Base URL of the upstream API, without the ``/character`` suffix.
    # Tests and local setups point this at a stub server.
    rickandmorty_api_url: str = os.getenv("RICKANDMORTY_API_URL", "https://rickandmortyapi.com/api")

    # Seconds to wait for the upstream before giving up.  An expired
    # timeout surfaces as ``UpstreamError``.
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "15"))


# Instantiate settings once so the launcher can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
