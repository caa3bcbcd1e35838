"""Configuration management for wifimatrix.

Loads and validates YAML-based configuration with Pydantic models.
Every setting has a default, so no configuration file is required.
"""

from wifimatrix.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
