"""Configuration module.

This module provides configuration paths, data models and persistence.

Submodules:
    manager: ConfigurationManager for loading/saving XML configuration
    schema: Data classes defining configuration structure (Settings)
    paths: AppPaths with config file locations and Flash shared-object roots

The configuration is stored as XML in %APPDATA%/CoCManager/configuration.xml.
ConfigurationManager is imported from its submodule since it depends on
logging_config, which itself reads AppPaths.
"""

from .schema import AppConfiguration, Settings
from .paths import AppPaths

__all__ = [
    "AppConfiguration",
    "Settings",
    "AppPaths",
]
