"""Configuration package for Speech WAV."""

# Re-export models
from speechwav.config.models import ConverterSettings, default_output_dir

# Re-export sources
from speechwav.config.protocols import SettingsSource, CURRENT_SCHEMA_VERSION
from speechwav.config.default_source import DefaultSettingsSource
from speechwav.config.yaml_source import YAMLSettingsSource

# Re-export loader
from speechwav.config.loader import SettingsLoader, load_settings

__all__ = [
    # Models
    "ConverterSettings",
    "default_output_dir",
    # Sources
    "SettingsSource",
    "CURRENT_SCHEMA_VERSION",
    "DefaultSettingsSource",
    "YAMLSettingsSource",
    # Loader
    "SettingsLoader",
    "load_settings",
]
