"""Configuration models and loaders."""

from .models import (
    ExpansionConfig,
    FixtureConfig,
    OutputConfig,
    PathsConfig,
    PricingConfig,
    SimulationConfig,
)
from .settings import create_default_config, load_config, load_config_with_fallback

__all__ = [
    "FixtureConfig",
    "PathsConfig",
    "ExpansionConfig",
    "PricingConfig",
    "SimulationConfig",
    "OutputConfig",
    "load_config",
    "load_config_with_fallback",
    "create_default_config",
]
