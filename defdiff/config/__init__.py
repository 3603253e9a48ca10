"""Configuration loading and validation."""

from defdiff.config.loader import load_config
from defdiff.config.schema import Config, GitConfig, ReportConfig

__all__ = [
    "Config",
    "GitConfig",
    "ReportConfig",
    "load_config",
]
