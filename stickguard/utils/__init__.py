"""
Utility functions.

This module provides configuration management and other utilities.
"""

from .config import (
    load_config,
    deep_merge,
    ConfigDict,
    DetectionConfig,
    FuzzConfig,
    ControllerConfig,
    SDIConfig,
    HandwarmerConfig,
    load_detection_config,
)

__all__ = [
    "load_config",
    "deep_merge",
    "ConfigDict",
    "DetectionConfig",
    "FuzzConfig",
    "ControllerConfig",
    "SDIConfig",
    "HandwarmerConfig",
    "load_detection_config",
]
