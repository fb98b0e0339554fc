"""
Configuration management.

Load and merge YAML configuration files with attribute access, and build the
typed detection thresholds every check consumes.
"""

import yaml
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


class ConfigDict(dict):
    """
    Dict that allows attribute access.

    Example:
        cfg = ConfigDict({'fuzzing': {'min_events_for_llr': 8}})
        print(cfg.fuzzing.min_events_for_llr)  # 8
    """

    def __getattr__(self, name: str) -> Any:
        try:
            value = self[name]
            if isinstance(value, dict):
                return ConfigDict(value)
            return value
        except KeyError:
            raise AttributeError(f"Config has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any):
        self[name] = value

    def to_dict(self) -> dict:
        """Convert to regular dict."""
        return dict(self)


def load_config(
    config_path: str,
    defaults_path: Optional[str] = None,
) -> ConfigDict:
    """
    Load configuration from YAML file.

    Supports hierarchical configs: loads defaults first, then merges
    specific config on top.

    Args:
        config_path: Path to config YAML file
        defaults_path: Optional path to defaults file (merged first).
            Falls back to the packaged ``configs/default.yaml``.

    Returns:
        ConfigDict with configuration values

    Example:
        cfg = load_config('tournament.yaml')
        print(cfg.fuzzing.rim_magnitude_threshold)
        print(cfg.sdi.deadzone_threshold)
    """
    config = {}

    if defaults_path is None:
        defaults_path = str(DEFAULT_CONFIG_PATH)

    # Load defaults
    if defaults_path and Path(defaults_path).exists():
        with open(defaults_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded defaults from {defaults_path}")

    # Load and merge specific config
    config_path = Path(config_path)
    if config_path.exists():
        with open(config_path, "r") as f:
            specific = yaml.safe_load(f) or {}
        config = deep_merge(config, specific)
        logger.debug(f"Loaded config from {config_path}")
    else:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return ConfigDict(config)


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values in override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


# =============================================================================
# Typed detection thresholds
# =============================================================================

@dataclass
class FuzzConfig:
    """Input fuzzing thresholds."""
    # Raw magnitude >= 78/80: +-1 offsets get absorbed by circular clamping
    rim_magnitude_threshold: float = 0.975
    min_events_for_llr: int = 8
    min_events_for_chi_sq: int = 20

    # Hypothesis models, P(delta=0); +-1 share the remainder evenly
    p_zero_fuzz: float = 0.50
    p_zero_nofuzz: float = 0.95


@dataclass
class ControllerConfig:
    """Box vs. analog controller detection."""
    rim_coord_max: int = 432          # reachable rim positions
    full_game_frames: int = 10800     # 3 minutes at 60 fps
    box_threshold: float = 0.50       # rim coverage below this => box
    rim_tolerance: float = 0.0125     # one quantization unit, outward


@dataclass
class SDIConfig:
    """Directional input region thresholds and rule windows."""
    deadzone_threshold: float = 0.2875
    direction_threshold: float = 0.7

    # Rule 1
    rule_one_lookahead: int = 9
    rule_one_max_tilt_frames: int = 3
    rule_one_min_gap: int = 4
    rule_one_max_unique_coords: int = 2
    rule_one_evidence_frames: int = 10

    # Rules 2 and 3
    pingpong_lookahead: int = 4
    pingpong_evidence_frames: int = 5


@dataclass
class HandwarmerConfig:
    """Warm-up session detection."""
    min_game_frames: int = 3600       # 1 minute
    max_idle_frames: int = 600        # 10 seconds in the deadzone
    deadzone_threshold: float = 0.2875


_SECTIONS = {
    "fuzzing": FuzzConfig,
    "controller": ControllerConfig,
    "sdi": SDIConfig,
    "handwarmer": HandwarmerConfig,
}


@dataclass
class DetectionConfig:
    """All tuned constants, grouped per check."""
    fuzzing: FuzzConfig = field(default_factory=FuzzConfig)
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    sdi: SDIConfig = field(default_factory=SDIConfig)
    handwarmer: HandwarmerConfig = field(default_factory=HandwarmerConfig)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "DetectionConfig":
        """
        Build from a (possibly partial) nested dict.

        Raises:
            ValueError: on unknown sections/keys or non-positive windows.
        """
        sections = {}
        for name, values in (config or {}).items():
            if name not in _SECTIONS:
                raise ValueError(f"Unknown config section '{name}'")
            section_cls = _SECTIONS[name]
            known = {f.name for f in fields(section_cls)}
            unknown = set(values or {}) - known
            if unknown:
                raise ValueError(
                    f"Unknown key(s) in '{name}' config: {', '.join(sorted(unknown))}"
                )
            sections[name] = section_cls(**(values or {}))

        result = cls(**sections)
        result.validate()
        return result

    def validate(self):
        """Reject thresholds and windows that cannot be applied."""
        for name in _SECTIONS:
            section = getattr(self, name)
            for f in fields(section):
                value = getattr(section, f.name)
                if value <= 0:
                    raise ValueError(f"{name}.{f.name} must be positive, got {value}")
        for name in ("p_zero_fuzz", "p_zero_nofuzz"):
            value = getattr(self.fuzzing, name)
            if value >= 1:
                raise ValueError(f"fuzzing.{name} must be below 1, got {value}")

    def to_dict(self) -> dict:
        return asdict(self)


def load_detection_config(path: Optional[str] = None) -> DetectionConfig:
    """
    Load detection thresholds.

    Args:
        path: Optional override YAML, merged on top of the packaged defaults

    Returns:
        DetectionConfig
    """
    cfg = load_config(path or str(DEFAULT_CONFIG_PATH))
    logger.debug(
        f"Detection thresholds: box_threshold={cfg.controller.box_threshold}, "
        f"min_events_for_llr={cfg.fuzzing.min_events_for_llr}"
    )
    return DetectionConfig.from_dict(cfg.to_dict())
