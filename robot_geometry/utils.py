"""
Utility functions and configuration management for robot geometry.
"""

import os
import math
import yaml
import numpy as np
from typing import Dict, Any, Optional
from dataclasses import dataclass, fields
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config', 'default_config.yaml')


class GeometryError(ValueError):
    """Raised for malformed array or matrix inputs to the geometry helpers."""
    pass


@dataclass
class GeometryConfig:
    """Configuration class for geometry parameters."""

    # Comparison
    equality_tolerance: float = 1e-9

    # Formatting
    display_precision: int = 2

    # Unit conversion (meters -> robot position units)
    position_units_scale: float = 1000.0

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'GeometryConfig':
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            logger.warning(f"Ignoring unknown geometry config keys: {sorted(unknown)}")

        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(config_path: Optional[str] = None) -> GeometryConfig:
    """
    Load geometry configuration from YAML file.

    Args:
        config_path: Path to configuration file. If None, uses default config.

    Returns:
        GeometryConfig object
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config_dict = yaml.safe_load(f) or {}
            logger.info(f"Loaded configuration from {config_path}")
            return GeometryConfig.from_dict(config_dict)
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")

    logger.info("Using default configuration")
    return GeometryConfig()


def save_config(config: GeometryConfig, config_path: str):
    """
    Save geometry configuration to YAML file.

    Args:
        config: GeometryConfig object to save
        config_path: Path where to save the configuration
    """
    try:
        directory = os.path.dirname(config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)
        logger.info(f"Saved configuration to {config_path}")
    except Exception as e:
        logger.error(f"Failed to save config to {config_path}: {e}")


_active_config: Optional[GeometryConfig] = None


def get_config() -> GeometryConfig:
    """Return the process-wide configuration, loading the packaged default on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(config: Optional[GeometryConfig]):
    """
    Replace the process-wide configuration.

    Args:
        config: New configuration, or None to reload the packaged default on next use
    """
    global _active_config
    _active_config = config


def is_close(a: float, b: float, tolerance: Optional[float] = None) -> bool:
    """
    Compare two scalars with an absolute tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Absolute tolerance. If None, uses the configured equality tolerance.

    Returns:
        True if |a - b| <= tolerance (always False when either value is NaN)
    """
    if tolerance is None:
        tolerance = get_config().equality_tolerance
    return abs(a - b) <= tolerance


def reciprocal(scalar: float) -> float:
    """
    Return 1 / scalar, yielding inf or NaN instead of raising for a zero divisor.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(1.0, np.float64(scalar)))


def safe_cos_sin(angle: float):
    """
    Return (cos, sin) of an angle; non-finite angles give (nan, nan).
    """
    if not math.isfinite(angle):
        return math.nan, math.nan
    return math.cos(angle), math.sin(angle)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(value, high))


def ensure_shape(arr, shape, name: str) -> np.ndarray:
    """
    Convert input to a float array and check its shape.

    Args:
        arr: Array-like input
        shape: Expected shape tuple
        name: Name used in the error message

    Returns:
        Float numpy array

    Raises:
        GeometryError: If the shape does not match
    """
    out = np.asarray(arr, dtype=float)
    if out.shape != tuple(shape):
        raise GeometryError(f"{name} must have shape {tuple(shape)}, got {out.shape}")
    return out
