# MIT License (see LICENSE)
"""
JSON serialization for configuration presets and render frames.

Configuration presets let a front-end ship named field setups (cyclotron,
E×B drift, ...). Simulation state itself is never persisted; frames are
exported only as plain dicts for recording or for a web viewer.

Config Schema Overview:
-----------------------
{
  "electric_field": [Ex, Ey],          # Default: [0, 0]
  "magnetic_field": [Bx, By, Bz],      # Default: [0, 0, 0]
  "magnetic_frequency": float,         # Hz, default 0 (static)
  "max_trail_length": int,             # Default: 100
  "bounds": float,                     # Default: 1.5
  "viewport": [W, H],                  # Default: [800, 600]
  "time_step": float,                  # Default: 0.02
  "max_particles": int,                # Default: 5000
  "units": {                           # Optional
    "field_scale": float,
    "velocity_scale": float,
    "visual_speed_factor": float,
    "base_charge": float,
    "base_mass": float
  }
}

Frame Schema:
-------------
{
  "time": float,
  "fields": {"E": [x, y, z], "B": [x, y, z], "frequency": float},
  "particles": [
    {"id": int, "position": [x, y, z], "color": str,
     "radius": float, "trail": [[x, y, z], ...]}
  ]
}
"""
from __future__ import annotations
import json
from typing import TYPE_CHECKING, Any

import numpy as np

from ..config import SimulationConfig

if TYPE_CHECKING:
    from ..core.fields import FieldState
    from ..types import ParticleSnapshot

_UNIT_KEYS = ("field_scale", "velocity_scale", "visual_speed_factor", "base_charge", "base_mass")
_DEFAULTS = SimulationConfig()


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a config file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> SimulationConfig:
    """
    Load a SimulationConfig from a JSON preset.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top level is not an object, a vector has the wrong
            length or a value is not numeric.
    """
    return config_from_json(load_config_raw(path))


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a dictionary.

    Missing keys fall back to SimulationConfig defaults. Unknown keys are
    ignored for forward compatibility.
    """
    if not isinstance(d, dict):
        raise ValueError(f"Config must be a JSON object, got {type(d).__name__}")
    kwargs: dict[str, Any] = {}

    if "electric_field" in d:
        kwargs["electric_field"] = _vector(d["electric_field"], 2, "electric_field")
    if "magnetic_field" in d:
        kwargs["magnetic_field"] = _vector(d["magnetic_field"], 3, "magnetic_field")
    if "viewport" in d:
        w, h = _vector(d["viewport"], 2, "viewport")
        if w <= 0 or h <= 0:
            raise ValueError(f"Viewport size must be positive, got ({w}, {h})")
        kwargs["viewport_size"] = (w, h)

    for key in ("magnetic_frequency", "bounds", "time_step"):
        if key in d:
            kwargs[key] = _number(d[key], key)
    for key in ("max_trail_length", "max_particles"):
        if key in d:
            kwargs[key] = int(_number(d[key], key))

    units = d.get("units", {})
    if not isinstance(units, dict):
        raise ValueError(f"'units' must be a JSON object, got {type(units).__name__}")
    for key in _UNIT_KEYS:
        if key in units:
            kwargs[key] = _number(units[key], key)

    return SimulationConfig(**kwargs)


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """
    Serialize a SimulationConfig to a dictionary (round-trip compatible).

    Fields equal to their defaults are omitted to keep presets short.
    """
    result: dict[str, Any] = {
        "electric_field": list(config.electric_field),
        "magnetic_field": list(config.magnetic_field),
    }
    if config.magnetic_frequency != _DEFAULTS.magnetic_frequency:
        result["magnetic_frequency"] = config.magnetic_frequency
    if config.max_trail_length != _DEFAULTS.max_trail_length:
        result["max_trail_length"] = config.max_trail_length
    if config.bounds != _DEFAULTS.bounds:
        result["bounds"] = config.bounds
    if config.viewport_size != _DEFAULTS.viewport_size:
        result["viewport"] = list(config.viewport_size)
    if config.time_step != _DEFAULTS.time_step:
        result["time_step"] = config.time_step
    if config.max_particles != _DEFAULTS.max_particles:
        result["max_particles"] = config.max_particles

    units = {
        key: getattr(config, key)
        for key in _UNIT_KEYS
        if getattr(config, key) != getattr(_DEFAULTS, key)
    }
    if units:
        result["units"] = units
    return result


def save_config(config: SimulationConfig, path: str, indent: int = 2) -> None:
    """Write a SimulationConfig preset to disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)


def particle_to_json(snap: "ParticleSnapshot") -> dict[str, Any]:
    """Serialize a particle snapshot for a render frame."""
    return {
        "id": snap.id,
        "position": list(snap.position),
        "color": snap.color,
        "radius": snap.radius,
        "trail": [list(pt) for pt in snap.trail],
    }


def frame_to_json(time: float, fields: "FieldState", particles: list["ParticleSnapshot"]) -> dict[str, Any]:
    """Serialize one rendered frame: clock, instantaneous fields and particles."""
    return {
        "time": float(time),
        "fields": {
            "E": _to_list(fields.electric),
            "B": _to_list(fields.magnetic),
            "frequency": fields.frequency,
        },
        "particles": [particle_to_json(s) for s in particles],
    }


def _vector(value: Any, n: int, name: str) -> tuple[float, ...]:
    if not isinstance(value, (list, tuple)) or len(value) != n:
        raise ValueError(f"'{name}' must be a list of {n} numbers, got {value!r}")
    return tuple(_number(v, name) for v in value)


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{name}' must be numeric, got {value!r}")
    return float(value)


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
