# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides:
    - Config presets: Load and save SimulationConfig values as JSON.
    - Frame export: Convert particle snapshots and field state to JSON dicts.

Simulation state is never saved; a reload always starts empty.

Typical usage:
    from lorentz_sim.io import load_config, save_config

    config = load_config("presets/cyclotron.json")
    sim = Simulation(config=config)
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_to_json,
    config_from_json,
    particle_to_json,
    frame_to_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_to_json",
    "config_from_json",
    "particle_to_json",
    "frame_to_json",
]
