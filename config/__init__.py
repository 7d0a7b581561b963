"""
Configuration management package

Provides configuration classes for the elevator dispatch simulation.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TrafficConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TrafficConfig',

    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
