"""
Elevator Dispatch Simulator - Core simulation engine

This package provides the building-level request router, the per-elevator
state machine it drives, and the SimPy infrastructure that advances them
one tick at a time.
"""

__version__ = "0.1.0"

from .core.building import Building
from .core.elevator import Elevator
from .core.request import Request
from .core.reports import BuildingReport, ElevatorReport
from .core.enums import Direction, ElevatorStatus, ElevatorSystemStatus
from .core.exceptions import IllegalStateError

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment
from .infrastructure.tick_driver import TickDriver

__all__ = [
    'Building',
    'Elevator',
    'Request',
    'BuildingReport',
    'ElevatorReport',
    'Direction',
    'ElevatorStatus',
    'ElevatorSystemStatus',
    'IllegalStateError',
    'MessageBroker',
    'RealtimeEnvironment',
    'TickDriver',
]
