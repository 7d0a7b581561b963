"""Core simulation entities"""

from .enums import Direction, ElevatorStatus, ElevatorSystemStatus
from .exceptions import IllegalStateError
from .request import Request
from .reports import ElevatorReport, BuildingReport
from .elevator import Elevator
from .building import Building

__all__ = [
    'Direction',
    'ElevatorStatus',
    'ElevatorSystemStatus',
    'IllegalStateError',
    'Request',
    'ElevatorReport',
    'BuildingReport',
    'Elevator',
    'Building',
]
