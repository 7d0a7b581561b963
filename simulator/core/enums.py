"""
Enumerations shared by the elevator and building state machines.
"""

from enum import Enum


class Direction(Enum):
    """Travel direction of an elevator car"""
    UP = "UP"
    DOWN = "DOWN"
    STOPPED = "STOPPED"

    @property
    def symbol(self) -> str:
        """Single character used in the textual elevator line"""
        return {"UP": "^", "DOWN": "v", "STOPPED": "-"}[self.value]

    def __str__(self):
        return self.value


class ElevatorStatus(Enum):
    """Service state of a single elevator"""
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
    STOPPING = "STOPPING"
    WAITING = "WAITING"
    MOVING = "MOVING"


class ElevatorSystemStatus(Enum):
    """Service state of the whole building"""
    OUT_OF_SERVICE = "Out Of Service"
    RUNNING = "Running"
    STOPPING = "Stopping"

    def __str__(self):
        return self.value
