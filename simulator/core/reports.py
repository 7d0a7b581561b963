"""
Reports - Immutable snapshots of elevator and building state

Reports are built fresh on every status query and only hold tuples
copied from live state, so a caller holding one can neither observe
later changes nor mutate the building through it.
"""

from dataclasses import dataclass
from typing import Tuple

from .enums import Direction, ElevatorStatus, ElevatorSystemStatus
from .request import Request


@dataclass(frozen=True)
class ElevatorReport:
    """Snapshot of one elevator"""
    elevator_id: int
    current_floor: int
    direction: Direction
    door_closed: bool
    floor_requests: Tuple[bool, ...]
    taking_requests: bool
    status: ElevatorStatus
    wait_timer: int

    @property
    def out_of_service(self) -> bool:
        return self.status is ElevatorStatus.OUT_OF_SERVICE

    def to_dict(self) -> dict:
        return {
            "elevator_id": self.elevator_id,
            "current_floor": self.current_floor,
            "direction": self.direction.value,
            "door_closed": self.door_closed,
            "floor_requests": list(self.floor_requests),
            "taking_requests": self.taking_requests,
            "out_of_service": self.out_of_service,
            "status": self.status.value,
            "wait_timer": self.wait_timer,
        }

    def __str__(self):
        if self.status is ElevatorStatus.OUT_OF_SERVICE:
            return f"Out of Service[Floor {self.current_floor}]"
        if self.status is ElevatorStatus.WAITING:
            return f"Waiting[Floor {self.current_floor}, Time {self.wait_timer}]"
        door = "C" if self.door_closed else "O"
        stops = " ".join(
            str(floor) if requested else "--"
            for floor, requested in enumerate(self.floor_requests)
        )
        return f"[{self.current_floor}|{self.direction.symbol}|{door}]< {stops} >"


@dataclass(frozen=True)
class BuildingReport:
    """Snapshot of the whole elevator system"""
    num_floors: int
    num_elevators: int
    elevator_capacity: int
    elevator_reports: Tuple[ElevatorReport, ...]
    up_requests: Tuple[Request, ...]
    down_requests: Tuple[Request, ...]
    system_status: ElevatorSystemStatus

    def to_dict(self) -> dict:
        return {
            "num_floors": self.num_floors,
            "num_elevators": self.num_elevators,
            "elevator_capacity": self.elevator_capacity,
            "system_status": self.system_status.name,
            "elevators": [report.to_dict() for report in self.elevator_reports],
            "up_requests": [request.to_dict() for request in self.up_requests],
            "down_requests": [request.to_dict() for request in self.down_requests],
        }

    def __str__(self):
        lines = [
            "Building Report:",
            f"Elevator system status: {self.system_status}",
            "Elevator reports: ",
        ]
        lines.extend(str(report) for report in self.elevator_reports)
        lines.append(f"Up requests: {format_requests(self.up_requests)}")
        lines.append(f"Down requests: {format_requests(self.down_requests)}")
        return "\n".join(lines) + "\n"


def format_requests(requests) -> str:
    return "[" + ", ".join(str(request) for request in requests) + "]"
