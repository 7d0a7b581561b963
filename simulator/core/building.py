"""
Building - Owns the elevator fleet and routes ride requests

This module provides the Building class which manages:
- The fleet of elevators (fixed for the lifetime of the building)
- FIFO queues of pending up and down requests
- The system-wide lifecycle (out of service, running, stopping)
- Greedy first-come-first-served distribution of queued requests
"""

import logging
from typing import List, Optional

from .elevator import Elevator
from .enums import Direction, ElevatorStatus, ElevatorSystemStatus
from .exceptions import IllegalStateError
from .reports import BuildingReport
from .request import Request

logger = logging.getLogger(__name__)


class Building:
    """
    A building with a fixed number of floors and elevators.

    Requests are only assigned at the terminus floors: cars waiting at
    floor 0 take up-requests, cars waiting at the top floor take
    down-requests. Each car is filled up to capacity before the next
    car in index order gets a turn.
    """

    def __init__(self, num_floors: int, num_elevators: int, elevator_capacity: int,
                 idle_wait_ticks: int = Elevator.DEFAULT_IDLE_WAIT_TICKS,
                 door_dwell_ticks: int = Elevator.DEFAULT_DOOR_DWELL_TICKS):
        """
        Initialize building.

        Args:
            num_floors: Number of floors, numbered 0 to num_floors - 1
            num_elevators: Number of elevator cars
            elevator_capacity: Maximum number of requests one car takes per trip
            idle_wait_ticks: Ticks a car waits at a terminus before repositioning
            door_dwell_ticks: Ticks a car holds its door open at a stop

        Raises:
            ValueError: If any dimension is out of range
        """
        if num_floors < 2:
            raise ValueError("The number of floors must be greater than 1.")
        if num_elevators < 1:
            raise ValueError("There must be at least one elevator in the building.")
        if elevator_capacity < 1:
            raise ValueError("The elevator must be able to receive at least one person.")

        self.num_floors = num_floors
        self.num_elevators = num_elevators
        self.elevator_capacity = elevator_capacity
        self.top_floor = num_floors - 1

        self._elevators: List[Elevator] = [
            Elevator(i, num_floors, elevator_capacity,
                     idle_wait_ticks=idle_wait_ticks, door_dwell_ticks=door_dwell_ticks)
            for i in range(num_elevators)
        ]
        self._up_requests: List[Request] = []
        self._down_requests: List[Request] = []
        self._system_status = ElevatorSystemStatus.OUT_OF_SERVICE

    @classmethod
    def from_config(cls, config) -> 'Building':
        """Create a building from a SimulationConfig"""
        return cls(
            num_floors=config.building.num_floors,
            num_elevators=config.elevator.num_elevators,
            elevator_capacity=config.elevator.capacity,
            idle_wait_ticks=config.elevator.idle_wait_ticks,
            door_dwell_ticks=config.elevator.door_dwell_ticks,
        )

    @property
    def system_status(self) -> ElevatorSystemStatus:
        return self._system_status

    def add_request(self, request: Optional[Request]) -> bool:
        """
        Queue a ride request.

        Args:
            request: Ride to queue

        Returns:
            True if the request was queued, False if the system is out of service

        Raises:
            ValueError: If the request is None or outside the building's floors
            IllegalStateError: If the system is stopping
        """
        if request is None:
            raise ValueError("Request cannot be None.")
        if not self._is_valid_floor(request.start_floor) or not self._is_valid_floor(request.end_floor):
            raise ValueError(
                f"Request {request} is outside floors 0-{self.top_floor}."
            )
        if self._system_status is ElevatorSystemStatus.OUT_OF_SERVICE:
            return False
        if self._system_status is ElevatorSystemStatus.STOPPING:
            raise IllegalStateError("Elevator system is stopping now.")

        if request.direction is Direction.UP:
            self._up_requests.append(request)
        else:
            self._down_requests.append(request)
        logger.debug("[Building] Queued request %s", request)
        return True

    def step(self):
        """Advance every elevator by one tick, then hand out queued requests"""
        if self._system_status is ElevatorSystemStatus.OUT_OF_SERVICE:
            return

        for elevator in self._elevators:
            elevator.step()

        if self._system_status is ElevatorSystemStatus.STOPPING:
            if all(elevator.status is ElevatorStatus.OUT_OF_SERVICE and elevator.current_floor == 0
                   for elevator in self._elevators):
                self._set_system_status(ElevatorSystemStatus.OUT_OF_SERVICE)
        else:
            self._distribute_requests()

    def _distribute_requests(self):
        if not self._up_requests and not self._down_requests:
            return
        for elevator in self._elevators:
            if not elevator.is_taking_requests():
                continue
            if elevator.current_floor == 0:
                batch = self._take_batch(self._up_requests)
            elif elevator.current_floor == self.top_floor:
                batch = self._take_batch(self._down_requests)
            else:
                continue
            if batch:
                elevator.process_requests(batch)
                logger.info("[Building] %s took %s", elevator.name,
                            ", ".join(str(request) for request in batch))

    def _take_batch(self, queue: List[Request]) -> List[Request]:
        batch = queue[:self.elevator_capacity]
        del queue[:len(batch)]
        return batch

    def start_elevator_system(self) -> bool:
        """
        Start the system and every elevator.

        Returns:
            True if the system was started, False if it is already running

        Raises:
            IllegalStateError: If the system is stopping
        """
        if self._system_status is ElevatorSystemStatus.STOPPING:
            raise IllegalStateError("Elevator system is stopping now.")
        if self._system_status is ElevatorSystemStatus.RUNNING:
            return False
        for elevator in self._elevators:
            elevator.start()
        self._set_system_status(ElevatorSystemStatus.RUNNING)
        return True

    def stop_elevator_system(self):
        """
        Send every elevator home and purge unassigned requests.

        Stops already assigned to a car are dropped by the car itself.
        Cars already out of service stay put, so a stopped idle system
        returns to out of service on the next step.
        """
        for elevator in self._elevators:
            elevator.take_out_of_service()
        purged = len(self._up_requests) + len(self._down_requests)
        self._up_requests.clear()
        self._down_requests.clear()
        self._set_system_status(ElevatorSystemStatus.STOPPING)
        if purged:
            logger.info("[Building] Purged %d queued request(s)", purged)

    def get_elevator_system_status(self) -> BuildingReport:
        """Build an immutable snapshot of the whole system"""
        return BuildingReport(
            num_floors=self.num_floors,
            num_elevators=self.num_elevators,
            elevator_capacity=self.elevator_capacity,
            elevator_reports=tuple(elevator.get_elevator_status() for elevator in self._elevators),
            up_requests=tuple(self._up_requests),
            down_requests=tuple(self._down_requests),
            system_status=self._system_status,
        )

    def _is_valid_floor(self, floor: int) -> bool:
        return 0 <= floor <= self.top_floor

    def _set_system_status(self, new_status: ElevatorSystemStatus):
        if self._system_status is not new_status:
            logger.info("[Building] System status: %s -> %s", self._system_status, new_status)
            self._system_status = new_status

    def __repr__(self) -> str:
        return (f"Building(floors={self.num_floors}, elevators={self.num_elevators}, "
                f"capacity={self.elevator_capacity}, status={self._system_status.name})")
