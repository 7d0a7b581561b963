import logging
from typing import Sequence

from .enums import Direction, ElevatorStatus
from .exceptions import IllegalStateError
from .reports import ElevatorReport
from .request import Request

logger = logging.getLogger(__name__)


class Elevator:
    """
    Elevator car advanced one tick at a time by its Building.

    The car only accepts new rides while waiting at a terminus floor
    (floor 0 or the top floor). Once a batch is assigned it serves every
    stop, then carries on to the next terminus and waits there again.
    An idle car whose wait timer expires travels to the opposite terminus.
    """

    DEFAULT_IDLE_WAIT_TICKS = 5
    DEFAULT_DOOR_DWELL_TICKS = 3

    def __init__(self, elevator_id: int, num_floors: int, capacity: int,
                 idle_wait_ticks: int = DEFAULT_IDLE_WAIT_TICKS,
                 door_dwell_ticks: int = DEFAULT_DOOR_DWELL_TICKS):
        if num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if idle_wait_ticks < 0:
            raise ValueError("idle_wait_ticks cannot be negative")
        if door_dwell_ticks < 1:
            raise ValueError("door_dwell_ticks must be at least 1")

        self.elevator_id = elevator_id
        self.name = f"Elevator {elevator_id}"
        self.num_floors = num_floors
        self.top_floor = num_floors - 1
        self.capacity = capacity
        self.idle_wait_ticks = idle_wait_ticks
        self.door_dwell_ticks = door_dwell_ticks

        self.current_floor = 0
        self.direction = Direction.STOPPED
        self.door_closed = False
        self.floor_requests = set()
        self.wait_timer = 0
        self.dwell_timer = 0
        self.status = ElevatorStatus.OUT_OF_SERVICE
        self.taking_requests = False

    # --- Commands from the building ---

    def start(self) -> bool:
        """
        Put an out-of-service car back into service at floor 0.

        Returns:
            True if the car was started, False if it was not out of service
        """
        if self.status is not ElevatorStatus.OUT_OF_SERVICE:
            return False
        self.current_floor = 0
        self.floor_requests.clear()
        self._wait()
        return True

    def take_out_of_service(self):
        """Drop all pending stops and head for floor 0"""
        if self.status is ElevatorStatus.OUT_OF_SERVICE:
            return
        self.floor_requests.clear()
        self.taking_requests = False
        self.wait_timer = 0
        self.dwell_timer = 0
        if self.current_floor != 0:
            self.door_closed = True
        self._update_direction(Direction.DOWN)
        self._set_status(ElevatorStatus.STOPPING)

    def is_taking_requests(self) -> bool:
        return (self.status is ElevatorStatus.WAITING
                and self.taking_requests
                and len(self.floor_requests) < self.capacity)

    def process_requests(self, requests: Sequence[Request]):
        """
        Accept a batch of rides that all travel in the same direction.

        Args:
            requests: Rides to serve, at most `capacity` of them

        Raises:
            IllegalStateError: If the car is not taking requests or the
                batch exceeds its capacity
            ValueError: If the batch mixes directions or leaves the shaft
        """
        if not self.is_taking_requests():
            raise IllegalStateError(f"{self.name} is not taking requests")
        if len(requests) > self.capacity:
            raise IllegalStateError(
                f"{self.name} can take at most {self.capacity} requests, got {len(requests)}"
            )
        if not requests:
            return

        directions = {request.direction for request in requests}
        if len(directions) > 1:
            raise ValueError("All requests in a batch must travel in the same direction")
        for request in requests:
            if max(request.start_floor, request.end_floor) > self.top_floor:
                raise ValueError(f"Request {request} is outside floors 0-{self.top_floor}")

        for request in requests:
            self.floor_requests.add(request.start_floor)
            self.floor_requests.add(request.end_floor)
        self.taking_requests = False
        self.wait_timer = 0
        self._update_direction(directions.pop())
        self._set_status(ElevatorStatus.MOVING)
        logger.debug("[%s] Assigned %d request(s), stops %s",
                     self.name, len(requests), sorted(self.floor_requests))

    # --- Simulation ---

    def step(self):
        """Advance the car by one tick"""
        if self.status is ElevatorStatus.OUT_OF_SERVICE:
            return
        if self.status is ElevatorStatus.STOPPING:
            self._step_stopping()
        elif self.status is ElevatorStatus.WAITING:
            self._step_waiting()
        else:
            self._step_moving()

    def _step_waiting(self):
        if self.wait_timer > 0:
            self.wait_timer -= 1
            return
        # Nobody came: reposition to the opposite terminus
        self.taking_requests = False
        self._update_direction(Direction.UP if self.current_floor == 0 else Direction.DOWN)
        self._set_status(ElevatorStatus.MOVING)

    def _step_moving(self):
        if not self.door_closed:
            self.dwell_timer -= 1
            if self.dwell_timer <= 0:
                self.door_closed = True
                self._wait_if_idle_at_terminus()
            return

        if self.current_floor in self.floor_requests:
            self.floor_requests.discard(self.current_floor)
            self.door_closed = False
            self.dwell_timer = self.door_dwell_ticks
            logger.debug("[%s] Door open at floor %d", self.name, self.current_floor)
            return

        self._update_direction(self._next_direction())
        self.current_floor += 1 if self.direction is Direction.UP else -1
        self._wait_if_idle_at_terminus()

    def _step_stopping(self):
        if self.current_floor > 0:
            self.door_closed = True
            self.current_floor -= 1
        if self.current_floor == 0:
            self.floor_requests.clear()
            self.door_closed = False
            self._update_direction(Direction.STOPPED)
            self._set_status(ElevatorStatus.OUT_OF_SERVICE)

    def _next_direction(self) -> Direction:
        above = any(floor > self.current_floor for floor in self.floor_requests)
        below = any(floor < self.current_floor for floor in self.floor_requests)
        if self.direction is Direction.UP:
            if above or (not below and self.current_floor < self.top_floor):
                return Direction.UP
            return Direction.DOWN
        if below or (not above and self.current_floor > 0):
            return Direction.DOWN
        return Direction.UP

    def _wait_if_idle_at_terminus(self):
        if not self.floor_requests and self.current_floor in (0, self.top_floor):
            self._wait()

    def _wait(self):
        self.door_closed = True
        self.dwell_timer = 0
        self.wait_timer = self.idle_wait_ticks
        self.taking_requests = True
        self._update_direction(Direction.UP if self.current_floor == 0 else Direction.DOWN)
        self._set_status(ElevatorStatus.WAITING)

    # --- State bookkeeping ---

    def _set_status(self, new_status: ElevatorStatus):
        if self.status is not new_status:
            old_status = self.status
            self.status = new_status
            logger.debug("[%s] State transition: %s -> %s (floor %d)",
                         self.name, old_status.value, new_status.value, self.current_floor)

    def _update_direction(self, new_direction: Direction):
        if self.direction is not new_direction:
            logger.debug("[%s] Direction: %s -> %s", self.name, self.direction, new_direction)
            self.direction = new_direction

    def get_elevator_status(self) -> ElevatorReport:
        """Build an immutable snapshot of this car"""
        return ElevatorReport(
            elevator_id=self.elevator_id,
            current_floor=self.current_floor,
            direction=self.direction,
            door_closed=self.door_closed,
            floor_requests=tuple(floor in self.floor_requests for floor in range(self.num_floors)),
            taking_requests=self.is_taking_requests(),
            status=self.status,
            wait_timer=self.wait_timer,
        )

    def __repr__(self) -> str:
        return (f"Elevator(id={self.elevator_id}, floor={self.current_floor}, "
                f"status={self.status.value}, direction={self.direction.value})")
