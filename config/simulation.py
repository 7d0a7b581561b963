"""
Simulation Configuration

Building dimensions, elevator timing, random traffic and the pacing of
the tick driver.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 6

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Elevator fleet specifications"""
    num_elevators: int = 8
    capacity: int = 3  # requests per trip
    idle_wait_ticks: int = 5  # ticks waited at a terminus before repositioning
    door_dwell_ticks: int = 3  # ticks the door stays open at a stop

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")
        if self.idle_wait_ticks < 0:
            raise ValueError("idle_wait_ticks cannot be negative")
        if self.door_dwell_ticks < 1:
            raise ValueError("door_dwell_ticks must be at least 1")


@dataclass
class TrafficConfig:
    """Random traffic configuration"""
    request_rate: float = 0.5  # requests per simulated second
    duration_ticks: int = 120  # ticks before the system is told to stop

    def __post_init__(self):
        if self.request_rate <= 0:
            raise ValueError("request_rate must be positive")
        if self.duration_ticks < 1:
            raise ValueError("duration_ticks must be at least 1")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator and traffic settings with the
    pacing of the tick driver.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)

    random_seed: Optional[int] = None
    tick_interval: float = 1.0  # simulated seconds per tick
    realtime_factor: float = 1.0  # 1.0 = realtime, 0.0 = as fast as possible

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = (data or {}).get('simulation', data or {})

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 6)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 8),
            capacity=elevator_data.get('capacity', 3),
            idle_wait_ticks=elevator_data.get('idle_wait_ticks', 5),
            door_dwell_ticks=elevator_data.get('door_dwell_ticks', 3)
        )

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            request_rate=traffic_data.get('request_rate', 0.5),
            duration_ticks=traffic_data.get('duration_ticks', 120)
        )

        return cls(
            building=building,
            elevator=elevator,
            traffic=traffic,
            random_seed=sim_data.get('random_seed'),
            tick_interval=sim_data.get('tick_interval', 1.0),
            realtime_factor=sim_data.get('realtime_factor', 1.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators,
                    'capacity': self.elevator.capacity,
                    'idle_wait_ticks': self.elevator.idle_wait_ticks,
                    'door_dwell_ticks': self.elevator.door_dwell_ticks
                },
                'traffic': {
                    'request_rate': self.traffic.request_rate,
                    'duration_ticks': self.traffic.duration_ticks
                },
                'tick_interval': self.tick_interval,
                'realtime_factor': self.realtime_factor
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        # A run must last long enough for a car to cross the building once
        if self.traffic.duration_ticks < self.building.num_floors:
            raise ValueError(
                f"traffic.duration_ticks ({self.traffic.duration_ticks}) must be at least "
                f"building.num_floors ({self.building.num_floors})"
            )
