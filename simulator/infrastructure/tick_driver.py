"""
TickDriver - Periodic SimPy process that advances a Building
"""

import logging
import threading
from typing import Callable, Optional

import simpy

from ..core.building import Building
from ..core.enums import ElevatorSystemStatus
from .message_broker import MessageBroker

logger = logging.getLogger(__name__)

STATUS_TOPIC = "building/status"


class TickDriver:
    """
    Calls Building.step() once every `tick_interval` simulated seconds.

    After each tick the building report is published on STATUS_TOPIC
    (when a broker is given) and `on_tick` is called with the report.
    `lock` serializes the step with any other thread touching the building.

    `stopped` is an event that succeeds with the tick number when a
    stopping system reaches out of service; a fresh event is armed for
    the next stop cycle.
    """

    def __init__(self, env: simpy.Environment, building: Building,
                 broker: Optional[MessageBroker] = None, tick_interval: float = 1.0,
                 lock: Optional[threading.RLock] = None,
                 on_tick: Optional[Callable] = None):
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self.env = env
        self.building = building
        self.broker = broker
        self.tick_interval = tick_interval
        self.lock = lock if lock is not None else threading.RLock()
        self.on_tick = on_tick
        self.tick = 0
        self.stopped = env.event()
        self._process = env.process(self.run())

    @property
    def process(self) -> simpy.Process:
        return self._process

    def run(self):
        while True:
            yield self.env.timeout(self.tick_interval)
            self.step_once()

    def step_once(self):
        """Advance the building by one tick and publish the result"""
        with self.lock:
            was_stopping = self.building.system_status is ElevatorSystemStatus.STOPPING
            self.building.step()
            report = self.building.get_elevator_system_status()
        self.tick += 1

        if self.broker is not None:
            self.broker.put(STATUS_TOPIC, {"tick": self.tick, "report": report.to_dict()})
        if self.on_tick is not None:
            self.on_tick(report)

        if was_stopping and report.system_status is ElevatorSystemStatus.OUT_OF_SERVICE:
            logger.info("%.2f [TickDriver] System out of service after tick %d", self.env.now, self.tick)
            stopped, self.stopped = self.stopped, self.env.event()
            stopped.succeed(self.tick)
        return report
