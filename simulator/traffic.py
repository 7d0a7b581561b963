"""
Random ride-request generation for unattended simulation runs
"""

import logging
import random
import threading
from typing import Optional

import simpy

from .core.building import Building
from .core.exceptions import IllegalStateError
from .core.request import Request

logger = logging.getLogger(__name__)


class RequestGenerator:
    """
    SimPy process that feeds random rides into a building.

    Inter-arrival times are exponential with mean 1 / request_rate;
    start and destination floors are drawn uniformly and always differ.
    Requests the building refuses (out of service or stopping) are
    counted in `rejected` rather than raised.
    """

    def __init__(self, env: simpy.Environment, building: Building, request_rate: float,
                 rng: Optional[random.Random] = None,
                 lock: Optional[threading.RLock] = None):
        if request_rate <= 0:
            raise ValueError("request_rate must be positive")
        self.env = env
        self.building = building
        self.request_rate = request_rate
        self.rng = rng if rng is not None else random.Random()
        self.lock = lock if lock is not None else threading.RLock()
        self.generated = 0
        self.accepted = 0
        self.rejected = 0
        self._process = env.process(self.run())

    @property
    def process(self) -> simpy.Process:
        return self._process

    def random_request(self) -> Request:
        num_floors = self.building.num_floors
        start_floor = self.rng.randrange(num_floors)
        end_floor = self.rng.randrange(num_floors - 1)
        if end_floor >= start_floor:
            end_floor += 1
        return Request(start_floor, end_floor)

    def run(self):
        while True:
            yield self.env.timeout(self.rng.expovariate(self.request_rate))
            request = self.random_request()
            self.generated += 1
            try:
                with self.lock:
                    queued = self.building.add_request(request)
            except IllegalStateError:
                queued = False
            if queued:
                self.accepted += 1
                logger.debug("%.2f [RequestGen] %s", self.env.now, request)
            else:
                self.rejected += 1
