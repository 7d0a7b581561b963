"""
A SimPy environment whose clock is paced against the wall clock.

Used by the tick driver so one simulated tick takes a visible amount of
real time when a view is attached.
"""

import logging
import time

import simpy

logger = logging.getLogger(__name__)


class RealtimeEnvironment(simpy.Environment):
    """
    simpy.Environment that sleeps after each event until real time catches up.

    Args:
        speed_factor (float): Simulated seconds per real second
            - 1.0 = real time
            - 2.0 = twice as fast
            - 0.0 = no pacing at all (plain SimPy behaviour)
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        super().__init__(initial_time=initial_time)
        self.speed_factor = speed_factor
        self._mark()

    def _mark(self):
        self.real_start_time = time.monotonic()
        self.sim_start_time = self.now

    def step(self):
        result = super().step()
        if self.speed_factor > 0:
            target = self.real_start_time + (self.now - self.sim_start_time) / self.speed_factor
            delay = target - time.monotonic()
            if delay > 0:
                time.sleep(delay)
        return result

    def set_speed(self, speed_factor):
        """Change pacing mid-run; timing references restart from now"""
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        logger.info("[Env] Speed factor: %s -> %s", self.speed_factor, speed_factor)
        self.speed_factor = speed_factor
        self._mark()

    def get_speed(self):
        return self.speed_factor
