"""
Tick driver, message broker and realtime environment tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

import time

import pytest
import simpy

from simulator.core.building import Building
from simulator.core.enums import ElevatorSystemStatus
from simulator.core.reports import BuildingReport
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment
from simulator.infrastructure.tick_driver import STATUS_TOPIC, TickDriver


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def building():
    building = Building(3, 2, 2)
    building.start_elevator_system()
    return building


def test_ticks_follow_the_interval(env, building):
    driver = TickDriver(env, building, tick_interval=0.5)
    env.run(until=2.25)
    assert driver.tick == 4


def test_invalid_interval(env, building):
    with pytest.raises(ValueError):
        TickDriver(env, building, tick_interval=0)


def test_reports_are_published_after_each_tick(env, building):
    broker = MessageBroker(env)
    status_pipe = broker.get_pipe(STATUS_TOPIC)
    TickDriver(env, building, broker=broker)
    env.run(until=3.5)

    messages = list(status_pipe.items)
    assert [message["tick"] for message in messages] == [1, 2, 3]
    assert messages[-1]["report"]["system_status"] == "RUNNING"
    assert messages[-1]["report"]["elevators"][0]["wait_timer"] == 2

    broadcast = list(broker.get_broadcast_pipe().items)
    assert len(broadcast) == 3
    assert all(item["topic"] == STATUS_TOPIC for item in broadcast)


def test_unsubscribed_topic_does_not_buffer(env, building):
    broker = MessageBroker(env)
    TickDriver(env, building, broker=broker)
    env.run(until=500)
    assert STATUS_TOPIC not in broker.topics


def test_on_tick_receives_the_report_every_tick(env, building):
    seen = []
    driver = TickDriver(env, building, on_tick=seen.append)
    env.run(until=4.5)
    assert len(seen) == driver.tick == 4
    assert all(isinstance(report, BuildingReport) for report in seen)
    assert [report.elevator_reports[0].wait_timer for report in seen] == [4, 3, 2, 1]


def test_step_once_without_an_environment_run(env, building):
    driver = TickDriver(env, building)
    report = driver.step_once()
    assert driver.tick == 1
    assert report.elevator_reports[0].wait_timer == 4


def test_stopped_event_fires_when_out_of_service(env, building):
    driver = TickDriver(env, building)
    # Idle cars reach the top floor on tick 8
    env.run(until=8.5)
    assert all(r.current_floor == 2 for r in building.get_elevator_system_status().elevator_reports)

    first_stopped = driver.stopped
    building.stop_elevator_system()
    assert env.run(until=first_stopped) == 10
    assert building.system_status is ElevatorSystemStatus.OUT_OF_SERVICE
    assert driver.stopped is not first_stopped
    assert not driver.stopped.triggered


def test_message_broker_topics(env):
    broker = MessageBroker(env)
    received = []

    def consumer():
        message = yield broker.get("greeting")
        received.append((env.now, message))

    def producer():
        yield env.timeout(2)
        broker.put("greeting", {"text": "hello"})

    env.process(consumer())
    env.process(producer())
    env.run()

    assert received == [(2, {"text": "hello"})]
    assert broker.get_current_time() == 2
    assert broker.get_broadcast_pipe().items == [{"topic": "greeting", "message": {"text": "hello"}}]


def test_realtime_environment_without_pacing_runs_immediately():
    env = RealtimeEnvironment(speed_factor=0.0)
    started = time.monotonic()
    env.run(until=10000)
    assert env.now == 10000
    assert time.monotonic() - started < 1.0


def test_realtime_environment_paces_events():
    env = RealtimeEnvironment(speed_factor=50.0)

    def ticker():
        yield env.timeout(1)

    env.process(ticker())
    started = time.monotonic()
    env.run(until=1)
    # 1 simulated second at 50x is 20 ms of wall time
    assert time.monotonic() - started >= 0.015


def test_realtime_environment_speed():
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-1)

    env = RealtimeEnvironment(speed_factor=1.0)
    env.set_speed(4.0)
    assert env.get_speed() == 4.0
    with pytest.raises(ValueError):
        env.set_speed(-0.5)
    assert env.get_speed() == 4.0


def test_put_without_subscriber_only_broadcasts(env):
    broker = MessageBroker(env)
    assert broker.put("nobody/listens", 1) is None
    assert "nobody/listens" not in broker.topics
    assert len(broker.get_broadcast_pipe().items) == 1
