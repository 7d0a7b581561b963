"""
Console controller tests

A recording view captures every call so the messages shown to the user
can be checked exactly.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from controller import ConsoleController, ConsoleView, IElevatorView
from simulator.core.building import Building
from simulator.core.enums import ElevatorSystemStatus
from simulator.core.exceptions import IllegalStateError
from simulator.core.request import Request


class RecordingView(IElevatorView):
    def __init__(self):
        self.errors = []
        self.statuses = []
        self.elevators = []
        self.requests = []

    def display_error(self, message):
        self.errors.append(message)

    def display_system_status(self, status):
        self.statuses.append(status)

    def display_elevator_status(self, index, floor, direction):
        self.elevators.append((index, floor, direction))

    def display_request_information(self, up_requests, down_requests):
        self.requests.append((up_requests, down_requests))


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def controller(view):
    return ConsoleController(view, Building(3, 2, 3))


@pytest.fixture
def running(controller):
    assert controller.start()
    return controller


@pytest.mark.parametrize("start, destination, message", [
    ("", "2", "Please enter two integers."),
    ("1", "   ", "Please enter two integers."),
    (None, "1", "Please enter two integers."),
    ("one", "2", "Invalid input. Please enter two integers."),
    ("1.5", "2", "Invalid input. Please enter two integers."),
    ("1", "1", "Invalid request. Please enter two different integers in range 0-2."),
    ("0", "3", "Invalid request. Please enter two different integers in range 0-2."),
    ("-1", "2", "Invalid request. Please enter two different integers in range 0-2."),
])
def test_parse_request_errors(controller, start, destination, message):
    with pytest.raises(ValueError) as exc_info:
        controller.parse_request(start, destination)
    assert str(exc_info.value) == message


def test_parse_request_accepts_text_and_ints(controller):
    assert controller.parse_request(" 0 ", "2") == Request(0, 2)
    assert controller.parse_request(2, 0) == Request(2, 0)


def test_start_refreshes_the_whole_view(running, view):
    assert view.statuses == ["Running"]
    assert view.elevators == [(0, 0, "UP"), (1, 0, "UP")]
    assert view.requests == [("[]", "[]")]


def test_make_request_shows_the_queues(running, view):
    assert running.make_request("0", "2")
    assert running.make_request("2", "1")
    assert view.requests[-1] == ("[0->2]", "[2->1]")
    assert view.errors == []


def test_make_request_blank_input_is_checked_first(controller, view):
    assert not controller.make_request("", "1")
    assert view.errors == ["Please enter two integers."]


def test_make_request_needs_a_running_system(controller, view):
    assert not controller.make_request("0", "1")
    assert view.errors == ["The system is not taking requests. "
                           "Please restart it before making new requests."]


def test_make_request_shows_parse_errors(running, view):
    assert not running.make_request("0", "9")
    assert view.errors == ["Invalid request. Please enter two different integers in range 0-2."]
    assert running.status().up_requests == ()


def test_stop_only_while_running(controller, view):
    assert not controller.stop()
    assert view.errors == ["The system is Out Of Service. It cannot be stopped now."]

    controller.start()
    assert controller.stop()
    assert view.statuses[-1] == "Stopping"
    assert view.elevators[-1] == (1, 0, "DOWN")

    assert not controller.stop()
    assert view.errors[-1] == "The system is Stopping. It cannot be stopped now."


def test_restart_only_when_out_of_service(running, view):
    assert not running.restart()
    assert view.errors == ["The system is Running. It cannot be restarted now. "
                           "Please wait until it is out of service."]

    running.stop()
    assert not running.restart()
    assert view.errors[-1].startswith("The system is Stopping.")

    running.tick()
    assert running.status().system_status is ElevatorSystemStatus.OUT_OF_SERVICE
    assert running.restart()
    assert view.statuses[-1] == "Running"


def test_start_while_stopping_shows_error(running, view):
    running.make_request("0", "2")
    for _ in range(6):
        running.tick()
    running.stop()
    assert not running.start()
    assert view.errors == ["Elevator system is stopping now."]


def test_tick_advances_and_refreshes(running, view):
    running.make_request("0", "1")
    report = running.tick()
    assert report.up_requests == ()
    assert report.elevator_reports[0].floor_requests == (True, True, False)
    assert view.requests[-1] == ("[]", "[]")


def test_console_view_prints_lines(capsys):
    view = ConsoleView("Lobby")
    view.display_error("boom")
    view.display_system_status("Running")
    view.display_elevator_status(1, 2, "DOWN")
    view.display_request_information("[0->1]", "[]")
    assert capsys.readouterr().out.splitlines() == [
        "[Lobby] Error: boom",
        "[Lobby] Status: Running",
        "[Lobby] Elevator 1: floor 2, DOWN",
        "[Lobby] Up: [0->1] Down: []",
    ]


def test_check_request_order(controller):
    with pytest.raises(ValueError) as exc_info:
        controller.check_request("", "9")
    assert str(exc_info.value) == "Please enter two integers."

    with pytest.raises(IllegalStateError) as exc_info:
        controller.check_request("0", "9")
    assert str(exc_info.value).startswith("The system is not taking requests.")

    controller.start()
    with pytest.raises(ValueError):
        controller.check_request("0", "9")
    assert controller.check_request("0", "2") == Request(0, 2)


def test_make_request_while_stopping_reports_closed_intake(running, view):
    running.stop()
    assert not running.make_request("7", "x")
    assert view.errors == ["The system is not taking requests. "
                           "Please restart it before making new requests."]
