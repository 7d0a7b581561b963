"""
ConsoleController - Turns user commands into building operations

The controller is the only component that talks to both the building and
a view. It validates raw text input, enforces which commands are legal in
the current system status, and pushes report data to the view.
"""

import logging
import threading
from typing import Optional

from simulator.core.building import Building
from simulator.core.enums import ElevatorSystemStatus
from simulator.core.exceptions import IllegalStateError
from simulator.core.reports import BuildingReport, format_requests
from simulator.core.request import Request

from .interfaces.view import IElevatorView

logger = logging.getLogger(__name__)

NOT_TAKING_REQUESTS = ("The system is not taking requests. "
                       "Please restart it before making new requests.")


class ConsoleController:
    """
    Controller for one building and one view.

    All building access goes through `lock`, so a tick driver and a
    request handler on another thread never interleave inside a step.
    """

    def __init__(self, view: IElevatorView, building: Building,
                 lock: Optional[threading.RLock] = None):
        self.view = view
        self.building = building
        self.lock = lock if lock is not None else threading.RLock()

    # --- Input validation ---

    def parse_request(self, start_floor, destination_floor) -> Request:
        """
        Validate raw user input and build a Request.

        Args:
            start_floor: Start floor as typed by the user (str or int)
            destination_floor: Destination floor as typed by the user

        Returns:
            A Request inside this building's floor range

        Raises:
            ValueError: With a message suitable for display
        """
        if _is_blank(start_floor) or _is_blank(destination_floor):
            raise ValueError("Please enter two integers.")
        try:
            start = int(str(start_floor).strip())
            destination = int(str(destination_floor).strip())
        except ValueError:
            raise ValueError("Invalid input. Please enter two integers.") from None

        top_floor = self.building.num_floors - 1
        if (start < 0 or start > top_floor or destination < 0 or destination > top_floor
                or start == destination):
            raise ValueError(
                f"Invalid request. Please enter two different integers in range 0-{top_floor}."
            )
        return Request(start, destination)

    def check_request(self, start_floor, destination_floor) -> Request:
        """
        Validate a ride in the order the user sees the errors: blank
        input, then system status, then the floors themselves.

        Raises:
            ValueError: Blank or invalid input
            IllegalStateError: The system is not running
        """
        if _is_blank(start_floor) or _is_blank(destination_floor):
            raise ValueError("Please enter two integers.")
        with self.lock:
            if self.building.system_status is not ElevatorSystemStatus.RUNNING:
                raise IllegalStateError(NOT_TAKING_REQUESTS)
        return self.parse_request(start_floor, destination_floor)

    # --- Commands ---

    def make_request(self, start_floor, destination_floor) -> bool:
        """
        Queue a ride typed in by the user.

        Returns:
            True if the request was queued; otherwise the reason was shown
            on the view
        """
        with self.lock:
            try:
                request = self.check_request(start_floor, destination_floor)
            except (ValueError, IllegalStateError) as e:
                self.view.display_error(str(e))
                return False
            queued = self.building.add_request(request)
            report = self.building.get_elevator_system_status()
        self._show_request_information(report)
        return queued

    def restart(self) -> bool:
        """Start the system again; only legal once it is out of service"""
        with self.lock:
            status = self.building.system_status
            if status is not ElevatorSystemStatus.OUT_OF_SERVICE:
                self.view.display_error(
                    f"The system is {status}. It cannot be restarted now. "
                    "Please wait until it is out of service."
                )
                return False
            started = self.building.start_elevator_system()
            report = self.building.get_elevator_system_status()
        logger.info("[Controller] Elevator system restarted")
        self.view.display_system_status(str(report.system_status))
        self._show_all_elevator_status(report)
        return started

    def start(self) -> bool:
        """Start the system at program launch"""
        with self.lock:
            try:
                started = self.building.start_elevator_system()
            except IllegalStateError as e:
                self.view.display_error(str(e))
                return False
            report = self.building.get_elevator_system_status()
        self.refresh_view(report)
        return started

    def stop(self) -> bool:
        """Stop the system; only legal while it is running"""
        with self.lock:
            status = self.building.system_status
            if status is not ElevatorSystemStatus.RUNNING:
                self.view.display_error(f"The system is {status}. It cannot be stopped now.")
                return False
            self.building.stop_elevator_system()
            report = self.building.get_elevator_system_status()
        logger.info("[Controller] Elevator system stopping")
        self.view.display_system_status(str(report.system_status))
        self._show_all_elevator_status(report)
        return True

    def tick(self) -> BuildingReport:
        """Advance the building one step and refresh the view"""
        with self.lock:
            self.building.step()
            report = self.building.get_elevator_system_status()
        self.refresh_view(report)
        return report

    def status(self) -> BuildingReport:
        with self.lock:
            return self.building.get_elevator_system_status()

    # --- View updates ---

    def refresh_view(self, report: Optional[BuildingReport] = None):
        """Push a complete report to the view"""
        if report is None:
            report = self.status()
        self.view.display_system_status(str(report.system_status))
        self._show_all_elevator_status(report)
        self._show_request_information(report)

    def _show_all_elevator_status(self, report: BuildingReport):
        for index, elevator_report in enumerate(report.elevator_reports):
            self.view.display_elevator_status(
                index, elevator_report.current_floor, str(elevator_report.direction)
            )

    def _show_request_information(self, report: BuildingReport):
        self.view.display_request_information(
            format_requests(report.up_requests), format_requests(report.down_requests)
        )


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()
