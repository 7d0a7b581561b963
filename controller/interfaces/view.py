"""
View Interface

Defines what a controller may ask a view to display. Implementations
include the console printer and the test recorder.
"""

from abc import ABC, abstractmethod


class IElevatorView(ABC):
    """
    Interface for anything that renders the elevator system

    A view never touches the building; it only receives strings and
    numbers the controller has already read from a BuildingReport.
    """

    @abstractmethod
    def display_error(self, message: str) -> None:
        """Show a rejected command or invalid input"""

    @abstractmethod
    def display_system_status(self, status: str) -> None:
        """Show the system status ("Running", "Stopping", "Out Of Service")"""

    @abstractmethod
    def display_elevator_status(self, index: int, floor: int, direction: str) -> None:
        """Show where one car is and which way it is heading"""

    @abstractmethod
    def display_request_information(self, up_requests: str, down_requests: str) -> None:
        """Show the pending queues, e.g. "[0->2, 0->1]" and "[]" """
