"""Plain-text view printing every update to stdout"""

from .interfaces.view import IElevatorView


class ConsoleView(IElevatorView):
    """Prints each update on its own line"""

    def __init__(self, title: str = "Elevator System"):
        self.title = title

    def display_error(self, message: str) -> None:
        print(f"[{self.title}] Error: {message}")

    def display_system_status(self, status: str) -> None:
        print(f"[{self.title}] Status: {status}")

    def display_elevator_status(self, index: int, floor: int, direction: str) -> None:
        print(f"[{self.title}] Elevator {index}: floor {floor}, {direction}")

    def display_request_information(self, up_requests: str, down_requests: str) -> None:
        print(f"[{self.title}] Up: {up_requests} Down: {down_requests}")
