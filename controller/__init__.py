"""
Controller package

Validates user input and drives a Building on behalf of a view.
"""

from .console_controller import ConsoleController
from .console_view import ConsoleView
from .interfaces.view import IElevatorView

__all__ = [
    'ConsoleController',
    'ConsoleView',
    'IElevatorView',
]
