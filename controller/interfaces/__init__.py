"""Interfaces between the controller and its views"""

from .view import IElevatorView

__all__ = ['IElevatorView']
