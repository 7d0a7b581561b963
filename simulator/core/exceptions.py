"""Errors raised by the simulation core"""


class IllegalStateError(RuntimeError):
    """
    An operation was attempted in a state that forbids it.

    The object the operation was called on is left unchanged.
    """
