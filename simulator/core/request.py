"""
Request - A single ride from a start floor to a destination floor
"""

from dataclasses import dataclass

from .enums import Direction


@dataclass(frozen=True)
class Request:
    """
    Immutable ride request.

    Attributes:
        start_floor: Floor where the rider boards (0-based)
        end_floor: Floor where the rider leaves (0-based)

    The direction is derived from the two floors and never stored.
    Range against a concrete building is checked by Building.add_request.
    """
    start_floor: int
    end_floor: int

    def __post_init__(self):
        for name in ("start_floor", "end_floor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.start_floor == self.end_floor:
            raise ValueError(
                f"start_floor and end_floor must differ, both are {self.start_floor}"
            )

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.end_floor > self.start_floor else Direction.DOWN

    def to_dict(self) -> dict:
        return {"start_floor": self.start_floor, "end_floor": self.end_floor}

    def __str__(self):
        return f"{self.start_floor}->{self.end_floor}"
