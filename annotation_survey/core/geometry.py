from typing import Union

Number = Union[int, float]

class Timeline:
    """The bounded horizontal interval on which markers may be placed."""

    def __init__(self, lower_bound: Number, upper_bound: Number) -> None:
        if not lower_bound < upper_bound:
            raise ValueError(f"Timeline bounds must satisfy lower < upper (got {lower_bound}, {upper_bound})")
        self.lower_bound: Number = lower_bound
        self.upper_bound: Number = upper_bound

    @classmethod
    def from_surface(cls, width: Number, left_margin: Number, right_margin: Number) -> 'Timeline':
        """Derives the bounds from the drawing surface width and its fixed insets."""
        return cls(left_margin, width - right_margin)

    @property
    def midpoint(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2

    @property
    def length(self) -> Number:
        return self.upper_bound - self.lower_bound

    def clamp(self, x: Number) -> Number:
        return max(self.lower_bound, min(self.upper_bound, x))

    def contains_open(self, x: Number) -> bool:
        """Strictly inside the line, endpoints excluded."""
        return self.lower_bound < x < self.upper_bound

    def __repr__(self) -> str:
        return f"Timeline({self.lower_bound}, {self.upper_bound})"
