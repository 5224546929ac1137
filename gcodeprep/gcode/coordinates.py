"""
Point resolution for GCODE commands

Combines the X/Y/Z words of one command with the prior position under
absolute (G90) or incremental (G91) addressing.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .parser import ArgumentToken, as_tokens, lookup

AXES = ("X", "Y", "Z")


@dataclass(frozen=True)
class Position:
    """
    3D position; a component of None is unspecified

    Unspecified is not zero: it means the axis never received a value and
    must not be used in arithmetic.
    """

    x: float | None = None
    y: float | None = None
    z: float | None = None

    def as_tuple(self) -> tuple[float | None, float | None, float | None]:
        return (self.x, self.y, self.z)

    def is_specified(self, axis: str) -> bool:
        return getattr(self, axis.lower()) is not None

    def with_values(self, **values: float | None) -> "Position":
        return replace(self, **values)

    def __iter__(self):
        return iter(self.as_tuple())


def update_point(
    initial: Position,
    x: float | None,
    y: float | None,
    z: float | None,
    absolute: bool,
) -> Position:
    """
    Move ``initial`` by explicit axis values

    Args:
        initial: Prior position
        x, y, z: New value per axis, None when the axis was not given
        absolute: True replaces axes outright, False adds them as displacement

    Returns:
        New position; axes given as None keep their prior value
    """
    values = {}
    for name, value in (("x", x), ("y", y), ("z", z)):
        if value is None:
            continue
        if absolute:
            values[name] = value
        else:
            prior = getattr(initial, name)
            if prior is None:
                raise ValueError(f"Cannot apply incremental {name.upper()}{value} to an unspecified axis")
            values[name] = prior + value
    if not values:
        return initial
    return replace(initial, **values)


def resolve_point(
    args: str | Sequence[ArgumentToken],
    initial: Position,
    absolute: bool,
) -> Position:
    """Resolve the end point of a command from its X/Y/Z words"""
    tokens = as_tokens(args)
    x, y, z = (lookup(tokens, axis) for axis in AXES)
    return update_point(initial, x, y, z, absolute)
