"""
Arc resolution and linearization for G2/G3 commands

Resolves the arc center from IJK or R words, computes start/end angles and
the sweep in the commanded direction, and breaks the arc into short linear
moves for controllers that only understand G1. Arcs lie in the XY plane; Z
is interpolated linearly across the sweep (helical motion).
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from gcodeprep import config as cfg
from gcodeprep.utils.errors import ArcGeometryError, ArcUnderSpecifiedError

from .coordinates import Position, resolve_point, update_point
from .parser import ArgumentToken, as_tokens, lookup

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class SegmentPolicy:
    """
    How finely an arc is broken up

    min_arc_length: arcs shorter than this are not expanded (0 disables)
    segment_length: target length of each linear move (0 falls back to the
        minimum-length rule, then to cfg.DEFAULT_ARC_POINTS)
    """

    min_arc_length: float = 0.0
    segment_length: float = 0.0


def _require_xy(point: Position, name: str) -> tuple[float, float]:
    if point.x is None or point.y is None:
        raise ValueError(f"Arc {name} needs both X and Y, got {point}")
    return point.x, point.y


def convert_r_to_center(
    start: Position,
    end: Position,
    radius: float,
    absolute_ijk: bool,
    clockwise: bool,
) -> Position:
    """
    Derive the arc center from an R word using chord geometry

    A negative radius selects the arc longer than 180 degrees between the
    same endpoints. The Z of the returned center is unspecified.

    Args:
        start: Current position
        end: Resolved end point of the command
        radius: Signed R value
        absolute_ijk: True returns the raw offset (absolute center addressing),
            False returns start + offset
        clockwise: True for G2, False for G3

    Returns:
        Arc center

    Raises:
        ArcGeometryError: endpoints coincide, or the radius is shorter than
            half the chord
    """
    sx, sy = _require_xy(start, "start")
    ex, ey = _require_xy(end, "end")

    x = ex - sx
    y = ey - sy
    chord = math.hypot(x, y)

    h_x2_div_d = 4 * radius * radius - x * x - y * y
    if h_x2_div_d < 0:
        logger.warning("Error computing arc radius: R=%s chord=%s", radius, chord)
        raise ArcGeometryError(f"radius {abs(radius)} is smaller than half the chord length {chord}")
    if chord == 0:
        logger.warning("Error computing arc center: R-form arc starts and ends at %s", start)
        raise ArcGeometryError("R-form arc cannot start and end at the same point")

    h_x2_div_d = -math.sqrt(h_x2_div_d) / chord

    if not clockwise:
        h_x2_div_d = -h_x2_div_d

    # Negative R: take the long way around
    if radius < 0:
        h_x2_div_d = -h_x2_div_d

    offset_x = 0.5 * (x - (y * h_x2_div_d))
    offset_y = 0.5 * (y + (x * h_x2_div_d))

    if absolute_ijk:
        return Position(offset_x, offset_y, None)
    return Position(sx + offset_x, sy + offset_y, None)


def has_ijk(tokens: Sequence[ArgumentToken]) -> bool:
    return any(lookup(tokens, axis) is not None for axis in ("I", "J", "K"))


def resolve_center(
    args: str | Sequence[ArgumentToken],
    current: Position,
    next_point: Position,
    absolute_ijk: bool,
    clockwise: bool,
) -> Position:
    """
    Resolve the arc center of a G2/G3 command

    IJK words are applied to ``current`` exactly like XYZ words (I->X,
    J->Y, K->Z), as offsets or absolute coordinates depending on
    ``absolute_ijk``. Without IJK the center comes from the R word.

    Raises:
        ArcUnderSpecifiedError: no IJK words and no usable R word
        ArcGeometryError: the R word cannot reach both endpoints
    """
    tokens = as_tokens(args)
    i = lookup(tokens, "I")
    j = lookup(tokens, "J")
    k = lookup(tokens, "K")

    if i is None and j is None and k is None:
        radius = lookup(tokens, "R")
        if radius is None:
            logger.warning("Arc command has neither IJK nor R: %s", " ".join(map(str, tokens)))
            raise ArcUnderSpecifiedError("arc needs I/J/K offsets or an R radius")
        return convert_r_to_center(current, next_point, radius, absolute_ijk, clockwise)

    return update_point(current, i, j, k, absolute_ijk)


def angle_of(center: Position, point: Position) -> float:
    """Angle in radians, in [0, 2π), of the ray from center to point"""
    cx, cy = _require_xy(center, "center")
    px, py = _require_xy(point, "point")
    delta_x = px - cx
    delta_y = py - cy

    if delta_x == 0:
        return math.pi / 2.0 if delta_y > 0 else math.pi * 3.0 / 2.0

    slope = math.atan(delta_y / delta_x)
    if delta_x > 0 and delta_y >= 0:
        return slope
    if delta_x < 0 and delta_y >= 0:
        return math.pi - abs(slope)
    if delta_x < 0 and delta_y < 0:
        return math.pi + abs(slope)
    return TWO_PI - abs(slope)


def sweep_of(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """
    Angular travel from start to end in the commanded direction

    Equal angles are a full circle. An end angle of exactly 0 counts as 2π
    so an arc ending on the positive X axis does not wrap.
    """
    if start_angle == end_angle:
        return TWO_PI

    if end_angle == 0:
        end_angle = TWO_PI

    if not clockwise and end_angle < start_angle:
        return (TWO_PI - start_angle) + end_angle
    if clockwise and end_angle > start_angle:
        return (TWO_PI - end_angle) + start_angle
    return abs(end_angle - start_angle)


def linearize_arc(
    start: Position,
    end: Position,
    center: Position,
    clockwise: bool,
    radius: float = 0.0,
    min_arc_length: float = 0.0,
    segment_length: float = 0.0,
) -> list[Position]:
    """
    Break an arc into points for linear moves

    Args:
        start: Arc start (not included in the result)
        end: Arc end, always the last element, emitted unchanged
        center: Arc center (X/Y used)
        clockwise: True for G2, False for G3
        radius: Arc radius; 0 derives it from the center
        min_arc_length: Arcs shorter than this return [] (0 disables)
        segment_length: Target length of each move (0 uses the minimum-length
            rule, then cfg.DEFAULT_ARC_POINTS)

    Returns:
        Points along the arc ending with ``end``, or [] when the arc is
        shorter than ``min_arc_length`` and should be left unexpanded
    """
    sx, _ = _require_xy(start, "start")
    _, ey = _require_xy(end, "end")
    cx, cy = _require_xy(center, "center")

    # Derived from start X and end Y
    if radius == 0:
        radius = math.sqrt((sx - cx) ** 2 + (ey - cy) ** 2)

    start_angle = angle_of(center, start)
    end_angle = angle_of(center, end)
    sweep = sweep_of(start_angle, end_angle, clockwise)

    arc_length = sweep * radius

    if min_arc_length > 0 and arc_length < min_arc_length:
        logger.debug("Arc length %.6g below minimum %.6g, not expanded", arc_length, min_arc_length)
        return []

    num_points = cfg.DEFAULT_ARC_POINTS

    if segment_length <= 0 and min_arc_length > 0:
        segment_length = arc_length / min_arc_length

    if segment_length > 0:
        num_points = int(math.ceil(arc_length / segment_length))

    return generate_arc_points(start, end, center, clockwise, radius, start_angle, sweep, num_points)


def generate_arc_points(
    start: Position,
    end: Position,
    center: Position,
    clockwise: bool,
    radius: float,
    start_angle: float,
    sweep: float,
    num_points: int,
) -> list[Position]:
    """
    Points at equal angular steps along an already resolved arc

    Emits ``num_points - 1`` intermediate points followed by ``end`` itself,
    so accumulated float error never reaches the final point.
    """
    sx, sy = _require_xy(start, "start")
    cx, cy = _require_xy(center, "center")

    if radius == 0:
        radius = math.hypot(sx - cx, sy - cy)

    if num_points <= 1:
        return [end]

    fractions = np.arange(1, num_points, dtype=np.float64) / num_points
    direction = -1.0 if clockwise else 1.0
    angles = np.mod(start_angle + direction * fractions * sweep, TWO_PI)

    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)

    if start.z is None or end.z is None:
        zs: list[float | None] = [None] * len(fractions)
    else:
        zs = (start.z + fractions * (end.z - start.z)).tolist()

    segments = [Position(float(x), float(y), z) for x, y, z in zip(xs, ys, zs)]
    segments.append(end)

    logger.debug(
        "Arc r=%.6g sweep=%.6g rad %s -> %d points",
        radius,
        sweep,
        "CW" if clockwise else "CCW",
        len(segments),
    )
    if cfg.TRACE_ENABLED:
        for point in segments:
            logger.trace("  arc point %s", point)  # type: ignore[attr-defined]

    return segments


@dataclass(frozen=True)
class ArcDescriptor:
    """Resolved arc of one G2/G3 command; radius 0 means derive from center"""

    center: Position
    start: Position
    end: Position
    clockwise: bool
    radius: float = 0.0

    @classmethod
    def from_command(
        cls,
        args: str | Sequence[ArgumentToken],
        current: Position,
        clockwise: bool,
        absolute: bool = True,
        absolute_ijk: bool = False,
    ) -> "ArcDescriptor":
        """
        Resolve end point and center of an arc command

        Args:
            args: Command text or its words
            current: Position before the move
            clockwise: True for G2, False for G3
            absolute: XYZ addressing (G90 vs G91)
            absolute_ijk: IJK addressing (G90.1 vs G91.1)
        """
        tokens = as_tokens(args)
        end = resolve_point(tokens, current, absolute)
        center = resolve_center(tokens, current, end, absolute_ijk, clockwise)
        radius = 0.0
        if not has_ijk(tokens):
            # resolve_center already rejected a missing R
            radius = abs(lookup(tokens, "R") or 0.0)
        return cls(center=center, start=current, end=end, clockwise=clockwise, radius=radius)

    @property
    def effective_radius(self) -> float:
        if self.radius:
            return self.radius
        sx, sy = _require_xy(self.start, "start")
        cx, cy = _require_xy(self.center, "center")
        return math.hypot(sx - cx, sy - cy)

    @property
    def start_angle(self) -> float:
        return angle_of(self.center, self.start)

    @property
    def end_angle(self) -> float:
        return angle_of(self.center, self.end)

    @property
    def sweep(self) -> float:
        return sweep_of(self.start_angle, self.end_angle, self.clockwise)

    @property
    def arc_length(self) -> float:
        return self.sweep * self.effective_radius

    def linearize(self, policy: SegmentPolicy | None = None) -> list[Position]:
        """Points along the arc, [] when shorter than the policy minimum"""
        policy = policy or SegmentPolicy()
        return linearize_arc(
            self.start,
            self.end,
            self.center,
            self.clockwise,
            self.effective_radius,
            policy.min_arc_length,
            policy.segment_length,
        )
