"""
Output helpers for GCODE generation

Formats resolved positions back into G1 command text and expands a single
G2/G3 command into linear moves.
"""

import logging

from gcodeprep import config as cfg

from .arcs import ArcDescriptor, SegmentPolicy
from .coordinates import AXES, Position
from .parser import parse_gcodes, tokenize

logger = logging.getLogger(__name__)


def format_gcode_number(value: float, decimals: int = 3) -> str:
    """
    Format number for GCODE output

    Args:
        value: Numeric value
        decimals: Number of decimal places

    Returns:
        Formatted string without trailing zeros
    """
    formatted = f"{value:.{decimals}f}"
    # Remove trailing zeros and decimal point if not needed
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-", "-0"):
        formatted = "0"
    return formatted


def generate_g1_from_points(
    start: Position,
    end: Position,
    absolute: bool,
    precision: int | None = None,
) -> str:
    """
    Build a G1 move from ``start`` to ``end``

    Absolute mode writes the coordinates of ``end``; incremental mode writes
    ``end - start`` per axis. Unspecified axes of ``end`` are left out.
    """
    decimals = cfg.DEFAULT_PRECISION if precision is None else precision
    words = ["G1"]
    for axis in AXES:
        value = getattr(end, axis.lower())
        if value is None:
            continue
        if not absolute:
            origin = getattr(start, axis.lower())
            if origin is None:
                raise ValueError(f"Cannot write incremental {axis} from an unspecified start")
            value = value - origin
        words.append(f"{axis}{format_gcode_number(value, decimals)}")
    return "".join(words)


def expand_arc_command(
    command: str,
    current: Position,
    absolute: bool = True,
    absolute_ijk: bool = False,
    policy: SegmentPolicy | None = None,
    precision: int | None = None,
) -> list[str]:
    """
    Replace a G2/G3 command with equivalent G1 moves

    Args:
        command: Cleaned single-line command
        current: Position before the command
        absolute: XYZ addressing (G90 vs G91)
        absolute_ijk: IJK addressing (G90.1 vs G91.1)
        policy: Segmenting rules, default SegmentPolicy()
        precision: Fraction digits in the output, default cfg.DEFAULT_PRECISION

    Returns:
        G1 lines ending exactly on the arc end point; ``[command]`` when the
        command is not an arc or the arc is too short to expand

    Raises:
        ArcResolutionError: the arc words cannot produce a center
    """
    gcodes = parse_gcodes(command)
    if 2 in gcodes:
        clockwise = True
    elif 3 in gcodes:
        clockwise = False
    else:
        return [command]

    tokens = tokenize(command)
    arc = ArcDescriptor.from_command(tokens, current, clockwise, absolute, absolute_ijk)
    points = arc.linearize(policy)
    if not points:
        return [command]

    lines = []
    previous = current
    for point in points:
        lines.append(generate_g1_from_points(previous, point, absolute, precision))
        previous = point

    logger.debug("Expanded '%s' into %d G1 moves", command, len(lines))
    return lines
