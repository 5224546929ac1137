"""
GCODE preprocessing for motion pipelines

Decodes single G-code commands into geometry a linear-only motion
controller can consume.

Main components:
- parser.py: word tokenization and address lookup
- coordinates.py: Position type and end point resolution (G90/G91)
- arcs.py: arc center, angle/sweep and linearization of G2/G3
- text.py: comment stripping, whitespace and feed rate rewriting
- utils.py: G1 output formatting and arc expansion
"""

from .arcs import (
    ArcDescriptor,
    SegmentPolicy,
    angle_of,
    convert_r_to_center,
    generate_arc_points,
    linearize_arc,
    resolve_center,
    sweep_of,
)
from .coordinates import Position, resolve_point, update_point
from .parser import (
    ArgumentToken,
    extract_codes,
    lookup,
    parse_codes,
    parse_gcodes,
    parse_mcodes,
    tokenize,
)
from .text import (
    clean_command,
    override_speed,
    parse_comment,
    remove_all_whitespace,
    remove_comment,
    truncate_decimals,
)
from .utils import expand_arc_command, format_gcode_number, generate_g1_from_points

__all__ = [
    "ArgumentToken",
    "tokenize",
    "lookup",
    "parse_codes",
    "extract_codes",
    "parse_gcodes",
    "parse_mcodes",
    "Position",
    "update_point",
    "resolve_point",
    "ArcDescriptor",
    "SegmentPolicy",
    "convert_r_to_center",
    "resolve_center",
    "angle_of",
    "sweep_of",
    "linearize_arc",
    "generate_arc_points",
    "remove_comment",
    "parse_comment",
    "remove_all_whitespace",
    "clean_command",
    "truncate_decimals",
    "override_speed",
    "format_gcode_number",
    "generate_g1_from_points",
    "expand_arc_command",
]
