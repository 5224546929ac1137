"""
gcodeprep Python Package

Stateless helpers that turn one G-code command at a time into geometry:
word tokenization, end point and arc center resolution, and arc
linearization into G1 moves for controllers without G2/G3 support.

Key components:
- tokenize / lookup: split a command into words and read address values
- resolve_point / resolve_center: end point and arc center under G90/G91
- ArcDescriptor / linearize_arc: sweep computation and segmenting
- expand_arc_command: one G2/G3 line in, G1 lines out
"""

from ._version import __version__
from .gcode import (
    ArcDescriptor,
    ArgumentToken,
    Position,
    SegmentPolicy,
    clean_command,
    expand_arc_command,
    linearize_arc,
    lookup,
    resolve_center,
    resolve_point,
    tokenize,
)
from .utils.errors import ArcGeometryError, ArcResolutionError, ArcUnderSpecifiedError

__all__ = [
    "__version__",
    "ArgumentToken",
    "tokenize",
    "lookup",
    "Position",
    "resolve_point",
    "resolve_center",
    "ArcDescriptor",
    "SegmentPolicy",
    "linearize_arc",
    "clean_command",
    "expand_arc_command",
    "ArcResolutionError",
    "ArcUnderSpecifiedError",
    "ArcGeometryError",
]
