"""
Arc expansion quickstart for gcodeprep.
- Cleans a commented G2 line
- Resolves its end point and center
- Prints the G1 moves that replace it

Run from the repository root:
    python examples/arc_expansion_quickstart.py
"""

import logging

from gcodeprep import ArcDescriptor, Position, SegmentPolicy, clean_command, expand_arc_command
from gcodeprep.config import LOG_LEVEL_DEFAULT

RAW = "G2 X10 Y0 R-6 (major arc) ; from origin"
START = Position(0.0, 0.0, 0.0)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL_DEFAULT, format="%(levelname)s %(name)s: %(message)s")
    command = clean_command(RAW)
    arc = ArcDescriptor.from_command(command, START, clockwise=True)
    print(f"command: {command}")
    print(f"center: ({arc.center.x:.4f}, {arc.center.y:.4f}) sweep: {arc.sweep:.4f} rad")
    for line in expand_arc_command(command, START, policy=SegmentPolicy(segment_length=2.0)):
        print(line)


if __name__ == "__main__":
    main()
