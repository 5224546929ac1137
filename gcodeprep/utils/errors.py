"""
Exception types for arc resolution.
Absent or malformed words never raise; only arcs that cannot be built do.
"""


class ArcResolutionError(RuntimeError):
    """An arc command could not be turned into a center."""

    prefix = "Arc Resolution Error"

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"{self.prefix}: {message}")

    def __str__(self):
        return f"{self.prefix}: {self.original_message}"


class ArcUnderSpecifiedError(ArcResolutionError):
    """Neither IJK nor R describe the arc."""

    prefix = "Under-specified Arc"


class ArcGeometryError(ArcResolutionError):
    """The endpoints and radius cannot lie on one circle."""

    prefix = "Inconsistent Arc"
