"""
Central configuration for gcodeprep tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("GCODEPREP_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = os.getenv("GCODEPREP_LOG_LEVEL", "INFO")


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"Environment variable {name}='{raw}' is not a valid integer") from None
    if value < minimum:
        raise ValueError(f"Environment variable {name}={value} must be >= {minimum}")
    return value


# Points generated for an arc when no segment policy applies
DEFAULT_ARC_POINTS: int = _env_int("GCODEPREP_ARC_POINTS", 20, 1)

# Fraction digits written by the G1 emitter
DEFAULT_PRECISION: int = _env_int("GCODEPREP_PRECISION", 4, 0)
