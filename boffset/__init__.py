"""boffset: shift the contents of a binary file by a fixed byte offset."""

from boffset.shifter import BLOCK_SIZE, plan_shift, shift
from boffset.types import (
    ConfigError,
    InputAccessError,
    OffsetTooLargeError,
    OutputAccessError,
    OutputExistsError,
    ShiftError,
    ShiftIOError,
    ShiftPlan,
    ShiftResult,
    UsageError,
)

__version__ = "1.0.0"

__all__ = [
    "BLOCK_SIZE",
    "plan_shift",
    "shift",
    "ShiftPlan",
    "ShiftResult",
    "ShiftError",
    "UsageError",
    "InputAccessError",
    "OffsetTooLargeError",
    "OutputExistsError",
    "OutputAccessError",
    "ShiftIOError",
    "ConfigError",
]
