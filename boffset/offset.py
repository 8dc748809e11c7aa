"""Offset parsing and unit conversion."""

from __future__ import annotations

import re

from boffset.types import UsageError

# 16 bits per sample * 2 channels
CD_AUDIO_SAMPLE_SIZE = 4

_OFFSET_RE = re.compile(r"^[+-]?\d+$")


def parse_offset(text: str) -> int:
    """Parse a signed decimal offset such as ``+588``, ``-12`` or ``40``.

    Raises:
        UsageError: If *text* is not a signed decimal integer.
    """
    value = text.strip()
    if not _OFFSET_RE.match(value):
        raise UsageError(f"Invalid offset: {text!r} (expected [+|-]<bytes>)")
    return int(value)


def samples_to_bytes(samples: int, sample_size: int) -> int:
    """Convert an offset counted in samples to one counted in bytes."""
    if sample_size < 1:
        raise ValueError(f"sample_size must be >= 1, got {sample_size}")
    return samples * sample_size
