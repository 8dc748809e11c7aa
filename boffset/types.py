"""Data classes and exceptions for the shifter."""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShiftPlan:
    """Layout of one output file, derived from ``(offset, size)`` alone.

    The output is ``head_padding`` zero bytes, then ``copy_length`` bytes of
    input starting at ``skip``, then ``tail_padding`` zero bytes.
    """

    offset: int
    size: int
    head_padding: int
    skip: int
    copy_length: int
    tail_padding: int

    @property
    def padding(self) -> int:
        return self.head_padding + self.tail_padding


@dataclass
class ShiftResult:
    """Summary of one shift run."""

    offset: int
    input_path: str
    output_path: str
    size: int = 0
    bytes_copied: int = 0
    bytes_padded: int = 0
    skipped: bool = False  # zero offset, nothing written


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ShiftError(Exception):
    """Base exception for shift operations."""

    exit_code = 1


class UsageError(ShiftError):
    """Raised when the command line is malformed."""


class InputAccessError(ShiftError):
    """Raised when the input file cannot be opened."""


class OffsetTooLargeError(ShiftError):
    """Raised when ``abs(offset)`` is not smaller than the input size."""


class OutputExistsError(ShiftError):
    """Raised instead of overwriting an existing output file."""


class OutputAccessError(ShiftError):
    """Raised when the output file cannot be created."""


class ShiftIOError(ShiftError):
    """Raised when reading or writing fails after the output was created."""


class ConfigError(ShiftError):
    """Raised when the configuration file is missing or malformed."""
