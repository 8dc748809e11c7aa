"""Shift the byte content of a file by a fixed offset.

The output always has the same size as the input. A positive offset drops
bytes from the start of the input and pads the end of the output with zeros;
a negative offset pads the start and drops the tail of the input::

    input   01 02 03 04 05 06 07 08
    +3  ->  04 05 06 07 08 00 00 00
    -3  ->  00 00 00 01 02 03 04 05

Data is copied in fixed-size blocks, so memory use does not depend on the
file size or on the offset.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from boffset.types import (
    InputAccessError,
    OffsetTooLargeError,
    OutputAccessError,
    OutputExistsError,
    ShiftIOError,
    ShiftPlan,
    ShiftResult,
)

logger = logging.getLogger(__name__)

BLOCK_SIZE = 4096


def plan_shift(offset: int, size: int) -> ShiftPlan:
    """Compute where padding and copied data go for *offset* on *size* bytes.

    Raises:
        OffsetTooLargeError: If ``abs(offset) >= size``.
    """
    if abs(offset) >= size:
        raise OffsetTooLargeError(
            f"Offset {offset} >= input file size ({size} bytes)"
        )
    magnitude = abs(offset)
    if offset < 0:
        return ShiftPlan(
            offset=offset,
            size=size,
            head_padding=magnitude,
            skip=0,
            copy_length=size - magnitude,
            tail_padding=0,
        )
    return ShiftPlan(
        offset=offset,
        size=size,
        head_padding=0,
        skip=magnitude,
        copy_length=size - magnitude,
        tail_padding=magnitude,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _input_size(src: BinaryIO) -> int:
    size = src.seek(0, os.SEEK_END)
    src.seek(0, os.SEEK_SET)
    return size


def _write_zeros(dst: BinaryIO, count: int, block_size: int, sparse: bool) -> None:
    """Write *count* zero bytes at the current position of *dst*.

    With *sparse* only the last byte is written and the gap before it is left
    as a hole, which reads back as zeros on filesystems that support holes.
    """
    if count <= 0:
        return
    if sparse:
        dst.seek(count - 1, os.SEEK_CUR)
        dst.write(b"\x00")
        return
    zeros = bytes(min(count, block_size))
    remaining = count
    while remaining:
        n = min(remaining, len(zeros))
        dst.write(zeros[:n])
        remaining -= n


def _copy_blocks(src: BinaryIO, dst: BinaryIO, length: int, block_size: int) -> int:
    """Copy up to *length* bytes from *src* to *dst*, one block at a time.

    Returns:
        Number of bytes copied; smaller than *length* only if *src* ran out.
    """
    copied = 0
    while copied < length:
        chunk = src.read(block_size)
        if not chunk:
            break
        remaining = length - copied
        if len(chunk) > remaining:
            chunk = chunk[:remaining]
        dst.write(chunk)
        copied += len(chunk)
    logger.debug("Copied %d of %d bytes", copied, length)
    return copied


def _open_output(path: Path) -> BinaryIO:
    if os.path.lexists(path):
        raise OutputExistsError(f"Output file exists: {path}")
    try:
        return open(path, "xb")
    except FileExistsError as exc:
        raise OutputExistsError(f"Output file exists: {path}") from exc
    except OSError as exc:
        raise OutputAccessError(f"Output file error: {path}: {exc.strerror or exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def shift(
    offset: int,
    input_path: str | Path,
    output_path: str | Path,
    *,
    sparse: bool = False,
    block_size: int = BLOCK_SIZE,
) -> ShiftResult:
    """Write a copy of *input_path* shifted by *offset* bytes to *output_path*.

    A zero offset is a no-op: nothing is opened and the output is not created.

    Args:
        offset: Signed byte offset; ``abs(offset)`` must be smaller than the
            input size.
        input_path: Existing file to read.
        output_path: File to create; must not exist.
        sparse: Pad by seeking past the gap instead of writing zeros.
        block_size: Copy block size. Does not affect the result.

    Returns:
        A :class:`ShiftResult` describing what was written.

    Raises:
        InputAccessError: The input cannot be opened or is not seekable.
        OffsetTooLargeError: ``abs(offset)`` is not smaller than the input size.
        OutputExistsError: Something already exists at *output_path*.
        OutputAccessError: The output cannot be created.
        ShiftIOError: Reading or writing failed part way; the partial output
            is left on disk.
    """
    if block_size < 1:
        raise ValueError(f"block_size must be >= 1, got {block_size}")

    src_path = Path(input_path)
    dst_path = Path(output_path)
    result = ShiftResult(offset=offset, input_path=str(src_path), output_path=str(dst_path))

    if offset == 0:
        logger.info("Zero offset: nothing to do")
        result.skipped = True
        return result

    try:
        src = open(src_path, "rb")
    except OSError as exc:
        raise InputAccessError(f"Input file error: {src_path}: {exc.strerror or exc}") from exc

    with src:
        try:
            size = _input_size(src)
        except OSError as exc:
            raise InputAccessError(f"Input file is not seekable: {src_path}") from exc

        plan = plan_shift(offset, size)
        dst = _open_output(dst_path)

        logger.info("Using offset: %d bytes", offset)
        # Buffered writes may only fail when dst is flushed on close.
        try:
            with dst:
                _write_zeros(dst, plan.head_padding, block_size, sparse)
                src.seek(plan.skip, os.SEEK_SET)
                copied = _copy_blocks(src, dst, plan.copy_length, block_size)
                if copied < plan.copy_length:
                    raise ShiftIOError(
                        f"Input ended after {copied} of {plan.copy_length} bytes: {src_path}"
                    )
                _write_zeros(dst, plan.tail_padding, block_size, sparse)
        except OSError as exc:
            logger.warning("Partial output left at %s", dst_path)
            raise ShiftIOError(f"I/O error while shifting: {exc}") from exc
        except ShiftIOError:
            logger.warning("Partial output left at %s", dst_path)
            raise

    result.size = size
    result.bytes_copied = copied
    result.bytes_padded = plan.padding
    logger.debug(
        "Wrote %s: %d bytes copied, %d bytes padded",
        dst_path, result.bytes_copied, result.bytes_padded,
    )
    return result
