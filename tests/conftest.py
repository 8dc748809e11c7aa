"""Shared fixtures for boffset tests."""

from __future__ import annotations

import logging
import pathlib

import pytest

SAMPLE_BYTES = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08])


def expected_shift(data: bytes, offset: int) -> bytes:
    """Reference result computed in memory."""
    if offset >= 0:
        return data[offset:] + bytes(offset)
    return bytes(-offset) + data[:len(data) + offset]


@pytest.fixture(scope="session")
def project_root():
    return pathlib.Path(__file__).resolve().parent.parent


@pytest.fixture()
def sample_input(tmp_path):
    """The eight-byte file ``01 02 .. 08``."""
    p = tmp_path / "sample.bin"
    p.write_bytes(SAMPLE_BYTES)
    return p


@pytest.fixture()
def large_data():
    """Non-repeating-per-block data spanning several 4 KB blocks."""
    return bytes((i * 7 + i // 251) % 256 for i in range(3 * 4096 + 1234))


@pytest.fixture()
def large_input(tmp_path, large_data):
    p = tmp_path / "large.bin"
    p.write_bytes(large_data)
    return p


@pytest.fixture()
def output_path(tmp_path):
    """A path for the output file that does not exist yet."""
    return tmp_path / "shifted.bin"


@pytest.fixture(autouse=True)
def _reset_boffset_logger():
    """Drop handlers the CLI attached so they don't outlive the captured stream."""
    yield
    log = logging.getLogger("boffset")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
