"""Tests for offset parsing and unit conversion."""

from __future__ import annotations

import pytest

from boffset.offset import CD_AUDIO_SAMPLE_SIZE, parse_offset, samples_to_bytes
from boffset.types import UsageError


class TestParseOffset:
    @pytest.mark.parametrize(
        "text, expected",
        [("3", 3), ("+3", 3), ("-3", -3), ("0", 0), ("-0", 0), (" 42 ", 42), ("+00012", 12)],
    )
    def test_valid(self, text, expected):
        assert parse_offset(text) == expected

    def test_large_value(self):
        assert parse_offset("-12345678901234") == -12345678901234

    @pytest.mark.parametrize("text", ["", "abc", "3.5", "0x10", "--3", "+-3", "3 4", "12b"])
    def test_invalid(self, text):
        with pytest.raises(UsageError, match="Invalid offset"):
            parse_offset(text)


class TestSamplesToBytes:
    def test_cd_audio(self):
        assert samples_to_bytes(-588, CD_AUDIO_SAMPLE_SIZE) == -2352

    def test_identity(self):
        assert samples_to_bytes(17, 1) == 17

    def test_zero_sample_size(self):
        with pytest.raises(ValueError):
            samples_to_bytes(3, 0)
