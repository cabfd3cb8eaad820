"""Core data types of the GLOS recording format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from glos.errors import FormatViolationError

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _check_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} out of range: {value}")


class Compression(IntEnum):
    """Compression applied to IQ data."""

    NONE = 0
    LZ4 = 1

    @classmethod
    def from_u8(cls, value: int) -> Compression:
        try:
            return cls(value)
        except ValueError:
            raise FormatViolationError(f"Unknown compression: {value}") from None

    def as_u8(self) -> int:
        return int(self)


class IqFormat(IntEnum):
    """Encoding of IQ samples."""

    INT8 = 0
    INT16 = 1
    FLOAT32 = 2

    @classmethod
    def from_u8(cls, value: int) -> IqFormat:
        try:
            return cls(value)
        except ValueError:
            raise FormatViolationError(f"Unknown IQ format: {value}") from None

    def as_u8(self) -> int:
        return int(self)

    def sample_size(self) -> int:
        """Size in bytes of one I/Q pair."""
        return _SAMPLE_SIZES[self]


_SAMPLE_SIZES = {
    IqFormat.INT8: 2,
    IqFormat.INT16: 4,
    IqFormat.FLOAT32: 8,
}


class SdrType(IntEnum):
    """Kind of SDR device that made a recording."""

    HACKRF = 0
    PLUTO_SDR = 1
    USRP_B200 = 2
    UNKNOWN = 255

    @classmethod
    def from_u8(cls, value: int) -> SdrType:
        """Map a byte to a device type; unrecognised values become UNKNOWN."""
        _check_range("SDR type", value, _U8_MAX)
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    def as_u8(self) -> int:
        return int(self)


@dataclass
class GlosHeader:
    """Fixed-size (128 byte) header of a GLOS file."""

    version: int
    flags: int
    sdr_type: SdrType
    iq_format: IqFormat
    compression: Compression
    sample_rate: int
    center_freq: int
    gain_db: float
    timestamp_start: int
    timestamp_end: int
    total_samples: int

    def __post_init__(self) -> None:
        _check_range("version", self.version, _U8_MAX)
        _check_range("flags", self.flags, _U8_MAX)
        _check_range("sample_rate", self.sample_rate, _U32_MAX)
        _check_range("center_freq", self.center_freq, _U64_MAX)
        _check_range("timestamp_start", self.timestamp_start, _U64_MAX)
        _check_range("timestamp_end", self.timestamp_end, _U64_MAX)
        _check_range("total_samples", self.total_samples, _U64_MAX)


@dataclass
class IqBlock:
    """A variable-size block of IQ samples."""

    timestamp_ns: int
    sample_count: int
    data: bytes
    is_compressed: bool = False

    def __post_init__(self) -> None:
        _check_range("timestamp_ns", self.timestamp_ns, _U64_MAX)
        _check_range("sample_count", self.sample_count, _U32_MAX)
        self.data = bytes(self.data)