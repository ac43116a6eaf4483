"""Serial number parsing and closed-interval arithmetic — no I/O."""

import re
from dataclasses import dataclass

from device_warranty.domain.exceptions import MalformedSerialError

_LEADING_ALPHA = re.compile(r"[A-Za-z]*")
_TRAILING_DIGITS = re.compile(r"([0-9]+)$")


@dataclass(frozen=True)
class ParsedSerial:
    """A serial split into its alphabetic prefix and numeric suffix."""

    prefix: str
    number: int


@dataclass(frozen=True)
class SerialRange:
    """Closed range ``[start, end]`` of serial numbers."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Range start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is greater than end {self.end}")


def parse_serial(serial: str) -> ParsedSerial:
    """Split ``serial`` into (leading letters, trailing digits).

    ``"AB123"`` → ``("AB", 123)``; ``"AB-0042"`` → ``("AB", 42)``.
    A serial without a trailing digit run is malformed.
    """
    match = _TRAILING_DIGITS.search(serial)
    if match is None:
        raise MalformedSerialError(serial)
    prefix = _LEADING_ALPHA.match(serial).group(0)
    return ParsedSerial(prefix=prefix, number=int(match.group(1)))


def contains(serial_range: SerialRange, number: int) -> bool:
    return serial_range.start <= number <= serial_range.end


def overlaps(a: SerialRange, b: SerialRange) -> bool:
    """Closed-interval intersection; ranges sharing one endpoint overlap."""
    return a.start <= b.end and b.start <= a.end
