"""Memory limit parsing for `<size><unit>` strings such as `512M` or `2G`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from cf_env.errors import EnvMalformedError, UnknownMemoryUnitError

from .parsing import domain_is_unsigned_integer_text

MEMORY_LIMIT_SIZE_REASON: Final[str] = "not a valid unsigned integer"

_BYTE_UNIT_MULTIPLIERS: Final[dict[str, int]] = {
    "G": 1024**3,
    "M": 1024**2,
}


class ByteUnit(str, Enum):
    """Memory size unit derived from the last character of a size string."""

    GIGABYTE = "G"
    MEGABYTE = "M"

    @classmethod
    def from_string(cls, value: str) -> ByteUnit:
        """Resolve the unit from the trailing character of a size string.

        Args:
            value: Full size string, for example `512M`.

        Returns:
            ByteUnit: Unit mapped case-insensitively from the last character.

        Raises:
            UnknownMemoryUnitError: Raised when the string is empty or ends
                with an unsupported character.
        """

        if not value:
            raise UnknownMemoryUnitError()
        unit_character = value[-1].upper()
        if unit_character == "G":
            return cls.GIGABYTE
        if unit_character == "M":
            return cls.MEGABYTE
        raise UnknownMemoryUnitError()


@dataclass(frozen=True)
class MemoryLimit:
    """Typed memory limit.

    Attributes:
        unit: Size unit.
        size: Non-negative size expressed in `unit`.
    """

    unit: ByteUnit
    size: int

    def to_bytes(self) -> int:
        """Return the limit in bytes using binary multiples."""

        return self.size * _BYTE_UNIT_MULTIPLIERS[self.unit.value]


def parse_memory_limit(value: str, variable_name: str) -> MemoryLimit:
    """Parse one `<digits><unit>` string into `MemoryLimit`.

    The unit is classified first, so an unsupported trailing character is
    always `UnknownMemoryUnitError` even when the size is also invalid.

    Args:
        value: Raw size string.
        variable_name: Variable named in malformed-size errors.

    Returns:
        MemoryLimit: Parsed limit.

    Raises:
        UnknownMemoryUnitError: Raised when the trailing unit is unsupported.
        EnvMalformedError: Raised when the size part is not an unsigned integer.
    """

    unit = ByteUnit.from_string(value)
    size_text = value[:-1]
    if not domain_is_unsigned_integer_text(size_text):
        raise EnvMalformedError(variable_name, MEMORY_LIMIT_SIZE_REASON)
    return MemoryLimit(unit=unit, size=int(size_text))
