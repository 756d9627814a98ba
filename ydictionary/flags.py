"""Search options of the lookup request.

Options are sent to the service as a bitmask written in hexadecimal.
"""

from collections.abc import Iterable
from enum import IntFlag


class Flags(IntFlag):
    """Search options (bitmask of flags)."""

    FAMILY = 0x0001
    """Apply the family search filter."""

    MORPHO = 0x0004
    """Enable searching by word form."""

    POS_FILTER = 0x0008
    """Require matching parts of speech for the search word and translation."""

    def get_name(self) -> str:
        """Get command-line name of the flag, e.g. `pos-filter`."""
        assert self.name is not None
        return self.name.lower().replace("_", "-")


def encode(flags: Iterable[Flags]) -> int:
    """Combine flags into a bitmask."""

    result: int = 0
    for flag in flags:
        result |= flag.value
    return result


def decode(value: int) -> set[Flags]:
    """Get all defined flags set in the bitmask.

    Undefined bits are ignored.
    """
    return {flag for flag in Flags if value & flag.value}


def format_flags(value: int) -> str:
    """Get wire representation of the bitmask: uppercase hexadecimal."""
    return f"{int(value):X}"


def parse_flag(name: str) -> Flags:
    """Get flag by its command-line name.

    :param name: flag name, e.g. `morpho` or `pos-filter`
    """
    key: str = name.strip().upper().replace("-", "_")
    if key in Flags.__members__:
        return Flags[key]

    raise ValueError(f"Unknown flag `{name}`.")


def flag_names() -> list[str]:
    """Get command-line names of all flags."""
    return [flag.get_name() for flag in Flags]
