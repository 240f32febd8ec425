"""Units of measure accepted by the embedded metric format."""

from enum import StrEnum


class Unit(StrEnum):
    """Unit of measure associated with a metric's values.

    Members compare equal to their wire symbol, so a plain string such as
    ``"Seconds"`` can be used anywhere a Unit is expected. Strings outside
    this set are passed through unchanged.
    """

    NONE = "None"
    SECONDS = "Seconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    BYTES = "Bytes"
    KILOBYTES = "Kilobytes"
    MEGABYTES = "Megabytes"
    GIGABYTES = "Gigabytes"
    TERABYTES = "Terabytes"
    BITS = "Bits"
    KILOBITS = "Kilobits"
    MEGABITS = "Megabits"
    GIGABITS = "Gigabits"
    TERABITS = "Terabits"
    PERCENT = "Percent"
    COUNT = "Count"
    BYTES_SECOND = "Bytes/Second"
    KILOBYTES_SECOND = "Kilobytes/Second"
    MEGABYTES_SECOND = "Megabytes/Second"
    GIGABYTES_SECOND = "Gigabytes/Second"
    TERABYTES_SECOND = "Terabytes/Second"
    BITS_SECOND = "Bits/Second"
    KILOBITS_SECOND = "Kilobits/Second"
    MEGABITS_SECOND = "Megabits/Second"
    GIGABITS_SECOND = "Gigabits/Second"
    TERABITS_SECOND = "Terabits/Second"
    COUNT_SECOND = "Count/Second"


_KNOWN_UNITS = frozenset(unit.value for unit in Unit)


def is_known_unit(value: str) -> bool:
    """Return True if value is one of the standard unit symbols."""
    return value in _KNOWN_UNITS
