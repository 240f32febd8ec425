"""Helpers for flat key/value argument lists.

Dimensions and properties are passed as ``key, value, key, value, ...``.
A trailing key without a value maps to the empty string.
"""

from collections.abc import Iterator, Sequence


def iter_pairs(kv: Sequence[str]) -> Iterator[tuple[str, str]]:
    """Yield (key, value) tuples from a flat key/value sequence.

    Args:
        kv: Alternating keys and values.

    Yields:
        Pairs in input order. An unpaired final key yields (key, "").
    """
    paired = len(kv) - len(kv) % 2
    for i in range(0, paired, 2):
        yield kv[i], kv[i + 1]
    if paired < len(kv):
        yield kv[paired], ""


def pairs_to_dict(kv: Sequence[str]) -> dict[str, str]:
    """Build a new dict from a flat key/value sequence (last write wins)."""
    return dict(iter_pairs(kv))
