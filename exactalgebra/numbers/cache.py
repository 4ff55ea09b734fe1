"""
Shared pool of small integers.

Integers in [-CACHE_DEPTH, CACHE_DEPTH] are handed out as one canonical
FiniteInteger instance each, so natural construction of the same small value
always returns the identical object. The table is built on first access and
not guarded by a lock: two threads racing on the first access build the same
table twice and one of them wins, which is harmless because the entries are
immutable and equal.
"""

import logging

LOG = logging.getLogger(__name__)

CACHE_DEPTH = 128

_table = None


def _build():
    from .finite_integer import FiniteInteger
    LOG.debug(f"Building small integer cache for [{-CACHE_DEPTH}, {CACHE_DEPTH}]")
    return tuple(FiniteInteger(value) for value in range(-CACHE_DEPTH, CACHE_DEPTH + 1))


def in_window(value: int) -> bool:
    return -CACHE_DEPTH <= value <= CACHE_DEPTH


def get(value: int):
    """Returns the cached integer for value, or None if value lies outside the window"""
    global _table
    if not in_window(value):
        return None
    table = _table
    if table is None:
        table = _table = _build()
    return table[value + CACHE_DEPTH]
