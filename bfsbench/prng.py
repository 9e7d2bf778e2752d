"""Seed derivation for the benchmark's random number generator."""

from __future__ import annotations

import os
from typing import Mapping

from .options import _strtol

DEFAULT_SEED = 0xDECAFBAD

_MASK30 = 0x3FFFFFFF
_MASK64 = (1 << 64) - 1


def make_mrg_seed(userseed: int) -> tuple[int, int, int, int, int]:
    """Spread a 64-bit seed into five nonzero generator seed values."""
    u = userseed & _MASK64
    low = (u & _MASK30) + 1
    mid = ((u >> 30) & _MASK30) + 1
    top = u >> 60
    return (low, mid, low, mid, (top << 4) + top + 1)


def seed_from_environment(environ: Mapping[str, str] | None = None) -> int:
    """Return the user seed from SEED, or the default when unset or invalid."""
    if environ is None:
        environ = os.environ
    seed = -1
    text = environ.get("SEED")
    if text is not None:
        value, bad = _strtol(text)
        seed = -1 if bad else value
    if seed < 0:
        seed = DEFAULT_SEED
    return seed