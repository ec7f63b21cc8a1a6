"""Deterministic prefill selection.

Picks which active cells are revealed in advance on the printed template.
The selection must be bit-identical for identical (matrix, content, level,
percent) in any conforming implementation, so every step below is fixed:

    seed  = FNV-1a 32-bit over UTF-8 of "content|level|percent"
    rnd   = 32-bit LCG (Numerical Recipes constants), draw = state / 2^32
    order = Fisher–Yates from the last index down to 1
    pick  = first round_half_away(active * percent / 100) shuffled indices

All helpers are pure and take their state explicitly.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from decimal import Decimal

from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.utils.math_helpers import clamp_percent, round_half_away

logger = logging.getLogger(__name__)

_UINT32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223


# ── Pure helpers ──


def format_percent(percent: float) -> str:
    """Seed text for a percent.

    Whole numbers have no decimal part. Fractions use the shortest round-trip
    digits, positional down to 1e-6 and exponent form (`1.5e-7`) below that.
    """
    value = float(percent)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        if abs(value) >= 1e-6:
            return format(Decimal(text), "f")
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def seed_text(content: str, level: str, percent: float) -> str:
    return f"{content}|{level}|{format_percent(percent)}"


def fnv1a_32(data: bytes | str) -> int:
    """32-bit FNV-1a hash."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & _UINT32
    return h


def lcg_next(state: int) -> int:
    """One step of the 32-bit linear congruential generator."""
    return (LCG_MULTIPLIER * state + LCG_INCREMENT) & _UINT32


def lcg_floats(seed: int) -> Iterator[float]:
    """Endless stream of draws in [0, 1). The first draw comes from lcg_next(seed)."""
    state = seed & _UINT32
    while True:
        state = lcg_next(state)
        yield state / _TWO_POW_32


def fisher_yates(items: Sequence[int], draws: Iterator[float]) -> list[int]:
    """Shuffled copy of `items`, consuming one draw per swap (i = n-1 … 1)."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(next(draws) * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def prefill_count(active_count: int, percent: float) -> int:
    """How many active cells a (clamped) percent reveals."""
    pct = clamp_percent(percent)
    if pct <= 0 or active_count <= 0:
        return 0
    return min(active_count, max(0, round_half_away(active_count * pct / 100)))


# ── Selection ──


def shuffled_active(matrix: ModuleMatrix, content: str, level: str, percent: float) -> list[int]:
    """Active indices in the seeded shuffle order used for selection."""
    pct = clamp_percent(percent)
    seed = fnv1a_32(seed_text(content, level, pct))
    return fisher_yates(matrix.active_indices(), lcg_floats(seed))


def select_prefill(matrix: ModuleMatrix, content: str, level: str, percent: float) -> frozenset[int]:
    """Reproducible subset of active-cell indices to mark as already solved."""
    pct = clamp_percent(percent)
    active = matrix.active_indices()
    if pct <= 0 or not active:
        return frozenset()

    count = round_half_away(len(active) * pct / 100)
    if count <= 0:
        return frozenset()

    seed = fnv1a_32(seed_text(content, level, pct))
    shuffled = fisher_yates(active, lcg_floats(seed))
    chosen = frozenset(shuffled[: min(count, len(shuffled))])

    logger.debug(
        "Prefill: %d of %d active cells (percent=%s, seed=%08x)",
        len(chosen), len(active), format_percent(pct), seed,
    )
    return chosen
