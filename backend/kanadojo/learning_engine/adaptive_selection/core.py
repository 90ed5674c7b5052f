"""
Core algorithms for adaptive selection.

Implements:
- Per-item statistics with bounded weights (WeightTable)
- Logical-tick recency suppression (RecencyGuard)
- Weighted sampling from a caller-supplied pool with uniform fallback
- Deterministic seeded RNG for reproducibility
"""

import hashlib
import logging
import math
import random
from bisect import bisect_right
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import accumulate
from typing import Any, TypeVar

from kanadojo.core.app_exceptions import EmptyPoolError
from kanadojo.learning_engine.params import SelectionParams

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ItemStat:
    """Selection statistics for one learning item."""

    item_id: str
    weight: float
    correct_count: int = 0
    wrong_count: int = 0
    last_seen_tick: int | None = None  # None = never marked seen

    @property
    def attempts(self) -> int:
        return self.correct_count + self.wrong_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        return {
            "item_id": self.item_id,
            "weight": round(self.weight, 4),
            "correct_count": self.correct_count,
            "wrong_count": self.wrong_count,
            "last_seen_tick": self.last_seen_tick,
        }


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def apply_correct_decay(weight: float, min_weight: float, decay: float) -> float:
    """
    Move weight toward the floor after a correct answer.

    w' = min + (w - min) * decay
    """
    return min_weight + (weight - min_weight) * decay


def apply_wrong_boost(weight: float, max_weight: float, boost: float) -> float:
    """
    Move weight toward the ceiling after a wrong answer.

    w' = w + (max - w) * boost
    """
    return weight + (max_weight - weight) * boost


class WeightTable:
    """
    Mapping from item id to ItemStat plus the shared logical tick.

    Entries are created on first reference and never removed.
    """

    def __init__(self, params: SelectionParams):
        self.params = params
        self._stats: dict[str, ItemStat] = {}
        self._tick = 0

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._stats

    @property
    def current_tick(self) -> int:
        """Most recently issued tick (0 before any mark_seen)."""
        return self._tick

    def item_ids(self) -> list[str]:
        return list(self._stats)

    def get(self, item_id: str) -> ItemStat | None:
        """Look up an entry without creating it."""
        return self._stats.get(item_id)

    def _ensure(self, item_id: str) -> ItemStat:
        stat = self._stats.get(item_id)
        if stat is None:
            stat = ItemStat(item_id=item_id, weight=self.params.neutral_weight)
            self._stats[item_id] = stat
        return stat

    def get_weight(self, item_id: str) -> float:
        """Current weight; inserts a neutral entry for unseen ids."""
        return self._ensure(item_id).weight

    def record_outcome(self, item_id: str, correct: bool) -> ItemStat:
        """
        Apply one answer outcome to an item.

        Correct answers decay the weight toward min_weight, wrong answers
        boost it toward max_weight. The result is always clamped.

        Args:
            item_id: Item identity
            correct: Whether the learner answered correctly

        Returns:
            The updated ItemStat
        """
        stat = self._ensure(item_id)
        p = self.params
        if correct:
            new_weight = apply_correct_decay(stat.weight, p.min_weight, p.correct_decay)
            stat.correct_count += 1
        else:
            new_weight = apply_wrong_boost(stat.weight, p.max_weight, p.wrong_boost)
            stat.wrong_count += 1
        stat.weight = clamp(new_weight, p.min_weight, p.max_weight)
        return stat

    def mark_seen(self, item_id: str) -> int:
        """Advance the shared tick and stamp it on the item. Returns the new tick."""
        stat = self._ensure(item_id)
        self._tick += 1
        stat.last_seen_tick = self._tick
        return self._tick

    def snapshot(self) -> dict[str, dict[str, Any]]:
        return {item_id: stat.to_dict() for item_id, stat in self._stats.items()}


class RecencyGuard:
    """Shrinks the weight of items marked seen within the recency window."""

    def __init__(self, table: WeightTable):
        self.table = table

    def factor(self, item_id: str) -> float:
        """
        Compute the recency multiplier for an item.

        age = current_tick - last_seen_tick
        factor = floor + (1 - floor) * age / window   for age < window
        factor = 1                                    otherwise

        Args:
            item_id: Item identity

        Returns:
            Multiplier in [recency_floor, 1]
        """
        window = self.table.params.recency_window
        stat = self.table.get(item_id)
        if window <= 0 or stat is None or stat.last_seen_tick is None:
            return 1.0

        age = self.table.current_tick - stat.last_seen_tick
        if age >= window:
            return 1.0

        floor = self.table.params.recency_floor
        return floor + (1.0 - floor) * (age / window)

    def penalize(self, item_id: str, weight: float) -> float:
        """Effective weight after the recency penalty."""
        return weight * self.factor(item_id)


def create_seeded_rng(seed: int | str | None = None) -> random.Random:
    """
    Create a seeded random number generator.

    Args:
        seed: Integer seed, hex string, any other string (hashed), or None
            for an entropy-seeded generator

    Returns:
        Random instance
    """
    if seed is None or isinstance(seed, int):
        return random.Random(seed)

    # If seed is already hex, use it directly, otherwise hash it
    try:
        seed_int = int(seed, 16)
    except ValueError:
        seed_bytes = hashlib.sha256(seed.encode()).digest()
        seed_int = int.from_bytes(seed_bytes[:8], byteorder="big")
    return random.Random(seed_int)


def _sanitize(weight: float) -> float:
    if math.isfinite(weight) and weight < 0:
        return 0.0
    return weight


def effective_weights(pool: Sequence[T], weight_fn: Callable[[T], float]) -> list[float]:
    """Per-slot weights for a pool; negative weights count as zero."""
    return [_sanitize(weight_fn(item)) for item in pool]


def is_degenerate(weights: list[float]) -> bool:
    """True when the weights cannot form a distribution."""
    total = sum(weights)
    return not math.isfinite(total) or total <= 0


def draw(
    pool: Sequence[T],
    weight_fn: Callable[[T], float],
    rng: random.Random,
) -> T:
    """
    Draw one element of pool with probability proportional to weight_fn.

    Duplicates in pool are independent slots. A zero or non-finite total
    falls back to a uniform draw.

    Args:
        pool: Candidate items
        weight_fn: Maps an item to its effective weight
        rng: Random source

    Returns:
        An element of pool (the object itself)

    Raises:
        EmptyPoolError: If pool is empty
    """
    if len(pool) == 0:
        raise EmptyPoolError()

    if len(pool) == 1:
        return pool[0]

    weights = effective_weights(pool, weight_fn)
    if is_degenerate(weights):
        logger.debug("Degenerate weights, falling back to uniform draw", extra={"pool_size": len(pool)})
        return pool[rng.randrange(len(pool))]

    cumulative = list(accumulate(weights))
    r = rng.random() * cumulative[-1]
    index = bisect_right(cumulative, r)
    if index >= len(pool):
        # Float rounding can push r onto the last boundary
        index = max(i for i, w in enumerate(weights) if w > 0)
    return pool[index]
