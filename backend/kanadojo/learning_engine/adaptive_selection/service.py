"""
Adaptive Selection Service - Public facade used by game modes.

Coordinates:
- Weight table lookups and outcome updates
- Recency suppression layered over stored weights
- Weighted sampling from caller-supplied candidate pools
- Host-scoped lazy construction (SelectorProvider)

Game modes follow a three-call protocol per round:

    item = selector.select_weighted_character(pool)
    selector.mark_character_seen(item)
    ...  # learner answers
    selector.update_character_weight(item, correct)
"""

import logging
import random
import threading
from collections.abc import Iterable
from typing import Any

from kanadojo.core.app_exceptions import EmptyPoolError
from kanadojo.core.config import Settings, settings as app_settings
from kanadojo.learning_engine.adaptive_selection.core import (
    ItemStat,
    RecencyGuard,
    WeightTable,
    create_seeded_rng,
    draw,
    effective_weights,
    is_degenerate,
)
from kanadojo.learning_engine.params import (
    SelectionParams,
    build_selection_params,
    compute_checksum,
)

logger = logging.getLogger(__name__)


class AdaptiveSelector:
    """
    In-memory adaptive selection policy.

    Owns one WeightTable. All operations are synchronous and serialized by
    a re-entrant lock, so a selector can be shared between threads.
    """

    def __init__(
        self,
        params: SelectionParams | None = None,
        rng: random.Random | None = None,
    ):
        self._params = params or SelectionParams()
        self._rng = rng or create_seeded_rng()
        self._table = WeightTable(self._params)
        self._guard = RecencyGuard(self._table)
        self._lock = threading.RLock()

    @property
    def params(self) -> SelectionParams:
        return self._params

    def _effective_weight(self, item_id: str) -> float:
        return self._guard.penalize(item_id, self._table.get_weight(item_id))

    def select_weighted_character(self, pool: Iterable[str]) -> str:
        """
        Pick one item from pool, biased toward items that need practice.

        Does not mark the item seen; callers do that explicitly so several
        items can be selected for one round before any is scored.

        Args:
            pool: Candidate item ids (duplicates count as separate slots)

        Returns:
            An element of pool

        Raises:
            EmptyPoolError: If pool is empty
        """
        candidates = list(pool)
        if not candidates:
            raise EmptyPoolError()

        with self._lock:
            return draw(candidates, self._effective_weight, self._rng)

    def mark_character_seen(self, item_id: str) -> None:
        """Record that item_id was just shown."""
        with self._lock:
            self._table.mark_seen(item_id)

    def update_character_weight(self, item_id: str, correct: bool) -> None:
        """Report the learner's answer for item_id."""
        with self._lock:
            stat = self._table.record_outcome(item_id, correct)
            logger.debug(
                f"Updated weight for {item_id!r}",
                extra={"item": stat.to_dict(), "correct": correct},
            )

    def selection_probabilities(self, pool: Iterable[str]) -> dict[str, float]:
        """
        Distribution the next select_weighted_character(pool) call would use.

        Duplicate ids accumulate the probability of each of their slots.

        Args:
            pool: Candidate item ids

        Returns:
            Dict mapping item id -> probability (sums to 1)

        Raises:
            EmptyPoolError: If pool is empty
        """
        candidates = list(pool)
        if not candidates:
            raise EmptyPoolError()

        with self._lock:
            weights = effective_weights(candidates, self._effective_weight)

        if is_degenerate(weights):
            weights = [1.0] * len(candidates)

        total = sum(weights)
        probabilities: dict[str, float] = {}
        for item_id, weight in zip(candidates, weights):
            probabilities[item_id] = probabilities.get(item_id, 0.0) + weight / total
        return probabilities

    def get_stat(self, item_id: str) -> ItemStat | None:
        """Copy of the stored statistics for item_id, or None if never referenced."""
        with self._lock:
            stat = self._table.get(item_id)
            if stat is None:
                return None
            return ItemStat(**vars(stat))

    def known_item_ids(self) -> set[str]:
        with self._lock:
            return set(self._table.item_ids())

    def snapshot(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        with self._lock:
            return {
                "params_checksum": compute_checksum(self._params),
                "tick": self._table.current_tick,
                "item_count": len(self._table),
                "items": self._table.snapshot(),
            }


class SelectorProvider:
    """
    Host-owned holder for one shared AdaptiveSelector.

    The selector is built on the first get() and reused afterwards. The host
    decides how long the provider lives (one per learner session, typically)
    and hands it to every game mode that should share the policy.
    """

    def __init__(
        self,
        params: SelectionParams | None = None,
        rng: random.Random | None = None,
    ):
        self._params = params
        self._rng = rng
        self._selector: AdaptiveSelector | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._selector is not None

    def get(self) -> AdaptiveSelector:
        if self._selector is None:
            with self._lock:
                if self._selector is None:
                    self._selector = AdaptiveSelector(self._params, self._rng)
                    logger.debug("Created adaptive selector", extra={"params": self._selector.params.model_dump()})
        return self._selector


def create_adaptive_selector(
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> AdaptiveSelector:
    """
    Build a selector from application settings.

    Args:
        settings: Settings instance (defaults to the global settings)
        rng: Explicit random source; overrides ADAPTIVE_SEED

    Returns:
        AdaptiveSelector configured from ADAPTIVE_PARAMS / ADAPTIVE_SEED

    Raises:
        InvalidSelectionParamsError: If ADAPTIVE_PARAMS overrides are invalid
    """
    settings = settings or app_settings
    params = build_selection_params(settings.ADAPTIVE_PARAMS)
    if rng is None:
        rng = create_seeded_rng(settings.ADAPTIVE_SEED)
    return AdaptiveSelector(params=params, rng=rng)
