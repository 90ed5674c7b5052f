"""
Adaptive Selection - weighted, recency-aware item picking.

This module decides which learning item (kana, kanji, word) a game mode
shows next, combining:
- Per-item weights that rise on mistakes and fall on correct answers
- Suppression of items shown within the last few picks
- Weighted sampling from the caller's candidate pool
"""

from kanadojo.learning_engine.adaptive_selection.core import (
    ItemStat,
    RecencyGuard,
    WeightTable,
    create_seeded_rng,
    draw,
)
from kanadojo.learning_engine.adaptive_selection.service import (
    AdaptiveSelector,
    SelectorProvider,
    create_adaptive_selector,
)

__all__ = [
    "AdaptiveSelector",
    "SelectorProvider",
    "create_adaptive_selector",
    "ItemStat",
    "WeightTable",
    "RecencyGuard",
    "draw",
    "create_seeded_rng",
]
