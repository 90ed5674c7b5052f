"""
Learning Engine Module.

This module contains the item selection logic shared by all game modes:
- Adaptive selection (weighted, recency-aware picking)
- Tunable selection parameters with documented defaults
- Word-building round construction and scoring

The engine is a pure in-memory policy. Hosts own its lifetime.
"""

from kanadojo.learning_engine.adaptive_selection import (
    AdaptiveSelector,
    SelectorProvider,
    create_adaptive_selector,
)
from kanadojo.learning_engine.constants import KanaScript, RoundStatus
from kanadojo.learning_engine.params import SelectionParams, build_selection_params

__all__ = [
    # Selector
    "AdaptiveSelector",
    "SelectorProvider",
    "create_adaptive_selector",
    # Parameters
    "SelectionParams",
    "build_selection_params",
    # Constants
    "KanaScript",
    "RoundStatus",
]
