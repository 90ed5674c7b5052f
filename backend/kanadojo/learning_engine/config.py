"""
Learning Engine Configuration - Central Constants Registry.

All constants used by the adaptive selection engine MUST be defined here
with proper provenance. No magic numbers allowed in algorithm implementations.

Each constant includes:
- value: The actual constant value
- source: Where the value comes from and why it was chosen
- notes: Rationale and context
- validated: Whether the value has been validated against play data
"""

from dataclasses import dataclass
from typing import Any
import math


@dataclass(frozen=True)
class SourcedValue:
    """
    A constant value with documented provenance.

    All learning algorithm constants must use this type to enforce documentation.
    """

    value: Any
    source: str
    notes: str = ""
    validated: bool = False

    def __post_init__(self):
        if not self.source or self.source.strip() == "":
            raise ValueError(f"SourcedValue must have non-empty source. Got: {self.source}")


# =============================================================================
# Weight Table Constants
# =============================================================================

# Starting priority for an item on first sighting
ADAPTIVE_NEUTRAL_WEIGHT = SourcedValue(
    value=1.0,
    source="Heuristic default: unit weight so unseen items start with equal odds",
    notes="Every other weight is read relative to this one. A fresh table samples uniformly.",
    validated=True,
)

# Floor keeps mastered items in rotation
ADAPTIVE_MIN_WEIGHT = SourcedValue(
    value=0.1,
    source="Heuristic default: one tenth of neutral so mastered items still appear",
    notes="Must stay strictly positive. A zero floor would starve items the learner "
    "answered correctly a few times in a row.",
)

# Ceiling bounds how far repeated mistakes can skew the distribution
ADAPTIVE_MAX_WEIGHT = SourcedValue(
    value=10.0,
    source="Heuristic default: ten times neutral, typical cap for weighted drill apps",
    notes="With the floor at 0.1 the most-needed item is at most 100x as likely as "
    "the best-known one.",
)

# =============================================================================
# Outcome Update Constants
# =============================================================================

# w <- min + (w - min) * decay on a correct answer
ADAPTIVE_CORRECT_DECAY = SourcedValue(
    value=0.7,
    source="Heuristic default: keep 70% of the distance above the floor per correct answer",
    notes="Exponential moving step toward the floor. Six correct answers in a row "
    "take a neutral item to ~0.2.",
)

# w <- w + (max - w) * boost on a wrong answer
ADAPTIVE_WRONG_BOOST = SourcedValue(
    value=0.25,
    source="Heuristic default: close 25% of the gap to the ceiling per mistake",
    notes="A single mistake on a neutral item lifts it to 3.25, roughly 3x its peers.",
)

# =============================================================================
# Recency Guard Constants
# =============================================================================

# Number of logical ticks during which a just-seen item is suppressed
ADAPTIVE_RECENCY_WINDOW = SourcedValue(
    value=3,
    source="Heuristic default: covers one three-character word plus the next pick",
    notes="Measured in mark-seen events, not wall-clock time. 0 disables the guard.",
)

# Multiplier applied to the item marked most recently
ADAPTIVE_RECENCY_FLOOR = SourcedValue(
    value=0.05,
    source="Heuristic default: near-zero but positive so tiny pools still resolve",
    notes="The factor grows linearly from this floor back to 1.0 across the window.",
)


# =============================================================================
# Validation Functions
# =============================================================================


def validate_all_constants():
    """
    Validate all constants at import time.

    Raises:
        ValueError: If any constant fails validation
    """
    errors = []

    for name, const in [
        ("ADAPTIVE_NEUTRAL_WEIGHT", ADAPTIVE_NEUTRAL_WEIGHT),
        ("ADAPTIVE_MIN_WEIGHT", ADAPTIVE_MIN_WEIGHT),
        ("ADAPTIVE_MAX_WEIGHT", ADAPTIVE_MAX_WEIGHT),
    ]:
        if not math.isfinite(const.value) or const.value <= 0:
            errors.append(f"{name} must be finite and > 0, got {const.value}")

    if not (
        ADAPTIVE_MIN_WEIGHT.value
        <= ADAPTIVE_NEUTRAL_WEIGHT.value
        <= ADAPTIVE_MAX_WEIGHT.value
    ):
        errors.append(
            "Weights must satisfy MIN <= NEUTRAL <= MAX, got "
            f"{ADAPTIVE_MIN_WEIGHT.value} <= {ADAPTIVE_NEUTRAL_WEIGHT.value} "
            f"<= {ADAPTIVE_MAX_WEIGHT.value}"
        )

    for name, const in [
        ("ADAPTIVE_CORRECT_DECAY", ADAPTIVE_CORRECT_DECAY),
        ("ADAPTIVE_WRONG_BOOST", ADAPTIVE_WRONG_BOOST),
    ]:
        if not (0 < const.value < 1):
            errors.append(f"{name} must be in (0, 1), got {const.value}")

    if not isinstance(ADAPTIVE_RECENCY_WINDOW.value, int) or ADAPTIVE_RECENCY_WINDOW.value < 0:
        errors.append(
            f"ADAPTIVE_RECENCY_WINDOW must be a non-negative int, got {ADAPTIVE_RECENCY_WINDOW.value}"
        )

    if not (0 < ADAPTIVE_RECENCY_FLOOR.value <= 1):
        errors.append(f"ADAPTIVE_RECENCY_FLOOR must be in (0, 1], got {ADAPTIVE_RECENCY_FLOOR.value}")

    if errors:
        raise ValueError("Constant validation failed:\n" + "\n".join(errors))


# Validate on import
validate_all_constants()


# =============================================================================
# Convenience Accessors
# =============================================================================


def get_adaptive_selection_defaults() -> dict:
    """Get adaptive selection defaults as a dict."""
    return {
        "neutral_weight": ADAPTIVE_NEUTRAL_WEIGHT.value,
        "min_weight": ADAPTIVE_MIN_WEIGHT.value,
        "max_weight": ADAPTIVE_MAX_WEIGHT.value,
        "correct_decay": ADAPTIVE_CORRECT_DECAY.value,
        "wrong_boost": ADAPTIVE_WRONG_BOOST.value,
        "recency_window": ADAPTIVE_RECENCY_WINDOW.value,
        "recency_floor": ADAPTIVE_RECENCY_FLOOR.value,
    }
