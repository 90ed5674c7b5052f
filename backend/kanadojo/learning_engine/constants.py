"""Constants for learning engine game modes."""

from enum import Enum


class KanaScript(str, Enum):
    """Writing system a single character belongs to."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    OTHER = "other"


class RoundStatus(str, Enum):
    """Word-building round status."""

    CHECK = "check"
    CORRECT = "correct"
    WRONG = "wrong"


# Unicode blocks (inclusive)
HIRAGANA_RANGE = (0x3040, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)
