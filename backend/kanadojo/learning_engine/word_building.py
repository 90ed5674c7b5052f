"""
Word-building game mode.

The learner is shown a short "word" made of characters picked by the
adaptive selector and must rebuild its reading from a shuffled set of
tiles (the correct answers plus a few distractors).

Per round:
1. Each character is selected from the characters not yet used in the
   word and marked seen immediately, so recency suppression applies to
   the next slot of the same word.
2. After the learner checks the answer, every character of the word is
   reported to the selector as correct or wrong.
"""

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kanadojo.learning_engine.adaptive_selection import AdaptiveSelector
from kanadojo.learning_engine.constants import (
    HIRAGANA_RANGE,
    KATAKANA_RANGE,
    KanaScript,
    RoundStatus,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTRACTORS = 3


def is_hiragana(char: str) -> bool:
    if not char:
        return False
    return HIRAGANA_RANGE[0] <= ord(char[0]) <= HIRAGANA_RANGE[1]


def is_katakana(char: str) -> bool:
    if not char:
        return False
    return KATAKANA_RANGE[0] <= ord(char[0]) <= KATAKANA_RANGE[1]


def kana_script(char: str) -> KanaScript:
    """Classify a character by its first code point."""
    if is_hiragana(char):
        return KanaScript.HIRAGANA
    if is_katakana(char):
        return KanaScript.KATAKANA
    return KanaScript.OTHER


@dataclass
class WordRound:
    """One word-building question."""

    word_chars: list[str] = field(default_factory=list)
    answer_chars: list[str] = field(default_factory=list)
    tiles: list[str] = field(default_factory=list)
    reverse: bool = False
    status: RoundStatus = RoundStatus.CHECK

    @property
    def is_playable(self) -> bool:
        return bool(self.word_chars)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        return {
            "word_chars": self.word_chars,
            "answer_chars": self.answer_chars,
            "tiles": self.tiles,
            "reverse": self.reverse,
            "status": self.status.value,
        }


@dataclass
class RoundResult:
    """Outcome of checking a word-building round."""

    correct: bool
    status: RoundStatus
    score_delta: int
    hiragana_correct: int = 0
    katakana_correct: int = 0
    reported_chars: list[str] = field(default_factory=list)


def build_word_round(
    selector: AdaptiveSelector,
    pairs: Mapping[str, str],
    word_length: int,
    *,
    reverse: bool = False,
    max_distractors: int = DEFAULT_MAX_DISTRACTORS,
    rng: random.Random | None = None,
) -> WordRound:
    """
    Build a word-building round.

    Args:
        selector: Shared adaptive selector
        pairs: Mapping of source character -> answer (e.g. kana -> romaji)
        word_length: Number of characters in the word
        reverse: Show answers and ask for source characters instead
        max_distractors: Upper bound on extra tiles
        rng: Random source for distractors and tile order

    Returns:
        WordRound (not playable when there are too few characters)
    """
    rng = rng or random.Random()
    reverse_pairs = {answer: source for source, answer in pairs.items()}

    # Reverse rounds keep repeated readings; a repeat just shortens the word
    source_chars = list(pairs.values()) if reverse else list(pairs)
    if word_length <= 0 or len(source_chars) < word_length:
        logger.debug(
            "Not enough characters for word building",
            extra={"available": len(source_chars), "word_length": word_length},
        )
        return WordRound(reverse=reverse)

    word_chars: list[str] = []
    used: set[str] = set()
    for _ in range(word_length):
        available = [c for c in source_chars if c not in used]
        if not available:
            break
        selected = selector.select_weighted_character(available)
        word_chars.append(selected)
        used.add(selected)
        selector.mark_character_seen(selected)

    lookup = reverse_pairs if reverse else pairs
    answer_chars = [lookup[c] for c in word_chars]

    distractor_count = max(0, min(max_distractors, len(source_chars) - word_length))
    distractor_source = list(pairs) if reverse else list(reverse_pairs)
    used_answers = set(answer_chars)
    distractors: list[str] = []
    for _ in range(distractor_count):
        available = [c for c in distractor_source if c not in used_answers and c not in distractors]
        if not available:
            break
        distractors.append(available[rng.randrange(len(available))])

    tiles = answer_chars + distractors
    rng.shuffle(tiles)

    return WordRound(
        word_chars=word_chars,
        answer_chars=answer_chars,
        tiles=tiles,
        reverse=reverse,
    )


def toggle_tile(placed: list[str], tile: str) -> list[str]:
    """Place a tile, or take it back if it is already placed."""
    if tile in placed:
        return [t for t in placed if t != tile]
    return [*placed, tile]


def check_word_round(
    selector: AdaptiveSelector,
    word_round: WordRound,
    placed: list[str],
) -> RoundResult | None:
    """
    Score the learner's tiles and report every character to the selector.

    Args:
        selector: Shared adaptive selector
        word_round: Round being answered
        placed: Tiles in the order the learner placed them

    Returns:
        RoundResult, or None when no tile has been placed
    """
    if not placed:
        return None

    correct = placed == word_round.answer_chars
    word_round.status = RoundStatus.CORRECT if correct else RoundStatus.WRONG

    for char in word_round.word_chars:
        selector.update_character_weight(char, correct)

    if correct:
        scripts = [kana_script(c) for c in word_round.word_chars]
        return RoundResult(
            correct=True,
            status=RoundStatus.CORRECT,
            score_delta=len(word_round.word_chars),
            hiragana_correct=scripts.count(KanaScript.HIRAGANA),
            katakana_correct=scripts.count(KanaScript.KATAKANA),
            reported_chars=list(word_round.word_chars),
        )

    return RoundResult(
        correct=False,
        status=RoundStatus.WRONG,
        score_delta=-1,
        reported_chars=list(word_round.word_chars),
    )


def apply_score(score: int, result: RoundResult) -> int:
    """New running score; never drops below zero."""
    return max(0, score + result.score_delta)
