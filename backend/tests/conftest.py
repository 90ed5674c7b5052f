"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest

from kanadojo.learning_engine.adaptive_selection import AdaptiveSelector, create_seeded_rng
from kanadojo.learning_engine.params import SelectionParams


@pytest.fixture
def params() -> SelectionParams:
    """Registry defaults."""
    return SelectionParams()


@pytest.fixture
def rng():
    """Deterministic random source."""
    return create_seeded_rng("kanadojo-tests")


@pytest.fixture
def selector(params: SelectionParams, rng) -> AdaptiveSelector:
    """Fresh selector with an empty weight table and a seeded RNG."""
    return AdaptiveSelector(params=params, rng=rng)


@pytest.fixture
def kana_pairs() -> dict[str, str]:
    """Vowel row of hiragana mapped to romaji."""
    return {"あ": "a", "い": "i", "う": "u", "え": "e", "お": "o"}


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Put the root logger back the way the test found it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield root_logger
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
