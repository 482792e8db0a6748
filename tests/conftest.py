"""Shared fixtures for engine tests."""

import numpy as np
import pytest

from migration_engine.board import initialize_board


@pytest.fixture
def board6():
    """Starting position on a 6x6 board."""
    return initialize_board(6)


@pytest.fixture
def board8():
    """Starting position on an 8x8 board."""
    return initialize_board(8)


@pytest.fixture
def empty4():
    """Empty 4x4 board."""
    return np.zeros((4, 4), dtype=np.int8)


@pytest.fixture
def random_boards():
    """Reproducible random 6x6 boards with arbitrary cell contents."""
    rng = np.random.default_rng(1234)
    return [rng.integers(0, 3, size=(6, 6)).astype(np.int8) for _ in range(25)]
