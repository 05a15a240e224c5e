import random

import matplotlib

matplotlib.use("Agg")

import pytest

from digraphx import Graph


@pytest.fixture
def diamond():
    """0 -> 1 -> 3 is cheaper than 0 -> 2 -> 3; 4 is isolated."""
    return Graph(
        {
            0: {1: 1, 2: 4},
            1: {3: 2},
            2: {3: 1},
            3: {},
            4: {},
        }
    )


@pytest.fixture
def cycle():
    # 0 -> 1 -> 2 -> 0, strongly connected
    return Graph({0: {1: 3}, 1: {2: 5}, 2: {0: 7}})


@pytest.fixture
def rng():
    return random.Random(1234)
