import matplotlib

matplotlib.use("Agg")

import pytest

from context import TSPContext

SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]


@pytest.fixture
def square_context():
    return TSPContext.from_points(SQUARE)


@pytest.fixture
def random_points():
    from utils_gen_points import generate_random_points
    return generate_random_points(7, seed=3)
