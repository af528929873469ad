import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

import pytest

from tests.helpers import PredictableRandom, make_simulation


@pytest.fixture
def simulation():
    return make_simulation(seed=1234)


@pytest.fixture
def predictable_simulation():
    return make_simulation(rng=PredictableRandom())


__all__ = [
    "PredictableRandom",
    "make_simulation",
]
