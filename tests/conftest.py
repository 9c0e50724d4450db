import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# flat layout: model_*.py and utils_data.py live in the project root
ROOT = str(Path(__file__).resolve().parent.parent)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def unit():
    from model_perceptron import Perceptron
    return Perceptron()


@pytest.fixture
def unipolar_unit():
    from model_perceptron import Perceptron, UNIPOLAR
    return Perceptron(mode=UNIPOLAR)


@pytest.fixture
def painted_detector():
    from model_receptor import train_painted_detector
    return train_painted_detector(n_steps=20)
