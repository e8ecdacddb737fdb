from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import numpy as np
import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from helpers import cm_to_inch


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def parabola_fig():
    """Single axes, x in [-10, 10], y in [0, 100], no grid."""
    x = np.linspace(-10, 10, 201)
    fig, ax = plt.subplots(figsize=(cm_to_inch(12), cm_to_inch(9)))
    ax.plot(x, x ** 2)
    ax.set_xlim(-10, 10)
    ax.set_ylim(0, 100)
    return fig


@pytest.fixture
def two_axes_fig():
    x = np.linspace(0, 1, 11)
    fig, (top, bottom) = plt.subplots(2, 1, figsize=(cm_to_inch(10), cm_to_inch(12)))
    top.plot(x, x, label="a")
    top.plot(x, 2 * x, label="b")
    top.set_title("Top")
    top.grid(True)
    bottom.plot(x, x ** 2)
    bottom.set_xlabel("t")
    bottom.set_ylabel("y")
    return fig
