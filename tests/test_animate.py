import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.animation as animation  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from complexplane import Complex, Polar  # noqa: E402
from complexplane.animate import animate_complex, trajectory  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_trajectory_accepts_every_sample_kind():
    xs, ys = trajectory([Complex(1, 2), Polar(2, math.pi / 2), 3 - 1j, (4, 5)])
    np.testing.assert_allclose(xs, [1, 0, 3, 4], atol=1e-12)
    np.testing.assert_allclose(ys, [2, 2, -1, 5], atol=1e-12)
    assert xs.dtype == np.float64


def test_trajectory_of_rotation_stays_on_unit_circle():
    step = Complex.unit(math.pi / 180)
    xs, ys = trajectory(step ** k for k in range(360))
    np.testing.assert_allclose(np.hypot(xs, ys), 1.0, atol=1e-9)


def test_trajectory_rejects_empty_sequence():
    with pytest.raises(ValueError):
        trajectory([])


def test_trajectory_rejects_unknown_samples():
    with pytest.raises(TypeError):
        trajectory([Complex(1, 0), "2+3i"])


def test_animation_box_fits_the_trajectory():
    anim = animate_complex([Complex(3, 0), Polar(2, math.pi / 2), 1j], show=False)
    assert isinstance(anim, animation.FuncAnimation)
    ax = plt.gcf().axes[0]
    assert ax.get_xlim() == pytest.approx((-3.3, 3.3))
    assert ax.get_ylim() == pytest.approx((-3.3, 3.3))


def test_animation_box_has_minimum_span():
    animate_complex([Complex(0.1, 0.1)], show=False)
    ax = plt.gcf().axes[0]
    assert ax.get_xlim() == pytest.approx((-1.1, 1.1))
