import logging
import math
from typing import Iterable, Tuple, Union

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from .complex import Complex, ComplexBase

logger = logging.getLogger(__name__)

Sample = Union[ComplexBase, complex, Tuple[float, float]]


def trajectory(sequence: Iterable[Sample]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project a sequence of samples onto the plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, `Polar`, Python `complex`, or (x, y) tuples

    Returns
    -------
    (xs, ys) float arrays of the real and imaginary parts.
    """
    points = []
    for z in sequence:
        if isinstance(z, ComplexBase):
            z = z.to_rectangular()
        elif isinstance(z, complex):
            z = Complex.from_complex(z)
        elif isinstance(z, tuple) and len(z) == 2:
            z = Complex(*z)
        else:
            raise TypeError(f"Cannot plot sample of type {type(z).__name__}")
        points.append((z.re, z.im))
    if not points:
        raise ValueError("Cannot plot an empty sequence")
    coords = np.asarray(points, dtype=float)
    return coords[:, 0], coords[:, 1]


def animate_complex(
    sequence: Iterable[Sample],
    *,
    interval: int = 200,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, `Polar`, Python `complex`, or (x, y) tuples
    interval : delay between frames in **ms**
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    xs, ys = trajectory(sequence)

    # Square box that fits everything
    span = max(float(np.max(np.abs(xs))), float(np.max(np.abs(ys))), 1.0)
    margin = 0.1 * span
    logger.debug("animating %d samples, span %g", len(xs), span)

    fig, ax = plt.subplots()
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title("Complex number animation")
    ax.grid(True, linestyle="--", alpha=0.3)

    point, = ax.plot([], [], "ro", markersize=6)
    trail, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    def init():
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        point.set_data([xs[frame]], [ys[frame]])
        trail.set_data(xs[:frame + 1], ys[:frame + 1])
        ax.set_title(f"t = {frame}  |  z = {xs[frame]:+.3f} {ys[frame]:+.3f}i")
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(xs),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    step = Complex.unit(math.pi / 180)
    animate_complex([step ** k for k in range(360)], interval=1)
