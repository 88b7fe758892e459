"""Hypothesis profiles and shared strategies for the property tests."""
import math
import os

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from complexplane import Complex, Polar

settings.register_profile(
    "default",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.register_profile("dev", max_examples=25, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


def components(bound: float = 1e3):
    return st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False)


angles = st.floats(min_value=0.0, max_value=2 * math.pi, exclude_max=True)


@st.composite
def rectangulars(draw, bound: float = 1e3) -> Complex:
    return Complex(draw(components(bound)), draw(components(bound)))


@st.composite
def polars(draw, bound: float = 1e3) -> Polar:
    return Polar(draw(components(bound)), draw(angles))
