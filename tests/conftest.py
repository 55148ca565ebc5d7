"""Pytest configuration and shared fixtures."""

import pytest

from hydrakit.core.chain import osc, shape
from hydrakit.core.tagged import TaggedSequence
from hydrakit.effects.mixer import Clock


@pytest.fixture
def live_param():
    """A frame-evaluated parameter, as the engine would call it."""
    return lambda: 0.25


@pytest.fixture
def simple_chain(live_param):
    """
    osc -> rotate -> color with a callable, a list and a tagged list argument.
    """
    return (
        osc(10, 0.1, live_param)
        .rotate([0, 1, 2])
        .color(TaggedSequence([1, 0.5]).fast(2), 0, 1)
    )


@pytest.fixture
def nested_chain(simple_chain):
    """A chain modulated by ``simple_chain``."""
    return shape(4, [0.2, 0.4]).modulate(simple_chain, 0.3)


@pytest.fixture
def clock() -> Clock:
    return Clock(time=10.0, bpm=120.0)
