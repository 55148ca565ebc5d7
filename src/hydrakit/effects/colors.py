"""
Colour compositions built from engine operators.

Effects that combine a source with a transformed version of itself clone the
source first; passing the same chain to both sides makes the engine recurse.
"""

import math
from typing import Any, List, Sequence

from hydrakit.core.chain import Chain, osc
from hydrakit.core.clone import clone_chain


def better_gradient(speed: float = 0.5) -> Chain:
    """Smooth two-way gradient: an oscillator blended with its half-turn rotation."""
    return osc(math.pi / 2, speed, math.pi / 2).blend(
        osc(math.pi / 2, speed, math.pi / 2).rotate(math.pi)
    )


def mono_stripes(source: Chain, color: Sequence[Any]) -> Chain:
    """Posterized stripes in one colour, warped by ``source``."""
    return (
        osc(20, 0.04)
        .color(*color)
        .posterize(20)
        .modulate(source, 0.5)
    )


def duo_stripes(source: Chain, light_color: Sequence[Any], dark_color: Sequence[Any]) -> Chain:
    """
    Two interleaved stripe sets, warped by ``source``.

    The dark stripes are the inverted light stripes and modulate a clone of
    ``source``.
    """
    freq, sync = 5, 0.4
    return (
        osc(freq, sync)
        .color(*light_color)
        .modulate(source, 0.5)
        .add(
            osc(freq, sync)
            .invert()
            .color(*dark_color)
            .modulate(clone_chain(source), 0.5)
        )
    )


def monochrome(source: Chain, color: Sequence[Any]) -> Chain:
    return source.saturate(0).color(*color)


def duochrome(source: Chain, light_color: Sequence[Any], dark_color: Sequence[Any]) -> Chain:
    """
    Map highlights to ``light_color`` and shadows to ``dark_color``.

    Channels may be sequences; for a list of colours use
    ``reshape_color_arrays`` first so each channel gets its own sequence.
    """
    shadows = clone_chain(source)
    return (
        source
        .saturate(0)
        .color(*light_color)
        .add(
            shadows
            .invert()
            .saturate(0)
            .color(*dark_color)
        )
    )


def simple_bichrome(source: Chain, r: Any, g: Any, b: Any) -> Chain:
    return (
        source
        .saturate(0)
        .color(r, g, b)
        .contrast(0.1)
        .saturate(10)
    )


def bichrome(source: Chain, r1: Any, g1: Any, b1: Any, r2: Any, g2: Any, b2: Any) -> Chain:
    """
    Light colour on the source, dark colour on its inverse.

    Usage:
        bichrome(src(s0), *light_color, *dark_color)
    """
    return duochrome(source, (r1, g1, b1), (r2, g2, b2))


def split_colors(source: Chain) -> List[Chain]:
    """
    Three independent copies of ``source`` tinted red, green and blue.

    ``source`` itself is left unchanged.

    Usage:
        reds, greens, blues = split_colors(base)
    """
    return [
        clone_chain(source).color(1, 0, 0),
        clone_chain(source).color(0, 1, 0),
        clone_chain(source).color(0, 0, 1),
    ]


def shift_colors(source: Chain, transforms: Sequence[Sequence[Any]]) -> Chain:
    """
    Route each input channel to a new colour.

    Args:
        source: Chain to recolour; left unchanged.
        transforms: Three colours; the red channel is tinted with
            ``transforms[0]``, green with ``transforms[1]``, blue with
            ``transforms[2]``.

    Returns:
        The three tinted channels added together.
    """
    if len(transforms) != 3:
        raise ValueError(f"Expected 3 colour transforms, got {len(transforms)}")
    return (
        clone_chain(source).r().color(*transforms[0])
        .add(clone_chain(source).g().color(*transforms[1]))
        .add(clone_chain(source).b().color(*transforms[2]))
    )


def contour(source: Chain) -> Chain:
    """Outline of the opaque parts of ``source``."""
    inner = clone_chain(source)
    return (
        source
        .thresh(0.01)
        .diff(inner.thresh(0.1))
        .thresh()
    )
