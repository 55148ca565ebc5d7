"""Movement presets."""

from hydrakit.core.chain import Chain
from hydrakit.core.tagged import TaggedSequence


def circular_scroll(source: Chain, speed: float, radius: float) -> Chain:
    """
    Scroll ``source`` around a circle.

    Both axes ease sinusoidally between ``-radius`` and ``radius``; the x
    axis runs half a cycle ahead, in the direction given by the sign of
    ``speed``.
    """
    direction = (speed > 0) - (speed < 0)
    x = TaggedSequence([-radius, radius]).ease("sin").fast(abs(speed)).offset(direction * 0.5)
    y = TaggedSequence([-radius, radius]).ease("sin").fast(abs(speed))
    return source.scroll(x, y)
