"""
Per-sample colour triples to per-channel parameter sequences.

Callers think in colours, ``[[r1, g1, b1], [r2, g2, b2], ...]``, while the
engine's ``color`` operator wants one sequence per channel,
``color([r1, r2], [g1, g2], [b1, b2])``.
"""

from typing import Any, Sequence, Tuple

import numpy as np
from PIL import ImageColor

from hydrakit.core.tagged import TaggedSequence, is_sequence, map_sequence, metadata_of
from hydrakit.errors import InvalidShape

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def reshape_triples(triples: Sequence[Sequence[Any]]) -> Tuple[TaggedSequence, TaggedSequence, TaggedSequence]:
    """
    Transpose N triples into three sequences of length N.

    Metadata on the input (``_speed``, ``_ease``, ...) is copied onto each of
    the three outputs, so whichever channel the engine inspects sees it.

    Args:
        triples: Non-empty sequence whose elements each hold exactly 3
            values, or an (N, 3) array.

    Returns:
        (channel0, channel1, channel2) as TaggedSequences.

    Raises:
        InvalidShape: If the input is empty, not a sequence, or any element
            does not hold exactly 3 values. Nothing is built in that case.
    """
    meta = metadata_of(triples)

    if isinstance(triples, np.ndarray):
        if triples.ndim != 2 or triples.shape[1] != 3:
            raise InvalidShape(f"Expected an (N, 3) array, got shape {triples.shape}")
        triples = triples.tolist()

    if not is_sequence(triples) or len(triples) == 0:
        raise InvalidShape("Input must be a non-empty sequence of sequences")

    for i, item in enumerate(triples):
        if not is_sequence(item) or len(item) != 3:
            raise InvalidShape(f"Element {i} must contain exactly 3 values, got {item!r}")

    return tuple(
        TaggedSequence((item[channel] for item in triples), attrs=meta)
        for channel in range(3)
    )


def hex_to_rgb(value: str) -> Tuple[float, float, float]:
    """
    Convert a colour string to normalised RGB.

    Accepts anything ``PIL.ImageColor`` understands (``"#ff8800"``,
    ``"#f80"``, ``"orange"``, ``"rgb(255, 136, 0)"``) as well as bare hex
    digits such as ``"ff8800"``.

    Returns:
        (r, g, b) floats in [0, 1].
    """
    if not value.startswith("#") and len(value) in (3, 6) and set(value) <= _HEX_DIGITS:
        value = "#" + value
    rgb = ImageColor.getrgb(value)[:3]
    return tuple(channel / 255 for channel in rgb)


def reshape_color_arrays(colors: Sequence[Any]) -> Tuple[TaggedSequence, TaggedSequence, TaggedSequence]:
    """
    Split a sequence of colours into red, green and blue sequences.

    Elements may be (r, g, b) triples or colour strings. Metadata on
    ``colors`` ends up on all three channels.

    Raises:
        InvalidShape: On an empty input, a malformed triple or a string
            that is not a colour.
    """
    if not is_sequence(colors) or len(colors) == 0:
        raise InvalidShape("Input must be a non-empty sequence of colours")

    def _as_triple(color: Any) -> Any:
        if isinstance(color, str):
            try:
                return hex_to_rgb(color)
            except ValueError as err:
                raise InvalidShape(f"Unrecognised colour {color!r}") from err
        return color

    if isinstance(colors, np.ndarray):
        return reshape_triples(colors)
    return reshape_triples(map_sequence(colors, _as_triple))
