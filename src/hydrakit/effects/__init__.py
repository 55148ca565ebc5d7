"""Compositions built on the engine's operators and the core primitives."""

from hydrakit.effects.colors import (
    better_gradient,
    bichrome,
    contour,
    duo_stripes,
    duochrome,
    mono_stripes,
    monochrome,
    shift_colors,
    simple_bichrome,
    split_colors,
)
from hydrakit.effects.mixer import Clock, fade_in, fade_out, pulse, pulse_bpm
from hydrakit.effects.motion import circular_scroll
from hydrakit.effects.sources import ExternalSource, Texture, src_fit, src_scale, src_size
