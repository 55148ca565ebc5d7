"""Support library for live-coded visual synthesis chains."""

from hydrakit.config import CanvasConfig, SeedConfig
from hydrakit.core.chain import Chain, OperatorDefinition, OperatorInput, OperatorNode, register_operator
from hydrakit.core.clone import clone_chain
from hydrakit.core.reshape import hex_to_rgb, reshape_color_arrays, reshape_triples
from hydrakit.core.seeds import (
    offset_seed,
    persistent_random,
    random_array,
    random_color,
    random_int,
    randomize,
)
from hydrakit.core.tagged import TaggedSequence, map_sequence
from hydrakit.errors import HydrakitError, InvalidInput, InvalidShape

__version__ = "0.1.0"
__all__ = [
    "CanvasConfig",
    "SeedConfig",
    "Chain",
    "OperatorDefinition",
    "OperatorInput",
    "OperatorNode",
    "register_operator",
    "clone_chain",
    "hex_to_rgb",
    "reshape_color_arrays",
    "reshape_triples",
    "offset_seed",
    "persistent_random",
    "random_array",
    "random_color",
    "random_int",
    "randomize",
    "TaggedSequence",
    "map_sequence",
    "HydrakitError",
    "InvalidInput",
    "InvalidShape",
]
