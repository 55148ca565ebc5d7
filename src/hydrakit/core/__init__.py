"""Chain cloning, seeded generation and reshaping primitives."""

from hydrakit.core.chain import Chain, OperatorDefinition, OperatorInput, OperatorNode, register_operator
from hydrakit.core.clone import clone_chain
from hydrakit.core.reshape import hex_to_rgb, reshape_color_arrays, reshape_triples
from hydrakit.core.seeds import offset_seed, persistent_random, random_color
from hydrakit.core.tagged import TaggedSequence, map_sequence
