"""
Structural model of the engine's operator chains.

A chain is a list of nodes, each naming a shared operator definition and
holding the arguments the user passed. Sources start a chain; every other
operator is appended to an existing one. The engine evaluates chains itself,
nothing here renders.
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

CHAIN_TYPE = "chain"

# Operator kinds, matching the engine's shader categories
SRC = "src"
COLOR = "color"
COORD = "coord"
COMBINE = "combine"
COMBINE_COORD = "combineCoord"

OPERATOR_TYPES = (SRC, COLOR, COORD, COMBINE, COMBINE_COORD)


@dataclass(frozen=True)
class OperatorInput:
    name: str
    type: str = "float"
    default: Any = None


@dataclass(frozen=True)
class OperatorDefinition:
    """Immutable description of one operator; shared by every node using it."""
    name: str
    type: str
    inputs: Tuple[OperatorInput, ...] = ()
    glsl: str = ""


@dataclass
class OperatorNode:
    name: str
    definition: OperatorDefinition
    args: List[Any] = field(default_factory=list)


@dataclass
class Chain:
    """
    An ordered composition of operators.

    Transform methods resolve against the operator registry, append a node
    to this chain and return it, so ``a.color(1, 0, 0)`` changes ``a``.
    Use ``clone_chain`` before reusing a chain in two places.
    """
    nodes: List[OperatorNode]
    output: Optional[str] = None
    uniforms: Dict[str, Any] = field(default_factory=dict)
    context: Any = None
    type: str = CHAIN_TYPE

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        definition = OPERATORS.get(name)
        if definition is None or definition.type == SRC:
            raise AttributeError(
                f"{type(self).__name__!r} has no operator {name!r}"
            )
        return functools.partial(self.then, name)

    def __len__(self) -> int:
        return len(self.nodes)

    def then(self, name: str, *args: Any) -> "Chain":
        """Append operator ``name`` with ``args`` and return this chain."""
        definition = OPERATORS.get(name)
        if definition is None:
            raise AttributeError(f"Unknown operator {name!r}")
        if definition.type == SRC:
            raise AttributeError(f"Source operator {name!r} cannot be appended to a chain")
        self.nodes.append(OperatorNode(name, definition, list(args)))
        return self

    def out(self, output: str = "o0") -> "Chain":
        self.output = output
        return self

    @property
    def operator_names(self) -> List[str]:
        return [node.name for node in self.nodes]


def is_chain(value: Any) -> bool:
    """Duck-typed check used by the cloner and the composition helpers."""
    return getattr(value, "type", None) == CHAIN_TYPE and getattr(value, "nodes", None) is not None


def _inputs(*specs) -> Tuple[OperatorInput, ...]:
    return tuple(OperatorInput(*spec) for spec in specs)


_BUILTINS = [
    # Sources
    OperatorDefinition("osc", SRC, _inputs(("frequency", "float", 60.0), ("sync", "float", 0.1), ("offset", "float", 0.0))),
    OperatorDefinition("solid", SRC, _inputs(("r", "float", 0.0), ("g", "float", 0.0), ("b", "float", 0.0), ("a", "float", 1.0))),
    OperatorDefinition("src", SRC, _inputs(("tex", "sampler2D", None))),
    OperatorDefinition("shape", SRC, _inputs(("sides", "float", 3.0), ("radius", "float", 0.3), ("smoothing", "float", 0.01))),
    OperatorDefinition("noise", SRC, _inputs(("scale", "float", 10.0), ("offset", "float", 0.1))),
    OperatorDefinition("gradient", SRC, _inputs(("speed", "float", 0.0))),
    OperatorDefinition("voronoi", SRC, _inputs(("scale", "float", 5.0), ("speed", "float", 0.3), ("blending", "float", 0.3))),
    # Colour
    OperatorDefinition("color", COLOR, _inputs(("r", "float", 1.0), ("g", "float", 1.0), ("b", "float", 1.0), ("a", "float", 1.0))),
    OperatorDefinition("saturate", COLOR, _inputs(("amount", "float", 2.0))),
    OperatorDefinition("contrast", COLOR, _inputs(("amount", "float", 1.6))),
    OperatorDefinition("invert", COLOR, _inputs(("amount", "float", 1.0))),
    OperatorDefinition("posterize", COLOR, _inputs(("bins", "float", 3.0), ("gamma", "float", 0.6))),
    OperatorDefinition("thresh", COLOR, _inputs(("threshold", "float", 0.5), ("tolerance", "float", 0.04))),
    OperatorDefinition("luma", COLOR, _inputs(("threshold", "float", 0.5), ("tolerance", "float", 0.1))),
    OperatorDefinition("r", COLOR, _inputs(("scale", "float", 1.0), ("offset", "float", 0.0))),
    OperatorDefinition("g", COLOR, _inputs(("scale", "float", 1.0), ("offset", "float", 0.0))),
    OperatorDefinition("b", COLOR, _inputs(("scale", "float", 1.0), ("offset", "float", 0.0))),
    # Coordinates
    OperatorDefinition("rotate", COORD, _inputs(("angle", "float", 10.0), ("speed", "float", 0.0))),
    OperatorDefinition("scale", COORD, _inputs(("amount", "float", 1.5), ("xMult", "float", 1.0), ("yMult", "float", 1.0))),
    OperatorDefinition("scroll", COORD, _inputs(("scrollX", "float", 0.5), ("scrollY", "float", 0.5), ("speedX", "float", 0.0), ("speedY", "float", 0.0))),
    OperatorDefinition("scrollX", COORD, _inputs(("scrollX", "float", 0.5), ("speed", "float", 0.0))),
    OperatorDefinition("scrollY", COORD, _inputs(("scrollY", "float", 0.5), ("speed", "float", 0.0))),
    OperatorDefinition("kaleid", COORD, _inputs(("nSides", "float", 4.0))),
    OperatorDefinition("pixelate", COORD, _inputs(("pixelX", "float", 20.0), ("pixelY", "float", 20.0))),
    # Combining two chains
    OperatorDefinition("add", COMBINE, _inputs(("texture", "vec4", None), ("amount", "float", 1.0))),
    OperatorDefinition("sub", COMBINE, _inputs(("texture", "vec4", None), ("amount", "float", 1.0))),
    OperatorDefinition("mult", COMBINE, _inputs(("texture", "vec4", None), ("amount", "float", 1.0))),
    OperatorDefinition("blend", COMBINE, _inputs(("texture", "vec4", None), ("amount", "float", 0.5))),
    OperatorDefinition("diff", COMBINE, _inputs(("texture", "vec4", None),)),
    OperatorDefinition("layer", COMBINE, _inputs(("texture", "vec4", None),)),
    OperatorDefinition("mask", COMBINE, _inputs(("texture", "vec4", None),)),
    OperatorDefinition("modulate", COMBINE_COORD, _inputs(("texture", "vec4", None), ("amount", "float", 0.1))),
    OperatorDefinition("modulateScale", COMBINE_COORD, _inputs(("texture", "vec4", None), ("multiple", "float", 1.0), ("offset", "float", 1.0))),
    OperatorDefinition("modulateRotate", COMBINE_COORD, _inputs(("texture", "vec4", None), ("multiple", "float", 1.0), ("offset", "float", 0.0))),
]

OPERATORS: Dict[str, OperatorDefinition] = {d.name: d for d in _BUILTINS}


def register_operator(definition: OperatorDefinition) -> OperatorDefinition:
    """
    Add a custom operator to the registry.

    Chains built afterwards can use it by name; existing nodes keep the
    definition they were created with.
    """
    if definition.type not in OPERATOR_TYPES:
        raise ValueError(
            f"Operator type must be one of {OPERATOR_TYPES}, got {definition.type!r}"
        )
    if definition.name in OPERATORS:
        logger.warning("Replacing operator definition %r", definition.name)
    else:
        logger.debug("Registered operator %r (%s)", definition.name, definition.type)
    OPERATORS[definition.name] = definition
    return definition


def source(name: str, *args: Any, uniforms: Optional[Dict[str, Any]] = None, context: Any = None) -> Chain:
    """Start a new chain with the source operator ``name``."""
    definition = OPERATORS.get(name)
    if definition is None or definition.type != SRC:
        raise ValueError(f"{name!r} is not a registered source operator")
    return Chain(
        nodes=[OperatorNode(name, definition, list(args))],
        uniforms=uniforms if uniforms is not None else {},
        context=context,
    )


def osc(frequency: Any = 60.0, sync: Any = 0.1, offset: Any = 0.0) -> Chain:
    return source("osc", frequency, sync, offset)


def solid(r: Any = 0.0, g: Any = 0.0, b: Any = 0.0, a: Any = 1.0) -> Chain:
    return source("solid", r, g, b, a)


def src(tex: Any) -> Chain:
    return source("src", tex)


def shape(sides: Any = 3.0, radius: Any = 0.3, smoothing: Any = 0.01) -> Chain:
    return source("shape", sides, radius, smoothing)


def noise(scale: Any = 10.0, offset: Any = 0.1) -> Chain:
    return source("noise", scale, offset)


def gradient(speed: Any = 0.0) -> Chain:
    return source("gradient", speed)


def voronoi(scale: Any = 5.0, speed: Any = 0.3, blending: Any = 0.3) -> Chain:
    return source("voronoi", scale, speed, blending)
