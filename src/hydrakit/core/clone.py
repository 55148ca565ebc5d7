"""
Independent copies of operator chains.

Feeding one chain object into two branches of a composition (a source added
to a transformed copy of itself, a source modulating itself) makes the
engine evaluate a single mutable chain from both sides and recurse without
end. A clone has the same operators and arguments but its own storage.
"""

import logging
from typing import Any, List

import numpy as np

from hydrakit.core.chain import Chain, OperatorNode, is_chain
from hydrakit.core.tagged import TaggedSequence
from hydrakit.errors import InvalidInput

logger = logging.getLogger(__name__)


def clone_chain(chain: Chain) -> Chain:
    """
    Create a deep copy of a chain that can be extended without touching the original.

    Operator definitions, the output routing, the default uniforms and the
    engine context are shared by reference. Node arguments are copied by
    kind:

    - callables are shared, they are evaluated live every frame
    - sequences get a new container holding the same elements
    - nested chains are cloned recursively
    - anything else is returned as is

    Args:
        chain: A composed chain, e.g. the result of ``osc().rotate()``.

    Returns:
        A new chain of the same type.

    Raises:
        InvalidInput: If ``chain`` is not a composed chain.
    """
    if not is_chain(chain):
        raise InvalidInput(
            f"Invalid source: expected a composed chain, got {type(chain).__name__}"
        )

    # Build every node first so a failure leaves nothing half-cloned
    nodes = [
        OperatorNode(node.name, node.definition, _clone_args(node.args))
        for node in chain.nodes
    ]

    cloned = type(chain)(
        nodes=nodes,
        output=chain.output,
        uniforms=chain.uniforms,
        context=chain.context,
    )
    logger.debug("Cloned chain of %d nodes: %s", len(nodes), [n.name for n in nodes])
    return cloned


def _clone_args(args: List[Any]) -> List[Any]:
    if args is None:
        return args
    return [_clone_arg(arg) for arg in args]


def _clone_arg(arg: Any) -> Any:
    if is_chain(arg):
        return clone_chain(arg)
    if callable(arg):
        return arg
    if isinstance(arg, TaggedSequence):
        return arg.copy()
    if isinstance(arg, np.ndarray):
        return arg.copy()
    if isinstance(arg, list):
        return list(arg)
    # Tuples, numbers, strings and booleans are immutable
    return arg
