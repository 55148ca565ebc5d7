"""
Sequences carrying side-channel metadata.

The engine reads animation hints such as ``_speed`` or ``_ease`` from the
sequence passed as a parameter rather than from its elements. Anything that
derives a new sequence from a tagged one has to carry those hints forward,
otherwise the animation silently falls back to its defaults.
"""

from collections.abc import Sequence
from typing import Any, Callable, Dict, Iterable, Optional

import numpy as np

META_PREFIX = "_"


def is_meta_key(key: Any) -> bool:
    """True for keys in the reserved metadata namespace."""
    return isinstance(key, str) and key.startswith(META_PREFIX)


def is_sequence(value: Any) -> bool:
    """
    True for ordered collections usable as parameter arrays.

    Strings and bytes are excluded even though they are sequences.
    """
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


class TaggedSequence(list):
    """
    A list plus a mapping of reserved-prefix metadata.

    Metadata belongs to the sequence as a whole. Equality with other lists
    compares elements only.
    """

    def __init__(self, iterable: Iterable = (), attrs: Optional[Dict[str, Any]] = None):
        super().__init__(iterable)
        self.attrs: Dict[str, Any] = {}
        for key, value in (attrs or {}).items():
            self.set_attr(key, value)

    def __repr__(self) -> str:
        return f"TaggedSequence({list.__repr__(self)}, attrs={self.attrs!r})"

    def set_attr(self, key: str, value: Any) -> "TaggedSequence":
        if not is_meta_key(key):
            raise ValueError(
                f"Metadata key {key!r} must start with {META_PREFIX!r}"
            )
        self.attrs[key] = value
        return self

    def get_attr(self, key: str, default: Any = None) -> Any:
        return self.attrs.get(key, default)

    def copy(self) -> "TaggedSequence":
        return TaggedSequence(self, self.attrs)

    def map(self, fn: Callable[[Any], Any]) -> "TaggedSequence":
        return map_sequence(self, fn)

    # Array modifiers understood by the engine. Like the engine's own,
    # they tag this sequence in place and return it for chaining.

    def fast(self, speed: float = 1.0) -> "TaggedSequence":
        return self.set_attr("_speed", speed)

    def smooth(self, amount: float = 1.0) -> "TaggedSequence":
        return self.set_attr("_smooth", amount)

    def ease(self, name: str = "linear") -> "TaggedSequence":
        return self.set_attr("_ease", name)

    def offset(self, amount: float = 0.5) -> "TaggedSequence":
        return self.set_attr("_offset", amount)

    def fit(self, low: float = 0.0, high: float = 1.0) -> "TaggedSequence":
        """
        Rescale the values linearly so they span [low, high].

        Returns a new sequence; metadata is copied. A constant sequence
        maps every value to ``low``.
        """
        if not self:
            return self.copy()
        lo, hi = min(self), max(self)
        if hi == lo:
            return map_sequence(self, lambda _: low)
        span = (high - low) / (hi - lo)
        return map_sequence(self, lambda x: (x - lo) * span + low)


def metadata_of(value: Any) -> Dict[str, Any]:
    """Metadata attached to ``value``; empty for anything untagged."""
    attrs = getattr(value, "attrs", None)
    if not isinstance(attrs, dict):
        return {}
    return {k: v for k, v in attrs.items() if is_meta_key(k)}


def map_sequence(seq: Iterable, fn: Callable[[Any], Any]) -> TaggedSequence:
    """
    Apply ``fn`` elementwise, copying the input's metadata onto the result.

    Args:
        seq: Any iterable; metadata is read if it is a TaggedSequence.
        fn: Called once per element.

    Returns:
        TaggedSequence of the mapped values.
    """
    return TaggedSequence((fn(item) for item in seq), attrs=metadata_of(seq))
