"""Exceptions raised by hydrakit."""


class HydrakitError(Exception):
    """Base class for all hydrakit errors."""


class InvalidInput(HydrakitError, TypeError):
    """The value handed to clone_chain is not a composed chain."""


class InvalidShape(HydrakitError, ValueError):
    """The value handed to a reshape is not a non-empty sequence of triples."""
