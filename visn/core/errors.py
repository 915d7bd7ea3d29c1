"""
Exception types for the knowledge engine.

Domain failures from a fallible resolver are never raised; they are
returned as Err values. These exceptions cover misuse of the engine.
"""


class EngineError(Exception):
    """Base class for knowledge engine errors."""
    pass


class AlreadyResolvedError(EngineError):
    """Raised when an engine is queued onto or resolved after resolution."""
    pass


class ResolverContractError(EngineError, TypeError):
    """Raised when a fallible resolver returns something other than Ok or Err."""
    pass


class UnwrapError(EngineError):
    """Raised when unwrapping the wrong variant of a Result."""
    pass
