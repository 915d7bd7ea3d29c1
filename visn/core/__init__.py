"""
Core event-resolution primitives.

This module provides the knowledge engine and its building blocks:
- KnowledgeEngine: Abstract queue-then-resolve interface
- TotalEngine / FallibleEngine: The two resolver styles
- Ok / Err: Fallible resolution outcomes
- Combinators: The ordering contract
- Errors: Engine misuse
"""

from .engine import KnowledgeEngine, QueuedEngine
from .total import TotalEngine, new_knowledge_engine, new_engine
from .fallible import FallibleEngine, new_fallible_engine
from .result import Ok, Err, Result
from .combinators import Combinator, identity, compose
from .errors import EngineError, AlreadyResolvedError, ResolverContractError, UnwrapError

__all__ = [
    "KnowledgeEngine",
    "QueuedEngine",
    "TotalEngine",
    "FallibleEngine",
    "new_knowledge_engine",
    "new_engine",
    "new_fallible_engine",
    "Ok",
    "Err",
    "Result",
    "Combinator",
    "identity",
    "compose",
    "EngineError",
    "AlreadyResolvedError",
    "ResolverContractError",
    "UnwrapError",
]
