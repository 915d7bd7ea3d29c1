"""
visn - "knowledge"

A simulation engine for eventually consistent systems.

Users provide a list of synthetic events, of the kind they would like to
specify in test code, and a function mapping those to real changes in the
state of a system. visn then applies them in order, in any order, or in
other combinations.

Example:
    from dataclasses import dataclass, replace
    from visn import new_engine

    @dataclass(frozen=True)
    class Registers:
        a: str = ""
        b: str = ""

    def resolve(event, system):
        field, value = event
        return replace(system, **{field: value})

    result = (
        new_engine(resolve)
        .queue_events([("a", "a1"), ("b", "b1"), ("a", "a2")])
        .resolve_in_order(Registers)
    )
    assert result == Registers(a="a2", b="b1")
"""

__version__ = "0.1.0"

from .core import (
    KnowledgeEngine,
    TotalEngine,
    FallibleEngine,
    new_knowledge_engine,
    new_engine,
    new_fallible_engine,
    Ok,
    Err,
    Result,
    Combinator,
    identity,
    compose,
    EngineError,
    AlreadyResolvedError,
    ResolverContractError,
    UnwrapError,
)
from .explore import Exploration, explore
from .logging_config import setup_logging, get_logger

__all__ = [
    "KnowledgeEngine",
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
    "Exploration",
    "explore",
    "EngineError",
    "AlreadyResolvedError",
    "ResolverContractError",
    "UnwrapError",
    "setup_logging",
    "get_logger",
]
