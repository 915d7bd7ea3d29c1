"""
KnowledgeEngine: queue synthetic events, then resolve them under an ordering.

The engine is the heart of visn. Synthetic events are queued up and folded,
one by one, into the state of the system under test by a resolver function
bound at construction. Each test then only defines a starting state, the
events to deliver, the ordering to deliver them in, and an expected outcome.

Engines are single-use: resolution consumes the queued events.
"""

import copy
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from .combinators import Combinator, identity
from .errors import AlreadyResolvedError
from ..logging_config import get_logger

S = TypeVar("S")
E = TypeVar("E")
R = TypeVar("R")

Init = Callable[[], S]


class KnowledgeEngine(ABC, Generic[S, E, R]):
    """
    Framework for testing the consequences of messages in an eventually
    consistent system arriving in various orders.

    Types:
        S: state of the system under test
        E: synthetic event
        R: resolution outcome; S for the total engine, Ok[S] | Err[...] for
           the fallible engine

    Usage:
        state = (
            new_engine(resolve)
            .queue_events([SetA("a1"), SetB("b1")])
            .resolve_in_order(Registers)
        )
    """

    @abstractmethod
    def queue_event(self, event: E) -> "KnowledgeEngine[S, E, R]":
        """Add a single event to the tail of the main queue."""
        ...

    @abstractmethod
    def queue_prologue(self, event: E) -> "KnowledgeEngine[S, E, R]":
        """Add an event resolved before the main queue, outside the combinator."""
        ...

    @abstractmethod
    def queue_epilogue(self, event: E) -> "KnowledgeEngine[S, E, R]":
        """Add an event resolved after the main queue, outside the combinator."""
        ...

    @abstractmethod
    def resolve_with(self, init: Init, combinator: Combinator) -> R:
        """
        Resolve the queued events using the given combinator.

        Args:
            init: Zero-argument callable producing the starting state
            combinator: Callable taking an iterator over the queued events
                and returning an iterable of events to resolve, in order

        Returns:
            Resolution outcome (see class docstring)

        Raises:
            AlreadyResolvedError: If the engine was already resolved
        """
        ...

    def queue_events(self, events: Iterable[E]) -> "KnowledgeEngine[S, E, R]":
        """
        Queue copies of multiple events, in iteration order.

        Each element is deep-copied so later mutation of the caller's
        events does not leak into the queue. Events must therefore support
        copy.deepcopy; ones holding uncopyable objects (locks, sockets,
        open files) raise TypeError here and should be queued one at a
        time with queue_event(), which stores them as given.
        """
        engine = self
        for event in events:
            engine = engine.queue_event(copy.deepcopy(event))
        return engine

    def resolve_in_order(self, init: Init) -> R:
        """
        The simplest resolution - resolves the queued events in the order
        in which they were added.
        """
        return self.resolve_with(init, identity)


class QueuedEngine(KnowledgeEngine[S, E, R]):
    """
    Event queues and resolver shared by both engine variants.

    Subclasses implement resolve_with() on top of _take_queues().
    """

    def __init__(self, resolve: Callable, trace_id: Optional[str] = None) -> None:
        self._resolve = resolve
        self._prologue: List[E] = []
        self._events: List[E] = []
        self._epilogue: List[E] = []
        self._resolved = False
        self.applied = 0
        self._log = get_logger(__name__, trace_id=trace_id)

    @property
    def resolved(self) -> bool:
        return self._resolved

    def queue_event(self, event: E) -> "QueuedEngine[S, E, R]":
        self._ensure_unresolved()
        self._events.append(event)
        self._log.debug("Queued event %d: %r", len(self._events), event)
        return self

    def queue_prologue(self, event: E) -> "QueuedEngine[S, E, R]":
        self._ensure_unresolved()
        self._prologue.append(event)
        self._log.debug("Queued prologue event %d: %r", len(self._prologue), event)
        return self

    def queue_epilogue(self, event: E) -> "QueuedEngine[S, E, R]":
        self._ensure_unresolved()
        self._epilogue.append(event)
        self._log.debug("Queued epilogue event %d: %r", len(self._epilogue), event)
        return self

    def _ensure_unresolved(self) -> None:
        if self._resolved:
            raise AlreadyResolvedError("Engine has already been resolved")

    def _take_queues(self) -> Tuple[List[E], List[E], List[E]]:
        """
        Mark the engine resolved and hand over its queues.

        The engine drops its references, so nothing queued can be observed
        or re-resolved afterwards.
        """
        self._ensure_unresolved()
        self._resolved = True
        queues = (self._prologue, self._events, self._epilogue)
        self._prologue, self._events, self._epilogue = [], [], []
        self._log.debug(
            "Resolving %d prologue, %d main, %d epilogue events", *(len(q) for q in queues)
        )
        return queues
