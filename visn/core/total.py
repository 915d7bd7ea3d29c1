"""
Total engine: the resolver always produces a new state.
"""

from typing import Callable, Iterable, Optional

from .combinators import Combinator
from .engine import E, Init, KnowledgeEngine, QueuedEngine, S

# Resolver signature: (event, current_state) -> new_state
Resolver = Callable[[E, S], S]


class TotalEngine(QueuedEngine[S, E, S]):
    """Engine whose resolve_with() returns the final state."""

    def resolve_with(self, init: Init, combinator: Combinator) -> S:
        prologue, events, epilogue = self._take_queues()
        state = init()
        state = self._fold(prologue, state)
        state = self._fold(combinator(iter(events)), state)
        state = self._fold(epilogue, state)
        self._log.debug("Resolution finished after %d events", self.applied)
        return state

    def _fold(self, events: Iterable[E], state: S) -> S:
        for event in events:
            state = self._resolve(event, state)
            self.applied += 1
        return state


def new_knowledge_engine(
    resolve: Resolver, trace_id: Optional[str] = None
) -> KnowledgeEngine[S, E, S]:
    """
    Create a new engine with the given resolver function.

    The resolver translates synthetic (test) events into actual changes
    in the state of the system under test.

    Args:
        resolve: Function (event, state) -> new_state
        trace_id: Optional identifier attached to this engine's log records

    Returns:
        Empty TotalEngine
    """
    return TotalEngine(resolve, trace_id=trace_id)


new_engine = new_knowledge_engine
