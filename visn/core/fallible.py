"""
Fallible engine: the resolver may fail, and the first failure ends resolution.

Short-circuit contract: once the resolver returns Err, no further event
(main queue or epilogue) is passed to it, and the combinator's output is
not pulled any further.
"""

from typing import Callable, Iterable, Optional, TypeVar, Union

from .combinators import Combinator
from .engine import E, Init, KnowledgeEngine, QueuedEngine, S
from .errors import ResolverContractError
from .result import Err, Ok, Result

X = TypeVar("X")

# Resolver signature: (event, current_state) -> Ok(new_state) | Err(error)
FallibleResolver = Callable[[E, S], Result[S, X]]


class FallibleEngine(QueuedEngine[S, E, Result[S, X]]):
    """Engine whose resolve_with() returns Ok(final_state) or the first Err."""

    def resolve_with(self, init: Init, combinator: Combinator) -> Result[S, X]:
        prologue, events, epilogue = self._take_queues()
        state = init()

        outcome = self._fold(prologue, state)
        if isinstance(outcome, Err):
            return outcome
        outcome = self._fold(combinator(iter(events)), outcome.value)
        if isinstance(outcome, Err):
            return outcome
        outcome = self._fold(epilogue, outcome.value)
        if isinstance(outcome, Ok):
            self._log.debug("Resolution finished after %d events", self.applied)
        return outcome

    def _fold(self, events: Iterable[E], state: S) -> Union[Ok[S], Err[X]]:
        for event in events:
            outcome = self._resolve(event, state)
            if isinstance(outcome, Err):
                self._log.debug(
                    "Resolution halted at event %d: %r", self.applied + 1, outcome.error
                )
                return outcome
            if not isinstance(outcome, Ok):
                raise ResolverContractError(
                    f"Fallible resolver must return Ok or Err, got {type(outcome).__name__}"
                )
            state = outcome.value
            self.applied += 1
        return Ok(state)


def new_fallible_engine(
    resolve: FallibleResolver, trace_id: Optional[str] = None
) -> KnowledgeEngine[S, E, Result[S, X]]:
    """
    Create a new engine with the given fallible resolver function.

    The resolver translates synthetic (test) events into actual changes
    in the state of the system under test, or reports why it could not.

    If the resolver ever returns an Err, the engine stops and returns
    that Err unchanged.

    Args:
        resolve: Function (event, state) -> Ok(new_state) | Err(error)
        trace_id: Optional identifier attached to this engine's log records

    Returns:
        Empty FallibleEngine
    """
    return FallibleEngine(resolve, trace_id=trace_id)
