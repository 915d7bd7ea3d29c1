"""
Exploration runner: resolve fresh engines under a list of combinators.

An eventually-consistent system should converge to the same outcome no
matter which delivery order the combinators simulate.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Tuple

from ..core.combinators import Combinator
from ..core.engine import Init, KnowledgeEngine
from ..logging_config import get_logger


@dataclass(frozen=True)
class Exploration:
    """
    Result of an exploration.

    Fields:
        outcomes: One resolution outcome per combinator, in combinator order (a tuple)
    """
    outcomes: Tuple[Any, ...]

    @property
    def runs(self) -> int:
        return len(self.outcomes)

    def divergent(self) -> List[int]:
        """Indices of outcomes that differ from the first one."""
        if not self.outcomes:
            return []
        first = self.outcomes[0]
        return [i for i, outcome in enumerate(self.outcomes) if outcome != first]

    def converged(self) -> bool:
        """True if every ordering produced an outcome equal to the first."""
        return not self.divergent()


def explore(
    build: Callable[[], KnowledgeEngine],
    init: Init,
    combinators: Iterable[Combinator],
) -> Exploration:
    """
    Resolve a freshly built engine once per combinator.

    Args:
        build: Zero-argument factory returning a queued, unresolved engine
        init: Starting-state factory passed to every resolution
        combinators: Orderings to try, e.g. one per permutation

    Returns:
        Exploration with one outcome per combinator

    Example:
        def ordering(perm):
            def comb(events):
                queued = list(events)
                return [queued[i] for i in perm]
            return comb

        orders = [ordering(p) for p in itertools.permutations(range(3))]
        result = explore(lambda: new_engine(resolve).queue_events(events), State, orders)
        assert result.converged()
    """
    log = get_logger(__name__)
    outcomes = []
    for comb in combinators:
        outcomes.append(build().resolve_with(init, comb))

    result = Exploration(outcomes=tuple(outcomes))
    log.debug("Explored %d orderings, %d divergent", result.runs, len(result.divergent()))
    return result
