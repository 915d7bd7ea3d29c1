"""
Combinators: the ordering contract.

A combinator receives an iterator over the queued events and returns an
iterable of the events to resolve, in the order to resolve them. It may
reorder, drop, duplicate or transform events. Ordering strategies
(shuffles, permutations) are written by the caller against this contract.
"""

from typing import Callable, Iterable, Iterator, TypeVar

E = TypeVar("E")

Combinator = Callable[[Iterator[E]], Iterable[E]]


def identity(events: Iterator[E]) -> Iterable[E]:
    """Resolve events in the order they were queued."""
    return events


def compose(*combinators: Combinator) -> Combinator:
    """
    Chain combinators left-to-right into a single combinator.

    compose(f, g) hands the queued events to f, then f's output to g.
    compose() with no arguments behaves like identity.

    Example:
        only_writes = lambda evs: (e for e in evs if e.kind == "write")
        newest_first = lambda evs: reversed(list(evs))
        engine.resolve_with(State, compose(only_writes, newest_first))
    """

    def combined(events: Iterator[E]) -> Iterable[E]:
        current: Iterable[E] = events
        for comb in combinators:
            current = comb(iter(current))
        return current

    return combined
