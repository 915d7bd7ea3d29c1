"""
Tests for prologue and epilogue phases.

Prologue events resolve first and epilogue events last, both in insertion
order and both outside the combinator.
"""

from visn import new_engine, new_fallible_engine, Ok, Err


def append(event, log):
    return log + [event]


def test_phases_bracket_reordered_queue():
    """Prologue, reordered main queue, epilogue."""
    result = (
        new_engine(append)
        .queue_epilogue("end-1")
        .queue_events(["m1", "m2", "m3"])
        .queue_prologue("start-1")
        .queue_epilogue("end-2")
        .queue_prologue("start-2")
        .resolve_with(list, lambda evs: reversed(list(evs)))
    )

    assert result == ["start-1", "start-2", "m3", "m2", "m1", "end-1", "end-2"]


def test_combinator_never_sees_prologue_or_epilogue():
    """Only main-queue events reach the combinator."""
    received = []

    def spy(events):
        received.extend(events)
        return []

    result = (
        new_engine(append)
        .queue_prologue("p")
        .queue_event("m")
        .queue_epilogue("e")
        .resolve_with(list, spy)
    )

    assert received == ["m"]
    assert result == ["p", "e"]


def fallible_append(event, log):
    if event.startswith("fail"):
        return Err(event)
    return Ok(log + [event])


def test_prologue_failure_halts_everything():
    """A failing prologue event stops before the combinator runs."""
    combinator_calls = []
    seen = []

    def recording(event, log):
        seen.append(event)
        return fallible_append(event, log)

    def comb(events):
        combinator_calls.append(1)
        return events

    result = (
        new_fallible_engine(recording)
        .queue_prologue("fail-early")
        .queue_event("m")
        .queue_epilogue("e")
        .resolve_with(list, comb)
    )

    assert result == Err("fail-early")
    assert seen == ["fail-early"]
    assert combinator_calls == []


def test_main_failure_skips_epilogue():
    """Epilogue events do not run after a main-queue failure."""
    seen = []

    def recording(event, log):
        seen.append(event)
        return fallible_append(event, log)

    result = (
        new_fallible_engine(recording)
        .queue_prologue("p")
        .queue_events(["m", "fail-main"])
        .queue_epilogue("e")
        .resolve_in_order(list)
    )

    assert result == Err("fail-main")
    assert "e" not in seen


def test_epilogue_failure_is_reported():
    """A failing epilogue event is the outcome."""
    result = (
        new_fallible_engine(fallible_append)
        .queue_event("m")
        .queue_epilogue("fail-late")
        .queue_epilogue("never")
        .resolve_in_order(list)
    )

    assert result == Err("fail-late")


def test_fallible_phases_success():
    """All phases succeeding yields Ok with every event applied."""
    engine = (
        new_fallible_engine(fallible_append)
        .queue_prologue("p")
        .queue_event("m")
        .queue_epilogue("e")
    )
    result = engine.resolve_in_order(list)

    assert result == Ok(["p", "m", "e"])
    assert engine.applied == 3
