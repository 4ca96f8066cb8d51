import pytest

from akrt.guards import ArmedScopeGuard, ScopeGuard


def test_scope_guard_runs_on_exit():
    events = []
    with ScopeGuard(lambda: events.append("done")):
        events.append("body")
    assert events == ["body", "done"]


def test_scope_guard_runs_on_exception():
    events = []
    with pytest.raises(RuntimeError):
        with ScopeGuard(lambda: events.append("done")):
            raise RuntimeError("boom")
    assert events == ["done"]


def test_armed_guard_runs_when_armed():
    events = []
    with ArmedScopeGuard(lambda: events.append("done")):
        pass
    assert events == ["done"]


def test_disarmed_guard_does_not_run():
    events = []
    with ArmedScopeGuard(lambda: events.append("done")) as guard:
        guard.disarm()
    assert events == []


def test_disarmed_guard_lets_exception_through():
    events = []
    with pytest.raises(KeyError):
        with ArmedScopeGuard(lambda: events.append("done")) as guard:
            guard.disarm()
            raise KeyError("k")
    assert events == []