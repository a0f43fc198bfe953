"""Tests for progress module."""

import pytest

from lazy_sequence.errors import InvalidTransition, NoValue
from lazy_sequence.progress import Finished, HasValue, NotStarted, Phase, ProgressState


def test_initial_state_is_startup():
    """Test that a new progress state has not started."""
    progress = ProgressState()
    assert progress.phase is Phase.STARTUP
    assert isinstance(progress.state, NotStarted)
    assert not progress.has_value()
    assert not progress.has_failure()


def test_set_value_overwrites():
    """Test that each set_value replaces the held value."""
    progress = ProgressState()
    progress.set_value(1)
    progress.set_value(2)

    assert progress.phase is Phase.VALUE
    assert progress.state == HasValue(2)
    assert progress.value() == 2


def test_value_before_any_yield_raises():
    """Test that reading a value in the startup phase raises NoValue."""
    progress = ProgressState()
    with pytest.raises(NoValue):
        progress.value()


def test_set_value_after_finish_raises():
    """Test that a finished state can't be resurrected."""
    progress = ProgressState()
    progress.set_finished_normally()

    with pytest.raises(InvalidTransition, match="finished"):
        progress.set_value(1)
    assert progress.is_in_finished_state()


def test_set_finished_normally_is_idempotent():
    """Test that finishing twice keeps the first outcome."""
    progress = ProgressState()
    failure = ValueError("boom")
    progress.set_failure(failure)
    progress.set_finished_normally()

    assert progress.state == Finished(failure)
    assert progress.has_failure()


def test_finished_normally_has_no_value():
    """Test that a normally finished state never returns a stale value."""
    progress = ProgressState()
    progress.set_value(5)
    progress.set_finished_normally()

    with pytest.raises(NoValue):
        progress.value()
    progress.rethrow_if_failed()


def test_failure_takes_priority_and_is_rethrown_every_time():
    """Test that a stored failure is re-raised on every read."""
    progress = ProgressState()
    progress.set_value(5)
    failure = KeyError("missing")
    progress.set_failure(failure)

    for _ in range(3):
        with pytest.raises(KeyError) as excinfo:
            progress.value()
        assert excinfo.value is failure

    with pytest.raises(KeyError):
        progress.rethrow_if_failed()


def test_clear_any_value():
    """Test that clearing keeps the value phase but drops the value."""
    progress = ProgressState()
    progress.set_value("x")
    progress.clear_any_value()

    assert progress.phase is Phase.VALUE
    assert not progress.has_value()
    with pytest.raises(NoValue):
        progress.value()

    progress.set_value("y")
    assert progress.value() == "y"


def test_clear_any_value_outside_value_phase_is_noop():
    """Test that clearing in other phases changes nothing."""
    progress = ProgressState()
    progress.clear_any_value()
    assert progress.phase is Phase.STARTUP

    progress.set_finished_normally()
    progress.clear_any_value()
    assert progress.state == Finished()


def test_none_is_a_real_value():
    """Test that None can be yielded and read back."""
    progress = ProgressState()
    progress.set_value(None)
    assert progress.has_value()
    assert progress.value() is None


def test_cleared_state_has_no_placeholder_value():
    """Test that a cleared value phase reports an explicit flag."""
    progress = ProgressState()
    progress.set_value("x")
    progress.clear_any_value()

    assert progress.state == HasValue(value=None, cleared=True)
    assert progress.state.value is None
