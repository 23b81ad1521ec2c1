"""
Tests for single timed execution and error capture.
"""

import time

import pytest

from brainteasers.lab.descriptor import call
from brainteasers.lab.engine import (
    NO_VALUE,
    ErrorChain,
    Failure,
    NoValue,
    Success,
    execute,
)


def _raise_value_error():
    raise ValueError("Test error")


def _raise_chained():
    try:
        raise KeyError("inner")
    except KeyError as e:
        raise RuntimeError("outer") from e


def _raise_implicit():
    try:
        {}["missing"]
    except KeyError:
        raise ValueError("while handling")


def _raise_suppressed():
    try:
        {}["missing"]
    except KeyError:
        raise ValueError("clean") from None


def _raise_three_deep():
    try:
        try:
            raise OSError("root")
        except OSError as e:
            raise KeyError("middle") from e
    except KeyError as e:
        raise RuntimeError("top") from e


class TestNoValue:

    def test_singleton(self):
        assert NoValue() is NO_VALUE

    def test_distinct_from_none(self):
        assert NO_VALUE is not None
        assert not NO_VALUE
        assert repr(NO_VALUE) == "NO_VALUE"


class TestExecute:

    def test_success(self):
        timed = execute(lambda: 30)
        assert timed.outcome == Success(30)
        assert timed.succeeded
        assert timed.elapsed_ms >= 0

    def test_none_is_a_value(self):
        assert execute(lambda: None).outcome == Success(None)

    def test_void_discards_value(self):
        timed = execute(lambda: 30, returns_value=False)
        assert timed.outcome.value is NO_VALUE

    def test_invokes_exactly_once(self):
        hits = []
        execute(lambda: hits.append(1))
        assert hits == [1]

    def test_invokes_exactly_once_on_failure(self):
        hits = []

        def fail():
            hits.append(1)
            raise RuntimeError("x")

        execute(fail)
        assert hits == [1]

    def test_failure_is_captured(self):
        timed = execute(_raise_value_error)
        assert not timed.succeeded
        assert isinstance(timed.outcome, Failure)
        error = timed.outcome.error
        assert error.message == "Test error"
        assert error.type_name == "ValueError"
        assert error.cause is None

    def test_elapsed_time_covers_the_call(self):
        timed = execute(lambda: time.sleep(0.05))
        assert timed.elapsed_ms >= 45.0

    def test_elapsed_time_recorded_on_failure(self):
        def slow_fail():
            time.sleep(0.05)
            raise RuntimeError("late")

        timed = execute(slow_fail)
        assert isinstance(timed.outcome, Failure)
        assert timed.elapsed_ms >= 45.0

    def test_keyboard_interrupt_is_not_captured(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            execute(interrupt)


class TestErrorChain:

    def test_explicit_cause(self):
        error = execute(_raise_chained).outcome.error
        assert error.message == "outer"
        assert error.cause.type_name == "KeyError"
        assert error.cause.message == "'inner'"

    def test_implicit_context(self):
        error = execute(_raise_implicit).outcome.error
        assert error.cause.type_name == "KeyError"

    def test_suppressed_context(self):
        error = execute(_raise_suppressed).outcome.error
        assert error.cause is None

    def test_only_one_level_of_cause(self):
        error = execute(_raise_three_deep).outcome.error
        assert error.cause.type_name == "KeyError"
        assert error.cause.cause is None

    def test_trace_lines_start_at_the_raise(self):
        error = execute(_raise_value_error).outcome.error
        assert error.trace_lines
        assert error.trace_lines[0].endswith("in _raise_value_error")
        assert error.trace_lines[0].startswith('File "')
        assert all(line == line.strip() for line in error.trace_lines)

    def test_trace_lines_leave_out_lab_frames(self):
        error = execute(call(_raise_value_error)).outcome.error
        assert len(error.trace_lines) == 1
        assert error.trace_lines[0].endswith("in _raise_value_error")

    def test_from_exception_without_traceback(self):
        error = ErrorChain.from_exception(ValueError("bare"))
        assert error.trace_lines == ()
        assert error.message == "bare"
