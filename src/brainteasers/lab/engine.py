"""
Execution Engine.

Runs a zero-argument callable exactly once, times it, and captures the outcome:
Success(value), Success(NO_VALUE) for void calls, or Failure(ErrorChain).
"""

import os
import time
import traceback
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from brainteasers.logging_config import logger


class NoValue:
    """Marker for a call that produces nothing. Distinct from None."""

    _instance: Optional["NoValue"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = NoValue()

# Frames from this package (execute, Call.invoke) are left out of reported traces
_LAB_DIR = os.path.dirname(os.path.abspath(__file__))


class ErrorChain(BaseModel):
    """
    A captured exception: message, type name, one level of cause, trace lines.
    """
    model_config = ConfigDict(frozen=True)

    message: str
    type_name: str
    cause: Optional["ErrorChain"] = None
    trace_lines: Tuple[str, ...] = ()

    @classmethod
    def from_exception(cls, exc: BaseException, with_cause: bool = True) -> "ErrorChain":
        cause = None
        if with_cause:
            inner = _inner_exception(exc)
            if inner is not None:
                # Only one level is reported
                cause = cls.from_exception(inner, with_cause=False)

        return cls(
            message=str(exc),
            type_name=type(exc).__name__,
            cause=cause,
            trace_lines=tuple(_trace_lines(exc)),
        )


def _inner_exception(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def _trace_lines(exc: BaseException) -> List[str]:
    """One line per frame, innermost (where the exception was raised) first."""
    frames = [
        frame for frame in traceback.extract_tb(exc.__traceback__)
        if os.path.dirname(os.path.abspath(frame.filename)) != _LAB_DIR
    ]
    lines = [
        f'File "{frame.filename}", line {frame.lineno}, in {frame.name}'
        for frame in reversed(frames)
    ]
    return [line.strip() for line in lines if line.strip()]


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class Failure:
    error: ErrorChain


ExecutionOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class TimedOutcome:
    """Outcome of one execution plus its wall-clock duration."""

    outcome: ExecutionOutcome
    elapsed_ms: float

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Success)


def execute(fn: Callable[[], Any], returns_value: bool = True) -> TimedOutcome:
    """
    Invoke fn once and time it.

    Exceptions are captured into a Failure, never re-raised. The end timestamp
    is taken right after the call returns or raises, so elapsed time covers the
    whole attempt either way.

    Args:
        fn: Zero-argument callable with its arguments already bound
        returns_value: False for void calls; the return value is then discarded

    Returns:
        TimedOutcome with Success or Failure and elapsed milliseconds
    """
    start_time = time.perf_counter()
    try:
        value = fn()
        end_time = time.perf_counter()
    except Exception as e:
        end_time = time.perf_counter()
        elapsed_ms = (end_time - start_time) * 1000
        logger.debug(f"Execution failed after {elapsed_ms:.2f} ms with {type(e).__name__}: {e}")
        return TimedOutcome(outcome=Failure(ErrorChain.from_exception(e)), elapsed_ms=elapsed_ms)

    elapsed_ms = (end_time - start_time) * 1000
    logger.debug(f"Execution completed in {elapsed_ms:.2f} ms")
    outcome = Success(value if returns_value else NO_VALUE)
    return TimedOutcome(outcome=outcome, elapsed_ms=elapsed_ms)
