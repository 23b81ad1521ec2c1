"""
Lab Package.

Run one call, see what happened: signature, timing, result or exception.

Components:
- descriptor: call() / lazy() and the call descriptor extractor
- engine: single timed execution with captured outcome
- formatter: bounded display strings for values
- renderer: fixed-structure text report
- runner: run() / run_void() entry points

Usage:
    from brainteasers.lab import call, run

    run(call(divmod, 17, 5))
"""

from .descriptor import (
    Call,
    CallDescriptor,
    Lazy,
    call,
    lazy,
    extract_descriptor,
    declared_result_type,
)

from .engine import (
    NO_VALUE,
    ErrorChain,
    Failure,
    NoValue,
    Success,
    TimedOutcome,
    execute,
)

from .formatter import (
    Char,
    Describable,
    FormattedValue,
    format_argument,
    format_value,
)

from .renderer import ReportRenderer

from .runner import (
    run,
    run_void,
    zero_value,
)

__all__ = [
    # Descriptor
    "Call",
    "CallDescriptor",
    "Lazy",
    "call",
    "lazy",
    "extract_descriptor",
    "declared_result_type",
    # Engine
    "NO_VALUE",
    "ErrorChain",
    "Failure",
    "NoValue",
    "Success",
    "TimedOutcome",
    "execute",
    # Formatter
    "Char",
    "Describable",
    "FormattedValue",
    "format_argument",
    "format_value",
    # Renderer
    "ReportRenderer",
    # Runner
    "run",
    "run_void",
    "zero_value",
]
