"""
Lab entry points.

    from brainteasers.lab import call, run, run_void

    total = run(call(add, 10, 20))      # prints the report, returns 30
    run_void(call(greet, "world"))      # prints the report, "Result: void"

Each run goes Extracting -> Executing -> Succeeded/Failed -> Rendered, once.
Execution errors are reported, never raised to the caller.
"""

from typing import Any, Optional, TextIO, Union

from brainteasers.config import LabConfig, get_lab_config
from brainteasers.logging_config import logger
from brainteasers.lab.descriptor import (
    Call,
    annotation_name,
    declared_result_annotation,
    declared_result_type,
    extract_descriptor,
)
from brainteasers.lab.engine import NO_VALUE, TimedOutcome, Success, execute
from brainteasers.lab.formatter import format_one_shot, is_one_shot
from brainteasers.lab.renderer import ReportRenderer


# Zero values returned by run() when the call fails
_ZERO_VALUES = {int: 0, float: 0.0, bool: False, complex: 0j}
_ZERO_VALUES_BY_NAME = {kind.__name__: zero for kind, zero in _ZERO_VALUES.items()}


def zero_value(declared: Any) -> Any:
    """Zero/absent value of a declared result type (None for reference-like types)."""
    if isinstance(declared, str):
        return _ZERO_VALUES_BY_NAME.get(declared)
    return _ZERO_VALUES.get(declared)


def _run(
    expr: Any,
    returns_value: bool,
    declared_type_name: str,
    sink: Optional[TextIO],
    config: Optional[LabConfig],
) -> TimedOutcome:
    config = config or get_lab_config()
    renderer = ReportRenderer(sink=sink, config=config)

    logger.debug("Extracting call descriptor")
    descriptor = extract_descriptor(expr)
    renderer.render_header(descriptor)

    logger.debug(f"Executing {descriptor.target_name}.{descriptor.method_name}")
    # Calling invoke directly keeps Call.__call__ out of the trace
    timed = execute(expr.invoke if isinstance(expr, Call) else expr, returns_value=returns_value)
    logger.debug("Succeeded" if timed.succeeded else "Failed")

    formatted = None
    value = timed.outcome.value if timed.succeeded else NO_VALUE
    if value is not NO_VALUE and is_one_shot(value):
        # Preview a copy so the caller still gets every item
        formatted, kept = format_one_shot(value, config)
        timed = TimedOutcome(outcome=Success(kept), elapsed_ms=timed.elapsed_ms)

    renderer.render_outcome(timed, declared_type_name, formatted)
    renderer.render_footer()
    logger.debug("Rendered")
    return timed


def run(
    expr: Any,
    *,
    returns: Optional[Union[type, str]] = None,
    sink: Optional[TextIO] = None,
    config: Optional[LabConfig] = None,
) -> Any:
    """
    Run a value-producing call once and print its execution report.

    Args:
        expr: A Call built with call(), or any zero-argument callable
        returns: Declared result type; read from the return annotation if None
        sink: Text stream for the report (default: sys.stdout)
        config: Report configuration (uses global if None)

    Returns:
        The call's return value, or the zero value of the declared type
        (0 for int, None for most types) if the call raised
    """
    if returns is None:
        declared = declared_result_annotation(expr)
        declared_type_name = declared_result_type(expr)
    else:
        declared = returns
        declared_type_name = annotation_name(returns)

    timed = _run(expr, True, declared_type_name, sink, config)
    if isinstance(timed.outcome, Success):
        return timed.outcome.value
    return zero_value(declared)


def run_void(
    expr: Any,
    *,
    sink: Optional[TextIO] = None,
    config: Optional[LabConfig] = None,
) -> None:
    """
    Run a call for its effects only and print its execution report.

    Whatever the call returns is discarded; the result line reads "void".
    """
    _run(expr, False, "void", sink, config)
