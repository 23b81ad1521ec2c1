"""
Call Descriptor Extractor.

A call is handed to the lab as a Call: the callable plus its argument
expressions, built with call(fn, *args, **kwargs). The same object is both
executable (Call.invoke) and inspectable (extract_descriptor), so the report
header never needs to be written by hand.

Arguments wrapped in lazy() are evaluated when the header is built and again
when the call runs, the same way an argument expression would be evaluated at
the call site.
"""

import inspect
import typing
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from brainteasers.logging_config import logger


UNKNOWN = "Unknown"
PLACEHOLDER_PARAM = "param"
UNEVALUATED_ARGUMENT = "?"

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True)
class Lazy:
    """An argument sub-expression, evaluated only when its value is needed."""

    thunk: Callable[[], Any]

    def evaluate(self) -> Any:
        return self.thunk()


def lazy(thunk: Callable[[], Any]) -> Lazy:
    return Lazy(thunk)


def _resolve(argument: Any) -> Any:
    if isinstance(argument, Lazy):
        return argument.evaluate()
    return argument


@dataclass(frozen=True)
class Call:
    """
    A single deferred invocation of fn(*args, **kwargs).

    Nothing runs until invoke() is called.
    """

    fn: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Tuple[Tuple[str, Any], ...] = ()

    def invoke(self) -> Any:
        args = [_resolve(arg) for arg in self.args]
        kwargs = {name: _resolve(value) for name, value in self.kwargs}
        return self.fn(*args, **kwargs)

    def __call__(self) -> Any:
        return self.invoke()


def call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Call:
    """Describe fn(*args, **kwargs) without running it."""
    return Call(fn=fn, args=tuple(args), kwargs=tuple(kwargs.items()))


class CallDescriptor(BaseModel):
    """
    Names and argument values of one invocation, used for the report header.
    """
    model_config = ConfigDict(frozen=True)

    target_name: str
    method_name: str
    parameter_names: Tuple[str, ...] = ()
    argument_values: Tuple[Any, ...] = ()

    @model_validator(mode="after")
    def _check_pairing(self) -> "CallDescriptor":
        if len(self.parameter_names) != len(self.argument_values):
            raise ValueError(
                f"{len(self.parameter_names)} parameter names for "
                f"{len(self.argument_values)} argument values"
            )
        return self

    @classmethod
    def unknown(cls) -> "CallDescriptor":
        return cls(target_name=UNKNOWN, method_name=UNKNOWN)


def _display_argument(argument: Any) -> Any:
    """Concrete value of one argument for display; '?' if evaluating it fails."""
    try:
        return _resolve(argument)
    except Exception as e:
        logger.debug(f"Argument evaluation failed with {type(e).__name__}: {e}")
        return UNEVALUATED_ARGUMENT


def _underlying(fn: Callable[..., Any]) -> Any:
    while isinstance(fn, partial):
        fn = fn.func
    return fn


def _names(fn: Callable[..., Any]) -> Tuple[str, str]:
    """(target name, method name) for a callable."""
    fn = _underlying(fn)
    method_name = getattr(fn, "__name__", None)
    if method_name is None:
        # Callable instance: report its class and __call__
        return type(fn).__name__, "__call__"

    qualname = getattr(fn, "__qualname__", None) or method_name
    parts = [part for part in qualname.split(".") if part != "<locals>"]
    if len(parts) > 1:
        return parts[-2], method_name

    module = getattr(fn, "__module__", None)
    if module:
        return module.rsplit(".", 1)[-1], method_name
    return UNKNOWN, method_name


def _signature(fn: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def _pair_arguments(
    fn: Callable[..., Any],
    args: List[Any],
    kwargs: Dict[str, Any],
) -> Tuple[List[str], List[Any]]:
    """Pair argument values with declared parameter names, in declaration order."""
    sig = _signature(fn)
    declared: List[str] = []

    if sig is not None:
        try:
            bound = sig.bind(*args, **kwargs)
        except TypeError:
            # The call itself will fail when executed; pair what we can
            bound = None
        if bound is not None:
            bound.apply_defaults()
            names, values = [], []
            for name, value in bound.arguments.items():
                kind = sig.parameters[name].kind
                if kind in _VARIADIC and not value:
                    continue
                names.append(name)
                values.append(value)
            return names, values
        declared = [p.name for p in sig.parameters.values() if p.kind in _POSITIONAL]

    names = [declared[i] if i < len(declared) else PLACEHOLDER_PARAM for i in range(len(args))]
    names.extend(kwargs.keys())
    return names, list(args) + list(kwargs.values())


def extract_descriptor(expr: Any) -> CallDescriptor:
    """
    Build the descriptor for a deferred call.

    Anything that is not a Call (a bare lambda, an arbitrary callable) cannot be
    taken apart and yields the Unknown.Unknown() descriptor.
    """
    if not isinstance(expr, Call):
        logger.debug(f"Not a single direct call: {type(expr).__name__}")
        return CallDescriptor.unknown()

    target_name, method_name = _names(expr.fn)
    args = [_display_argument(arg) for arg in expr.args]
    kwargs = {name: _display_argument(value) for name, value in expr.kwargs}
    parameter_names, argument_values = _pair_arguments(expr.fn, args, kwargs)

    return CallDescriptor(
        target_name=target_name,
        method_name=method_name,
        parameter_names=tuple(parameter_names),
        argument_values=tuple(argument_values),
    )


def annotation_name(annotation: Any) -> str:
    """Display name for a type annotation; Optional[X] is shown as X."""
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__

    origin = typing.get_origin(annotation)
    if origin is typing.Union or type(annotation).__name__ == "UnionType":
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return annotation_name(members[0])
    if origin is not None and hasattr(origin, "__name__"):
        return origin.__name__
    return str(annotation).replace("typing.", "")


def declared_result_annotation(expr: Any) -> Any:
    """
    Return annotation of a deferred call's callable, or inspect.Signature.empty.

    String annotations are resolved when possible.
    """
    fn = _underlying(expr.fn) if isinstance(expr, Call) else expr
    if not callable(fn):
        return inspect.Signature.empty

    try:
        hints = typing.get_type_hints(fn)
    except Exception:
        # Unresolvable forward references; fall back to the raw annotation
        hints = {}
    if "return" in hints:
        return hints["return"]

    sig = _signature(fn)
    if sig is None:
        return inspect.Signature.empty
    return sig.return_annotation


def declared_result_type(expr: Any) -> str:
    """
    Declared result type name of a deferred call, from its return annotation.

    Used when the call returns None and there is no runtime type to show.
    """
    annotation = declared_result_annotation(expr)
    if annotation is inspect.Signature.empty:
        return "object"
    return annotation_name(annotation)
