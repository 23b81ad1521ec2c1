"""
Value Formatter.

Turns any runtime value into a short, readable string paired with its type name.
The rule list is closed and checked in order:

1. None                      -> null
2. Char                      -> 'c'
3. str                       -> "text" (no escaping)
4. tuple / array.array       -> [e0, e1] (Length: N), never truncated
5. other iterables           -> [e0, ..., e9, ...], capped at max_collection_items
6. anything else             -> describe() if Describable, else str()

Quoting (rules 2 and 3) only applies to signature arguments. A returned
string is shown as-is: "Hello World(str)".
"""

from array import array
from collections.abc import Iterable
from itertools import islice, tee
from typing import Any, Iterator, Optional, Protocol, Tuple, runtime_checkable

from pydantic import BaseModel, ConfigDict

from brainteasers.config import LabConfig, get_lab_config
from brainteasers.exceptions import InvalidCharError


NULL_DISPLAY = "null"
ELLIPSIS_ENTRY = "..."

# array.array typecodes -> element type names
_TYPECODE_NAMES = {
    "b": "int", "B": "int", "h": "int", "H": "int", "i": "int", "I": "int",
    "l": "int", "L": "int", "q": "int", "Q": "int",
    "f": "float", "d": "float",
    "u": "str", "w": "str",
}


class Char(str):
    """A single character. Rendered in single quotes instead of double quotes."""

    def __new__(cls, value: str):
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidCharError(str(value))
        return super().__new__(cls, value)


@runtime_checkable
class Describable(Protocol):
    """Values that provide their own display form for reports."""

    def describe(self) -> Optional[str]:
        ...


class FormattedValue(BaseModel):
    """
    A value's bounded display string and its runtime type name.
    """
    model_config = ConfigDict(frozen=True)

    display: str
    type_name: str


def display_form(value: Any) -> str:
    """Best-effort text form of a single value (rule 6 and collection elements)."""
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, Describable):
        text = value.describe()
    else:
        text = str(value)
    return NULL_DISPLAY if text is None else str(text)


def is_array(value: Any) -> bool:
    """Fixed-size indexable sequences."""
    return isinstance(value, (tuple, array))


def is_bulk_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def element_type_name(value: Any) -> str:
    if isinstance(value, array):
        return _TYPECODE_NAMES.get(value.typecode, "object")
    names = {type(item).__name__ for item in value if item is not None}
    if len(names) == 1:
        return names.pop()
    return "object"


def type_name(value: Any) -> str:
    """Runtime type display name; arrays get the element type plus []."""
    if is_array(value):
        return f"{element_type_name(value)}[]"
    return type(value).__name__


def argument_type_name(value: Any) -> str:
    """Type name shown in front of a signature argument."""
    if value is None:
        return "object"
    return type(value).__name__


def format_argument(value: Any) -> str:
    """Inline form used in the signature line."""
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, Char):
        return f"'{value}'"
    if isinstance(value, str):
        return f'"{value}"'
    return display_form(value)


def format_display(value: Any, config: Optional[LabConfig] = None) -> str:
    """Display string for a returned value."""
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, str):
        return str(value)

    if is_array(value):
        elements = [display_form(item) for item in value]
        return f"[{', '.join(elements)}] (Length: {len(value)})"

    if is_bulk_collection(value):
        cap = (config or get_lab_config()).max_collection_items
        # Pull at most one element past the cap, enough to know there are more
        elements = [display_form(item) for item in islice(iter(value), cap + 1)]
        if len(elements) > cap:
            elements = elements[:cap] + [ELLIPSIS_ENTRY]
        return f"[{', '.join(elements)}]"

    return display_form(value)


def format_value(
    value: Any,
    declared_type_name: str = "object",
    config: Optional[LabConfig] = None,
) -> FormattedValue:
    """
    Format a returned value.

    None has no runtime type, so the declared result type name is used instead.
    """
    if value is None:
        return FormattedValue(display=NULL_DISPLAY, type_name=declared_type_name)
    return FormattedValue(display=format_display(value, config), type_name=type_name(value))


def is_one_shot(value: Any) -> bool:
    """Iterators (generators, map objects, ...) that are used up by reading them."""
    return is_bulk_collection(value) and iter(value) is value


def format_one_shot(
    value: Iterator[Any],
    config: Optional[LabConfig] = None,
) -> Tuple[FormattedValue, Iterator[Any]]:
    """
    Format an iterator without consuming it for the caller.

    Returns the formatted preview and an iterator that still yields every item,
    including the ones read for the preview.
    """
    shown, kept = tee(value)
    formatted = FormattedValue(display=format_display(shown, config), type_name=type_name(value))
    return formatted, kept
