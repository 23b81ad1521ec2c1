"""
Report Renderer.

Writes the fixed-structure execution report to a text stream through rich.
Only the fixed markers go through rich (for styling). Names, values and
messages are written to the sink as-is, so "[a, b, c]", tabs and carriage
returns come out verbatim.

The sink is not synchronized: callers sharing one stream between threads
get interleaved reports.
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from brainteasers.config import LabConfig, get_lab_config
from brainteasers.lab.descriptor import CallDescriptor
from brainteasers.lab.engine import ErrorChain, Failure, NoValue, TimedOutcome
from brainteasers.lab.formatter import (
    FormattedValue,
    argument_type_name,
    format_argument,
    format_value,
)


BANNER = "=== Execution Analysis ==="
END_BANNER = "=== End Analysis ==="
EXECUTING = "⏳ Executing..."
SUCCESS = "✅ Execution completed successfully!"
FAILURE = "❌ Exception occurred during execution!"
RESULT = "📋 Result: "
EXCEPTION = "🚨 Exception: "
INNER_EXCEPTION = "🔗 Inner exception: "
TRACE_HEADER = "📍 Stack trace (first few lines):"
TRACE_INDENT = "   "


def format_signature(descriptor: CallDescriptor) -> str:
    """Target.method(type name = value, ...)"""
    parameters = [
        f"{argument_type_name(value)} {name} = {format_argument(value)}"
        for name, value in zip(descriptor.parameter_names, descriptor.argument_values)
    ]
    return f"{descriptor.target_name}.{descriptor.method_name}({', '.join(parameters)})"


def format_elapsed(elapsed_ms: float) -> str:
    return f"⏱️  Execution time: {elapsed_ms:.2f} ms"


class ReportRenderer:
    """
    Renders execution reports to a text sink.

    The header is written before the call runs and the outcome after it, so
    anything the call prints itself lands between the two.
    """

    def __init__(self, sink: Optional[TextIO] = None, config: Optional[LabConfig] = None):
        self.config = config or get_lab_config()
        # file=None lets rich resolve sys.stdout at write time (works with capture)
        self.console = Console(
            file=sink,
            force_terminal=self.config.color,
            no_color=self.config.color is False,
            highlight=False,
            emoji=False,
            markup=False,
            soft_wrap=True,
        )

    def _line(self, marker: str = "", payload: str = "", style: Optional[str] = None) -> None:
        """
        One report line: an optional styled marker followed by raw payload text.

        The payload (names, values, messages) bypasses rich so tabs, carriage
        returns and other control characters reach the sink unchanged.
        """
        if marker:
            self.console.print(Text(marker, style=style or ""), end="")
        self.console.file.write(f"{payload}\n")
        self.console.file.flush()

    def render_header(self, descriptor: CallDescriptor) -> None:
        self._line(BANNER, style="bold blue")
        self._line(payload=format_signature(descriptor))
        self._line()
        self._line(EXECUTING, style="bold yellow")

    def render_outcome(
        self,
        timed: TimedOutcome,
        declared_type_name: str = "object",
        formatted: Optional[FormattedValue] = None,
    ) -> None:
        """
        Success or failure block.

        formatted overrides formatting of the success value (used for iterators
        that were previewed on a copy).
        """
        outcome = timed.outcome
        if isinstance(outcome, Failure):
            self._render_failure(outcome.error)
            return

        self._line()
        self._line(SUCCESS, style="bold green")
        self._line(format_elapsed(timed.elapsed_ms))
        if isinstance(outcome.value, NoValue):
            self._line(RESULT, "void")
        else:
            if formatted is None:
                formatted = format_value(outcome.value, declared_type_name, self.config)
            self._line(RESULT, f"{formatted.display}({formatted.type_name})")

    def _render_failure(self, error: ErrorChain) -> None:
        self._line(FAILURE, style="bold red")
        self._line(EXCEPTION, f"{error.message} ({error.type_name})", style="bold red")
        if error.cause is not None:
            self._line(INNER_EXCEPTION, f"{error.cause.type_name} - {error.cause.message}")
        self._line(TRACE_HEADER)
        for line in error.trace_lines[:self.config.max_trace_lines]:
            self._line(payload=f"{TRACE_INDENT}{line.strip()}")

    def render_footer(self) -> None:
        self._line()
        self._line(END_BANNER, style="bold blue")
        self._line()

    def render(
        self,
        descriptor: CallDescriptor,
        timed: TimedOutcome,
        declared_type_name: str = "object",
    ) -> None:
        """Whole report in one go (header, outcome, footer)."""
        self.render_header(descriptor)
        self.render_outcome(timed, declared_type_name)
        self.render_footer()
