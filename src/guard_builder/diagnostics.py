"""Diagnostic sink for guard evaluation.

Diagnostics are advisory: they explain why a value was rejected or which
properties went unchecked, and never change a guard's result. Every diagnostic
is logged at WARNING level on this module's logger and handed to any registered
listeners.

The sink is process-wide so that settings changed after a guard was built (for
example turning off value logging) still apply to that guard.
"""

import logging
import reprlib
import threading
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_REDACTED_PLACEHOLDER = "redacted"
DEFAULT_MAX_VALUE_LENGTH = 200

ARRAY_MEMBER_MESSAGE = "Validation failed for a member of the array"


class DiagnosticKind(str, Enum):
    """Kinds of diagnostics emitted during evaluation."""
    MISSING_VALIDATOR = "missing_validator"
    VALIDATION_FAILED = "validation_failed"
    ARRAY_MEMBER_FAILED = "array_member_failed"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic emitted by a guard."""
    kind: DiagnosticKind
    message: str
    schema_name: str | None = None
    property_name: str | None = None   # None for root and array diagnostics
    value_received: str | None = None  # already sanitised

    @property
    def is_root(self) -> bool:
        return self.kind == DiagnosticKind.VALIDATION_FAILED and self.property_name is None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "schema": self.schema_name,
            "property": self.property_name,
            "value_received": self.value_received,
        }


DiagnosticListener = Callable[[Diagnostic], None]


class DiagnosticSink:
    """Formats diagnostics and delivers them to the log and to listeners."""

    def __init__(self):
        self.enabled = True
        self.log_value_received = True
        self.redacted_placeholder = DEFAULT_REDACTED_PLACEHOLDER
        self.max_value_length = DEFAULT_MAX_VALUE_LENGTH
        self._listeners: list[DiagnosticListener] = []
        self._lock = threading.Lock()

    def configure(
        self,
        *,
        enabled: bool | None = None,
        log_value_received: bool | None = None,
        redacted_placeholder: str | None = None,
        max_value_length: int | None = None,
    ) -> None:
        """Update sink settings. Arguments left as None keep their value."""
        if enabled is not None:
            self.enabled = enabled
        if log_value_received is not None:
            self.log_value_received = log_value_received
        if redacted_placeholder is not None:
            self.redacted_placeholder = redacted_placeholder
        if max_value_length is not None:
            self.max_value_length = max_value_length

        logger.debug(
            f"Diagnostics configured: enabled={self.enabled}, "
            f"log_value_received={self.log_value_received}"
        )

    def reset(self) -> None:
        """Restore default settings and drop all listeners."""
        self.enabled = True
        self.log_value_received = True
        self.redacted_placeholder = DEFAULT_REDACTED_PLACEHOLDER
        self.max_value_length = DEFAULT_MAX_VALUE_LENGTH
        with self._lock:
            self._listeners.clear()

    def sanitise_value(self, value: Any) -> str:
        """Render a value for a diagnostic, or the placeholder when redacting."""
        if not self.log_value_received:
            return self.redacted_placeholder

        try:
            rendered = reprlib.repr(value)
        except Exception:
            rendered = f"<unrepresentable {type(value).__name__}>"

        if len(rendered) > self.max_value_length:
            rendered = rendered[: self.max_value_length - 3] + "..."
        return rendered

    def render_property(self, property_name: Any) -> str:
        """Render a property key for a message. Never raises."""
        try:
            return str(property_name)
        except Exception:
            return f"<unprintable {type(property_name).__name__} key>"

    def missing_validator(self, schema_name: str, property_name: Any) -> None:
        key = self.render_property(property_name)
        self.emit(Diagnostic(
            kind=DiagnosticKind.MISSING_VALIDATOR,
            message=f"No validator specified for property '{key}' in '{schema_name}'",
            schema_name=schema_name,
            property_name=key,
        ))

    def validation_failed(self, schema_name: str, property_name: Any, value: Any) -> None:
        """Report a rejected value. A property_name of None means the root object."""
        received = self.sanitise_value(value)
        key = None if property_name is None else self.render_property(property_name)
        if key is None:
            message = f"Validation failed for root object '{schema_name}'. Value received: {received}"
        else:
            message = (
                f"Validation failed for property '{key}' in '{schema_name}'. "
                f"Value received: {received}"
            )

        self.emit(Diagnostic(
            kind=DiagnosticKind.VALIDATION_FAILED,
            message=message,
            schema_name=schema_name,
            property_name=key,
            value_received=received,
        ))

    def array_member_failed(self) -> None:
        self.emit(Diagnostic(kind=DiagnosticKind.ARRAY_MEMBER_FAILED, message=ARRAY_MEMBER_MESSAGE))

    def emit(self, diagnostic: Diagnostic) -> None:
        """Log a diagnostic and deliver it to listeners. Never raises."""
        if not self.enabled:
            return

        logger.warning(diagnostic.message)

        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(diagnostic)
            except Exception as e:
                logger.debug(f"Diagnostic listener {listener!r} failed: {e}")

    def add_listener(self, listener: DiagnosticListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: DiagnosticListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @contextmanager
    def capture(self) -> Iterator[list[Diagnostic]]:
        """Collect every diagnostic emitted inside the block.

        Example:
            with sink.capture() as diagnostics:
                is_user({"id": "x"})
            assert diagnostics[0].property_name == "id"
        """
        collected: list[Diagnostic] = []
        listener = collected.append
        self.add_listener(listener)
        try:
            yield collected
        finally:
            self.remove_listener(listener)


sink = DiagnosticSink()


def configure_diagnostics(**settings: Any) -> None:
    """Configure the process-wide diagnostic sink. See DiagnosticSink.configure."""
    sink.configure(**settings)


def capture_diagnostics() -> AbstractContextManager[list[Diagnostic]]:
    """Collect diagnostics emitted by any guard inside a ``with`` block."""
    return sink.capture()
