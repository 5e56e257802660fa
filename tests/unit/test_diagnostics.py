"""Unit tests for the diagnostic sink."""

import logging

from guard_builder import CommonTypeGuards, TypeGuardBuilder
from guard_builder.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    capture_diagnostics,
    configure_diagnostics,
    sink,
)


class BadRepr:
    def __repr__(self):
        raise RuntimeError("cannot render")


class TestSanitiseValue:
    """Test value rendering and redaction."""

    def test_logs_value_by_default(self):
        assert sink.sanitise_value("x") == "'x'"
        assert sink.sanitise_value(42) == "42"

    def test_render_property(self):
        class UnprintableKey:
            def __str__(self):
                raise RuntimeError("cannot render key")

        assert sink.render_property("email") == "email"
        assert sink.render_property(3) == "3"
        assert sink.render_property(UnprintableKey()) == "<unprintable UnprintableKey key>"

    def test_redaction(self):
        sink.configure(log_value_received=False)
        assert sink.sanitise_value("secret") == "redacted"

    def test_custom_placeholder(self):
        sink.configure(log_value_received=False, redacted_placeholder="<hidden>")
        assert sink.sanitise_value("secret") == "<hidden>"

    def test_long_values_are_truncated(self):
        sink.configure(max_value_length=20)
        rendered = sink.sanitise_value(list(range(1000)))
        assert len(rendered) <= 20
        assert rendered.endswith("...")

    def test_unrepresentable_values(self):
        assert "BadRepr" in sink.sanitise_value(BadRepr())

    def test_cyclic_values(self):
        cyclic = {}
        cyclic["self"] = cyclic
        assert "self" in sink.sanitise_value(cyclic)


class TestEmission:
    """Test diagnostic emission."""

    def test_missing_validator(self, diagnostics):
        sink.missing_validator("User", "email")

        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.kind == DiagnosticKind.MISSING_VALIDATOR
        assert diagnostic.schema_name == "User"
        assert diagnostic.property_name == "email"
        assert str(diagnostic) == "No validator specified for property 'email' in 'User'"

    def test_property_validation_failed(self, diagnostics):
        sink.validation_failed("User", "id", "x")

        diagnostic = diagnostics[0]
        assert diagnostic.kind == DiagnosticKind.VALIDATION_FAILED
        assert diagnostic.is_root is False
        assert diagnostic.value_received == "'x'"
        assert diagnostic.message == "Validation failed for property 'id' in 'User'. Value received: 'x'"

    def test_root_validation_failed(self, diagnostics):
        sink.validation_failed("User", None, {"id": 1})

        diagnostic = diagnostics[0]
        assert diagnostic.is_root is True
        assert diagnostic.property_name is None
        assert "root object 'User'" in diagnostic.message

    def test_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="guard_builder.diagnostics"):
            sink.missing_validator("User", "email")

        assert "No validator specified for property 'email'" in caplog.text
        assert caplog.records[0].levelno == logging.WARNING

    def test_disabled_sink_emits_nothing(self, diagnostics, caplog):
        sink.configure(enabled=False)

        with caplog.at_level(logging.WARNING, logger="guard_builder.diagnostics"):
            sink.validation_failed("User", "id", "x")

        assert diagnostics == []
        assert caplog.records == []

    def test_failing_listener_does_not_propagate(self, diagnostics):
        def broken(diagnostic):
            raise RuntimeError("listener failure")

        sink.add_listener(broken)
        try:
            sink.missing_validator("User", "email")
        finally:
            sink.remove_listener(broken)

        assert len(diagnostics) == 1

    def test_capture_stops_after_block(self):
        with capture_diagnostics() as collected:
            sink.missing_validator("User", "a")
        sink.missing_validator("User", "b")

        assert [d.property_name for d in collected] == ["a"]

    def test_nested_captures(self):
        with capture_diagnostics() as outer:
            sink.missing_validator("User", "a")
            with capture_diagnostics() as inner:
                sink.missing_validator("User", "b")

        assert [d.property_name for d in outer] == ["a", "b"]
        assert [d.property_name for d in inner] == ["b"]

    def test_to_dict(self):
        diagnostic = Diagnostic(
            kind=DiagnosticKind.VALIDATION_FAILED,
            message="Validation failed",
            schema_name="User",
            property_name="id",
            value_received="'x'",
        )
        assert diagnostic.to_dict() == {
            "kind": "validation_failed",
            "message": "Validation failed",
            "schema": "User",
            "property": "id",
            "value_received": "'x'",
        }


class TestSinkConfiguration:
    """Test process-wide configuration."""

    def test_configure_diagnostics(self):
        configure_diagnostics(log_value_received=False)
        assert sink.log_value_received is False

    def test_configure_keeps_unspecified_settings(self):
        isolated = DiagnosticSink()
        isolated.configure(redacted_placeholder="***")
        isolated.configure(log_value_received=False)
        assert isolated.redacted_placeholder == "***"
        assert isolated.enabled is True

    def test_reset(self):
        sink.configure(enabled=False, log_value_received=False)
        sink.add_listener(lambda diagnostic: None)
        sink.reset()
        assert sink.enabled is True
        assert sink.log_value_received is True

    def test_redaction_applies_to_previously_built_guards(self, diagnostics):
        guard = (
            TypeGuardBuilder.start("Account")
            .validate_property("password", CommonTypeGuards.basics.string())
            .build()
        )

        configure_diagnostics(log_value_received=False)
        assert guard({"password": 12345}) is False

        assert "12345" not in diagnostics[0].message
        assert diagnostics[0].value_received == "redacted"
