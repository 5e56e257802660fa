"""guard-builder - Composable runtime type guards for record-shaped values.

Guards are built from small per-property and whole-object predicates and
classify already-materialized values without raising. Diagnostics explain why a
value was rejected or which properties went unchecked.
"""

import logging

__version__ = "1.0.0"
__author__ = "guard-builder contributors"
__description__ = "Composable runtime type guards for record-shaped values"

from guard_builder.builder import TypeGuardBuilder
from guard_builder.config import GuardBuilderConfig, apply_config, load_config
from guard_builder.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    capture_diagnostics,
    configure_diagnostics,
    sink,
)
from guard_builder.exceptions import (
    BuilderFinalizedError,
    GuardBuilderError,
    MissingPropertiesError,
    SchemaError,
)
from guard_builder.guards import Guard, as_guard
from guard_builder.nullish import MISSING, is_nullish
from guard_builder.schema import schema_keys
from guard_builder.strict_builder import StrictTypeGuardBuilder
from guard_builder.type_guards import (
    CommonTypeGuards,
    nullable_array,
    nullable_array_of,
    nullable_boolean,
    nullable_date,
    nullable_date_string,
    nullable_number,
    nullable_object,
    nullable_string,
)

__all__ = [
    "__version__",
    "__description__",
    "TypeGuardBuilder",
    "StrictTypeGuardBuilder",
    "CommonTypeGuards",
    "Guard",
    "as_guard",
    "MISSING",
    "is_nullish",
    "schema_keys",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "capture_diagnostics",
    "configure_diagnostics",
    "sink",
    "GuardBuilderError",
    "BuilderFinalizedError",
    "MissingPropertiesError",
    "SchemaError",
    "GuardBuilderConfig",
    "apply_config",
    "load_config",
    "nullable_string",
    "nullable_number",
    "nullable_boolean",
    "nullable_object",
    "nullable_date",
    "nullable_date_string",
    "nullable_array",
    "nullable_array_of",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
