"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: calculator, formatter, config, registry, error

Example log query (jq):
    jq 'select(.event == "calculator.shape.rejected") | .metadata.index'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - calculator.*: Aggregation over shape collections
    - formatter.*: Result rendering
    - config.* / registry.*: Shape file loading
    - error.*: Error conditions
    """

    # ========== Calculator Events ==========
    SUM_COMPUTED = "calculator.sum.computed"
    """Sum computed over a valid shape collection."""

    SHAPE_REJECTED = "calculator.shape.rejected"
    """Element failed the capability check."""

    # ========== Formatter Events ==========
    RESULT_RENDERED = "formatter.rendered"
    """Sum rendered into an output representation."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Shape file parsed and validated."""

    SHAPE_CREATED = "registry.shape.created"
    """Shape built from a registered kind."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Shape file missing, malformed or invalid."""

    INVALID_SHAPE_ERROR = "error.invalid_shape"
    """Calculation aborted on an invalid shape."""

    UNKNOWN_SHAPE_KIND = "error.unknown_shape_kind"
    """Shape kind not present in the registry."""
