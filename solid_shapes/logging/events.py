"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>

    component: shape, calculation, printer, config, cli, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape construction and contract failures
    - calculation.*: Area aggregation
    - printer.*: Result formatting
    - config.* / cli.*: Entry point activity
    - error.*: Error conditions reported at the CLI boundary
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape built from configuration."""

    SHAPE_INVALID_STATE = "shape.invalid_state"
    """A shape raised InvalidStateError instead of returning a value."""

    # ========== Calculation Events ==========
    CALCULATION_COMPLETED = "calculation.completed"
    """Area (or volume) sum computed."""

    # ========== Printer Events ==========
    PRINTER_FORMATTED = "printer.formatted"
    """Sum formatted as JSON-shaped text."""

    # ========== Entry Point Events ==========
    CONFIG_LOADED = "config.loaded"
    """YAML configuration parsed and validated."""

    CLI_COMMAND = "cli.command"
    """CLI subcommand dispatched."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

    UNKNOWN_SHAPE_ERROR = "error.unknown_shape"
    """Configuration referenced an unregistered shape kind."""
