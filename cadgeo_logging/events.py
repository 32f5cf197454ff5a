"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Event Naming Convention:
    <component>.<action>[.<detail>]

    component: backend, shape, interaction, canvas, benchmark, config, command
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - backend.*: Geometry backend loading and per-call fallback
    - shape.*: Shape collection changes
    - interaction.*: Pointer sessions on the canvas
    - canvas.*: Surface repaint and resize
    - benchmark.*: Timing runs
    - config.* / command.*: Editor shell
    """

    # ========== Backend Events ==========
    BACKEND_LOADED = "backend.loaded"
    """Performance backend imported and probed successfully."""

    BACKEND_UNAVAILABLE = "backend.unavailable"
    """Performance backend failed to load; reference backend in use."""

    BACKEND_PARTIAL = "backend.partial"
    """Performance backend loaded without some operations; those use the reference backend."""

    BACKEND_CALL_FAILED = "backend.call_failed"
    """A single performance backend call raised; reference result returned."""

    # ========== Shape Events ==========
    SHAPE_ADDED = "shape.added"
    SHAPE_UPDATED = "shape.updated"
    SHAPE_DELETED = "shape.deleted"
    SHAPE_SELECTED = "shape.selected"

    SHAPE_STALE_REFERENCE = "shape.stale_reference"
    """Update/delete/select referenced an id no longer in the collection."""

    # ========== Interaction Events ==========
    INTERACTION_SESSION_STARTED = "interaction.session_started"
    INTERACTION_SESSION_ENDED = "interaction.session_ended"
    INTERACTION_UPDATE_THROTTLED = "interaction.update_throttled"

    # ========== Canvas Events ==========
    CANVAS_REDRAW = "canvas.redraw"
    CANVAS_RESIZED = "canvas.resized"

    # ========== Benchmark Events ==========
    BENCHMARK_STARTED = "benchmark.started"
    BENCHMARK_COMPLETED = "benchmark.completed"

    # ========== Editor Shell Events ==========
    CONFIG_LOADED = "config.loaded"
    COMMAND_EXECUTED = "command.executed"
    COMMAND_FAILED = "command.failed"


# Event categories for filtering
BACKEND_EVENTS = {
    LogEvent.BACKEND_LOADED,
    LogEvent.BACKEND_UNAVAILABLE,
    LogEvent.BACKEND_PARTIAL,
    LogEvent.BACKEND_CALL_FAILED,
}

SHAPE_EVENTS = {
    LogEvent.SHAPE_ADDED,
    LogEvent.SHAPE_UPDATED,
    LogEvent.SHAPE_DELETED,
    LogEvent.SHAPE_SELECTED,
    LogEvent.SHAPE_STALE_REFERENCE,
}

INTERACTION_EVENTS = {
    LogEvent.INTERACTION_SESSION_STARTED,
    LogEvent.INTERACTION_SESSION_ENDED,
    LogEvent.INTERACTION_UPDATE_THROTTLED,
}

BENCHMARK_EVENTS = {
    LogEvent.BENCHMARK_STARTED,
    LogEvent.BENCHMARK_COMPLETED,
}

ERROR_EVENTS = {
    LogEvent.BACKEND_UNAVAILABLE,
    LogEvent.BACKEND_CALL_FAILED,
    LogEvent.SHAPE_STALE_REFERENCE,
    LogEvent.COMMAND_FAILED,
}
