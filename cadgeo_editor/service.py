"""
Editor Service - headless canvas editor orchestrator.

This module provides the EditorService class which wires the geometry
engine, the shape store, the interaction controller and the canvas view
together, the way the application shell would: pointer events go to the
canvas, selections and transform patches come back to the store, and every
render repaints from the store's current state.

Architecture:
- One GeometryEngine, initialized once and injected everywhere
- ShapeStore owns shapes and selection (single source of truth)
- CanvasView owns the surface; InteractionController owns the drag session
- CommandRegistry exposes every editor action by name (scenario replay, CLI)

Threading Model:
- Single-threaded, event-driven. Callers deliver events in order.
"""

import math
import time
from typing import Any, Callable, Dict, Optional

import numpy as np

from cadgeo_bench import run_comparison
from cadgeo_engine import GeometryEngine, Point
from cadgeo_canvas import CanvasRenderer, CanvasView, InteractionController, Tool
from cadgeo_logging import LogEvent, StructuredLogger, create_logger

from cadgeo_editor.config import EditorConfig
from cadgeo_editor.registry import CommandRegistry
from cadgeo_editor.store import ShapeStore


class EditorService:
    """
    Headless editor: shapes, tool, grid flag and a canvas.

    Usage:
        service = EditorService(EditorConfig.from_yaml("config/editor.yaml"), seed=7)

        shape = service.add_shape("square", Point(200, 150))
        service.set_tool("rotate")
        service.pointer_down(Point(210, 150))
        service.pointer_move(Point(200, 250))
        service.pointer_up()

        frame = service.render()
        props = service.selected_properties()
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        engine: Optional[GeometryEngine] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            config: Editor configuration (default: EditorConfig.default())
            engine: Pre-built engine (default: initialized from config.backend)
            seed: Seed for shape spawn positions
            clock: Monotonic clock in seconds, used for move throttling
            logger: Structured logger (default: component "editor")
        """
        self.config = config or EditorConfig.default()
        self.logger = logger or create_logger("editor")

        if engine is None:
            backend = self.config.backend
            engine = GeometryEngine.initialize(
                performance_backend=backend.performance_backend if backend.enabled else None,
            )
        self.engine = engine

        self.store = ShapeStore(self.config.shapes, seed=seed)

        interaction = self.config.interaction
        self.controller = InteractionController(
            engine,
            on_shape_select=self.store.select,
            on_shape_update=self.store.update_shape,
            throttle_ms=interaction.throttle_ms,
            min_scale=interaction.min_scale,
            max_scale=interaction.max_scale,
            margin=self.config.canvas.margin,
            circle_segments=self.config.shapes.circle_segments,
            clock=clock,
        )
        self.store.add_delete_listener(self.controller.forget_shape)

        canvas = self.config.canvas
        self.view = CanvasView(
            engine,
            self.controller,
            renderer=CanvasRenderer(grid_spacing=canvas.grid_spacing),
            size=canvas.size,
            circle_segments=self.config.shapes.circle_segments,
        )

        self.tool = Tool.SELECT
        self.show_grid = canvas.show_grid

        self.command_registry = CommandRegistry()
        self._setup_command_handlers()

        self.logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Editor service initialized",
            metadata={
                'canvas': list(canvas.size),
                'backend': engine.active_backend_name,
                'backend_available': engine.is_backend_available(),
            },
        )

    # ========== Shell Actions ==========

    def add_shape(self, kind: str, translate: Optional[Point] = None):
        return self.store.add_shape(kind, translate)

    def delete_selected(self) -> bool:
        if self.store.selected_id is None:
            return False
        return self.store.delete_shape(self.store.selected_id)

    def set_tool(self, tool: str) -> None:
        self.tool = Tool(tool)

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

    def resize(self, width: int, height: int) -> None:
        self.view.resize(width, height)

    # ========== Pointer Events ==========

    def pointer_down(self, pos: Point) -> Optional[str]:
        return self.view.on_pointer_down(pos, self.store.shapes, self.tool)

    def pointer_move(self, pos: Point):
        return self.view.on_pointer_move(pos, self.store.shapes)

    def pointer_up(self) -> None:
        self.view.on_pointer_up()

    def pointer_leave(self) -> None:
        self.view.on_pointer_leave()

    # ========== Output ==========

    def render(self) -> np.ndarray:
        """Repaint the canvas from the store's current state."""
        return self.view.redraw(self.store.shapes, self.store.selected_id, self.show_grid)

    def selected_properties(self) -> Optional[Dict[str, Any]]:
        """
        Properties panel data for the selected shape.

        Returns:
            kind, area, perimeter, centroid (of the world polygon),
            rotation in whole degrees within [0, 360) and the scale factor;
            None when nothing is selected
        """
        shape = self.store.selected
        if shape is None:
            return None

        world = shape.world_polygon(self.engine, self.config.shapes.circle_segments)
        centroid = self.engine.centroid(world)
        degrees = round(math.degrees(shape.transform.rotate)) % 360

        return {
            "id": shape.id,
            "kind": shape.kind.value,
            "area": self.engine.area(world),
            "perimeter": self.engine.perimeter(world),
            "centroid": centroid.to_tuple(),
            "rotation_deg": degrees,
            "scale": shape.transform.scale.x,
        }

    def run_benchmark(self, iterations: Optional[int] = None):
        """Backend comparison on this editor's engine."""
        return run_comparison(self.engine, iterations or self.config.benchmark.iterations)

    # ========== Commands ==========

    def _setup_command_handlers(self):
        """Register every editor action with the command registry."""
        registry = self.command_registry

        registry.register("add_shape", self._handle_add_shape, "Add a square, triangle or circle")
        registry.register("select", self._handle_select, "Select a shape by id (null clears)")
        registry.register("delete_selected", self.delete_selected, "Delete the selected shape")
        registry.register("set_tool", self._handle_set_tool, "Switch tool: select, rotate, scale")
        registry.register("toggle_grid", self.toggle_grid, "Show/hide the grid")
        registry.register("resize", self._handle_resize, "Resize the canvas surface")
        registry.register("pointer_down", self._handle_pointer_down, "Pointer pressed at x, y")
        registry.register("pointer_move", self._handle_pointer_move, "Pointer moved to x, y")
        registry.register("pointer_up", self.pointer_up, "Pointer released")
        registry.register("pointer_leave", self.pointer_leave, "Pointer left the surface")
        registry.register("render", self.render, "Repaint and return a frame")
        registry.register("properties", self.selected_properties, "Selected shape properties")

    def _handle_add_shape(self, command: Dict):
        translate = None
        if "x" in command and "y" in command:
            translate = Point(float(command["x"]), float(command["y"]))
        return self.store.add_shape(command["kind"], translate, command.get("id"))

    def _handle_select(self, command: Dict):
        self.store.select(command.get("id"))

    def _handle_set_tool(self, command: Dict):
        self.set_tool(command["tool"])

    def _handle_resize(self, command: Dict):
        self.resize(int(command["width"]), int(command["height"]))

    def _handle_pointer_down(self, command: Dict):
        return self.pointer_down(_point(command))

    def _handle_pointer_move(self, command: Dict):
        return self.pointer_move(_point(command))


def _point(command: Dict) -> Point:
    return Point(float(command["x"]), float(command["y"]))
