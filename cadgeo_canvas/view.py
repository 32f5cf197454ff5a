"""
Canvas View
===========

Bounded Context: The drawing surface as an owned resource.

The view owns the surface size, forwards pointer events to the
InteractionController and repaints a whole frame on every redraw.
Shapes, the selected id, the tool and the grid flag are read-only inputs
supplied by the shell on each call.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from cadgeo_engine import GeometryEngine, Point
from cadgeo_engine.geometry.primitives import DEFAULT_CIRCLE_SEGMENTS
from cadgeo_logging import LogEvent, StructuredLogger, create_logger

from cadgeo_canvas.interaction import InteractionController, Tool
from cadgeo_canvas.rendering import CanvasRenderer
from cadgeo_canvas.shapes import Shape


class CanvasView:
    """
    Headless canvas: pointer events in, frames out.

    Usage:
        view = CanvasView(engine, controller, size=(600, 400))
        view.on_pointer_down(Point(100, 100), shapes, Tool.SELECT)
        frame = view.redraw(shapes, selected_id, show_grid=True)
    """

    def __init__(
        self,
        engine: GeometryEngine,
        controller: InteractionController,
        renderer: Optional[CanvasRenderer] = None,
        size: Tuple[int, int] = (600, 400),
        circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
        logger: Optional[StructuredLogger] = None,
    ):
        self.engine = engine
        self.controller = controller
        self.renderer = renderer or CanvasRenderer()
        self.circle_segments = circle_segments
        self.logger = logger or create_logger("canvas")

        self._size = self._validate_size(*size)

    @staticmethod
    def _validate_size(width: int, height: int) -> Tuple[int, int]:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        return int(width), int(height)

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return self._size

    def resize(self, width: int, height: int) -> None:
        """Resize notification; the next redraw uses the new size."""
        new_size = self._validate_size(width, height)
        if new_size == self._size:
            return

        old_size = self._size
        self._size = new_size
        self.logger.info(
            event=LogEvent.CANVAS_RESIZED,
            message=f"Canvas resized to {new_size[0]}x{new_size[1]}",
            metadata={'old_size': list(old_size), 'new_size': list(new_size)},
        )

    # ========== Pointer Events ==========

    def on_pointer_down(self, pos: Point, shapes: Sequence[Shape], tool: Tool = Tool.SELECT) -> Optional[str]:
        return self.controller.pointer_down(pos, shapes, tool)

    def on_pointer_move(self, pos: Point, shapes: Sequence[Shape]):
        return self.controller.pointer_move(pos, shapes, self._size)

    def on_pointer_up(self) -> None:
        self.controller.pointer_up()

    def on_pointer_leave(self) -> None:
        self.controller.pointer_leave()

    # ========== Drawing ==========

    def redraw(
        self,
        shapes: Sequence[Shape],
        selected_id: Optional[str] = None,
        show_grid: bool = True,
    ) -> np.ndarray:
        """
        Clear and repaint the whole surface.

        Shapes are drawn in collection order, so later shapes end up on top
        (the same order hit-testing reverses).

        Returns:
            Frame of shape (height, width, 3), dtype uint8
        """
        frame = self.renderer.clear(self._size)
        if show_grid:
            frame = self.renderer.draw_grid(frame)

        for shape in shapes:
            world = shape.world_polygon(self.engine, self.circle_segments)
            frame = self.renderer.draw_shape(
                frame,
                world,
                self.engine.centroid(world),
                selected=shape.id == selected_id,
            )

        self.logger.debug(
            event=LogEvent.CANVAS_REDRAW,
            message="Canvas repainted",
            metadata={'shapes': len(shapes), 'selected_id': selected_id, 'show_grid': show_grid},
        )
        return frame
