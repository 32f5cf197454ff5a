"""
Interaction State Machine
=========================

Bounded Context: Pointer-driven manipulation of one shape at a time.

States:
    Idle --pointer_down on a shape--> Dragging(tool) --pointer_up/leave--> Idle

Tools:
    select  translate follows the pointer, keeping the grab offset; the
            shape's bounding box is clamped inside the surface minus a margin
    rotate  absolute angle from the shape's translate toward the pointer
    scale   uniform factor |pointer - translate| / initial distance,
            clamped to [min_scale, max_scale]

Moves are throttled to one update per throttle_ms; the first move after
pointer_down always goes through. Updates are delivered through the
on_shape_update callback as {"transform": TransformParams}; the controller
never mutates shapes itself.
"""

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from cadgeo_engine import GeometryEngine, Point, TransformParams, ORIGIN
from cadgeo_engine.geometry.metrics import bounding_box
from cadgeo_engine.geometry.primitives import DEFAULT_CIRCLE_SEGMENTS
from cadgeo_logging import LogEvent, StructuredLogger, create_logger

from cadgeo_canvas.shapes import Shape


SelectCallback = Callable[[Optional[str]], None]
UpdateCallback = Callable[[str, Dict[str, Any]], None]

# Below this grab distance a scale ratio is meaningless
MIN_SCALE_DISTANCE = 1e-9


class Tool(str, Enum):
    SELECT = "select"
    ROTATE = "rotate"
    SCALE = "scale"


@dataclass
class DragSession:
    """
    State of the single in-progress manipulation.

    anchor_offset is only meaningful for select, initial_scale_distance
    only for scale.
    """

    shape_id: str
    tool: Tool
    anchor_offset: Point = ORIGIN
    last_pointer_pos: Point = ORIGIN
    initial_scale_distance: float = 0.0
    last_update_at: float = float("-inf")
    active: bool = True


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class InteractionController:
    """
    Translates raw pointer events into transform updates.

    Usage:
        controller = InteractionController(
            engine,
            on_shape_select=store.select,
            on_shape_update=store.update_shape,
        )
        controller.pointer_down(Point(120, 80), store.shapes, Tool.SCALE)
        controller.pointer_move(Point(220, 80), store.shapes, (600, 400))
        controller.pointer_up()
    """

    def __init__(
        self,
        engine: GeometryEngine,
        on_shape_select: SelectCallback,
        on_shape_update: UpdateCallback,
        throttle_ms: float = 16.0,
        min_scale: float = 0.1,
        max_scale: float = 5.0,
        margin: float = 10.0,
        circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            engine: Geometry engine used for world polygons and hit tests
            on_shape_select: Called with the hit shape id, or None on a miss
            on_shape_update: Called with (shape_id, patch)
            throttle_ms: Minimum interval between applied moves
            min_scale, max_scale: Bounds for the scale tool
            margin: Distance kept between a dragged shape and the surface edge
            circle_segments: Segments used to build circle polygons
            clock: Monotonic clock in seconds
            logger: Structured logger (default: component "interaction")
        """
        if min_scale <= 0 or min_scale > max_scale:
            raise ValueError(
                f"Scale bounds must satisfy 0 < min_scale <= max_scale, got [{min_scale}, {max_scale}]"
            )

        self.engine = engine
        self.on_shape_select = on_shape_select
        self.on_shape_update = on_shape_update
        self.throttle_ms = throttle_ms
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.margin = margin
        self.circle_segments = circle_segments
        self._clock = clock
        self.logger = logger or create_logger("interaction")

        self._session: Optional[DragSession] = None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._session is not None and self._session.active

    def hit_test(self, pos: Point, shapes: Sequence[Shape]) -> Optional[Shape]:
        """
        Topmost shape under the pointer.

        Shapes later in the sequence are drawn on top, so they are tested first.
        """
        for shape in reversed(shapes):
            world = shape.world_polygon(self.engine, self.circle_segments)
            if self.engine.point_in_polygon(pos, world):
                return shape
        return None

    def pointer_down(self, pos: Point, shapes: Sequence[Shape], tool: Tool = Tool.SELECT) -> Optional[str]:
        """
        Select the shape under the pointer and start a session with `tool`.

        Returns:
            Id of the selected shape, None when nothing was hit
        """
        if self._session is not None:
            self._end_session("restarted")

        tool = Tool(tool)
        hit = self.hit_test(pos, shapes)
        if hit is None:
            self.on_shape_select(None)
            return None

        self.on_shape_select(hit.id)

        translate = hit.transform.translate
        session = DragSession(shape_id=hit.id, tool=tool, last_pointer_pos=pos)
        if tool is Tool.SELECT:
            session.anchor_offset = pos - translate
        elif tool is Tool.SCALE:
            session.initial_scale_distance = pos.distance_to(translate)
        self._session = session

        self.logger.info(
            event=LogEvent.INTERACTION_SESSION_STARTED,
            message=f"Started {tool.value} session",
            metadata={'shape_id': hit.id, 'tool': tool.value, 'pointer': pos.to_tuple()},
        )
        return hit.id

    def pointer_move(
        self,
        pos: Point,
        shapes: Sequence[Shape],
        surface_size: Tuple[int, int],
    ) -> Optional[TransformParams]:
        """
        Apply the active tool for a pointer move.

        Args:
            pos: Pointer position in canvas coordinates
            shapes: Current shape collection (read-only)
            surface_size: (width, height) of the canvas

        Returns:
            The new TransformParams sent to on_shape_update, or None when
            idle, throttled, or the move produced no update
        """
        session = self._session
        if session is None or not session.active:
            return None

        now = self._clock()
        session.last_pointer_pos = pos
        if (now - session.last_update_at) * 1000.0 < self.throttle_ms:
            self.logger.debug(
                event=LogEvent.INTERACTION_UPDATE_THROTTLED,
                message="Pointer move dropped by throttle",
                metadata={'shape_id': session.shape_id},
            )
            return None

        shape = next((s for s in shapes if s.id == session.shape_id), None)
        if shape is None:
            self.logger.warning(
                event=LogEvent.SHAPE_STALE_REFERENCE,
                message="Dragged shape no longer exists, ending session",
                metadata={'shape_id': session.shape_id},
            )
            self._end_session("stale_shape")
            return None

        session.last_update_at = now

        if session.tool is Tool.SELECT:
            params = self._drag(shape, session, pos, surface_size)
        elif session.tool is Tool.ROTATE:
            params = self._rotate(shape, pos)
        else:
            params = self._scale(shape, session, pos)

        if params is None:
            return None

        self.on_shape_update(shape.id, {"transform": params})
        return params

    def pointer_up(self) -> None:
        self._end_session("pointer_up")

    def pointer_leave(self) -> None:
        self._end_session("pointer_leave")

    def forget_shape(self, shape_id: str) -> None:
        """Drop the session if it is bound to a deleted shape."""
        if self._session is not None and self._session.shape_id == shape_id:
            self._end_session("shape_deleted")

    def _end_session(self, reason: str) -> None:
        session = self._session
        if session is None:
            return

        session.active = False
        self._session = None
        self.logger.info(
            event=LogEvent.INTERACTION_SESSION_ENDED,
            message=f"Ended {session.tool.value} session",
            metadata={'shape_id': session.shape_id, 'reason': reason},
        )

    # ========== Tools ==========

    def _drag(
        self,
        shape: Shape,
        session: DragSession,
        pos: Point,
        surface_size: Tuple[int, int],
    ) -> TransformParams:
        candidate = shape.transform.with_translate(pos - session.anchor_offset)
        world = self.engine.world_polygon(
            shape.local_polygon(self.engine, self.circle_segments), candidate
        )
        min_x, min_y, max_x, max_y = bounding_box(world)
        width, height = surface_size

        offset_x = self._clamp_offset(min_x, max_x, width)
        offset_y = self._clamp_offset(min_y, max_y, height)
        if offset_x == 0.0 and offset_y == 0.0:
            return candidate

        translate = candidate.translate + Point(offset_x, offset_y)
        return candidate.with_translate(translate)

    def _clamp_offset(self, low: float, high: float, extent: float) -> float:
        """Shift that moves [low, high] inside [margin, extent - margin]."""
        offset = 0.0
        if high > extent - self.margin:
            offset = (extent - self.margin) - high
        if low + offset < self.margin:
            # Too big to fit: pin to the low margin
            offset = self.margin - low
        return offset

    def _rotate(self, shape: Shape, pos: Point) -> TransformParams:
        center = shape.transform.translate
        angle = math.atan2(pos.y - center.y, pos.x - center.x)
        return shape.transform.with_rotate(angle)

    def _scale(self, shape: Shape, session: DragSession, pos: Point) -> Optional[TransformParams]:
        if session.initial_scale_distance < MIN_SCALE_DISTANCE:
            return None

        distance = pos.distance_to(shape.transform.translate)
        factor = clamp(distance / session.initial_scale_distance, self.min_scale, self.max_scale)
        return shape.transform.with_uniform_scale(factor)
