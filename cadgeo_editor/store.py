"""
Shape Store
===========

Bounded Context: The ordered shape collection and the current selection.

Stand-in for the application state container. The canvas never mutates
shapes; it reports selections and transform patches through callbacks
that land here.

Design:
- Insertion order is drawing order (last added is on top)
- Unknown ids are a logged no-op, never an exception
- Delete listeners let the canvas drop sessions bound to removed shapes
"""

from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from cadgeo_engine import Point, TransformParams
from cadgeo_canvas import Shape, ShapeKind, new_shape_id
from cadgeo_logging import LogEvent, StructuredLogger, create_logger

from cadgeo_editor.config import ShapeDefaults


PATCHABLE_FIELDS = frozenset({"transform", "size", "base", "height", "radius", "center"})


class ShapeStore:
    """
    Ordered shapes plus the selected id.

    Usage:
        store = ShapeStore(ShapeDefaults(), seed=7)
        shape = store.add_shape("square")
        store.select(shape.id)
        store.update_shape(shape.id, {"transform": shape.transform.with_rotate(0.5)})
    """

    def __init__(
        self,
        defaults: Optional[ShapeDefaults] = None,
        seed: Optional[int] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.defaults = defaults or ShapeDefaults()
        self.logger = logger or create_logger("store")

        self._rng = np.random.default_rng(seed)
        self._shapes: List[Shape] = []
        self._selected_id: Optional[str] = None
        self._delete_listeners: List[Callable[[str], None]] = []

    # ========== Queries ==========

    @property
    def shapes(self) -> List[Shape]:
        """Snapshot of the collection in drawing order."""
        return list(self._shapes)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Shape]:
        return self.get(self._selected_id) if self._selected_id is not None else None

    def get(self, shape_id: str) -> Optional[Shape]:
        return next((s for s in self._shapes if s.id == shape_id), None)

    def __len__(self) -> int:
        return len(self._shapes)

    # ========== Mutations ==========

    def add_shape(
        self,
        kind: str,
        translate: Optional[Point] = None,
        shape_id: Optional[str] = None,
    ) -> Shape:
        """
        Append a shape with default dimensions.

        Args:
            kind: "square", "triangle" or "circle"
            translate: Placement (default: random point in the spawn area)
            shape_id: Explicit id (default: freshly generated)

        Raises:
            ValueError: Unknown kind or duplicate id
        """
        kind = ShapeKind(kind)
        shape_id = shape_id or new_shape_id()
        if self.get(shape_id) is not None:
            raise ValueError(f"Shape id '{shape_id}' already exists")

        if translate is None:
            translate = self._spawn_point()

        shape = Shape(id=shape_id, kind=kind, size=self.defaults.size,
                      transform=TransformParams(translate=translate))
        if kind is ShapeKind.TRIANGLE:
            shape.base = self.defaults.base
            shape.height = self.defaults.height
        elif kind is ShapeKind.CIRCLE:
            shape.radius = self.defaults.radius
            shape.center = Point(0.0, 0.0)

        self._shapes.append(shape)
        self.logger.info(
            event=LogEvent.SHAPE_ADDED,
            message=f"Added {kind.value}",
            metadata={'shape_id': shape_id, 'kind': kind.value, 'translate': translate.to_tuple()},
        )
        return shape

    def _spawn_point(self) -> Point:
        x, y = self.defaults.spawn_min + self._rng.random(2) * self.defaults.spawn_range
        return Point(float(x), float(y))

    def update_shape(self, shape_id: str, patch: Dict[str, Any]) -> Optional[Shape]:
        """
        Merge `patch` into the shape.

        Returns:
            The updated shape, or None when the id is unknown

        Raises:
            ValueError: Patch names a field that cannot be patched
        """
        unknown = set(patch) - PATCHABLE_FIELDS
        if unknown:
            raise ValueError(
                f"Cannot patch fields {sorted(unknown)}. "
                f"Patchable: {sorted(PATCHABLE_FIELDS)}"
            )

        index = self._index_of(shape_id)
        if index is None:
            self._log_stale(shape_id, "update")
            return None

        updated = replace(self._shapes[index], **patch)
        self._shapes[index] = updated
        self.logger.debug(
            event=LogEvent.SHAPE_UPDATED,
            message="Shape updated",
            metadata={'shape_id': shape_id, 'fields': sorted(patch)},
        )
        return updated

    def delete_shape(self, shape_id: str) -> bool:
        """Remove a shape; clears the selection if it was selected."""
        index = self._index_of(shape_id)
        if index is None:
            self._log_stale(shape_id, "delete")
            return False

        del self._shapes[index]
        if self._selected_id == shape_id:
            self._selected_id = None

        self.logger.info(
            event=LogEvent.SHAPE_DELETED,
            message="Shape deleted",
            metadata={'shape_id': shape_id, 'remaining': len(self._shapes)},
        )

        for listener in self._delete_listeners:
            listener(shape_id)
        return True

    def select(self, shape_id: Optional[str]) -> None:
        """Select a shape, or clear the selection with None."""
        if shape_id is not None and self._index_of(shape_id) is None:
            self._log_stale(shape_id, "select")
            return

        if shape_id == self._selected_id:
            return

        self._selected_id = shape_id
        self.logger.debug(
            event=LogEvent.SHAPE_SELECTED,
            message="Selection changed",
            metadata={'shape_id': shape_id},
        )

    def clear(self) -> None:
        for shape in list(self._shapes):
            self.delete_shape(shape.id)

    def add_delete_listener(self, listener: Callable[[str], None]) -> None:
        self._delete_listeners.append(listener)

    def _index_of(self, shape_id: str) -> Optional[int]:
        for index, shape in enumerate(self._shapes):
            if shape.id == shape_id:
                return index
        return None

    def _log_stale(self, shape_id: str, operation: str) -> None:
        self.logger.warning(
            event=LogEvent.SHAPE_STALE_REFERENCE,
            message=f"Ignoring {operation} of unknown shape",
            metadata={'shape_id': shape_id, 'operation': operation},
        )
