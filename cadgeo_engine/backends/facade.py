"""
Geometry Engine Facade
======================

Bounded Context: Backend selection and per-call fallback.

Responsibilities:
  - Probe the performance backend once at initialization
  - Build the operation table once (wrapped performance call or reference)
  - Answer every geometry call; never raise backend failures to callers

Fallback policy:
  - Load failure: logged as backend.unavailable, every operation uses the
    reference backend for the lifetime of the engine.
  - Missing operations: logged as backend.partial, only those operations
    use the reference backend.
  - Call failure: logged as backend.call_failed, that call is answered by
    the reference backend. The performance backend stays in the table, so a
    partially broken backend degrades operation by operation.

The engine is an explicit object passed to its consumers (canvas, editor,
benchmark); there is no module-level backend state.
"""

from typing import Any, Callable, Dict, Optional

from cadgeo_logging import LogEvent, StructuredLogger, create_logger

from cadgeo_engine.backends.base import OPERATIONS, GeometryBackend, missing_operations
from cadgeo_engine.backends.loader import load_backend
from cadgeo_engine.backends.reference import ReferenceBackend
from cadgeo_engine.errors import BackendUnavailableError
from cadgeo_engine.geometry import transforms
from cadgeo_engine.geometry.primitives import DEFAULT_CIRCLE_SEGMENTS
from cadgeo_engine.geometry.types import Matrix, Point, Polygon, TransformParams, ORIGIN


DEFAULT_PERFORMANCE_BACKEND = "cadgeo_engine.backends.vectorized"


class GeometryEngine:
    """
    Uniform geometry surface over a performance and a reference backend.

    Usage:
        engine = GeometryEngine.initialize()
        engine.is_backend_available()      # True when numpy backend loaded
        engine.area(engine.square(2))      # 4.0

        # Injected backends (tests, custom builds)
        engine = GeometryEngine(ReferenceBackend(), performance=MyBackend())
    """

    def __init__(
        self,
        reference: Optional[GeometryBackend] = None,
        performance: Optional[GeometryBackend] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            reference: Backend answering fallbacks (default: ReferenceBackend)
            performance: Backend tried first, None when unavailable
            logger: Structured logger (default: component "engine")
        """
        self.reference_backend = reference or ReferenceBackend()
        self.performance_backend = performance
        self.logger = logger or create_logger("engine")
        self._table: Dict[str, Callable[..., Any]] = self._build_table()

    @classmethod
    def initialize(
        cls,
        performance_backend: Optional[str] = DEFAULT_PERFORMANCE_BACKEND,
        logger: Optional[StructuredLogger] = None,
    ) -> "GeometryEngine":
        """
        Load the performance backend (if any) and build the engine.

        Never raises on backend problems: a failed load leaves the engine
        running on the reference backend.

        Args:
            performance_backend: Dotted module path, or None to skip loading
            logger: Structured logger
        """
        logger = logger or create_logger("engine")
        performance = None

        if performance_backend:
            try:
                performance = load_backend(performance_backend)
                logger.info(
                    event=LogEvent.BACKEND_LOADED,
                    message=f"Performance backend '{performance.name}' loaded",
                    metadata={'module': performance_backend},
                )
                missing = missing_operations(performance)
                if missing:
                    logger.warning(
                        event=LogEvent.BACKEND_PARTIAL,
                        message=f"Performance backend is missing operations: {', '.join(missing)}",
                        metadata={'module': performance_backend, 'missing': list(missing)},
                    )
            except BackendUnavailableError as e:
                logger.warning(
                    event=LogEvent.BACKEND_UNAVAILABLE,
                    message="Performance backend unavailable, using reference implementation",
                    metadata={'module': performance_backend, 'error': str(e)},
                )

        return cls(performance=performance, logger=logger)

    def _build_table(self) -> Dict[str, Callable[..., Any]]:
        table = {}
        for operation in OPERATIONS:
            fallback = getattr(self.reference_backend, operation)
            primary = getattr(self.performance_backend, operation, None)
            if callable(primary):
                table[operation] = self._with_fallback(operation, primary, fallback)
            else:
                table[operation] = fallback
        return table

    def _with_fallback(
        self,
        operation: str,
        primary: Callable[..., Any],
        fallback: Callable[..., Any],
    ) -> Callable[..., Any]:
        def call(*args, **kwargs):
            try:
                return primary(*args, **kwargs)
            except Exception as e:
                self.logger.error(
                    event=LogEvent.BACKEND_CALL_FAILED,
                    message=f"Performance backend failed on '{operation}', using reference result",
                    metadata={'operation': operation, 'backend': getattr(self.performance_backend, 'name', None)},
                    exc_info=e,
                )
                return fallback(*args, **kwargs)

        call.__name__ = operation
        return call

    def is_backend_available(self) -> bool:
        """True when the performance backend loaded successfully."""
        return self.performance_backend is not None

    @property
    def active_backend_name(self) -> str:
        if self.performance_backend is not None:
            return self.performance_backend.name
        return self.reference_backend.name

    # ========== Metrics ==========

    def area(self, polygon: Polygon) -> float:
        return self._table["area"](polygon)

    def perimeter(self, polygon: Polygon) -> float:
        return self._table["perimeter"](polygon)

    def centroid(self, polygon: Polygon) -> Point:
        return self._table["centroid"](polygon)

    # ========== Transforms ==========

    def transform(self, polygon: Polygon, matrix: Matrix) -> Polygon:
        return self._table["transform"](polygon, matrix)

    def world_polygon(self, local: Polygon, params: TransformParams) -> Polygon:
        """Local-space polygon placed by a shape's transform parameters."""
        return self.transform(local, transforms.matrix_from_params(params))

    # Matrix builders are O(1) and always computed by the reference engine.

    def create_matrix(
        self,
        translate: Optional[Point] = None,
        rotate: Optional[float] = None,
        scale: Optional[Point] = None,
    ) -> Matrix:
        return transforms.create_matrix(translate=translate, rotate=rotate, scale=scale)

    def translate_by(self, dx: float, dy: float) -> Matrix:
        return transforms.translate_by(dx, dy)

    def rotate_by(self, angle: float) -> Matrix:
        return transforms.rotate_by(angle)

    def scale_by(self, sx: float, sy: float) -> Matrix:
        return transforms.scale_by(sx, sy)

    def compose(self, outer: Matrix, inner: Matrix) -> Matrix:
        return transforms.compose(outer, inner)

    # ========== Hit testing ==========

    def point_in_polygon(self, point: Point, polygon: Polygon) -> bool:
        return self._table["point_in_polygon"](point, polygon)

    # ========== Primitives ==========

    def square(self, size: float) -> Polygon:
        return self._table["square"](size)

    def triangle(self, base: float, height: float) -> Polygon:
        return self._table["triangle"](base, height)

    def circle(
        self,
        center: Point = ORIGIN,
        radius: float = 1.0,
        segments: int = DEFAULT_CIRCLE_SEGMENTS,
    ) -> Polygon:
        if segments < 3:
            raise ValueError(f"A circle needs at least 3 segments, got {segments}")
        return self._table["circle"](center, radius, segments)

    def rectangle(self, width: float, height: float) -> Polygon:
        return self._table["rectangle"](width, height)
