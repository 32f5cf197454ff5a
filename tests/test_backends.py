import math
import sys
import types

import pytest

from cadgeo_engine import (
    BackendUnavailableError,
    GeometryEngine,
    Point,
    Polygon,
    ReferenceBackend,
    TransformParams,
    VectorizedBackend,
    load_backend,
)
from cadgeo_engine.backends.base import OPERATIONS, GeometryBackend, missing_operations
from cadgeo_logging import LogEvent


SAMPLE_POLYGONS = [
    Polygon(()),
    Polygon.from_points([(3, 4)]),
    Polygon.from_points([(0, 0), (1, 0)]),
    Polygon.from_points([(0, 0), (4, 0), (4, 3)]),
    Polygon.from_points([(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]),
]


class RecordingLogger:
    """Captures structured log calls."""

    def __init__(self):
        self.records = []

    def _record(self, level, event, message, metadata=None, exc_info=None):
        self.records.append((level, event, message, metadata or {}, exc_info))

    def debug(self, event, message, metadata=None, exc_info=None):
        self._record("debug", event, message, metadata, exc_info)

    def info(self, event, message, metadata=None, exc_info=None):
        self._record("info", event, message, metadata, exc_info)

    def warning(self, event, message, metadata=None, exc_info=None):
        self._record("warning", event, message, metadata, exc_info)

    def error(self, event, message, metadata=None, exc_info=None):
        self._record("error", event, message, metadata, exc_info)

    def events(self):
        return [record[1] for record in self.records]


# ========== Backend agreement ==========

@pytest.mark.parametrize("polygon", SAMPLE_POLYGONS)
def test_backends_agree_on_metrics(polygon):
    reference, vectorized = ReferenceBackend(), VectorizedBackend()

    assert vectorized.area(polygon) == pytest.approx(reference.area(polygon))
    assert vectorized.perimeter(polygon) == pytest.approx(reference.perimeter(polygon))
    ref_centroid, vec_centroid = reference.centroid(polygon), vectorized.centroid(polygon)
    assert vec_centroid.x == pytest.approx(ref_centroid.x)
    assert vec_centroid.y == pytest.approx(ref_centroid.y)


def test_backends_agree_on_primitives_and_transform():
    reference, vectorized = ReferenceBackend(), VectorizedBackend()
    engine = GeometryEngine()
    matrix = engine.create_matrix(translate=Point(3, -1), rotate=0.4, scale=Point(2, 0.5))

    pairs = [
        (reference.square(7), vectorized.square(7)),
        (reference.triangle(6, 4), vectorized.triangle(6, 4)),
        (reference.circle(Point(1, 2), 3, 24), vectorized.circle(Point(1, 2), 3, 24)),
        (reference.rectangle(5, 2), vectorized.rectangle(5, 2)),
    ]
    pairs += [(reference.transform(a, matrix), vectorized.transform(b, matrix)) for a, b in pairs]

    for ref_polygon, vec_polygon in pairs:
        assert len(ref_polygon) == len(vec_polygon)
        for r, v in zip(ref_polygon, vec_polygon):
            assert v.x == pytest.approx(r.x, abs=1e-9)
            assert v.y == pytest.approx(r.y, abs=1e-9)


def test_backends_agree_on_hit_testing():
    reference, vectorized = ReferenceBackend(), VectorizedBackend()
    star = GeometryEngine().world_polygon(
        reference.circle(Point(0, 0), 10, 7),
        TransformParams(rotate=0.3),
    )

    for x in range(-12, 13, 3):
        for y in range(-12, 13, 3):
            point = Point(x, y)
            assert vectorized.point_in_polygon(point, star) == reference.point_in_polygon(point, star)


def test_both_backends_satisfy_protocol():
    for backend in (ReferenceBackend(), VectorizedBackend()):
        assert isinstance(backend, GeometryBackend)
        assert missing_operations(backend) == ()


# ========== Loader ==========

def test_load_backend_returns_vectorized_backend():
    backend = load_backend("cadgeo_engine.backends.vectorized")

    assert backend.name == "vectorized"


def test_load_backend_rejects_missing_module():
    with pytest.raises(BackendUnavailableError, match="Cannot import"):
        load_backend("cadgeo_engine.backends.does_not_exist")


def test_load_backend_rejects_module_without_backend_class():
    with pytest.raises(BackendUnavailableError, match="BACKEND_CLASS"):
        load_backend("cadgeo_engine.backends.base")


def test_missing_operations_lists_gaps():
    class Partial:
        def area(self, polygon):
            return 0.0

    missing = missing_operations(Partial())

    assert "area" not in missing
    assert set(missing) == set(OPERATIONS) - {"area"}



class NoRectangleBackend(VectorizedBackend):
    """Vectorized backend without a rectangle operation; counts area calls."""

    name = "no-rectangle"
    rectangle = None

    def __init__(self):
        self.area_calls = 0

    def area(self, polygon):
        self.area_calls += 1
        return super().area(polygon)


class EmptyBackend:
    name = "empty"


@pytest.fixture
def backend_module(monkeypatch):
    """Registers an importable module exposing the given BACKEND_CLASS."""
    def register(name, backend_class):
        module = types.ModuleType(name)
        module.BACKEND_CLASS = backend_class
        monkeypatch.setitem(sys.modules, name, module)
        return name

    return register


def test_load_backend_accepts_partial_backend(backend_module):
    backend = load_backend(backend_module("partial_backend", NoRectangleBackend))

    assert missing_operations(backend) == ("rectangle",)


def test_load_backend_rejects_backend_without_operations(backend_module):
    with pytest.raises(BackendUnavailableError, match="none of the geometry operations"):
        load_backend(backend_module("empty_backend", EmptyBackend))


# ========== Facade ==========

def test_initialize_loads_default_performance_backend():
    logger = RecordingLogger()

    engine = GeometryEngine.initialize(logger=logger)

    assert engine.is_backend_available()
    assert engine.active_backend_name == "vectorized"
    assert LogEvent.BACKEND_LOADED in logger.events()


def test_initialize_falls_back_when_backend_cannot_load():
    logger = RecordingLogger()

    engine = GeometryEngine.initialize("no_such_package.backend", logger=logger)

    assert not engine.is_backend_available()
    assert engine.active_backend_name == "reference"
    assert engine.area(engine.square(2)) == pytest.approx(4.0)
    assert logger.records[-1][0] == "warning"
    assert logger.records[-1][1] == LogEvent.BACKEND_UNAVAILABLE


def test_initialize_without_performance_backend():
    engine = GeometryEngine.initialize(None, logger=RecordingLogger())

    assert not engine.is_backend_available()


def test_failing_call_returns_reference_result(failing_backend):
    logger = RecordingLogger()
    engine = GeometryEngine(performance=failing_backend, logger=logger)

    result = engine.area(engine.square(2))

    assert result == pytest.approx(4.0)
    assert failing_backend.area_calls == 1
    level, event, _, metadata, exc_info = logger.records[-1]
    assert level == "error"
    assert event == LogEvent.BACKEND_CALL_FAILED
    assert metadata["operation"] == "area"
    assert isinstance(exc_info, RuntimeError)


def test_failing_backend_stays_enabled_after_a_failure(failing_backend):
    engine = GeometryEngine(performance=failing_backend, logger=RecordingLogger())

    engine.area(engine.square(2))
    engine.area(engine.square(3))

    assert engine.is_backend_available()
    assert failing_backend.area_calls == 2
    # Operations that do not fail still go through the performance backend
    assert engine.perimeter(engine.square(2)) == pytest.approx(8.0)


def test_matrix_builders_match_reference_functions(vectorized_engine):
    from cadgeo_engine.geometry import create_matrix

    expected = create_matrix(translate=Point(1, 2), rotate=math.pi / 3, scale=Point(2, 2))

    assert vectorized_engine.create_matrix(Point(1, 2), math.pi / 3, Point(2, 2)) == expected


def test_partial_backend_degrades_only_missing_operations(backend_module):
    logger = RecordingLogger()

    engine = GeometryEngine.initialize(backend_module("partial_backend", NoRectangleBackend), logger=logger)

    assert engine.is_backend_available()
    assert engine.area(engine.square(2)) == pytest.approx(4.0)
    assert engine.performance_backend.area_calls == 1
    assert engine.rectangle(2, 3) == Polygon.from_points([(0, 0), (2, 0), (2, 3), (0, 3)])
    assert LogEvent.BACKEND_UNAVAILABLE not in logger.events()
    partial = [r for r in logger.records if r[1] == LogEvent.BACKEND_PARTIAL]
    assert partial[0][0] == "warning"
    assert partial[0][3]["missing"] == ["rectangle"]


def test_invalid_circle_is_not_reported_as_backend_failure(vectorized_engine):
    logger = RecordingLogger()
    vectorized_engine.logger = logger

    with pytest.raises(ValueError, match="at least 3 segments"):
        vectorized_engine.circle(Point(0, 0), 1, 2)

    assert LogEvent.BACKEND_CALL_FAILED not in logger.events()
