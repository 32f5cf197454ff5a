"""Shared fixtures: engines over each backend, a failing backend, a manual clock."""

import pytest

from cadgeo_engine import GeometryEngine, ReferenceBackend, VectorizedBackend


class FailingBackend(ReferenceBackend):
    """Reference backend whose area always raises."""

    name = "failing"

    def __init__(self):
        self.area_calls = 0

    def area(self, polygon):
        self.area_calls += 1
        raise RuntimeError("area exploded")


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def reference_engine():
    return GeometryEngine()


@pytest.fixture
def vectorized_engine():
    return GeometryEngine(performance=VectorizedBackend())


@pytest.fixture(params=["reference", "vectorized"])
def engine(request):
    """Engine running on each backend in turn."""
    if request.param == "reference":
        return GeometryEngine()
    return GeometryEngine(performance=VectorizedBackend())


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def failing_backend():
    return FailingBackend()
