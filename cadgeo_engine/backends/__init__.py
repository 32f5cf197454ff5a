"""
Backends Layer
==============

Bounded Context: Interchangeable implementations of the geometry function set.

- ReferenceBackend: plain Python, always available
- VectorizedBackend: numpy, loaded as the performance backend
- GeometryEngine: facade with load-time probing and per-call fallback
"""

from cadgeo_engine.backends.base import OPERATIONS, GeometryBackend
from cadgeo_engine.backends.reference import ReferenceBackend
from cadgeo_engine.backends.vectorized import VectorizedBackend
from cadgeo_engine.backends.loader import load_backend
from cadgeo_engine.backends.facade import GeometryEngine, DEFAULT_PERFORMANCE_BACKEND

__all__ = [
    "OPERATIONS",
    "GeometryBackend",
    "ReferenceBackend",
    "VectorizedBackend",
    "load_backend",
    "GeometryEngine",
    "DEFAULT_PERFORMANCE_BACKEND",
]
