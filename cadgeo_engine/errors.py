"""
Engine Errors
=============

Exceptions raised inside the geometry engine. None of them escape the
GeometryEngine facade during geometry calls: load and call failures are
logged and answered by the reference backend.
"""


class GeometryEngineError(Exception):
    """Base class for geometry engine errors."""
    pass


class BackendUnavailableError(GeometryEngineError):
    """Raised when a performance backend cannot be imported or probed."""
    pass
