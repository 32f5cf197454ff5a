"""
Backend Loader
==============

Imports a backend module by dotted path and instantiates its BACKEND_CLASS.
Import errors, a missing class, constructor errors and a backend exposing
none of OPERATIONS are reported as BackendUnavailableError.

A backend that exposes only some operations is still returned; the facade
routes the missing ones to the reference backend.
"""

import importlib

from cadgeo_engine.backends.base import OPERATIONS, GeometryBackend, missing_operations
from cadgeo_engine.errors import BackendUnavailableError


def load_backend(module_path: str) -> GeometryBackend:
    """
    Load and probe a geometry backend.

    Args:
        module_path: Dotted module path exposing BACKEND_CLASS

    Returns:
        Backend instance providing at least one operation in OPERATIONS

    Raises:
        BackendUnavailableError: If the backend cannot be used
    """
    try:
        module = importlib.import_module(module_path)
    except Exception as e:
        raise BackendUnavailableError(f"Cannot import backend module '{module_path}': {e}") from e

    backend_class = getattr(module, "BACKEND_CLASS", None)
    if backend_class is None:
        raise BackendUnavailableError(f"Module '{module_path}' does not define BACKEND_CLASS")

    try:
        backend = backend_class()
    except Exception as e:
        raise BackendUnavailableError(f"Backend '{module_path}' failed to initialize: {e}") from e

    if len(missing_operations(backend)) == len(OPERATIONS):
        raise BackendUnavailableError(f"Backend '{module_path}' provides none of the geometry operations")

    return backend
