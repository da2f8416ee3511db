class GraphOperationError(Exception):
    """Base class for failures that abort a distribute/extrude invocation."""


class OptionsError(GraphOperationError):
    pass


class InvalidCountError(OptionsError):
    pass


class NoSelectionError(GraphOperationError):
    pass


class AmbiguousDirectionError(GraphOperationError):
    """Raised when a component does not yield exactly two extrusion endpoints."""


class DegenerateGeometryError(GraphOperationError):
    """Raised for zero-length paths and collapsed radial constructions."""


__all__ = [
    "GraphOperationError",
    "OptionsError",
    "InvalidCountError",
    "NoSelectionError",
    "AmbiguousDirectionError",
    "DegenerateGeometryError",
]
