"""Custom exceptions for the directed graph library."""


class GraphError(Exception):
    """Base exception for graph operations."""


class InvalidVertexError(GraphError):
    """Raised when a value used as a vertex has no usable string id."""
