"""Graph records and the registry that manages them."""

from .graph import (
    GraphStatus,
    GraphSection,
    GraphResult,
    GraphError,
    AlreadyExistsError,
    NotFoundError,
    InvalidGraphError,
    PersistenceError,
)
from .graph_registry import GraphRegistry

__all__ = [
    "GraphStatus",
    "GraphSection",
    "GraphResult",
    "GraphError",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidGraphError",
    "PersistenceError",
    "GraphRegistry",
]
