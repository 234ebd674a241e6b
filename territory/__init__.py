"""Territory partition engine for line-drawing conquest games."""

from .errors import (
    AmbiguousPartitionError,
    DegeneratePartitionError,
    InvalidPathError,
    PartitionError,
)
from .field import Field
from .types import FieldParams, Provenance

__all__ = [
    "AmbiguousPartitionError",
    "DegeneratePartitionError",
    "Field",
    "FieldParams",
    "InvalidPathError",
    "PartitionError",
    "Provenance",
]
