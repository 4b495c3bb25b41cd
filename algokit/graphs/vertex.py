"""
Graph vertex.

A vertex is identified by a non-negative integer id. The optional label is
descriptive only and takes no part in equality or hashing.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Vertex:
    """
    Immutable graph vertex keyed by integer id.

    Attributes:
        id: Non-negative integer identity key.
        label: Optional non-empty display name. Not part of identity.

    Raises:
        TypeError: If id is not an int, or label is given but is not a str.
        ValueError: If id is negative or label is the empty string.

    Example:
        >>> Vertex(3) == Vertex(3, "Boston")
        True
        >>> str(Vertex(3, "Boston"))
        'Boston [3]'
    """

    id: int
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"Vertex id must be an int, got {type(self.id).__name__}")
        if self.id < 0:
            raise ValueError(f"Vertex id must be non-negative, got {self.id}")
        if self.label is not None:
            if not isinstance(self.label, str):
                raise TypeError(f"Vertex label must be a str, got {type(self.label).__name__}")
            if not self.label:
                raise ValueError("Vertex label must not be empty")

    @property
    def has_label(self) -> bool:
        return self.label is not None

    def __str__(self) -> str:
        if self.has_label:
            return f"{self.label} [{self.id}]"
        return f"[{self.id}]"
