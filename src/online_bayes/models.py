"""Data models for classification results."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Hashable


@functools.total_ordering
@dataclass(frozen=True)
class Classification:
    """The outcome of scoring one category for a set of features.

    ``probability`` is the unnormalized posterior score
    ``P(category) * PROD(P(feature|category))``. It is only meaningful
    relative to the scores of other categories for the same features.

    Records are ordered by ``probability``. Equal probabilities are ordered
    by ``rank``, the record's position in the classifier's ranking (0 is
    best, and ties there follow the order categories were first trained),
    so the better-ranked record compares greater. ``max(results)`` is
    therefore the top category.
    """

    features: tuple = field(compare=False)
    category: Hashable
    probability: float
    rank: int = field(default=0, repr=False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return (self.probability, -self.rank) < (other.probability, -other.rank)

    def __str__(self) -> str:
        return f"Classification [category={self.category}, probability={self.probability}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "probability": round(self.probability, 6),
            "features": list(self.features),
        }
