"""Feature probability estimates over a :class:`FrequencyStore`.

Two estimates are provided:

- ``feature_probability``: the raw conditional ``P(feature|category)``,
  i.e. the fraction of ``category`` examples that contained ``feature``.
- ``weighted_average``: a smoothed version that starts at an assumed
  probability for features with no evidence and moves toward the raw
  estimate as the feature is observed more often::

      (weight * assumed + totals * basic) / (weight + totals)

  where ``totals`` is the number of times the feature was seen across
  *all* categories, not just the one being tested.
"""

from __future__ import annotations

from typing import Hashable, Optional, Protocol, runtime_checkable

from .store import FrequencyStore

DEFAULT_WEIGHT = 1.0
DEFAULT_ASSUMED_PROBABILITY = 0.5


@runtime_checkable
class FeatureProbability(Protocol):
    """Anything that can estimate ``P(feature|category)``."""

    def feature_probability(self, feature: Hashable, category: Hashable) -> float:
        ...


def validate_smoothing(weight: float, assumed_probability: float) -> None:
    """Raise ``ValueError`` for smoothing settings the formula cannot use."""
    if weight <= 0:
        raise ValueError(f"weight must be positive, got {weight}")
    if not 0.0 <= assumed_probability <= 1.0:
        raise ValueError(
            f"assumed_probability must be within [0, 1], got {assumed_probability}"
        )


class ProbabilityEstimator:
    """Computes feature probabilities from a frequency store.

    Args:
        store: The frequency tables to read counts from.
    """

    def __init__(self, store: FrequencyStore) -> None:
        self.store = store

    def feature_probability(self, feature: Hashable, category: Hashable) -> float:
        """Raw ``P(feature|category)``; ``0.0`` for a category never trained.

        Duplicate features within one training example are each counted,
        so a feature repeated in an example can push this above ``1.0``
        (``train("a", ["x", "x"])`` gives ``2.0``). Without duplicates it
        stays in ``[0, 1]``.
        """
        category_count = self.store.category_count(category)
        if category_count == 0:
            return 0.0
        return self.store.feature_count(feature, category) / category_count

    def weighted_average(
        self,
        feature: Hashable,
        category: Hashable,
        weight: float = DEFAULT_WEIGHT,
        assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
        raw_probability: Optional[float] = None,
        calculator: Optional[FeatureProbability] = None,
    ) -> float:
        """Smoothed ``P(feature|category)``.

        Args:
            feature: The feature to estimate.
            category: The category to test against.
            weight: How many observations the assumed probability is worth.
            assumed_probability: Estimate used when the feature is unseen.
            raw_probability: Use this value instead of the raw estimate.
            calculator: Use this object's ``feature_probability`` instead
                of the raw estimate.

        Returns:
            The weighted average. It lies in ``[0, 1]`` only when the raw
            probability does; duplicate features in training examples can
            lift it above ``1.0`` (``train("a", ["x", "x"])`` gives ``1.5``
            for ``("x", "a")``). The value is not clamped.

        Raises:
            ValueError: If the smoothing settings are invalid or both
                ``raw_probability`` and ``calculator`` are given.
        """
        validate_smoothing(weight, assumed_probability)
        if raw_probability is not None and calculator is not None:
            raise ValueError("Pass either raw_probability or calculator, not both")

        if raw_probability is not None:
            basic = raw_probability
        elif calculator is not None:
            basic = calculator.feature_probability(feature, category)
        else:
            basic = self.feature_probability(feature, category)

        totals = self.store.feature_total(feature)
        return (weight * assumed_probability + totals * basic) / (weight + totals)
