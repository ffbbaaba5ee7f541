"""Frequency tables backing the classifier.

Holds two relations learned from labeled examples:

- feature counts: ``(feature, category) -> int``
- category counts: ``category -> int``

Counts are only ever incremented. Looking up a key that was never seen
yields ``0`` rather than raising. Categories keep their first-seen order,
which the classifier uses to break ties deterministically.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Hashable

logger = logging.getLogger(__name__)


class FrequencyStore:
    """In-memory feature/category frequency tables.

    Both tables are guarded by a single re-entrant :attr:`lock`. Callers
    that perform a compound update (several increments that must appear
    together) or need a consistent snapshot across several reads should
    hold it for the duration::

        with store.lock:
            for feature in features:
                store.increment_feature(feature, category)
            store.increment_category(category)
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._feature_counts: dict[Hashable, dict[Hashable, int]] = defaultdict(dict)
        self._category_counts: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._category_counts)

    def __bool__(self) -> bool:
        return bool(self._category_counts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(features={len(self._feature_counts)}, "
            f"categories={len(self._category_counts)})"
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def increment_feature(self, feature: Hashable, category: Hashable) -> None:
        """Record one more occurrence of ``feature`` in ``category``."""
        with self.lock:
            counts = self._feature_counts[feature]
            counts[category] = counts.get(category, 0) + 1

    def increment_category(self, category: Hashable) -> None:
        """Record one more example labeled ``category``."""
        with self.lock:
            self._category_counts[category] = self._category_counts.get(category, 0) + 1

    def reset(self) -> None:
        """Forget everything learned so far."""
        with self.lock:
            self._feature_counts = defaultdict(dict)
            self._category_counts = {}
        logger.debug("Frequency store reset")

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def feature_count(self, feature: Hashable, category: Hashable) -> int:
        """Number of times ``feature`` was seen in ``category`` (0 if never)."""
        counts = self._feature_counts.get(feature)
        if counts is None:
            return 0
        return counts.get(category, 0)

    def feature_total(self, feature: Hashable) -> int:
        """Occurrences of ``feature`` summed over every known category."""
        with self.lock:
            return sum(self.feature_count(feature, cat) for cat in self._category_counts)

    def category_count(self, category: Hashable) -> int:
        """Number of examples labeled ``category`` (0 if never)."""
        return self._category_counts.get(category, 0)

    def total_category_count(self) -> int:
        """Total number of training examples seen."""
        with self.lock:
            return sum(self._category_counts.values())

    def known_features(self) -> set:
        with self.lock:
            return set(self._feature_counts)

    def known_categories(self) -> set:
        with self.lock:
            return set(self._category_counts)

    def categories_in_order(self) -> list:
        """Known categories in the order they were first trained."""
        with self.lock:
            return list(self._category_counts)
