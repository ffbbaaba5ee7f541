"""Online naive Bayes classification.

Learns associations between discrete features (e.g. word tokens) and
categories one labeled example at a time, then ranks categories for an
unlabeled feature set by::

    score(category) = P(category) * PROD(P_w(feature|category))

where ``P_w`` is the smoothed weighted-average feature probability from
:mod:`online_bayes.probability`. The score is an unnormalized posterior
(there is no division by the marginal likelihood of the features); it is
only used to rank categories against each other.

Features:
- Incremental training with no separate fit step
- Smoothing so unseen features never zero out a category
- Full ranked results or just the arg-max category
- Thread-safe training and classification per instance
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Optional

from .models import Classification
from .probability import (
    DEFAULT_ASSUMED_PROBABILITY,
    DEFAULT_WEIGHT,
    ProbabilityEstimator,
    validate_smoothing,
)
from .store import FrequencyStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Abstract Classifier
# ---------------------------------------------------------------------------

class Classifier(ABC):
    """Base for classifiers built on feature/category frequency counts.

    Owns its own :class:`FrequencyStore`; separate instances never share
    learned state. Subclasses implement :meth:`classify`.

    ``weight`` and ``assumed_probability`` are the smoothing settings used
    by :meth:`weighted_average_probability` when none are passed.
    """

    weight: float = DEFAULT_WEIGHT
    assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY

    def __init__(self) -> None:
        self._store = FrequencyStore()
        self.estimator = ProbabilityEstimator(self._store)

    @property
    def store(self) -> FrequencyStore:
        return self._store

    @property
    def is_trained(self) -> bool:
        """Whether at least one example has been learned."""
        return bool(self._store)

    @property
    def categories(self) -> set:
        """Categories the classifier knows about."""
        return self._store.known_categories()

    @property
    def features(self) -> set:
        """Features the classifier knows about."""
        return self._store.known_features()

    def reset(self) -> None:
        """Discard all learned feature and category counts."""
        self._store.reset()

    def train(self, category: Hashable, features: Iterable[Hashable]) -> None:
        """Learn that ``features`` were observed together with ``category``.

        Every feature is counted, duplicates included, and the category
        count is incremented exactly once. The update is applied under the
        store lock so concurrent readers see all of it or none of it.

        Args:
            category: The label of the example.
            features: The example's features; may be empty.
        """
        features = list(features)
        with self._store.lock:
            for feature in features:
                self._store.increment_feature(feature, category)
            self._store.increment_category(category)
        logger.debug("Trained category %r with %d features", category, len(features))

    learn = train

    def feature_count(self, feature: Hashable, category: Hashable) -> int:
        return self._store.feature_count(feature, category)

    def category_count(self, category: Hashable) -> int:
        return self._store.category_count(category)

    def total_category_count(self) -> int:
        return self._store.total_category_count()

    def feature_probability(self, feature: Hashable, category: Hashable) -> float:
        return self.estimator.feature_probability(feature, category)

    def weighted_average_probability(
        self,
        feature: Hashable,
        category: Hashable,
        weight: Optional[float] = None,
        assumed_probability: Optional[float] = None,
        raw_probability: Optional[float] = None,
    ) -> float:
        """See :meth:`ProbabilityEstimator.weighted_average`.

        ``weight`` and ``assumed_probability`` default to this classifier's
        own settings, so the result matches the per-feature terms of the
        likelihood.
        """
        return self.estimator.weighted_average(
            feature,
            category,
            weight=self.weight if weight is None else weight,
            assumed_probability=(
                self.assumed_probability if assumed_probability is None else assumed_probability
            ),
            raw_probability=raw_probability,
        )

    @abstractmethod
    def classify(self, features: Iterable[Hashable]) -> Optional[Hashable]:
        """Return the most likely category, or ``None`` if nothing is known."""


# ---------------------------------------------------------------------------
# Naive Bayes
# ---------------------------------------------------------------------------

class BayesClassifier(Classifier):
    """Naive Bayes classifier with weighted-average smoothing.

    Example::

        classifier = BayesClassifier()
        classifier.train("positive", "I love sunny days".split())
        classifier.train("negative", "I hate rain".split())

        classifier.classify("today is a sunny day".split())  # "positive"
        classifier.ranked_scores("there will be rain".split())
        # [("negative", 0.046875), ("positive", 0.015625)]

    Args:
        weight: Weight of the assumed probability, in observations.
        assumed_probability: Feature probability assumed with no evidence.

    Raises:
        ValueError: If ``weight`` is not positive or ``assumed_probability``
            is outside ``[0, 1]``.
    """

    def __init__(
        self,
        weight: float = DEFAULT_WEIGHT,
        assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
    ) -> None:
        validate_smoothing(weight, assumed_probability)
        super().__init__()
        self.weight = weight
        self.assumed_probability = assumed_probability

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self.weight}, "
            f"assumed_probability={self.assumed_probability}, store={self._store!r})"
        )

    def category_prior(self, category: Hashable) -> float:
        """``P(category)``; ``0.0`` before any training."""
        with self._store.lock:
            total = self._store.total_category_count()
            if total == 0:
                return 0.0
            return self._store.category_count(category) / total

    def feature_set_likelihood(
        self,
        features: Iterable[Hashable],
        category: Hashable,
    ) -> float:
        """``PROD(P_w(feature|category))`` over ``features``; ``1.0`` when empty."""
        product = 1.0
        with self._store.lock:
            for feature in features:
                product *= self.weighted_average_probability(feature, category)
        return product

    def score(self, category: Hashable, features: Iterable[Hashable]) -> float:
        """Unnormalized posterior ``P(category) * likelihood``."""
        with self._store.lock:
            return self.category_prior(category) * self.feature_set_likelihood(
                features, category
            )

    def ranked_scores(self, features: Iterable[Hashable]) -> list[tuple[Hashable, float]]:
        """Score every known category, best first.

        Categories with equal scores keep the order in which they were
        first trained, so repeated calls on the same state agree.

        Returns:
            List of ``(category, score)`` tuples, descending by score.
            Empty if nothing has been trained.
        """
        features = list(features)
        with self._store.lock:
            scored = [
                (index, category, self.score(category, features))
                for index, category in enumerate(self._store.categories_in_order())
            ]
        scored.sort(key=lambda item: (-item[2], item[0]))
        return [(category, score) for _, category, score in scored]

    def classify_detailed(self, features: Iterable[Hashable]) -> list[Classification]:
        """Like :meth:`ranked_scores`, wrapped in :class:`Classification` records.

        Each record carries its position in the ranking, so sorting the
        records ascending reproduces the ranking in reverse, ties included.
        """
        features = tuple(features)
        return [
            Classification(features=features, category=category, probability=score, rank=rank)
            for rank, (category, score) in enumerate(self.ranked_scores(features))
        ]

    def classify(self, features: Iterable[Hashable]) -> Optional[Hashable]:
        """Return the highest-scoring category, or ``None`` when untrained."""
        ranked = self.ranked_scores(features)
        if not ranked:
            logger.debug("No categories known, nothing to classify")
            return None
        category, score = ranked[0]
        logger.debug("Classified as %r (score=%.6g)", category, score)
        return category
