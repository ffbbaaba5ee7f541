"""Shared test fixtures for online-bayes tests."""

from __future__ import annotations

import pytest

from online_bayes.classifier import BayesClassifier
from online_bayes.store import FrequencyStore


@pytest.fixture
def store() -> FrequencyStore:
    """An empty frequency store."""
    return FrequencyStore()


@pytest.fixture
def classifier() -> BayesClassifier:
    """An untrained classifier with default smoothing."""
    return BayesClassifier()


@pytest.fixture
def sentiment_classifier() -> BayesClassifier:
    """Classifier trained on one positive and one negative sentence."""
    bayes = BayesClassifier()
    bayes.train("positive", "I love sunny days".split())
    bayes.train("negative", "I hate rain".split())
    return bayes
