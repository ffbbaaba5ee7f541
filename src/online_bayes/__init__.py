"""online-bayes -- an online-trainable naive Bayes classifier."""

__version__ = "0.1.0"

from .classifier import BayesClassifier, Classifier
from .models import Classification
from .preprocessing import Tokenizer
from .probability import (
    DEFAULT_ASSUMED_PROBABILITY,
    DEFAULT_WEIGHT,
    FeatureProbability,
    ProbabilityEstimator,
)
from .store import FrequencyStore

__all__ = [
    # Classification
    "Classifier",
    "BayesClassifier",
    "Classification",
    # Statistics
    "FrequencyStore",
    "ProbabilityEstimator",
    "FeatureProbability",
    "DEFAULT_WEIGHT",
    "DEFAULT_ASSUMED_PROBABILITY",
    # Preprocessing
    "Tokenizer",
]
