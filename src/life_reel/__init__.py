"""Age-based photo bucketing for tracking a person over time."""

from life_reel.models import AgeBucket, ExactAge, Person, Photo
from life_reel.rules import AgeCalculator, AgeClassifier

__version__ = "0.1.0"

__all__ = [
    "AgeBucket",
    "AgeCalculator",
    "AgeClassifier",
    "ExactAge",
    "Person",
    "Photo",
]
