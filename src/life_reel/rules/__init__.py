"""Age rules - calculation, classification, grouping."""

from life_reel.rules.calculator import AgeCalculator
from life_reel.rules.classifier import AgeClassifier, PhotoGroups

__all__ = ["AgeCalculator", "AgeClassifier", "PhotoGroups"]
