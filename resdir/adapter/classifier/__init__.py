"""Tag classifier adapters."""

from .client import HttpTagClassifier, MockTagClassifier, NullTagClassifier

__all__ = ["HttpTagClassifier", "MockTagClassifier", "NullTagClassifier"]
