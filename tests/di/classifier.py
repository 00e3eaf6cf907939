"""Mock classifier providers for testing."""

from dishka import Scope, provide

from resdir.adapter.classifier import MockTagClassifier
from resdir.domain.service import TagClassifier
from resdir.util.di.infrastructure.classifier import ClassifierProvider


class MockClassifierProvider(ClassifierProvider):
    """Mock classifier provider.

    Tests script the classifier by resolving ``MockTagClassifier`` and
    setting its suggestions, error or delay.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_classifier(self) -> MockTagClassifier:
        """Provide the scripted classifier."""
        return MockTagClassifier()

    @provide(scope=Scope.APP)
    def get_tag_classifier(self, classifier: MockTagClassifier) -> TagClassifier:
        """Expose the scripted classifier as the tag classifier."""
        return classifier
