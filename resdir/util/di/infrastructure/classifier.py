"""Tag classifier infrastructure providers."""

from dishka import Scope, provide
import logfire

from resdir.adapter.classifier import HttpTagClassifier, NullTagClassifier
from resdir.config import SuggestionSettings
from resdir.domain.service import TagClassifier
from resdir.util.di.base import ProviderBase


class ClassifierProvider(ProviderBase):
    """Classifier component base."""

    __mock_component__ = "classifier"


class ProdClassifierProvider(ClassifierProvider):
    """Production classifier provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_tag_classifier(self, settings: SuggestionSettings) -> TagClassifier:
        """Provide the HTTP classifier, or a null one when no endpoint is set.

        Returns:
            Tag classifier
        """
        if not settings.endpoint_url:
            logfire.info("No classifier endpoint configured, suggestions disabled")
            return NullTagClassifier()

        return HttpTagClassifier(
            endpoint_url=settings.endpoint_url,
            api_key=settings.api_key,
            timeout=settings.timeout_seconds,
        )
