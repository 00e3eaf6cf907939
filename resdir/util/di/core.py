"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from resdir.config import Settings, SuggestionSettings, TaxonomySettings
from resdir.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_taxonomy_settings(self, settings: Settings) -> TaxonomySettings:
        """Provide taxonomy settings."""
        return settings.taxonomy

    @provide(scope=Scope.APP)
    def provide_suggestion_settings(self, settings: Settings) -> SuggestionSettings:
        """Provide suggestion settings."""
        return settings.suggestions
