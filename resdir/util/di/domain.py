"""Domain layer DI providers."""

from dishka import Scope, provide

from resdir.config import SuggestionSettings, TaxonomySettings
from resdir.domain.repository import (
    CategoryRepository,
    ResourceRepository,
    SubcategoryRepository,
    TagRepository,
)
from resdir.domain.service import (
    ResourceQueryService,
    ResourceService,
    SuggestionService,
    TagClassifier,
    TaxonomyService,
)
from resdir.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_taxonomy_service(
        self,
        category_repository: CategoryRepository,
        subcategory_repository: SubcategoryRepository,
        tag_repository: TagRepository,
        taxonomy_settings: TaxonomySettings,
    ) -> TaxonomyService:
        """Provide taxonomy domain service."""
        return TaxonomyService(
            category_repository=category_repository,
            subcategory_repository=subcategory_repository,
            tag_repository=tag_repository,
            taxonomy_settings=taxonomy_settings,
        )

    @provide
    def get_resource_service(
        self, resource_repository: ResourceRepository
    ) -> ResourceService:
        """Provide resource domain service."""
        return ResourceService(resource_repository=resource_repository)

    @provide
    def get_resource_query_service(
        self, resource_repository: ResourceRepository, tag_repository: TagRepository
    ) -> ResourceQueryService:
        """Provide resource listing domain service."""
        return ResourceQueryService(
            resource_repository=resource_repository, tag_repository=tag_repository
        )

    @provide
    def get_suggestion_service(
        self,
        tag_repository: TagRepository,
        classifier: TagClassifier,
        suggestion_settings: SuggestionSettings,
    ) -> SuggestionService:
        """Provide tag suggestion domain service."""
        return SuggestionService(
            tag_repository=tag_repository,
            classifier=classifier,
            suggestion_settings=suggestion_settings,
        )
