"""Application layer DI providers."""

from dishka import Scope, provide

from resdir.application.usecase.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListAdminResourcesUseCase,
    ListResourcesUseCase,
    SetResourceStatusUseCase,
    SetResourceTagsUseCase,
    SubmitResourceUseCase,
    UpdateResourceUseCase,
)
from resdir.application.usecase.suggestion import SuggestTagsUseCase
from resdir.application.usecase.taxonomy import (
    CreateCategoryUseCase,
    CreateSubcategoryUseCase,
    CreateTagUseCase,
    DeactivateEntryUseCase,
    GetTagHierarchyUseCase,
    ListCategoriesUseCase,
    ListSubcategoriesUseCase,
)
from resdir.domain.service import (
    ResourceQueryService,
    ResourceService,
    SuggestionService,
    TaxonomyService,
)
from resdir.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Taxonomy use cases
    @provide(scope=Scope.REQUEST)
    def get_tag_hierarchy_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> GetTagHierarchyUseCase:
        """Provide get tag hierarchy use case."""
        return GetTagHierarchyUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_list_subcategories_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> ListSubcategoriesUseCase:
        """Provide list subcategories use case."""
        return ListSubcategoriesUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_create_subcategory_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> CreateSubcategoryUseCase:
        """Provide create subcategory use case."""
        return CreateSubcategoryUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_deactivate_entry_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> DeactivateEntryUseCase:
        """Provide deactivate entry use case."""
        return DeactivateEntryUseCase(taxonomy_service=taxonomy_service)

    # Resource use cases
    @provide(scope=Scope.REQUEST)
    def get_list_resources_use_case(
        self, resource_query_service: ResourceQueryService
    ) -> ListResourcesUseCase:
        """Provide public list resources use case."""
        return ListResourcesUseCase(resource_query_service=resource_query_service)

    @provide(scope=Scope.REQUEST)
    def get_list_admin_resources_use_case(
        self, resource_query_service: ResourceQueryService
    ) -> ListAdminResourcesUseCase:
        """Provide admin list resources use case."""
        return ListAdminResourcesUseCase(
            resource_query_service=resource_query_service
        )

    @provide(scope=Scope.REQUEST)
    def get_submit_resource_use_case(
        self, resource_service: ResourceService
    ) -> SubmitResourceUseCase:
        """Provide submit resource use case."""
        return SubmitResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_create_resource_use_case(
        self, resource_service: ResourceService
    ) -> CreateResourceUseCase:
        """Provide create resource use case."""
        return CreateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_get_resource_use_case(
        self, resource_service: ResourceService
    ) -> GetResourceUseCase:
        """Provide get resource use case."""
        return GetResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_update_resource_use_case(
        self, resource_service: ResourceService
    ) -> UpdateResourceUseCase:
        """Provide update resource use case."""
        return UpdateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_resource_use_case(
        self, resource_service: ResourceService
    ) -> DeleteResourceUseCase:
        """Provide delete resource use case."""
        return DeleteResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_set_resource_status_use_case(
        self, resource_service: ResourceService
    ) -> SetResourceStatusUseCase:
        """Provide set resource status use case."""
        return SetResourceStatusUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_set_resource_tags_use_case(
        self, resource_service: ResourceService
    ) -> SetResourceTagsUseCase:
        """Provide set resource tags use case."""
        return SetResourceTagsUseCase(resource_service=resource_service)

    # Suggestion use cases
    @provide(scope=Scope.REQUEST)
    def get_suggest_tags_use_case(
        self, suggestion_service: SuggestionService
    ) -> SuggestTagsUseCase:
        """Provide suggest tags use case."""
        return SuggestTagsUseCase(suggestion_service=suggestion_service)
