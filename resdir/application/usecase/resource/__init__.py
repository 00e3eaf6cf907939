"""Resource use cases."""

from .common import AdminResourceItem, PublicResourceItem, ResourceFieldsRequest
from .create_resource import (
    CreateResourceRequest,
    CreateResourceResponse,
    CreateResourceUseCase,
)
from .delete_resource import DeleteResourceRequest, DeleteResourceUseCase
from .get_resource import GetResourceRequest, GetResourceResponse, GetResourceUseCase
from .list_resources import (
    ListAdminResourcesRequest,
    ListAdminResourcesResponse,
    ListAdminResourcesUseCase,
    ListResourcesRequest,
    ListResourcesResponse,
    ListResourcesUseCase,
)
from .set_resource_status import (
    SetResourceStatusRequest,
    SetResourceStatusResponse,
    SetResourceStatusUseCase,
)
from .set_resource_tags import (
    SetResourceTagsRequest,
    SetResourceTagsResponse,
    SetResourceTagsUseCase,
)
from .submit_resource import (
    SubmitResourceRequest,
    SubmitResourceResponse,
    SubmitResourceUseCase,
)
from .update_resource import (
    UpdateResourceRequest,
    UpdateResourceResponse,
    UpdateResourceUseCase,
)

__all__ = [
    "AdminResourceItem",
    "PublicResourceItem",
    "ResourceFieldsRequest",
    "CreateResourceRequest",
    "CreateResourceResponse",
    "CreateResourceUseCase",
    "DeleteResourceRequest",
    "DeleteResourceUseCase",
    "GetResourceRequest",
    "GetResourceResponse",
    "GetResourceUseCase",
    "ListAdminResourcesRequest",
    "ListAdminResourcesResponse",
    "ListAdminResourcesUseCase",
    "ListResourcesRequest",
    "ListResourcesResponse",
    "ListResourcesUseCase",
    "SetResourceStatusRequest",
    "SetResourceStatusResponse",
    "SetResourceStatusUseCase",
    "SetResourceTagsRequest",
    "SetResourceTagsResponse",
    "SetResourceTagsUseCase",
    "SubmitResourceRequest",
    "SubmitResourceResponse",
    "SubmitResourceUseCase",
    "UpdateResourceRequest",
    "UpdateResourceResponse",
    "UpdateResourceUseCase",
]
