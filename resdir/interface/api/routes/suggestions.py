"""Tag suggestion routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from resdir.application.usecase.suggestion import (
    SuggestTagsRequest,
    SuggestTagsResponse,
    SuggestTagsUseCase,
)
from resdir.domain.error import DomainError
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(tags=["suggestions"], route_class=DishkaRoute)


@router.post("/suggest-tags", response_model=SuggestTagsResponse)
async def suggest_tags(
    request: SuggestTagsRequest,
    use_case: FromDishka[SuggestTagsUseCase],
) -> SuggestTagsResponse:
    """Suggest tags for a draft submission.

    Classifier failures produce an empty list, not an error. Storage
    failures still surface as 503.
    """
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Tag suggestion domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error suggesting tags", error=str(e))
        raise internal_error("Failed to suggest tags")
