"""Tag classifier clients.

The classifier is an external service: it receives the resource text plus
the candidate tags and answers with scored picks. Filtering of the answer
happens in ``SuggestionService``.
"""

import asyncio
from typing import Optional

import httpx
import logfire
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resdir.adapter.error import ClassifierProviderError
from resdir.domain.model import RawTagSuggestion, SuggestionCandidate
from resdir.domain.service.suggestion_service import TagClassifier


class _SuggestedTag(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tag_id: Optional[int] = Field(default=None, alias="tagId")
    tag_name: str = Field(default="", alias="tagName")
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str = ""


class _ClassifierResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggested_tags: list[_SuggestedTag] = Field(
        default_factory=list, alias="suggestedTags"
    )


class HttpTagClassifier(TagClassifier):
    """Classifier reached over HTTP.

    Request body::

        {"content": "...", "candidates": [{"id", "name", "category",
         "subcategory", "fullPath"}]}

    Expected response body::

        {"suggestedTags": [{"tagId"?, "tagName", "confidence", "reasoning"}]}
    """

    def __init__(
        self, endpoint_url: str, api_key: Optional[str] = None, timeout: float = 5.0
    ) -> None:
        """Initialize HTTP classifier.

        Args:
            endpoint_url: Classifier endpoint accepting POST
            api_key: Optional bearer token
            timeout: HTTP timeout in seconds
        """
        self.endpoint_url = endpoint_url
        self.api_key = api_key
        self.timeout = timeout

    async def classify(
        self, content: str, candidates: list[SuggestionCandidate]
    ) -> list[RawTagSuggestion]:
        """Ask the remote classifier for tag picks.

        Raises:
            ClassifierProviderError: On transport errors, non-200 answers or
                malformed bodies
        """
        payload = {
            "content": content,
            "candidates": [
                {
                    "id": candidate.tag_id,
                    "name": candidate.tag_name,
                    "category": candidate.category_name,
                    "subcategory": candidate.sub_category_name,
                    "fullPath": candidate.full_path,
                }
                for candidate in candidates
            ],
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.endpoint_url,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Classifier request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise ClassifierProviderError(
                        f"Classifier request failed: {response.status_code}"
                    )

                body = _ClassifierResponse.model_validate(response.json())

        except httpx.HTTPError as e:
            logfire.error("Classifier HTTP error", error=str(e))
            raise ClassifierProviderError(f"HTTP error calling classifier: {e}")
        except (ValueError, ValidationError) as e:
            logfire.error("Classifier returned an unreadable body", error=str(e))
            raise ClassifierProviderError(f"Malformed classifier response: {e}")

        logfire.info("Classifier answered", count=len(body.suggested_tags))
        return [
            RawTagSuggestion(
                tag_id=item.tag_id,
                tag_name=item.tag_name,
                confidence=item.confidence,
                reasoning=item.reasoning,
            )
            for item in body.suggested_tags
        ]


class NullTagClassifier(TagClassifier):
    """Used when no classifier endpoint is configured."""

    async def classify(
        self, content: str, candidates: list[SuggestionCandidate]
    ) -> list[RawTagSuggestion]:
        return []


class MockTagClassifier(TagClassifier):
    """Scripted classifier for tests.

    Returns ``suggestions`` as given, raises ``error`` when set, and sleeps
    ``delay`` seconds first so timeouts can be exercised.
    """

    def __init__(
        self,
        suggestions: Optional[list[RawTagSuggestion]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> None:
        self.suggestions = list(suggestions or [])
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, list[SuggestionCandidate]]] = []

    async def classify(
        self, content: str, candidates: list[SuggestionCandidate]
    ) -> list[RawTagSuggestion]:
        self.calls.append((content, candidates))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.suggestions)
