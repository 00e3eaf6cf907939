"""Unit tests for the HTTP tag classifier."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from resdir.adapter.classifier import HttpTagClassifier, NullTagClassifier
from resdir.adapter.error import ClassifierProviderError
from resdir.domain.model import SuggestionCandidate
from resdir.domain.service import ClassifierError
from resdir.domain.value import TagId


@pytest.fixture
def candidates():
    """Two active tags from the Research category."""
    return [
        SuggestionCandidate(
            tag_id=TagId(1),
            tag_name="Qualitative",
            category_name="Research",
            sub_category_name="Methods",
            full_path="Research > Methods > Qualitative",
        ),
        SuggestionCandidate(
            tag_id=TagId(2),
            tag_name="Books",
            category_name="Research",
            full_path="Research > Books",
        ),
    ]


@pytest.fixture
def classifier():
    return HttpTagClassifier(
        endpoint_url="https://classifier.example.org/suggest",
        api_key="secret",
        timeout=2.0,
    )


class TestHttpTagClassifier:
    """Tests for HttpTagClassifier.classify."""

    @pytest.mark.asyncio
    async def test_parses_suggestions(self, classifier, candidates):
        """Should map the camelCase answer to raw suggestions."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = {
            "suggestedTags": [
                {
                    "tagId": 1,
                    "tagName": "Qualitative",
                    "confidence": 0.82,
                    "reasoning": "Interview study",
                },
                {"tagName": "Books", "confidence": 0.4},
            ]
        }

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            result = await classifier.classify("Title: Interviews", candidates)

        assert [(r.tag_id, r.tag_name, r.confidence) for r in result] == [
            (1, "Qualitative", 0.82),
            (None, "Books", 0.4),
        ]
        assert result[0].reasoning == "Interview study"

    @pytest.mark.asyncio
    async def test_sends_content_candidates_and_bearer_token(
        self, classifier, candidates
    ):
        """Should POST the content and every candidate with its path."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = {"suggestedTags": []}

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=mock_response)
            mock_client.return_value.__aenter__.return_value.post = post

            await classifier.classify("Title: Interviews", candidates)

        _, kwargs = post.call_args
        assert post.call_args.args[0] == "https://classifier.example.org/suggest"
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["timeout"] == 2.0
        assert kwargs["json"]["content"] == "Title: Interviews"
        assert kwargs["json"]["candidates"][1] == {
            "id": 2,
            "name": "Books",
            "category": "Research",
            "subcategory": None,
            "fullPath": "Research > Books",
        }

    @pytest.mark.asyncio
    async def test_non_200_raises_provider_error(self, classifier, candidates):
        """Should raise when the classifier answers with an error status."""
        mock_response = MagicMock()
        mock_response.status_code = 503
        mock_response.text = "overloaded"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            with pytest.raises(ClassifierProviderError) as exc_info:
                await classifier.classify("Title: Interviews", candidates)

        assert "503" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_malformed_body_raises_classifier_error(self, classifier, candidates):
        """Out-of-range confidence is treated as a malformed answer."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = {
            "suggestedTags": [{"tagName": "Books", "confidence": 7}]
        }

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            with pytest.raises(ClassifierError):
                await classifier.classify("Title: Interviews", candidates)

    @pytest.mark.asyncio
    async def test_transport_error_raises_provider_error(self, classifier, candidates):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("refused")
            )

            with pytest.raises(ClassifierProviderError):
                await classifier.classify("Title: Interviews", candidates)


class TestNullTagClassifier:
    """Tests for NullTagClassifier."""

    @pytest.mark.asyncio
    async def test_always_empty(self, candidates):
        assert await NullTagClassifier().classify("anything", candidates) == []
