"""Tag suggestion service.

The classifier itself is external; this service prepares its input and
filters what comes back against the active taxonomy.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import logfire

from resdir.config import SuggestionSettings
from resdir.domain.model import RawTagSuggestion, SuggestionCandidate, TagSuggestion
from resdir.domain.repository import TagRepository

from .base import Service


class ClassifierError(Exception):
    """Raised by classifiers when they cannot produce suggestions."""

    pass


class TagClassifier(ABC):
    """Text classifier interface mapping free text to taxonomy tags."""

    @abstractmethod
    async def classify(
        self, content: str, candidates: list[SuggestionCandidate]
    ) -> list[RawTagSuggestion]:
        """Suggest tags for a piece of text.

        Args:
            content: Text describing the resource
            candidates: Active tags the classifier may choose from

        Returns:
            Raw suggestions, unfiltered

        Raises:
            ClassifierError: If the classifier fails
        """
        pass


def build_content(
    title: Optional[str] = None,
    description: Optional[str] = None,
    submitted_by: Optional[str] = None,
    url_link: Optional[str] = None,
) -> str:
    """Join the non-empty resource fields into classifier input."""
    parts = [
        ("Title", title),
        ("Description", description),
        ("Submitted by", submitted_by),
        ("URL", url_link),
    ]
    return "\n\n".join(
        f"{label}: {value.strip()}" for label, value in parts if value and value.strip()
    )


class SuggestionService(Service):
    """Domain service for classifier-backed tag suggestions."""

    def __init__(
        self,
        tag_repository: TagRepository,
        classifier: TagClassifier,
        suggestion_settings: SuggestionSettings,
    ) -> None:
        """Initialize suggestion service.

        Args:
            tag_repository: Tag repository, source of the candidates
            classifier: External text classifier
            suggestion_settings: Timeout, confidence threshold and cap
        """
        self.tag_repository = tag_repository
        self.classifier = classifier
        self.settings = suggestion_settings

    async def suggest(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        submitted_by: Optional[str] = None,
        url_link: Optional[str] = None,
    ) -> list[TagSuggestion]:
        """Suggest tags for a resource being submitted.

        Suggestions are advisory. A slow or failing classifier yields an
        empty list instead of an error.

        Returns:
            Accepted suggestions, highest confidence first
        """
        with logfire.span("suggestion_service.suggest", title=title):
            content = build_content(title, description, submitted_by, url_link)
            if not content:
                logfire.info("No content to classify")
                return []

            rows = await self.tag_repository.find_hierarchy_rows()
            candidates = [
                SuggestionCandidate(
                    tag_id=row.tag_id,
                    tag_name=row.tag_name,
                    category_name=row.category_name,
                    sub_category_name=row.sub_category_name,
                    full_path=row.full_path,
                )
                for row in rows
            ]
            if not candidates:
                logfire.info("No active tags to suggest from")
                return []

            try:
                raw = await asyncio.wait_for(
                    self.classifier.classify(content, candidates),
                    timeout=self.settings.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Classifier timed out", timeout=self.settings.timeout_seconds
                )
                return []
            except ClassifierError as e:
                logfire.warn("Classifier failed", error=str(e))
                return []

            accepted = self.accept(raw, candidates)
            logfire.info(
                "Suggestions produced", received=len(raw), accepted=len(accepted)
            )
            return accepted

    def accept(
        self, raw: list[RawTagSuggestion], candidates: list[SuggestionCandidate]
    ) -> list[TagSuggestion]:
        """Filter raw classifier output.

        A suggestion is kept when its confidence reaches the threshold and it
        names an active tag, by id when given, otherwise by case-insensitive
        name. Each tag is kept once, at its highest confidence.
        """
        by_id = {candidate.tag_id: candidate for candidate in candidates}
        by_name: dict[str, SuggestionCandidate] = {}
        for candidate in candidates:
            by_name.setdefault(candidate.tag_name.casefold(), candidate)

        best: dict[int, TagSuggestion] = {}
        for item in raw:
            if item.confidence < self.settings.min_confidence:
                continue
            if item.tag_id is not None:
                match = by_id.get(item.tag_id)
            else:
                match = by_name.get(item.tag_name.strip().casefold())
            if match is None:
                continue

            current = best.get(match.tag_id)
            if current is not None and current.confidence >= item.confidence:
                continue
            best[match.tag_id] = TagSuggestion(
                tag_id=match.tag_id,
                tag_name=match.tag_name,
                category_name=match.category_name,
                sub_category_name=match.sub_category_name,
                confidence=item.confidence,
                reasoning=item.reasoning,
            )

        ranked = sorted(best.values(), key=lambda s: s.confidence, reverse=True)
        return ranked[: self.settings.max_suggestions]
