"""
Recommendation Orchestrator.

Skills -> suggested roles -> cached detail, or generated detail written
back to the store on a miss.
"""

import logging
from typing import Any

from backend.agents.role_suggester import RoleSuggester
from backend.db.store import JobRoleStore, normalize_name
from backend.errors import ValidationError
from backend.models import EnrichedJob, RoleDetail, RoleSuggestion

logger = logging.getLogger(__name__)

RECOMMEND_PREVIEW_CHARS = 130
LISTING_PREVIEW_CHARS = 120


def make_preview(description: str, limit: int) -> str:
    """Plain cut at ``limit`` characters; the ellipsis is always appended."""
    return (description or "")[:limit] + "..."


def idea_titles(ideas: list) -> list[str]:
    """Reduce project ideas to their titles; plain strings are kept as-is."""
    titles = []
    for idea in ideas:
        if isinstance(idea, str):
            titles.append(idea)
        elif isinstance(idea, dict):
            title = idea.get("title") or idea.get("name")
            if isinstance(title, str) and title:
                titles.append(title)
    return titles


def validate_skills(skills: Any) -> list[str]:
    """Trimmed, non-blank skills, or ValidationError."""
    if not isinstance(skills, list) or not skills:
        raise ValidationError("Skills array required")
    if not all(isinstance(s, str) for s in skills):
        raise ValidationError("Skills array required")

    cleaned = [s.strip() for s in skills if s.strip()]
    if not cleaned:
        raise ValidationError("Skills array required")
    return cleaned


class RecommendationOrchestrator:
    """Cache-aside enrichment of AI role suggestions."""

    def __init__(self, store: JobRoleStore, suggester: RoleSuggester):
        self.store = store
        self.suggester = suggester

    def recommend(self, skills: Any) -> list[EnrichedJob]:
        """
        Recommend roles for a skill set.

        Roles the model cannot describe are skipped, so the result may be
        shorter than the suggestion list.

        Raises:
            ValidationError: skills is not a non-empty list of strings.
            ProviderError: the suggestion call failed.
            StoreError: a lookup or insert failed.
        """
        skills = validate_skills(skills)
        suggestions = self.suggester.suggest_roles(skills)

        results = []
        for suggestion in suggestions:
            detail = self._cached_or_generated(suggestion)
            if detail is None:
                continue
            results.append(self._enrich(suggestion, detail))

        logger.info(f"Recommended {len(results)} of {len(suggestions)} suggested roles")
        return results

    def _cached_or_generated(self, suggestion: RoleSuggestion) -> RoleDetail | None:
        detail = self.store.find_by_name(normalize_name(suggestion.role))
        if detail is not None:
            logger.debug(f"Cache hit: {suggestion.role}")
            return detail

        logger.info(f"Cache miss, generating details: {suggestion.role}")
        detail = self.suggester.describe_role(suggestion.role)
        if detail is None:
            logger.warning(f"Skipping role without details: {suggestion.role}")
            return None

        self.store.insert(detail)
        return detail

    @staticmethod
    def _enrich(suggestion: RoleSuggestion, detail: RoleDetail) -> EnrichedJob:
        return EnrichedJob(
            role=detail.role_name,
            score=suggestion.score,
            preview=make_preview(detail.description, RECOMMEND_PREVIEW_CHARS),
            project_ideas=idea_titles(detail.project_ideas),
        )
