"""
Agents for Job Role Recommendation.

- role_suggester: asks the language model for roles and role details
- orchestrator: cache-aside enrichment of suggested roles
"""

from backend.agents.orchestrator import RecommendationOrchestrator
from backend.agents.role_suggester import RoleSuggester, create_role_suggester

__all__ = ["RecommendationOrchestrator", "RoleSuggester", "create_role_suggester"]
