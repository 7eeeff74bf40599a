"""FastAPI dependencies for the long-lived services built at startup."""

from fastapi import Request

from backend.agents.orchestrator import RecommendationOrchestrator
from backend.db.store import JobRoleStore


def get_store(request: Request) -> JobRoleStore:
    return request.app.state.store


def get_orchestrator(request: Request) -> RecommendationOrchestrator:
    return request.app.state.orchestrator
