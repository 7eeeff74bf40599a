"""Recommend endpoint."""

from fastapi import APIRouter, Depends

from backend.agents.orchestrator import RecommendationOrchestrator
from backend.api.deps import get_orchestrator
from backend.api.schemas import ErrorResponse, RecommendedJobResponse, RecommendRequest

router = APIRouter()


@router.post(
    "",
    response_model=list[RecommendedJobResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def recommend(
    data: RecommendRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    """Recommend job roles for a list of skills."""
    jobs = orchestrator.recommend(data.skills)
    return [
        RecommendedJobResponse(
            role=job.role,
            score=job.score,
            preview=job.preview,
            project_ideas=job.project_ideas,
        )
        for job in jobs
    ]
