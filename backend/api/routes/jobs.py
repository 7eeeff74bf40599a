"""Job role lookup endpoints. Read straight from the store, no AI calls."""

from urllib.parse import unquote

from fastapi import APIRouter, Depends

from backend.agents.orchestrator import LISTING_PREVIEW_CHARS, idea_titles, make_preview
from backend.api.deps import get_store
from backend.api.schemas import ErrorResponse, JobDetailResponse, JobSummaryResponse
from backend.db.store import JobRoleStore
from backend.errors import NotFoundError

router = APIRouter()


@router.get(
    "/job/{role:path}",
    response_model=JobDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_job(role: str, store: JobRoleStore = Depends(get_store)):
    """Get full detail for one role (case-insensitive)."""
    job = store.find_by_name(unquote(role).lower())
    if job is None:
        raise NotFoundError("Job not found")

    return JobDetailResponse(
        role=job.role_name,
        description=job.description,
        tech_stack=job.tech_stack,
        resume_keywords=job.resume_keywords,
        project_ideas=job.project_ideas,
        roadmap_link=job.roadmap_link,
    )


@router.get("/jobs", response_model=list[JobSummaryResponse])
def list_jobs(store: JobRoleStore = Depends(get_store)):
    """List all stored roles, ascending by name."""
    return [
        JobSummaryResponse(
            role=job.role_name,
            preview=make_preview(job.description, LISTING_PREVIEW_CHARS),
            project_ideas=idea_titles(job.project_ideas),
            roadmap_link=job.roadmap_link or None,
        )
        for job in store.list_all()
    ]
