"""API request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field


# Recommend schemas
class RecommendRequest(BaseModel):
    # Validated by the orchestrator so every bad shape maps to the same 400
    skills: Any = Field(default=None, description="Non-empty list of skills")


class RecommendedJobResponse(BaseModel):
    role: str
    score: float | None
    preview: str
    project_ideas: list[str] = Field(alias="projectIdeas")

    class Config:
        populate_by_name = True


# Job role schemas
class JobDetailResponse(BaseModel):
    role: str
    description: str
    tech_stack: list[str] = Field(alias="techStack")
    resume_keywords: list[str] = Field(alias="resumeKeywords")
    project_ideas: list[str | dict] = Field(alias="projectIdeas")
    roadmap_link: str | None = Field(alias="roadmapLink")

    class Config:
        populate_by_name = True


class JobSummaryResponse(BaseModel):
    role: str
    preview: str
    project_ideas: list[str] = Field(alias="projectIdeas")
    roadmap_link: str | None = Field(alias="roadmapLink")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str
