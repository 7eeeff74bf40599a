"""Domain models passed between the store, the suggestion client and the API."""

from pydantic import BaseModel, Field


class RoleSuggestion(BaseModel):
    """A candidate role from the provider. Never persisted."""

    role: str
    score: float | None = None


class RoleDetail(BaseModel):
    """Full detail for one job role, as stored or as freshly generated."""

    role_name: str
    description: str = ""
    tech_stack: list[str] = Field(default_factory=list)
    resume_keywords: list[str] = Field(default_factory=list)
    project_ideas: list[str | dict] = Field(default_factory=list)
    roadmap_link: str | None = None


class EnrichedJob(BaseModel):
    """One entry of a recommendation result."""

    role: str
    score: float | None
    preview: str
    project_ideas: list[str]
