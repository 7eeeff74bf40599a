"""
Role Suggester.

Asks the language model for job roles matching a skill set, and for the
full detail of a single role. Output is requested as strict JSON but parsed
tolerantly: the model's replies are best-effort structured text.
"""

import logging

from langchain_core.runnables import Runnable
from langchain_deepseek import ChatDeepSeek

from backend.config import settings
from backend.errors import ProviderError
from backend.models import RoleDetail, RoleSuggestion
from backend.utils.parser import extract_json, parse_role_details_response, parse_roles_response

logger = logging.getLogger(__name__)

SUGGEST_ROLES_PROMPT = """User skills: {skills}

Suggest the top 3 matching job roles.
Each role must include:
- "role": short role name
- "score": number (0-100) for how well the skills match

Respond ONLY as JSON with this exact format:
```json
{{
    "roles": [
        {{"role": "Backend Developer", "score": 85}},
        {{"role": "Database Engineer", "score": 70}},
        {{"role": "Full Stack Developer", "score": 65}}
    ]
}}
```
"""

DESCRIBE_ROLE_PROMPT = """Provide details for the job role: "{role}".

Respond ONLY as JSON with these keys:
```json
{{
    "jobRole": "{role}",
    "description": "2-4 sentences on what the role does day to day",
    "techStack": ["tool", "framework", "language"],
    "resumeKeywords": ["keyword", "keyword"],
    "projectIdeas": [{{"title": "short title", "description": "one sentence"}}],
    "roadmapLink": "https://roadmap.sh/..."
}}
```
"""

JSON_MODE = {"response_format": {"type": "json_object"}}


class RoleSuggester:
    """Translation boundary between the app and the language model."""

    def __init__(self, suggest_model: Runnable, detail_model: Runnable | None = None):
        self.suggest_model = suggest_model
        self.detail_model = detail_model if detail_model is not None else suggest_model

    def suggest_roles(self, skills: list[str]) -> list[RoleSuggestion]:
        """
        Up to 3 roles ranked by the model, scores in [0, 100].

        Raises:
            ProviderError: the call failed or the reply held no JSON at all.
        """
        prompt = SUGGEST_ROLES_PROMPT.format(skills=", ".join(skills))
        try:
            response = self.suggest_model.invoke(prompt)
        except Exception as e:
            logger.error(f"AI job roles error: {e}")
            raise ProviderError("role suggestion call failed") from e

        data = extract_json(_content(response))
        if data is None:
            logger.error(f"AI job roles reply is not JSON: {_content(response)[:300]!r}")
            raise ProviderError("role suggestion reply is not JSON")

        roles = parse_roles_response(data)
        logger.info(f"AI roles for {len(skills)} skills: {[r.role for r in roles]}")
        return roles

    def describe_role(self, role_name: str) -> RoleDetail | None:
        """Full detail for one role, or None on any failure."""
        try:
            response = self.detail_model.invoke(DESCRIBE_ROLE_PROMPT.format(role=role_name))
        except Exception as e:
            logger.error(f"AI job details error for {role_name!r}: {e}")
            return None

        detail = parse_role_details_response(role_name, extract_json(_content(response)))
        if detail is None:
            logger.warning(f"AI job details for {role_name!r} could not be parsed")
        return detail


def _content(response) -> str:
    content = getattr(response, "content", response)
    return content if isinstance(content, str) else str(content)


def create_role_suggester() -> RoleSuggester:
    """Create the suggester backed by DeepSeek in JSON mode."""
    if not settings.deepseek_api_key:
        raise ValueError("DEEPSEEK_API_KEY not set")

    def model(temperature: float) -> Runnable:
        return ChatDeepSeek(
            model=settings.deepseek_model,
            api_key=settings.deepseek_api_key,
            temperature=temperature,
        ).bind(**JSON_MODE)

    return RoleSuggester(model(settings.suggest_temperature), model(settings.detail_temperature))
