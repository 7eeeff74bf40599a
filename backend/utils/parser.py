"""
Robust JSON parser with multiple extraction strategies.

Handles various AI output formats:
- Clean JSON
- JSON in ```json blocks
- JSON in ```blocks (no language tag)
- JSON mixed with text

Also normalizes the loose role/detail shapes the model returns, and
converts list-valued columns to and from their stored JSON text.
"""

import json
import logging
import re
from typing import Any

from backend.models import RoleDetail, RoleSuggestion

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3


def extract_json(text: str) -> dict | list | None:
    """
    Extract JSON from AI response using multiple strategies.

    Args:
        text: Raw AI response text

    Returns:
        Parsed JSON (dict or list) or None if extraction fails
    """
    if not text or not text.strip():
        return None

    strategies = [
        _try_clean_json,
        _try_fenced_json,
        _try_fenced_any,
        _try_find_json_bounds,
    ]

    for strategy in strategies:
        result = strategy(text)
        # Scalars are not useful; callers resolve object vs array shapes
        if isinstance(result, (dict, list)):
            return result

    return None


def _try_clean_json(text: str) -> dict | list | None:
    """Try parsing the entire text as JSON."""
    try:
        return json.loads(text.strip())
    except json.JSONDecodeError:
        return None


def _try_fenced_json(text: str) -> dict | list | None:
    """Extract JSON from ```json ... ``` blocks."""
    for match in re.findall(r"```json\s*([\s\S]*?)\s*```", text, re.IGNORECASE):
        try:
            return json.loads(match.strip())
        except json.JSONDecodeError:
            continue
    return None


def _try_fenced_any(text: str) -> dict | list | None:
    """Extract JSON from ``` ... ``` blocks (any language or none)."""
    for match in re.findall(r"```(?:\w*)\s*([\s\S]*?)\s*```", text):
        try:
            return json.loads(match.strip())
        except json.JSONDecodeError:
            continue
    return None


def _try_find_json_bounds(text: str) -> dict | list | None:
    """Find JSON by matching braces/brackets, whichever opens first."""
    starts = [(text.find(o), o, c) for o, c in (("{", "}"), ("[", "]")) if text.find(o) != -1]
    for start, open_char, close_char in sorted(starts):
        candidate = _extract_balanced(text, start, open_char, close_char)
        if candidate:
            try:
                return json.loads(candidate)
            except json.JSONDecodeError:
                continue
    return None


def _extract_balanced(text: str, start: int, open_char: str, close_char: str) -> str | None:
    """Extract balanced brackets/braces starting from position."""
    depth = 0
    in_string = False
    escape_next = False

    for i, char in enumerate(text[start:], start):
        if escape_next:
            escape_next = False
            continue

        if char == "\\" and in_string:
            escape_next = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def parse_roles_response(data: Any) -> list[RoleSuggestion]:
    """
    Resolve the provider's role-suggestion payload to RoleSuggestions.

    Accepted shapes: a bare list, or an object with a ``roles`` or ``jobs``
    list. Items may be plain role names or ``{"role": ..., "score": ...}``
    objects. Anything else is logged and yields an empty list.
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("roles"), list):
        items = data["roles"]
    elif isinstance(data, dict) and isinstance(data.get("jobs"), list):
        items = data["jobs"]
    else:
        logger.warning(f"Unexpected AI format: {data!r}")
        return []

    suggestions = []
    for item in items:
        suggestion = _normalize_suggestion(item)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions[:MAX_SUGGESTIONS]


def _normalize_suggestion(item: Any) -> RoleSuggestion | None:
    if isinstance(item, str):
        role = item.strip()
        return RoleSuggestion(role=role) if role else None

    if not isinstance(item, dict):
        return None

    role = item.get("role") or item.get("title") or item.get("name")
    if not isinstance(role, str) or not role.strip():
        return None
    return RoleSuggestion(role=role.strip(), score=_normalize_score(item.get("score")))


def _normalize_score(score: Any) -> float | None:
    """Coerce a score to [0, 100]; missing or zero scores become None."""
    if isinstance(score, bool):
        return None
    if isinstance(score, str):
        score_match = re.search(r"-?\d+(?:\.\d+)?", score)
        score = float(score_match.group()) if score_match else None
    if not isinstance(score, (int, float)):
        return None
    return float(min(max(score, 0), 100)) or None


def parse_role_details_response(role_name: str, data: Any) -> RoleDetail | None:
    """
    Build a RoleDetail from the provider's detail payload.

    The role name is always the requested one so that later lookups by the
    same name hit. Returns None when the payload has no usable description.
    """
    if not isinstance(data, dict):
        return None

    description = _first(data, "description", "summary", "overview")
    if not isinstance(description, str) or not description.strip():
        return None

    roadmap = _first(data, "roadmapLink", "roadmap_link", "roadmaplink", "roadmap link", "roadmap")
    return RoleDetail(
        role_name=role_name,
        description=description.strip(),
        tech_stack=_string_list(_first(data, "techStack", "tech_stack", "techstack", "tech stack")),
        resume_keywords=_string_list(
            _first(data, "resumeKeywords", "resume_keywords", "resumekeywords", "resume keywords", "keywords")
        ),
        project_ideas=_idea_list(_first(data, "projectIdeas", "project_ideas", "projectideas", "project ideas")),
        roadmap_link=roadmap.strip() if isinstance(roadmap, str) and roadmap.strip() else None,
    )


def _first(data: dict, *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [s.strip() for s in re.split(r"[,;]", value) if s.strip()]
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if isinstance(v, (str, int, float)) and str(v).strip()]


def _idea_list(value: Any) -> list[str | dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if (isinstance(v, str) and v.strip()) or isinstance(v, dict)]


def dump_list(values: list | None) -> str:
    """Serialize a list-valued field for its text column."""
    return json.dumps(list(values or []))


def load_list(raw: Any) -> list:
    """Deserialize a list-valued text column; absent or malformed content is []."""
    if not raw:
        return []
    if isinstance(raw, list):
        return raw
    if not isinstance(raw, str):
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return []
    return value if isinstance(value, list) else []
