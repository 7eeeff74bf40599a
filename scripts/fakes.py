"""Test doubles for the language model."""

import json

from langchain_core.messages import AIMessage


class ScriptedModel:
    """Chat model stand-in that replays replies in order and records prompts.

    Used where a test needs the prompts sent, or a scripted exception raised
    mid-sequence; langchain_core's FakeListChatModel does neither, and is used
    everywhere else. Dicts and lists are sent as JSON text.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        if not self.replies:
            raise AssertionError(f"Unexpected model call: {prompt[:80]!r}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if not isinstance(reply, str):
            reply = json.dumps(reply)
        return AIMessage(content=reply)


def role_details(name: str, description: str | None = None) -> dict:
    """A well-formed detail reply for ``name``."""
    return {
        "jobRole": name,
        "description": description or f"{name}s design, build and run production systems every day of the week.",
        "techStack": ["Python", "PostgreSQL", "Docker"],
        "resumeKeywords": ["APIs", "scalability"],
        "projectIdeas": [{"title": "URL shortener", "description": "A small service"}, "Chat server"],
        "roadmapLink": "https://roadmap.sh/backend",
    }
