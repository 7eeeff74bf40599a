"""
Job Role Recommender - server entry point.

Usage:
    python main.py
"""

import logging

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from backend.config import settings  # noqa: E402


def main():
    """Run the API server."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("backend.api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
