"""
Job Role Recommender Backend.

Core components:
- agents: role suggestion client and recommendation orchestrator
- db: job_roles table and its store accessor
- api: FastAPI application and routes
"""
