"""Store accessor for the job_roles table."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from backend.db.tables import JobRole
from backend.errors import StoreError
from backend.models import RoleDetail
from backend.utils.parser import dump_list, load_list

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    return name.strip().lower()


def _strings(raw) -> list[str]:
    return [v for v in load_list(raw) if isinstance(v, str)]


def _to_detail(row: JobRole) -> RoleDetail:
    return RoleDetail(
        role_name=row.role_name,
        description=row.description or "",
        tech_stack=_strings(row.tech_stack),
        resume_keywords=_strings(row.resume_keywords),
        project_ideas=[v for v in load_list(row.project_ideas) if isinstance(v, (str, dict))],
        roadmap_link=row.roadmap_link,
    )


class JobRoleStore:
    """Typed access to job_roles over a shared session factory.

    Each operation runs in its own short-lived session; nothing spans
    operations.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def find_by_name(self, name: str) -> RoleDetail | None:
        """Case-insensitive, whitespace-trimmed exact match on role_name."""
        stmt = (
            select(JobRole)
            .where(JobRole.role_key == normalize_name(name))
            .order_by(JobRole.id)
            .limit(1)
        )
        try:
            with self._session_factory() as db:
                row = db.scalars(stmt).first()
                return _to_detail(row) if row else None
        except SQLAlchemyError as e:
            logger.error(f"Lookup of job role {name!r} failed: {e}")
            raise StoreError("job role lookup failed") from e

    def list_all(self) -> list[RoleDetail]:
        """All roles, ascending by role_name."""
        try:
            with self._session_factory() as db:
                rows = db.scalars(select(JobRole).order_by(JobRole.role_name.asc())).all()
                return [_to_detail(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Listing job roles failed: {e}")
            raise StoreError("job role listing failed") from e

    def insert(self, detail: RoleDetail) -> None:
        """Add a new row. No upsert: callers check find_by_name first."""
        row = JobRole(
            role_name=detail.role_name,
            role_key=normalize_name(detail.role_name),
            description=detail.description,
            tech_stack=dump_list(detail.tech_stack),
            resume_keywords=dump_list(detail.resume_keywords),
            project_ideas=dump_list(detail.project_ideas),
            roadmap_link=detail.roadmap_link,
        )
        try:
            with self._session_factory() as db:
                db.add(row)
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Insert of job role {detail.role_name!r} failed: {e}")
            raise StoreError("job role insert failed") from e
        logger.info(f"Stored new job role: {detail.role_name}")
