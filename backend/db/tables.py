"""Database table models."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.db.base import Base


class JobRole(Base):
    """A job role enriched with AI-generated detail.

    List-valued fields are JSON text, see ``dump_list``/``load_list``.
    """

    __tablename__ = "job_roles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    role_name: Mapped[str] = mapped_column(String(255), unique=True)
    # Trimmed, lower-cased role_name, folded in Python so every backend agrees
    role_key: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str] = mapped_column(Text, default="")
    tech_stack: Mapped[str] = mapped_column(Text, default="[]")
    resume_keywords: Mapped[str] = mapped_column(Text, default="[]")
    project_ideas: Mapped[str] = mapped_column(Text, default="[]")
    roadmap_link: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
