# src/locale_hub/infrastructure/db/_schema.py
"""
与 Alembic 迁移完全对应的 SQLAlchemy ORM 模型。

字段顺序遵守 `MappedAsDataclass` 的约束：无默认值的字段在前，
带默认值的主键与 `init=False` 字段在后。
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from .base import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class LhLanguage(Base):
    __tablename__ = "languages"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    id: Mapped[str] = mapped_column(Text, primary_key=True, default_factory=_uuid)


class LhProject(Base):
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    identifier: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    source_language_id: Mapped[str] = mapped_column(
        Text, ForeignKey("languages.id", ondelete="RESTRICT"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    id: Mapped[str] = mapped_column(Text, primary_key=True, default_factory=_uuid)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=lambda: datetime.now(timezone.utc),
        init=False,
    )


class LhProjectLanguage(Base):
    """项目的目标语言关联；`order` 从 1 开始，决定展示顺序。"""

    __tablename__ = "project_languages"

    project_id: Mapped[str] = mapped_column(
        Text, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True
    )
    language_id: Mapped[str] = mapped_column(
        Text, ForeignKey("languages.id", ondelete="RESTRICT"), primary_key=True
    )
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)


class LhModule(Base):
    __tablename__ = "modules"

    project_id: Mapped[str] = mapped_column(
        Text, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    id: Mapped[str] = mapped_column(Text, primary_key=True, default_factory=_uuid)

    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_modules_project_name"),
    )


class LhResource(Base):
    """一条 (module, language, key) → value 的翻译记录。"""

    __tablename__ = "resources"

    module_id: Mapped[str] = mapped_column(
        Text, ForeignKey("modules.id", ondelete="CASCADE"), nullable=False
    )
    language_id: Mapped[str] = mapped_column(
        Text, ForeignKey("languages.id", ondelete="RESTRICT"), nullable=False
    )
    key: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)
    id: Mapped[str] = mapped_column(Text, primary_key=True, default_factory=_uuid)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        default_factory=lambda: datetime.now(timezone.utc),
        init=False,
    )

    __table_args__ = (
        UniqueConstraint(
            "module_id", "language_id", "key", name="uq_resources_module_language_key"
        ),
        Index("ix_resources_module_language_order", "module_id", "language_id", "order"),
    )
