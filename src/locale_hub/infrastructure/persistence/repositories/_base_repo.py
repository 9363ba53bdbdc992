# src/locale_hub/infrastructure/persistence/repositories/_base_repo.py
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

# 单条 IN 子句的参数上限，避免触碰 SQLite 的绑定变量限制
IN_CLAUSE_CHUNK = 500


def chunked(items: Sequence[T], size: int = IN_CLAUSE_CHUNK) -> Iterator[Sequence[T]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BaseRepository:
    """所有 SQLAlchemy 仓库的基类。"""

    def __init__(self, session: "AsyncSession"):
        self._session = session
