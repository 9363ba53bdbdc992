# src/locale_hub/core/uow.py
"""
定义了 Unit of Work 与各仓库的抽象接口协议 (Protocols)。

应用服务只依赖这些协议，不依赖具体的 SQLAlchemy 实现。
一个 UoW 实例对应一个事务：正常退出时提交，异常退出时完整回滚。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from .types import Language, Module, NewResource, Project, Resource


class ILanguageRepository(Protocol):
    async def list_all(self) -> list[Language]: ...

    async def get(self, language_id: str) -> Language | None: ...

    async def get_by_code(self, code: str) -> Language | None: ...

    async def get_many(self, language_ids: Sequence[str]) -> list[Language]: ...

    async def add(self, *, name: str, code: str) -> Language: ...


class IProjectRepository(Protocol):
    async def list_all(self) -> list[Project]: ...

    async def get(self, project_id: str) -> Project | None: ...

    async def get_by_identifier(self, identifier: str) -> Project | None: ...

    async def add(
        self,
        *,
        name: str,
        identifier: str,
        description: str | None,
        source_language_id: str,
        target_language_ids: Sequence[str],
    ) -> str: ...

    async def update(
        self,
        project_id: str,
        *,
        name: str,
        identifier: str,
        description: str | None,
        source_language_id: str,
    ) -> None: ...

    async def replace_target_languages(
        self, project_id: str, language_ids: Sequence[str]
    ) -> None:
        """按给定顺序重写目标语言关联，`order` 从 1 开始。"""
        ...

    async def delete(self, project_id: str) -> None: ...


class IModuleRepository(Protocol):
    async def list_by_project(self, project_id: str) -> list[Module]: ...

    async def get(self, module_id: str) -> Module | None: ...

    async def get_by_name(self, project_id: str, name: str) -> Module | None: ...

    async def add(
        self, *, project_id: str, name: str, description: str | None
    ) -> Module: ...

    async def update(
        self, module_id: str, *, name: str, description: str | None
    ) -> Module: ...

    async def delete(self, module_id: str) -> None: ...

    async def delete_by_project(self, project_id: str) -> None: ...


class IResourceRepository(Protocol):
    async def list_for(self, module_id: str, language_id: str) -> list[Resource]:
        """按 `order` 升序返回某 (module, language) 下的全部资源。"""
        ...

    async def count(
        self,
        module_ids: Sequence[str],
        language_id: str,
        *,
        exclude_empty: bool = False,
    ) -> int: ...

    async def count_translated(
        self,
        module_ids: Sequence[str],
        source_language_id: str,
        target_language_id: str,
    ) -> int:
        """统计非空、且 key 存在于源语言键集中的目标语言资源数（排除孤儿）。"""
        ...

    async def create_many(self, resources: Sequence[NewResource]) -> int: ...

    async def update_value(self, resource_id: str, value: str) -> None: ...

    async def realign_order(self, module_id: str, key: str, order: int) -> int:
        """把某 key 在模块内所有语言下的 `order` 统一为给定值。"""
        ...

    async def delete_many(self, resource_ids: Sequence[str]) -> int: ...

    async def delete_for_modules(
        self,
        module_ids: Sequence[str],
        language_ids: Sequence[str] | None = None,
    ) -> int: ...

    async def retag_language(
        self, module_ids: Sequence[str], from_language_id: str, to_language_id: str
    ) -> int: ...


class IUnitOfWork(Protocol):
    languages: ILanguageRepository
    projects: IProjectRepository
    modules: IModuleRepository
    resources: IResourceRepository

    async def __aenter__(self) -> "IUnitOfWork": ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
