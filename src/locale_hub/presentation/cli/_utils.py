# src/locale_hub/presentation/cli/_utils.py
"""
CLI 内部共享的辅助工具：在事件循环中执行命令逻辑、统一错误呈现、
把用户输入的可读标识（项目标识、模块名、语言代码）解析为实体。
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from locale_hub.core.exceptions import LocaleHubError, NotFoundError
from locale_hub.infrastructure.db import dispose_engine

if TYPE_CHECKING:
    from locale_hub.application.coordinator import Coordinator
    from locale_hub.core.types import Language, Module, Project
    from locale_hub.di.container import AppContainer

T = TypeVar("T")

console = Console()


def run_with_coordinator(
    ctx: typer.Context, logic: Callable[["Coordinator"], Awaitable[T]]
) -> T:
    """
    在新的事件循环中执行 `logic(coordinator)`，结束后释放数据库引擎。
    LocaleHubError 以红色消息呈现并以退出码 1 结束。
    """
    container: AppContainer = ctx.obj

    async def _runner() -> T:
        coordinator = container.coordinator()
        try:
            return await logic(coordinator)
        finally:
            await dispose_engine(container.db_engine())

    try:
        return asyncio.run(_runner())
    except LocaleHubError as e:
        report_error(e)
        raise typer.Exit(code=1) from e


def report_error(error: LocaleHubError) -> None:
    console.print(f"[bold red]❌ {escape(error.message)}[/bold red]")
    for key, value in error.context.items():
        console.print(f"  - [dim]{key}:[/dim] {escape(str(value))}")


async def resolve_language(coordinator: Coordinator, code: str) -> Language:
    language = await coordinator.get_language_by_code(code)
    if language is None:
        raise NotFoundError(f"语言 '{code}' 不存在。", code=code)
    return language


async def resolve_project(coordinator: Coordinator, identifier: str) -> Project:
    return await coordinator.get_project_by_identifier(identifier)


async def resolve_module(
    coordinator: Coordinator, identifier: str, name: str
) -> tuple[Project, Module]:
    project = await resolve_project(coordinator, identifier)
    module = await coordinator.get_module_by_name(project.id, name)
    if module is None:
        raise NotFoundError(
            f"模块 '{name}' 不存在。", project=identifier, module=name
        )
    return project, module


def progress_style(ratio: float) -> str:
    if ratio >= 100:
        return "green"
    if ratio >= 50:
        return "yellow"
    return "red"
