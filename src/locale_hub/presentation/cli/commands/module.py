# src/locale_hub/presentation/cli/commands/module.py
"""模块管理与模块级进度的 CLI 命令。"""

from typing import Annotated

import typer
from rich.table import Table

from locale_hub.application.coordinator import Coordinator

from .._shared_options import (
    DESCRIPTION_OPTION,
    LANGUAGE_ARG,
    MODULE_ARG,
    PROJECT_ARG,
    YES_OPTION,
)
from .._utils import (
    console,
    progress_style,
    resolve_language,
    resolve_module,
    resolve_project,
    run_with_coordinator,
)

app = typer.Typer(help="管理项目中的模块（翻译文件）。", no_args_is_help=True)


@app.command("list")
def module_list(ctx: typer.Context, project: PROJECT_ARG) -> None:
    """列出项目中的模块及其源语言资源数。"""

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        listings = await coordinator.list_modules(current.id)
        if not listings:
            console.print("[yellow]该项目尚无模块。[/yellow]")
            return
        table = Table(title=f"{current.name} 的模块")
        table.add_column("名称", style="cyan")
        table.add_column("描述")
        table.add_column("资源数", justify="right")
        for item in listings:
            table.add_row(
                item.module.name, item.module.description or "", str(item.resource_count)
            )
        console.print(table)

    run_with_coordinator(ctx, _logic)


@app.command("create")
def module_create(
    ctx: typer.Context,
    project: PROJECT_ARG,
    name: MODULE_ARG,
    description: DESCRIPTION_OPTION = None,
) -> None:
    """在项目中创建模块。"""

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        module = await coordinator.create_module(current.id, name, description)
        console.print(f"[bold green]✅ 模块已创建：[/bold green]{module.name} ({module.id})")

    run_with_coordinator(ctx, _logic)


@app.command("update")
def module_update(
    ctx: typer.Context,
    project: PROJECT_ARG,
    name: MODULE_ARG,
    new_name: Annotated[str | None, typer.Option("--name", "-n", help="新名称。")] = None,
    description: DESCRIPTION_OPTION = None,
) -> None:
    """重命名模块或修改描述。"""

    async def _logic(coordinator: Coordinator) -> None:
        current_project, module = await resolve_module(coordinator, project, name)
        updated = await coordinator.update_module(
            current_project.id,
            module.id,
            new_name or module.name,
            description if description is not None else module.description,
        )
        console.print(f"[bold green]✅ 模块已更新：[/bold green]{updated.name}")

    run_with_coordinator(ctx, _logic)


@app.command("delete")
def module_delete(
    ctx: typer.Context, project: PROJECT_ARG, name: MODULE_ARG, yes: YES_OPTION = False
) -> None:
    """删除模块及其全部语言的资源。"""
    if not yes:
        typer.confirm(f"确定要删除模块 '{name}' 吗？", abort=True)

    async def _logic(coordinator: Coordinator) -> None:
        current_project, module = await resolve_module(coordinator, project, name)
        await coordinator.delete_module(current_project.id, module.id)
        console.print(f"[bold green]✅ 模块 '{name}' 已删除。[/bold green]")

    run_with_coordinator(ctx, _logic)


@app.command("progress")
def module_progress(
    ctx: typer.Context, project: PROJECT_ARG, language: LANGUAGE_ARG
) -> None:
    """显示项目各模块在某语言下的翻译进度。"""

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        lang = await resolve_language(coordinator, language)
        rows = await coordinator.module_progress(current.id, lang.id)
        table = Table(title=f"{current.name} · {lang.code}")
        table.add_column("模块", style="cyan")
        table.add_column("已翻译 / 总数", justify="right")
        table.add_column("进度", justify="right")
        for row in rows:
            style = progress_style(row.translation_ratio)
            table.add_row(
                row.name,
                f"{row.translated_keys} / {row.total_keys}",
                f"[{style}]{row.translation_ratio:.2f}%[/{style}]",
            )
        console.print(table)

    run_with_coordinator(ctx, _logic)
