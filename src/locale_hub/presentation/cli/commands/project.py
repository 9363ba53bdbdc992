# src/locale_hub/presentation/cli/commands/project.py
"""项目管理与进度查看的 CLI 命令。"""

from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.types import Project

from .._shared_options import DESCRIPTION_OPTION, PROJECT_ARG, YES_OPTION
from .._utils import (
    console,
    progress_style,
    resolve_language,
    resolve_project,
    run_with_coordinator,
)

app = typer.Typer(help="管理翻译项目。", no_args_is_help=True)

TARGET_OPTION = Annotated[
    list[str] | None,
    typer.Option("--target", "-t", help="目标语言代码，可多次使用；顺序即展示顺序。"),
]


def _render_project(project: Project) -> None:
    targets = ", ".join(
        f"{t.order}. {t.language.code}" for t in project.target_languages
    )
    body = (
        f"[dim]ID:[/dim] {project.id}\n"
        f"[dim]标识:[/dim] {project.identifier}\n"
        f"[dim]描述:[/dim] {project.description or '-'}\n"
        f"[dim]源语言:[/dim] {project.source_language.code}\n"
        f"[dim]目标语言:[/dim] {targets or '-'}"
    )
    console.print(Panel(body, title=f"[bold]{project.name}[/bold]", border_style="cyan"))


@app.command("list")
def project_list(ctx: typer.Context) -> None:
    """列出所有项目。"""

    async def _logic(coordinator: Coordinator) -> None:
        listings = await coordinator.list_projects()
        if not listings:
            console.print("[yellow]尚未创建任何项目。[/yellow]")
            return
        table = Table(title="项目")
        table.add_column("标识", style="cyan")
        table.add_column("名称")
        table.add_column("源语言")
        table.add_column("资源数", justify="right")
        table.add_column("目标语言数", justify="right")
        for item in listings:
            table.add_row(
                item.project.identifier,
                item.project.name,
                item.project.source_language.code,
                str(item.resource_count),
                str(item.language_count),
            )
        console.print(table)

    run_with_coordinator(ctx, _logic)


@app.command("show")
def project_show(ctx: typer.Context, project: PROJECT_ARG) -> None:
    """显示项目详情。"""

    async def _logic(coordinator: Coordinator) -> None:
        _render_project(await resolve_project(coordinator, project))

    run_with_coordinator(ctx, _logic)


@app.command("create")
def project_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Option("--name", "-n", help="项目名称。")],
    identifier: Annotated[str, typer.Option("--identifier", "-i", help="唯一标识。")],
    source: Annotated[str, typer.Option("--source", "-s", help="源语言代码。")],
    targets: TARGET_OPTION = None,
    description: DESCRIPTION_OPTION = None,
) -> None:
    """创建项目。"""

    async def _logic(coordinator: Coordinator) -> None:
        source_language = await resolve_language(coordinator, source)
        target_ids = [
            (await resolve_language(coordinator, code)).id for code in targets or []
        ]
        created = await coordinator.create_project(
            name=name,
            identifier=identifier,
            source_language_id=source_language.id,
            target_language_ids=target_ids,
            description=description,
        )
        console.print("[bold green]✅ 项目已创建。[/bold green]")
        _render_project(created)

    run_with_coordinator(ctx, _logic)


@app.command("update")
def project_update(
    ctx: typer.Context,
    project: PROJECT_ARG,
    name: Annotated[str | None, typer.Option("--name", "-n")] = None,
    identifier: Annotated[str | None, typer.Option("--identifier", "-i")] = None,
    source: Annotated[str | None, typer.Option("--source", "-s")] = None,
    targets: TARGET_OPTION = None,
    description: DESCRIPTION_OPTION = None,
) -> None:
    """更新项目；未给出的选项保持原值。移除目标语言会删除其全部译文。"""

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        source_id = (
            (await resolve_language(coordinator, source)).id
            if source
            else current.source_language.id
        )
        target_ids = (
            [(await resolve_language(coordinator, code)).id for code in targets]
            if targets
            else [t.language.id for t in current.target_languages]
        )
        updated = await coordinator.update_project(
            current.id,
            name=name or current.name,
            identifier=identifier or current.identifier,
            source_language_id=source_id,
            target_language_ids=target_ids,
            description=description if description is not None else current.description,
        )
        console.print("[bold green]✅ 项目已更新。[/bold green]")
        _render_project(updated)

    run_with_coordinator(ctx, _logic)


@app.command("delete")
def project_delete(ctx: typer.Context, project: PROJECT_ARG, yes: YES_OPTION = False) -> None:
    """删除项目及其全部模块与资源。"""
    if not yes:
        typer.confirm(f"确定要删除项目 '{project}' 及其全部数据吗？", abort=True)

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        await coordinator.delete_project(current.id)
        console.print(f"[bold green]✅ 项目 '{project}' 已删除。[/bold green]")

    run_with_coordinator(ctx, _logic)


@app.command("progress")
def project_progress(ctx: typer.Context, project: PROJECT_ARG) -> None:
    """按目标语言显示项目的翻译进度。"""

    async def _logic(coordinator: Coordinator) -> None:
        current = await resolve_project(coordinator, project)
        rows = await coordinator.language_progress(current.id)
        table = Table(title=f"{current.name} 翻译进度")
        table.add_column("#", justify="right", style="dim")
        table.add_column("语言", style="cyan")
        table.add_column("已翻译 / 总数", justify="right")
        table.add_column("进度", justify="right")
        for row in rows:
            style = progress_style(row.progress)
            table.add_row(
                str(row.order),
                f"{row.name} ({row.code})",
                f"{row.translated_keys} / {row.total_keys}",
                f"[{style}]{row.progress:.2f}%[/{style}]",
            )
        console.print(table)

    run_with_coordinator(ctx, _logic)
