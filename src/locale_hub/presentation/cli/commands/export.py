# src/locale_hub/presentation/cli/commands/export.py
"""导出命令：单模块 JSON 或整个项目的 ZIP 包。"""

from pathlib import Path

import typer

from locale_hub.application.coordinator import Coordinator

from .._shared_options import LANGUAGE_ARG, MODULE_ARG, OUTPUT_OPTION, PROJECT_ARG
from .._utils import (
    console,
    resolve_language,
    resolve_module,
    resolve_project,
    run_with_coordinator,
)

app = typer.Typer(help="导出翻译资源。", no_args_is_help=True)


@app.command("module")
def export_module(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    language: LANGUAGE_ARG,
    output: OUTPUT_OPTION = None,
) -> None:
    """把模块在某语言下导出为嵌套 JSON。"""

    async def _logic(coordinator: Coordinator) -> Path:
        _, current = await resolve_module(coordinator, project, module)
        lang = await resolve_language(coordinator, language)
        document = await coordinator.export_module(current.id, lang.id)
        target = output or Path(document.filename)
        target.write_bytes(document.content)
        return target

    path = run_with_coordinator(ctx, _logic)
    console.print(f"[bold green]✅ 已导出到 {path}[/bold green]")


@app.command("project")
def export_project(
    ctx: typer.Context,
    project: PROJECT_ARG,
    language: LANGUAGE_ARG,
    output: OUTPUT_OPTION = None,
) -> None:
    """把项目所有模块在某语言下打包导出为 ZIP。"""

    async def _logic(coordinator: Coordinator) -> tuple[Path, int]:
        current = await resolve_project(coordinator, project)
        lang = await resolve_language(coordinator, language)
        archive = await coordinator.export_project(current.id, lang.id)
        target = output or Path(archive.filename)
        target.write_bytes(archive.content)
        return target, len(archive.entries)

    path, count = run_with_coordinator(ctx, _logic)
    console.print(f"[bold green]✅ 已导出 {count} 个模块到 {path}[/bold green]")
