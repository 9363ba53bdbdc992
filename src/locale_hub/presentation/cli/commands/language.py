# src/locale_hub/presentation/cli/commands/language.py
"""语言参考数据的 CLI 命令。"""

from typing import Annotated

import typer
from rich.table import Table

from locale_hub.application.coordinator import Coordinator

from .._utils import console, run_with_coordinator

app = typer.Typer(help="管理语言参考数据。", no_args_is_help=True)


@app.command("list")
def language_list(ctx: typer.Context) -> None:
    """列出所有语言。"""

    async def _logic(coordinator: Coordinator) -> None:
        languages = await coordinator.list_languages()
        if not languages:
            console.print("[yellow]尚未添加任何语言。[/yellow]")
            return
        table = Table(title="语言")
        table.add_column("代码", style="cyan")
        table.add_column("名称")
        table.add_column("ID", style="dim")
        for lang in languages:
            table.add_row(lang.code, lang.name, lang.id)
        console.print(table)

    run_with_coordinator(ctx, _logic)


@app.command("add")
def language_add(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="语言名称，如 '简体中文'。")],
    code: Annotated[str, typer.Argument(help="BCP-47 代码，如 'zh-CN'。")],
) -> None:
    """添加一种语言。"""

    async def _logic(coordinator: Coordinator) -> None:
        language = await coordinator.create_language(name, code)
        console.print(
            f"[bold green]✅ 语言已添加：[/bold green]{language.name} ({language.code})"
        )

    run_with_coordinator(ctx, _logic)
