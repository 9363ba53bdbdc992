# src/locale_hub/presentation/cli/commands/editor.py
"""编辑器视图：源文本与译文并列。"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from locale_hub.application.coordinator import Coordinator

from .._shared_options import LANGUAGE_ARG, MODULE_ARG, PROJECT_ARG
from .._utils import console, resolve_language, resolve_module, run_with_coordinator

app = typer.Typer(help="查看模块的翻译编辑视图。", no_args_is_help=True)


@app.command("show")
def editor_show(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    language: LANGUAGE_ARG,
    untranslated: Annotated[
        bool, typer.Option("--untranslated", help="只显示未翻译的行。")
    ] = False,
) -> None:
    """按源语言顺序显示 键 / 源文本 / 译文。"""

    async def _logic(coordinator: Coordinator) -> None:
        _, current = await resolve_module(coordinator, project, module)
        lang = await resolve_language(coordinator, language)
        rows = await coordinator.get_editor_rows(current.id, lang.id)
        table = Table(title=f"{current.name} · {lang.code}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("键", style="cyan")
        table.add_column("源文本")
        table.add_column("译文")
        for row in rows:
            if untranslated and row.value:
                continue
            table.add_row(
                str(row.order),
                row.key,
                escape(row.source_value),
                escape(row.value) if row.value else "[dim]-[/dim]",
            )
        console.print(table)

    run_with_coordinator(ctx, _logic)
