# src/locale_hub/presentation/cli/commands/importer.py
"""表格（CSV）导入命令：先预览确认摘要，再提交。"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.types import ImportSummary

from .._shared_options import LANGUAGE_ARG, MODULE_ARG, PROJECT_ARG
from .._utils import console, resolve_language, resolve_module, run_with_coordinator

app = typer.Typer(help="从三列表格（键、源文本、译文）导入译文。", no_args_is_help=True)

FILE_ARG = Annotated[
    Path, typer.Argument(exists=True, dir_okay=False, help="CSV 文件，前两行为表头。")
]
HEADER_ROWS_OPTION = Annotated[
    int | None, typer.Option("--header-rows", min=0, help="跳过的表头行数。")
]


def _render_summary(summary: ImportSummary) -> None:
    table = Table(title="导入摘要" + ("（已提交）" if summary.committed else "（预览）"))
    table.add_column("项目", style="cyan")
    table.add_column("数量", justify="right")
    table.add_row("总行数", str(summary.total_rows))
    table.add_row("匹配行数", str(summary.matched_rows))
    table.add_row("新增", str(summary.added))
    table.add_row("更新", str(summary.updated))
    table.add_row("未变化", str(summary.unchanged))
    table.add_row("跳过", str(summary.skipped_rows))
    console.print(table)
    if summary.skipped_keys:
        console.print(
            "[yellow]以下键不在源语言键集中，已跳过：[/yellow] "
            + ", ".join(summary.skipped_keys)
        )


def _run(
    ctx: typer.Context,
    project: str,
    module: str,
    language: str,
    file: Path,
    header_rows: int | None,
    commit: bool,
) -> None:
    async def _logic(coordinator: Coordinator) -> None:
        rows = coordinator.parse_table(file.read_bytes(), header_rows=header_rows)
        _, current = await resolve_module(coordinator, project, module)
        lang = await resolve_language(coordinator, language)
        if commit:
            summary = await coordinator.import_rows(current.id, lang.id, rows)
        else:
            summary = await coordinator.preview_import(current.id, lang.id, rows)
        _render_summary(summary)

    run_with_coordinator(ctx, _logic)


@app.command("preview")
def import_preview(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    language: LANGUAGE_ARG,
    file: FILE_ARG,
    header_rows: HEADER_ROWS_OPTION = None,
) -> None:
    """计算导入摘要而不写入。"""
    _run(ctx, project, module, language, file, header_rows, commit=False)


@app.command("apply")
def import_apply(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    language: LANGUAGE_ARG,
    file: FILE_ARG,
    header_rows: HEADER_ROWS_OPTION = None,
) -> None:
    """在一个事务内写入导入的译文。"""
    _run(ctx, project, module, language, file, header_rows, commit=True)
