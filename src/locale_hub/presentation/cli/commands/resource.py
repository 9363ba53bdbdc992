# src/locale_hub/presentation/cli/commands/resource.py
"""源语言资源的 CLI 命令：上传嵌套 JSON、查看、逐条编辑与删除。"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from locale_hub.application.coordinator import Coordinator
from locale_hub.core.exceptions import NotFoundError, ValidationError
from locale_hub.core.types import SourceValueUpdate

from .._shared_options import MODULE_ARG, PROJECT_ARG
from .._utils import console, resolve_module, run_with_coordinator

app = typer.Typer(help="管理模块的源语言资源。", no_args_is_help=True)

KEY_ARG = Annotated[str, typer.Argument(help="点分路径形式的资源键。")]


def _load_json(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ValidationError(
            "文件不是合法的 UTF-8 文本。", path=str(path), encoding="utf-8"
        ) from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"文件不是合法的 JSON: {e}", path=str(path)) from e


@app.command("upload")
def resource_upload(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    file: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, help="嵌套 JSON 翻译文件。")
    ],
) -> None:
    """上传源语言 JSON；与已存储的键集对账（新增 / 更新 / 删除）。"""

    async def _logic(coordinator: Coordinator) -> None:
        tree = _load_json(file)
        _, current = await resolve_module(coordinator, project, module)
        summary = await coordinator.upload_source_tree(current.id, tree)
        console.print("[bold green]✅ 源语言资源已上传。[/bold green]")
        console.print(
            f"  新增 {summary.added} · 更新 {summary.updated} · 删除 {summary.deleted}"
            f" · 未变化 {summary.unchanged} · 重排 {summary.reordered}"
        )

    run_with_coordinator(ctx, _logic)


@app.command("list")
def resource_list(ctx: typer.Context, project: PROJECT_ARG, module: MODULE_ARG) -> None:
    """按顺序列出模块的源语言资源。"""

    async def _logic(coordinator: Coordinator) -> None:
        _, current = await resolve_module(coordinator, project, module)
        resources = await coordinator.list_source_resources(current.id)
        table = Table(title=f"{current.name} 源语言资源")
        table.add_column("#", justify="right", style="dim")
        table.add_column("键", style="cyan")
        table.add_column("值")
        for r in resources:
            table.add_row(str(r.order), r.key, escape(r.value))
        console.print(table)

    run_with_coordinator(ctx, _logic)


@app.command("keys")
def resource_keys(ctx: typer.Context, project: PROJECT_ARG, module: MODULE_ARG) -> None:
    """按源语言顺序输出模块的键集，每行一个。"""

    async def _logic(coordinator: Coordinator) -> None:
        _, current = await resolve_module(coordinator, project, module)
        for key in await coordinator.source_keys(current.id):
            typer.echo(key)

    run_with_coordinator(ctx, _logic)


@app.command("edit")
def resource_edit(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    key: KEY_ARG,
    value: Annotated[str, typer.Argument(help="新的源文本。")],
) -> None:
    """修改某个源语言键的值。"""

    async def _logic(coordinator: Coordinator) -> None:
        _, current = await resolve_module(coordinator, project, module)
        resources = await coordinator.list_source_resources(current.id)
        match = next((r for r in resources if r.key == key), None)
        if match is None:
            raise NotFoundError(f"键 '{key}' 不存在。", module=module, key=key)
        await coordinator.update_source_values(
            current.id, [SourceValueUpdate(id=match.id, value=value)]
        )
        console.print(f"[bold green]✅ 已更新 {key}。[/bold green]")

    run_with_coordinator(ctx, _logic)


@app.command("delete")
def resource_delete(
    ctx: typer.Context,
    project: PROJECT_ARG,
    module: MODULE_ARG,
    keys: Annotated[list[str], typer.Argument(help="要删除的键。")],
) -> None:
    """删除一个或多个源语言键。"""

    async def _logic(coordinator: Coordinator) -> None:
        _, current = await resolve_module(coordinator, project, module)
        wanted = set(keys)
        ids = [
            r.id for r in await coordinator.list_source_resources(current.id)
            if r.key in wanted
        ]
        deleted = await coordinator.delete_source_resources(current.id, ids)
        console.print(f"[bold green]✅ 已删除 {deleted} 个键。[/bold green]")

    run_with_coordinator(ctx, _logic)
