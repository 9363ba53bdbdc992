# src/locale_hub/presentation/cli/commands/db.py
"""数据库初始化与迁移命令。"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from locale_hub.core.exceptions import LocaleHubError
from locale_hub.management.db_service import DbService

from .._utils import console, report_error

app = typer.Typer(help="数据库初始化与迁移。", no_args_is_help=True)


def _service(ctx: typer.Context, alembic_ini: Path | None = None) -> DbService:
    return DbService(ctx.obj.config(), alembic_ini_path=alembic_ini)


@app.command("init")
def db_init(ctx: typer.Context) -> None:
    """不经迁移，直接按 ORM 模型创建全部数据表。"""
    try:
        asyncio.run(_service(ctx).init_schema())
    except LocaleHubError as e:
        report_error(e)
        raise typer.Exit(code=1) from e
    console.print("[bold green]✅ 数据表已创建。[/bold green]")


@app.command("migrate")
def db_migrate(
    ctx: typer.Context,
    revision: Annotated[str, typer.Argument(help="目标版本。")] = "head",
    alembic_ini: Annotated[
        Path | None, typer.Option("--alembic-ini", help="alembic.ini 路径。")
    ] = None,
) -> None:
    """运行 Alembic 迁移到指定版本。"""
    try:
        _service(ctx, alembic_ini).migrate(revision)
    except LocaleHubError as e:
        report_error(e)
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✅ 已迁移到 {revision}。[/bold green]")
