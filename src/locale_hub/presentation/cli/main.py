# src/locale_hub/presentation/cli/main.py
"""Locale Hub 命令行入口。"""

import os
from typing import Literal, cast

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_tracebacks

from locale_hub.bootstrap import create_app_config, create_container
from locale_hub.core.exceptions import LocaleHubError
from locale_hub.observability import setup_logging_from_config

from .commands import db, editor, export, importer, language, module, project, resource

install_rich_tracebacks(show_locals=False, word_wrap=True)

app = typer.Typer(
    name="locale-hub",
    help="🌐 Locale Hub 多语言资源管理命令行工具。",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(db.app, name="db")
app.add_typer(language.app, name="language")
app.add_typer(project.app, name="project")
app.add_typer(module.app, name="module")
app.add_typer(resource.app, name="resource")
app.add_typer(importer.app, name="import")
app.add_typer(editor.app, name="editor")
app.add_typer(export.app, name="export")

console = Console()


@app.callback()
def main(ctx: typer.Context) -> None:
    """加载配置、初始化日志并创建 DI 容器，供所有子命令使用。"""
    env_mode = os.getenv("LOCALEHUB_ENV", "dev").lower()
    if env_mode not in ("prod", "dev", "test"):
        env_mode = "dev"

    try:
        config = create_app_config(cast(Literal["prod", "dev", "test"], env_mode))
    except LocaleHubError as e:
        console.print(f"[bold red]❌ 启动失败：{escape(e.message)}[/bold red]")
        raise typer.Exit(code=1) from e

    setup_logging_from_config(config, service="locale-hub-cli")
    ctx.obj = create_container(config)


if __name__ == "__main__":
    app()
