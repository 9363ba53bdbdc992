# src/locale_hub/presentation/cli/_shared_options.py
"""
CLI 共享参数定义。

使用 typing.Annotated 为可复用的参数提供单一事实来源，
保证所有命令中同名参数的帮助文本一致。
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

PROJECT_ARG = Annotated[str, typer.Argument(help="项目标识（identifier）。")]

MODULE_ARG = Annotated[str, typer.Argument(help="模块名称。")]

LANGUAGE_ARG = Annotated[str, typer.Argument(help="语言代码（BCP-47），如 'zh-CN'。")]

OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="输出文件路径；省略时使用建议的文件名。"),
]

DESCRIPTION_OPTION = Annotated[
    str | None, typer.Option("--description", "-d", help="描述信息。")
]

YES_OPTION = Annotated[
    bool, typer.Option("--yes", "-y", help="跳过确认提示。")
]
