# tests/integration/cli/test_cli_flow.py
"""
对 CLI 应用进行端到端的集成测试。

每个用例在临时目录中运行，通过环境变量把数据库指向临时 SQLite 文件，
命令之间只通过数据库共享状态。
"""

import io
import json
import logging
import zipfile
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from locale_hub.presentation.cli.main import app
from tests.helpers.factories import SAMPLE_TREE

runner = CliRunner()

CSV_CONTENT = (
    "key,source,target\n"
    "Key,Source,Target\n"
    "greeting.hello,Hello,你好\n"
    "menu.file.save,Save,保存\n"
    "unknown.key,?,未知\n"
)


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOCALEHUB_ENV", "test")
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("LOCALEHUB_LOGGING__LEVEL", "WARNING")
    yield tmp_path
    logging.getLogger().handlers.clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def invoke(*args: str):
    result = runner.invoke(app, list(args), catch_exceptions=False)
    return result


def ok(*args: str) -> str:
    result = invoke(*args)
    assert result.exit_code == 0, result.output
    return result.output


def _bootstrap(workdir: Path) -> None:
    ok("db", "init")
    ok("language", "add", "English", "en")
    ok("language", "add", "简体中文", "zh-CN")
    ok("language", "add", "日本語", "ja")
    ok(
        "project", "create",
        "--name", "Demo",
        "--identifier", "demo",
        "--source", "en",
        "--target", "zh-CN",
        "--target", "ja",
    )
    ok("module", "create", "demo", "common")
    source = workdir / "en.json"
    source.write_text(json.dumps(SAMPLE_TREE, ensure_ascii=False), encoding="utf-8")
    output = ok("resource", "upload", "demo", "common", str(source))
    assert "新增 5" in output


def test_full_workflow(cli_env: Path):
    _bootstrap(cli_env)

    keys = ok("resource", "keys", "demo", "common").splitlines()
    assert keys == [
        "greeting.hello",
        "greeting.bye",
        "title",
        "menu.file.open",
        "menu.file.save",
    ]

    table = cli_env / "zh.csv"
    table.write_text(CSV_CONTENT, encoding="utf-8")
    preview = ok("import", "preview", "demo", "common", "zh-CN", str(table))
    assert "预览" in preview
    assert "unknown.key" in preview
    applied = ok("import", "apply", "demo", "common", "zh-CN", str(table))
    assert "已提交" in applied

    ok("editor", "show", "demo", "common", "zh-CN", "--untranslated")
    assert "40.00%" in ok("project", "progress", "demo")
    assert "40.00%" in ok("module", "progress", "demo", "zh-CN")

    out_file = cli_env / "out" / "common.zh.json"
    out_file.parent.mkdir()
    ok("export", "module", "demo", "common", "zh-CN", "-o", str(out_file))
    exported = json.loads(out_file.read_text(encoding="utf-8"))
    assert exported["greeting"] == {"hello": "你好", "bye": ""}
    assert exported["menu"]["file"]["save"] == "保存"

    ok("export", "project", "demo", "zh-CN")
    archive = cli_env / "Demo.zh-CN.zip"
    with zipfile.ZipFile(io.BytesIO(archive.read_bytes())) as zf:
        assert zf.namelist() == ["common.json"]

    ok("resource", "edit", "demo", "common", "title", "New Title")
    ok("resource", "delete", "demo", "common", "greeting.bye")
    assert "greeting.bye" not in ok("resource", "keys", "demo", "common").splitlines()

    ok("module", "delete", "demo", "common", "--yes")
    assert "该项目尚无模块" in ok("module", "list", "demo")


def test_project_update_and_delete(cli_env: Path):
    _bootstrap(cli_env)

    output = ok("project", "update", "demo", "--name", "Renamed", "--target", "ja")
    assert "项目已更新" in output
    assert "Renamed" in ok("project", "show", "demo")

    ok("project", "delete", "demo", "--yes")
    assert "尚未创建任何项目" in ok("project", "list")


def test_errors_exit_with_code_one(cli_env: Path):
    ok("db", "init")

    result = invoke("project", "show", "missing")
    assert result.exit_code == 1
    assert "项目不存在" in result.output

    result = invoke("language", "add", "Broken", "!!")
    assert result.exit_code == 1


def test_undecodable_uploads_are_reported_as_validation_errors(cli_env: Path):
    _bootstrap(cli_env)
    broken_json = cli_env / "broken.json"
    broken_json.write_bytes(b"{\"title\": \"\xff\xfe\"}")
    broken_csv = cli_env / "broken.csv"
    broken_csv.write_bytes(b"h1\nh2\ntitle,\xff\xfe,\xc3\n")

    result = invoke("resource", "upload", "demo", "common", str(broken_json))
    assert result.exit_code == 1
    assert "UTF-8" in result.output

    result = invoke("import", "preview", "demo", "common", "zh-CN", str(broken_csv))
    assert result.exit_code == 1
    assert "编码" in result.output


def test_invalid_config_fails_fast(cli_env: Path, monkeypatch):
    monkeypatch.setenv("LOCALEHUB_DATABASE__URL", "sqlite:///sync-driver.db")

    result = invoke("language", "list")

    assert result.exit_code == 1
    assert "启动失败" in result.output
