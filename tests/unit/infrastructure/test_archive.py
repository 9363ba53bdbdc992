# tests/unit/infrastructure/test_archive.py
import io
import zipfile

from locale_hub.infrastructure.archive import build_archive


def test_build_archive_writes_entries_in_order():
    content = build_archive({"common.json": b'{"a": "1"}', "empty.json": b"{}"})

    with zipfile.ZipFile(io.BytesIO(content)) as archive:
        assert archive.namelist() == ["common.json", "empty.json"]
        assert archive.read("common.json") == b'{"a": "1"}'
        assert archive.read("empty.json") == b"{}"
        assert archive.testzip() is None


def test_build_archive_with_no_entries_is_valid_zip():
    with zipfile.ZipFile(io.BytesIO(build_archive({}))) as archive:
        assert archive.namelist() == []
