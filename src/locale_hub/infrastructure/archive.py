# src/locale_hub/infrastructure/archive.py
"""把多份导出文档打包成内存中的 ZIP 归档。"""

from __future__ import annotations

import io
import zipfile
from collections.abc import Mapping


def build_archive(entries: Mapping[str, bytes]) -> bytes:
    """按给定顺序把 `文件名 → 内容` 写入 ZIP（DEFLATE 压缩）。"""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()
