# src/locale_hub/application/services/_languages.py
"""语言参考数据的应用服务。"""

from __future__ import annotations

from typing import TYPE_CHECKING

import langcodes
import structlog

from locale_hub.core.exceptions import ValidationError
from locale_hub.core.types import Language

from ._lookups import require_language

if TYPE_CHECKING:
    from locale_hub.infrastructure.uow import UowFactory

logger = structlog.get_logger(__name__)


def validate_language_code(code: str) -> str:
    """校验 BCP-47 语言代码，返回去除首尾空白后的代码。"""
    cleaned = (code or "").strip()
    if not cleaned or not langcodes.tag_is_valid(cleaned):
        raise ValidationError(f"语言代码 '{code}' 不是合法的 BCP-47 标签。", code=code)
    return cleaned


class LanguageService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def list_languages(self) -> list[Language]:
        async with self._uow_factory() as uow:
            return await uow.languages.list_all()

    async def get_language(self, language_id: str) -> Language:
        async with self._uow_factory() as uow:
            return await require_language(uow, language_id)

    async def get_language_by_code(self, code: str) -> Language | None:
        async with self._uow_factory() as uow:
            return await uow.languages.get_by_code(code.strip())

    async def create_language(self, name: str, code: str) -> Language:
        name = (name or "").strip()
        if not name:
            raise ValidationError("语言名称不能为空。")
        code = validate_language_code(code)

        async with self._uow_factory() as uow:
            if await uow.languages.get_by_code(code) is not None:
                raise ValidationError(f"语言代码 '{code}' 已存在。", code=code)
            language = await uow.languages.add(name=name, code=code)

        logger.info("语言已创建", language_id=language.id, code=code)
        return language
