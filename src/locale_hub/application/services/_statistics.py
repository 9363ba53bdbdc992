# src/locale_hub/application/services/_statistics.py
"""翻译进度统计。计数在 SQL 中完成，比率由领域层的完成度函数计算。"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from locale_hub.core.types import LanguageProgress, ModuleProgress
from locale_hub.domain import CompletenessStat, aggregate

from ._lookups import require_language, require_project

if TYPE_CHECKING:
    from locale_hub.core.types import Module
    from locale_hub.infrastructure.uow import UowFactory


class StatisticsService:
    def __init__(self, uow_factory: UowFactory):
        self._uow_factory = uow_factory

    async def _module_stat(
        self, module: Module, source_language_id: str, language_id: str
    ) -> CompletenessStat:
        async with self._uow_factory() as uow:
            total = await uow.resources.count([module.id], source_language_id)
            translated = await uow.resources.count_translated(
                [module.id], source_language_id, language_id
            )
        return CompletenessStat(total_keys=total, translated_keys=translated)

    async def module_progress(
        self, project_id: str, language_id: str
    ) -> list[ModuleProgress]:
        """项目各模块在某语言下的进度；每个模块独立 UoW 并发统计。"""
        async with self._uow_factory() as uow:
            project = await require_project(uow, project_id)
            await require_language(uow, language_id)
            modules = await uow.modules.list_by_project(project_id)

        stats = await asyncio.gather(
            *(
                self._module_stat(m, project.source_language.id, language_id)
                for m in modules
            )
        )
        return [
            ModuleProgress(
                id=module.id,
                name=module.name,
                description=module.description,
                total_keys=stat.total_keys,
                translated_keys=stat.translated_keys,
                translation_ratio=stat.ratio,
            )
            for module, stat in zip(modules, stats)
        ]

    async def language_progress(self, project_id: str) -> list[LanguageProgress]:
        """
        项目每个目标语言的整体进度，按项目中的目标语言顺序返回。

        项目级比率 = 各模块已翻译数之和 / 各模块源键数之和。
        """
        async with self._uow_factory() as uow:
            project = await require_project(uow, project_id)
            modules = await uow.modules.list_by_project(project_id)
            source_id = project.source_language.id
            totals = {m.id: await uow.resources.count([m.id], source_id) for m in modules}

            results: list[LanguageProgress] = []
            for target in project.target_languages:
                stat = aggregate(
                    [
                        CompletenessStat(
                            total_keys=totals[m.id],
                            translated_keys=await uow.resources.count_translated(
                                [m.id], source_id, target.language.id
                            ),
                        )
                        for m in modules
                    ]
                )
                results.append(
                    LanguageProgress(
                        id=target.language.id,
                        name=target.language.name,
                        code=target.language.code,
                        order=target.order,
                        total_keys=stat.total_keys,
                        translated_keys=stat.translated_keys,
                        progress=stat.ratio,
                    )
                )
            return results
