# src/locale_hub/di/container.py
"""
应用依赖注入 (DI) 容器。

使用 `dependency-injector` 装配配置、数据库引擎、UoW、应用服务与顶层门面。
服务拿到的是 `uow_factory.provider`：每次调用都创建一个新的 UoW（即新事务）。
"""

from dependency_injector import containers, providers

from locale_hub.application.coordinator import Coordinator
from locale_hub.application.services import (
    EditorService,
    ExportService,
    ImportService,
    LanguageService,
    ModuleService,
    ProjectService,
    SourceResourceService,
    StatisticsService,
)
from locale_hub.config import LocaleHubConfig
from locale_hub.infrastructure.db import (
    create_async_db_engine,
    create_async_sessionmaker,
)
from locale_hub.infrastructure.uow import SqlAlchemyUnitOfWork


class AppContainer(containers.DeclarativeContainer):
    """Locale Hub 应用的核心 DI 容器。"""

    # ==================================================================
    # 核心提供者
    # ==================================================================

    config = providers.Singleton(LocaleHubConfig)

    db_engine = providers.Singleton(create_async_db_engine, cfg=config)

    db_sessionmaker = providers.Singleton(create_async_sessionmaker, engine=db_engine)

    uow_factory = providers.Factory(
        SqlAlchemyUnitOfWork,
        sessionmaker=db_sessionmaker,
    )

    # ==================================================================
    # 应用服务
    # ==================================================================

    language_service = providers.Factory(
        LanguageService, uow_factory=uow_factory.provider
    )

    project_service = providers.Factory(
        ProjectService, uow_factory=uow_factory.provider
    )

    module_service = providers.Factory(ModuleService, uow_factory=uow_factory.provider)

    source_service = providers.Factory(
        SourceResourceService, uow_factory=uow_factory.provider
    )

    editor_service = providers.Factory(EditorService, uow_factory=uow_factory.provider)

    import_service = providers.Factory(
        ImportService, uow_factory=uow_factory.provider, config=config
    )

    export_service = providers.Factory(
        ExportService, uow_factory=uow_factory.provider, config=config
    )

    statistics_service = providers.Factory(
        StatisticsService, uow_factory=uow_factory.provider
    )

    # ==================================================================
    # 顶层门面
    # ==================================================================

    coordinator = providers.Factory(
        Coordinator,
        language_service=language_service,
        project_service=project_service,
        module_service=module_service,
        source_service=source_service,
        editor_service=editor_service,
        import_service=import_service,
        export_service=export_service,
        statistics_service=statistics_service,
    )
