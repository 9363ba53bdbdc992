"""
Locale Hub 核心契约。

包含异常体系、跨层 DTO 以及 Unit of Work / 仓库协议。
"""

from .exceptions import (
    ConfigurationError,
    LocaleHubError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .types import (
    EditorRow,
    ExportArchive,
    ExportDocument,
    ImportRow,
    ImportSummary,
    Language,
    LanguageProgress,
    Module,
    ModuleListing,
    ModuleProgress,
    NewResource,
    Project,
    ProjectListing,
    ReconcileSummary,
    Resource,
    SourceValueUpdate,
    TargetLanguage,
)
from .uow import (
    ILanguageRepository,
    IModuleRepository,
    IProjectRepository,
    IResourceRepository,
    IUnitOfWork,
)

__all__ = [
    # from exceptions.py
    "LocaleHubError", "NotFoundError", "ValidationError",
    "StorageError", "ConfigurationError",
    # from types.py
    "Language", "TargetLanguage", "Project", "ProjectListing",
    "Module", "ModuleListing", "Resource", "NewResource",
    "SourceValueUpdate", "EditorRow", "ImportRow", "ImportSummary",
    "ReconcileSummary", "ModuleProgress", "LanguageProgress",
    "ExportDocument", "ExportArchive",
    # from uow.py
    "IUnitOfWork", "ILanguageRepository", "IProjectRepository",
    "IModuleRepository", "IResourceRepository",
]
