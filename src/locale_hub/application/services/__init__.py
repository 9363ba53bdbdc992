# src/locale_hub/application/services/__init__.py
from ._editor import EditorService
from ._exporter import ExportService
from ._importer import ImportService
from ._languages import LanguageService, validate_language_code
from ._modules import ModuleService
from ._projects import ProjectService
from ._source_resources import SourceResourceService
from ._statistics import StatisticsService

__all__ = [
    "EditorService",
    "ExportService",
    "ImportService",
    "LanguageService",
    "ModuleService",
    "ProjectService",
    "SourceResourceService",
    "StatisticsService",
    "validate_language_code",
]
