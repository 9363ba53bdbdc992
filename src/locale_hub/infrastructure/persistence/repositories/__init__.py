# src/locale_hub/infrastructure/persistence/repositories/__init__.py
from ._language_repo import SqlAlchemyLanguageRepository
from ._module_repo import SqlAlchemyModuleRepository
from ._project_repo import SqlAlchemyProjectRepository
from ._resource_repo import SqlAlchemyResourceRepository

__all__ = [
    "SqlAlchemyLanguageRepository",
    "SqlAlchemyModuleRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyResourceRepository",
]
