# src/locale_hub/core/types.py
"""
本模块定义了 Locale Hub 的核心数据类型。
这些类型是系统各层之间数据交换的契约（DTO），仓库层负责把 ORM
实例转换成这里的模型，应用层与 CLI 只和这些模型打交道。
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Language(BaseModel):
    """语言参考数据。"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    code: str

    @classmethod
    def from_orm_model(cls, orm_obj: Any) -> "Language":
        return cls.model_validate(orm_obj, from_attributes=True)


class TargetLanguage(BaseModel):
    """项目关联的目标语言，`order` 决定展示顺序（从 1 开始）。"""

    language: Language
    order: int


class Project(BaseModel):
    """项目 DTO，包含源语言与按顺序排列的目标语言。"""

    id: str
    name: str
    identifier: str
    description: str | None = None
    source_language: Language
    target_languages: list[TargetLanguage] = Field(default_factory=list)


class ProjectListing(BaseModel):
    """项目列表中的一行：附带源语言资源数与目标语言数。"""

    project: Project
    resource_count: int
    language_count: int


class Module(BaseModel):
    """模块 DTO，对应一个逻辑上的翻译文件 / 命名空间。"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    name: str
    description: str | None = None

    @classmethod
    def from_orm_model(cls, orm_obj: Any) -> "Module":
        return cls.model_validate(orm_obj, from_attributes=True)


class ModuleListing(BaseModel):
    """模块列表中的一行：附带源语言下非空资源的数量。"""

    module: Module
    resource_count: int


class Resource(BaseModel):
    """一条 (module, language, key) → value 的翻译记录。"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    module_id: str
    language_id: str
    key: str
    value: str
    order: int

    @classmethod
    def from_orm_model(cls, orm_obj: Any) -> "Resource":
        return cls.model_validate(orm_obj, from_attributes=True)


class NewResource(BaseModel):
    """尚未落库的资源记录（由对账计划产生）。"""

    module_id: str
    language_id: str
    key: str
    value: str
    order: int


class SourceValueUpdate(BaseModel):
    """编辑源语言资源时提交的一项修改。"""

    id: str
    value: str


class EditorRow(BaseModel):
    """编辑器视图中的一行：源文本与目标语言当前译文并列。"""

    key: str
    source_value: str
    value: str
    order: int


class ImportRow(BaseModel):
    """表格导入中的一行：key、源文本、目标文本三列。"""

    key: str
    source_value: str = ""
    target_value: str = ""


class ReconcileSummary(BaseModel):
    """一次对账（源语言上传或合并写入）的各类计数。"""

    added: int = 0
    updated: int = 0
    deleted: int = 0
    unchanged: int = 0
    skipped: int = 0
    reordered: int = 0


class ImportSummary(BaseModel):
    """表格导入在提交前（或提交后）呈现给操作者的确认摘要。"""

    total_rows: int
    matched_rows: int
    skipped_rows: int
    added: int
    updated: int
    unchanged: int
    skipped_keys: list[str] = Field(default_factory=list)
    committed: bool = False


class ModuleProgress(BaseModel):
    """单个模块在某目标语言下的翻译进度。"""

    id: str
    name: str
    description: str | None = None
    total_keys: int
    translated_keys: int
    translation_ratio: float


class LanguageProgress(BaseModel):
    """某目标语言在整个项目上的翻译进度。"""

    id: str
    name: str
    code: str
    order: int
    total_keys: int
    translated_keys: int
    progress: float


class ExportDocument(BaseModel):
    """单模块导出结果：嵌套 JSON 树及其序列化字节。"""

    module_name: str
    language_code: str
    filename: str
    tree: dict[str, Any]
    content: bytes


class ExportArchive(BaseModel):
    """项目级导出结果：每个模块一个 JSON 条目的 ZIP 包。"""

    filename: str
    entries: list[str]
    content: bytes
    media_type: str = "application/zip"
