# src/locale_hub/core/exceptions.py
"""
本模块定义了 Locale Hub 中所有语义化的异常类型。

每个异常携带一个 `status_code`，与对外暴露时的错误类别对应
（404 未找到、400 校验失败、500 内部/存储错误），
上层（CLI 或未来的 HTTP 层）据此决定如何呈现错误。
"""

from __future__ import annotations


class LocaleHubError(Exception):
    """
    所有 Locale Hub 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """

    status_code: int = 500

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class NotFoundError(LocaleHubError):
    """引用的项目 / 模块 / 语言标识符无法解析。"""

    status_code = 404


class ValidationError(LocaleHubError):
    """
    请求在任何写入之前即被拒绝：缺少必填字段、项目标识重复、
    模块名重复、上传结构不合法等。
    """

    status_code = 400


class StorageError(LocaleHubError):
    """
    持久化层操作失败（事务提交失败、批量写入异常等）。
    通常是底层 SQLAlchemy 异常的包装，抛出前事务已完整回滚。
    """

    status_code = 500


class ConfigurationError(LocaleHubError):
    """加载、解析或验证配置时发生的错误。"""

    status_code = 500
