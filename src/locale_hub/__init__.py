# src/locale_hub/__init__.py
"""Locale Hub：多语言本地化资源的导入、对账、编辑与导出。"""

__version__ = "0.1.0"
