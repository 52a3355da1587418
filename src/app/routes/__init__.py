"""
FastAPI Routes.

페이지 라우트 (HTML) + API 라우트 (JSON)
"""

from . import articles, content, pages

__all__ = ["articles", "content", "pages"]
